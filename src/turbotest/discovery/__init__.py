"""Package detection and test file discovery."""

from turbotest.discovery.finder import (
    DEFAULT_TEST_PATTERNS,
    compile_patterns,
    find_test_files,
    glob_to_regex,
    is_test_file,
)
from turbotest.discovery.packages import (
    MANIFEST_NAME,
    DetectedPackage,
    detect_package_from_file,
    detect_package_from_path,
)

__all__ = [
    "DEFAULT_TEST_PATTERNS",
    "MANIFEST_NAME",
    "DetectedPackage",
    "compile_patterns",
    "detect_package_from_file",
    "detect_package_from_path",
    "find_test_files",
    "glob_to_regex",
    "is_test_file",
]

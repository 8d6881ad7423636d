"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error reporting
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from turbotest.config.loader import (
    GLOBAL_CONFIG_PATH,
    _deep_merge,
    _load_yaml,
    load_config,
)
from turbotest.config.models import LoggingConfig
from turbotest.core.errors import ConfigError, ErrorCode


def _write_repo_config(root: Path, content: str) -> None:
    config_dir = root / ".turbotest"
    config_dir.mkdir(exist_ok=True)
    (config_dir / "config.yaml").write_text(content)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("testing:\n  eager_parse: false\n")

        assert _load_yaml(yaml_file) == {"testing": {"eager_parse": False}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("testing:\n  test_match:\n    - [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self) -> None:
        base = {"testing": {"eager_parse": True, "turbo_binary_path": "npx turbo"}}
        override = {"testing": {"turbo_binary_path": "pnpm turbo"}}

        assert _deep_merge(base, override) == {
            "testing": {"eager_parse": True, "turbo_binary_path": "pnpm turbo"}
        }

    def test_does_not_mutate_base(self) -> None:
        base: dict[str, Any] = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})

        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_default_config_when_no_files(self, tmp_path: Path) -> None:
        config = load_config(tmp_path, global_config_path=tmp_path / "none.yaml")

        assert config.logging.level == "INFO"
        assert config.testing.test_match == ["**/*.spec.ts", "**/*.spec.js"]
        assert config.testing.turbo_binary_path == "npx turbo"
        assert config.testing.eager_parse is True

    def test_loads_repo_config(self, tmp_path: Path) -> None:
        _write_repo_config(tmp_path, "testing:\n  test_match:\n    - '**/*.test.ts'\n")

        config = load_config(tmp_path, global_config_path=tmp_path / "none.yaml")

        assert config.testing.test_match == ["**/*.test.ts"]

    def test_repo_config_overrides_global(self, tmp_path: Path) -> None:
        global_file = tmp_path / "global.yaml"
        global_file.write_text(
            "testing:\n  turbo_binary_path: yarn turbo\n  eager_parse: false\n"
        )
        _write_repo_config(tmp_path, "testing:\n  turbo_binary_path: pnpm turbo\n")

        config = load_config(tmp_path, global_config_path=global_file)

        assert config.testing.turbo_binary_path == "pnpm turbo"
        assert config.testing.eager_parse is False

    def test_default_global_path_is_patchable(self, tmp_path: Path) -> None:
        global_file = tmp_path / "global.yaml"
        global_file.write_text("logging:\n  level: ERROR\n")

        with patch("turbotest.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(tmp_path)

        assert config.logging.level == "ERROR"

    def test_env_vars_override_yaml(self, tmp_path: Path) -> None:
        _write_repo_config(tmp_path, "testing:\n  turbo_binary_path: pnpm turbo\n")

        with patch.dict(os.environ, {"TURBOTEST__TESTING__TURBO_BINARY_PATH": "bunx turbo"}):
            config = load_config(tmp_path, global_config_path=tmp_path / "none.yaml")

        assert config.testing.turbo_binary_path == "bunx turbo"

    def test_kwargs_override_all(self, tmp_path: Path) -> None:
        _write_repo_config(tmp_path, "logging:\n  level: DEBUG\n")

        config = load_config(
            tmp_path,
            global_config_path=tmp_path / "none.yaml",
            logging=LoggingConfig(level="ERROR"),
        )

        assert config.logging.level == "ERROR"

    def test_raises_config_error_for_invalid_value(self, tmp_path: Path) -> None:
        _write_repo_config(tmp_path, "testing:\n  max_buffer_bytes: -1\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path, global_config_path=tmp_path / "none.yaml")

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "max_buffer_bytes" in exc_info.value.message


class TestGlobalConfigPath:
    """Tests for the user-level config location."""

    def test_is_in_user_config(self) -> None:
        assert GLOBAL_CONFIG_PATH.parts[-3:] == (".config", "turbotest", "config.yaml")

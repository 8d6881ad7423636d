"""Tests for testing/models.py module."""

from __future__ import annotations

from pathlib import Path

from turbotest.testing.models import (
    PackageRef,
    RunOptions,
    TestNode,
    TestResult,
    file_node_id,
    node_id,
    package_node_id,
)


class TestNodeIds:
    """Tests for id helpers."""

    def test_package_id(self) -> None:
        assert package_node_id("@acme/web") == "package:@acme/web"

    def test_file_id_uses_relative_path(self) -> None:
        assert file_node_id("packages/web/src/a.spec.ts") == "file:packages/web/src/a.spec.ts"

    def test_child_id_joins_with_slash(self) -> None:
        assert node_id("file:a.spec.ts", "adds numbers") == "file:a.spec.ts/adds numbers"


class TestTestNode:
    """Tests for TestNode defaults and helpers."""

    def test_defaults(self) -> None:
        node = TestNode(id="file:a.spec.ts", kind="file", label="a.spec.ts", path=Path("/w/a.spec.ts"))

        assert node.children == []
        assert node.parent_id is None
        assert node.package is None
        assert node.resolved is True

    def test_children_are_not_shared(self) -> None:
        first = TestNode(id="a", kind="file", label="a", path=Path("/a"))
        second = TestNode(id="b", kind="file", label="b", path=Path("/b"))
        first.children.append(TestNode(id="a/x", kind="case", label="x", path=Path("/a")))

        assert second.children == []

    def test_runnable_leaf_kinds(self) -> None:
        kinds = {
            kind: TestNode(id=kind, kind=kind, label=kind, path=Path("/x")).is_runnable_leaf
            for kind in ("package", "file", "suite", "case")
        }

        assert kinds == {"package": False, "file": False, "suite": True, "case": True}

    def test_package_ref_is_hashable(self) -> None:
        assert len({PackageRef("web", Path("/w")), PackageRef("web", Path("/w"))}) == 1


class TestRunModels:
    """Tests for result and option models."""

    def test_result_defaults(self) -> None:
        result = TestResult(name="adds", duration_ms=1.5, status="passed")

        assert result.display_name is None
        assert result.error is None

    def test_run_options_defaults(self) -> None:
        options = RunOptions()

        assert options.test_ids is None
        assert options.debug is False

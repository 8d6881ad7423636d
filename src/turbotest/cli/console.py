"""Terminal host for the controller, rendered with rich."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from turbotest.testing.models import TestNode

OutcomeStatus = Literal["queued", "running", "passed", "failed", "skipped"]

_STATUS_STYLES: dict[str, str] = {
    "passed": "green",
    "failed": "red",
    "skipped": "yellow",
}

_KIND_STYLES: dict[str, str] = {
    "package": "bold cyan",
    "file": "bold",
    "suite": "magenta",
    "case": "",
}


@dataclass
class Outcome:
    node: TestNode
    status: OutcomeStatus
    duration_ms: float = 0.0
    message: str | None = None


class ConsoleRunReporter:
    """Collects outcomes of one run and optionally echoes raw command output."""

    def __init__(self, console: Console, *, stream_output: bool = False) -> None:
        self._console = console
        self._stream_output = stream_output
        self.outcomes: dict[str, Outcome] = {}
        self.ended = False

    def enqueued(self, node: TestNode) -> None:
        self.outcomes[node.id] = Outcome(node, "queued")

    def started(self, node: TestNode) -> None:
        self.outcomes[node.id] = Outcome(node, "running")

    def passed(self, node: TestNode, duration_ms: float) -> None:
        self.outcomes[node.id] = Outcome(node, "passed", duration_ms)

    def failed(self, node: TestNode, message: str, duration_ms: float) -> None:
        self.outcomes[node.id] = Outcome(node, "failed", duration_ms, message)

    def skipped(self, node: TestNode) -> None:
        self.outcomes[node.id] = Outcome(node, "skipped")

    def append_output(self, text: str) -> None:
        if self._stream_output:
            self._console.out(text, end="", highlight=False)

    def end(self) -> None:
        self.ended = True

    def finished(self) -> list[Outcome]:
        return [o for o in self.outcomes.values() if o.status in _STATUS_STYLES]

    @property
    def failure_count(self) -> int:
        return sum(1 for o in self.outcomes.values() if o.status == "failed")

    def render(self) -> Table:
        table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("Status")
        table.add_column("Test")
        table.add_column("Time", justify="right")
        table.add_column("Message", overflow="fold")
        for outcome in self.finished():
            style = _STATUS_STYLES[outcome.status]
            table.add_row(
                f"[{style}]{outcome.status}[/{style}]",
                escape(outcome.node.label),
                f"{outcome.duration_ms:.0f}ms" if outcome.duration_ms else "",
                escape(outcome.message or ""),
            )
        return table


class ConsoleConsumer:
    """Keeps the published roots and hands out console reporters."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        stream_output: bool = False,
        echo_updates: bool = False,
    ) -> None:
        self.console = console or Console()
        self.roots: dict[str, TestNode] = {}
        self.reporters: list[ConsoleRunReporter] = []
        self._stream_output = stream_output
        self._echo_updates = echo_updates

    def add_node(self, node: TestNode) -> None:
        self.roots[node.id] = node
        if self._echo_updates:
            self.console.print(render_node(node))

    def set_echo_updates(self, enabled: bool) -> None:
        self._echo_updates = enabled

    def clear_all(self) -> None:
        self.roots.clear()

    def run_requested(self, node_ids: list[str]) -> ConsoleRunReporter:
        reporter = ConsoleRunReporter(self.console, stream_output=self._stream_output)
        self.reporters.append(reporter)
        return reporter

    def render_tree(self) -> Tree:
        tree = Tree("[bold]Tests[/bold]")
        for root in self.roots.values():
            _add_branch(tree, root)
        return tree


def render_node(node: TestNode) -> Tree:
    tree = Tree(_node_label(node))
    for child in node.children:
        _add_branch(tree, child)
    return tree


def _add_branch(parent: Tree, node: TestNode) -> None:
    branch = parent.add(_node_label(node))
    for child in node.children:
        _add_branch(branch, child)


def _node_label(node: TestNode) -> str:
    style = _KIND_STYLES[node.kind]
    label = escape(node.label)
    if style:
        label = f"[{style}]{label}[/{style}]"
    if node.line is not None:
        label += f" [dim]:{node.line + 1}[/dim]"
    return f"{label} [dim]{escape(node.id)}[/dim]"


def node_to_dict(node: TestNode) -> dict[str, Any]:
    """JSON-ready view of a node and its subtree."""
    return {
        "id": node.id,
        "kind": node.kind,
        "label": node.label,
        "path": str(node.path),
        "relative_path": node.relative_path,
        "line": node.line,
        "column": node.column,
        "children": [node_to_dict(child) for child in node.children],
    }

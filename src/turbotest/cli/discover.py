"""turbotest discover command - print the test tree."""

import json
from pathlib import Path

import click

from turbotest.cli.console import ConsoleConsumer, node_to_dict
from turbotest.cli.utils import build_controller, file_option, load_workspace_config, workspace_option


@click.command()
@workspace_option
@file_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def discover_command(
    ctx: click.Context, workspace: Path, active_file: Path | None, as_json: bool
) -> None:
    """Discover test files, suites and cases of the workspace package."""
    config = load_workspace_config(workspace, verbose=ctx.obj.get("verbose", False))
    consumer = ConsoleConsumer()
    build_controller(consumer, workspace, active_file, config)

    if as_json:
        click.echo(json.dumps([node_to_dict(root) for root in consumer.roots.values()], indent=2))
        return

    if not consumer.roots:
        consumer.console.print("[yellow]No package found[/yellow] - no package.json with a name")
        return
    consumer.console.print(consumer.render_tree())

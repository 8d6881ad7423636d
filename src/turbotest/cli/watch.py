"""turbotest watch command - keep the test tree current."""

import asyncio
from pathlib import Path

import click

from turbotest.cli.console import ConsoleConsumer
from turbotest.cli.utils import build_controller, file_option, load_workspace_config, workspace_option
from turbotest.watch import watch_workspace


@click.command()
@workspace_option
@file_option
@click.pass_context
def watch_command(ctx: click.Context, workspace: Path, active_file: Path | None) -> None:
    """Print the test tree, then re-print packages as their test files change."""
    config = load_workspace_config(workspace, verbose=ctx.obj.get("verbose", False))
    consumer = ConsoleConsumer()
    controller = build_controller(consumer, workspace, active_file, config)
    consumer.console.print(consumer.render_tree())

    consumer.set_echo_updates(True)
    consumer.console.print("[dim]Watching for test file changes (Ctrl+C to stop)[/dim]")
    try:
        asyncio.run(
            watch_workspace(controller, workspace.resolve(), patterns=config.testing.test_match)
        )
    except KeyboardInterrupt:
        consumer.console.print("[dim]Stopped[/dim]")
    finally:
        controller.dispose()

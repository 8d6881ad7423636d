"""turbotest run command - run tests through turbo."""

import asyncio
from pathlib import Path

import click

from turbotest.cli.console import ConsoleConsumer
from turbotest.cli.utils import build_controller, file_option, load_workspace_config, workspace_option
from turbotest.testing.models import RunOptions


@click.command()
@click.argument("ids", nargs=-1)
@workspace_option
@file_option
@click.option("--output/--no-output", default=False, help="Stream raw command output")
@click.option("--debug", is_flag=True, help="Log raw output when it cannot be parsed")
@click.pass_context
def run_command(
    ctx: click.Context,
    ids: tuple[str, ...],
    workspace: Path,
    active_file: Path | None,
    output: bool,
    debug: bool,
) -> None:
    """Run tests and print a result table.

    IDS are node ids as printed by 'turbotest discover'. Without IDS every
    discovered package runs in full. Exits with status 1 if any test failed.
    """
    config = load_workspace_config(workspace, verbose=ctx.obj.get("verbose", False))
    consumer = ConsoleConsumer(stream_output=output)
    controller = build_controller(consumer, workspace, active_file, config)

    if not consumer.roots:
        raise click.ClickException("No package found - nothing to run")

    asyncio.run(controller.run_tests(list(ids) or None, RunOptions(debug=debug)))
    controller.dispose()

    reporter = consumer.reporters[-1]
    outcomes = reporter.finished()
    if not outcomes:
        consumer.console.print("[yellow]No results[/yellow] - no reported test matched the tree")
    else:
        consumer.console.print(reporter.render())

    failures = reporter.failure_count
    passed = sum(1 for o in outcomes if o.status == "passed")
    consumer.console.print(f"\n[bold]{passed} passed, {failures} failed[/bold]")
    if failures:
        ctx.exit(1)

"""turbotest CLI - turbotest command."""

import click

from turbotest.cli.discover import discover_command
from turbotest.cli.run import run_command
from turbotest.cli.watch import watch_command
from turbotest.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="turbotest")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """turbotest - discover and run Turborepo package tests."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(discover_command, name="discover")
cli.add_command(run_command, name="run")
cli.add_command(watch_command, name="watch")


if __name__ == "__main__":
    cli()

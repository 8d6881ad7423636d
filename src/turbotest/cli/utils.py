"""CLI utilities."""

from pathlib import Path

import click

from turbotest.config.loader import load_config
from turbotest.config.models import TurboTestConfig
from turbotest.core.errors import ConfigError
from turbotest.core.logging import configure_logging
from turbotest.testing.consumer import TestControllerConsumer, WorkspaceContext
from turbotest.testing.controller import TestController

workspace_option = click.option(
    "--workspace",
    "-w",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Workspace folder (default: current directory)",
)
file_option = click.option(
    "--file",
    "active_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Resolve the package from this file instead of the workspace folder",
)


def load_workspace_config(workspace: Path, *, verbose: bool = False) -> TurboTestConfig:
    """Load configuration for a workspace and apply its logging section.

    Raises:
        click.ClickException: If the configuration is invalid.
    """
    try:
        config = load_config(workspace)
    except ConfigError as e:
        raise click.ClickException(f"Invalid configuration: {e.message}") from e

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    return config


def build_controller(
    consumer: TestControllerConsumer,
    workspace: Path,
    active_file: Path | None,
    config: TurboTestConfig,
) -> TestController:
    """Create a controller bound to a fixed workspace and run discovery."""
    context = WorkspaceContext(
        workspace_path=workspace.resolve(),
        active_file=active_file.resolve() if active_file else None,
    )
    controller = TestController(consumer, lambda: context, config=config.testing)
    controller.refresh()
    return controller

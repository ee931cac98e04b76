"""Main CLI application entry point.

Defines the Typer application and global options. Running ``snapman``
without a subcommand opens the interactive menu.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from snapman import __version__
from snapman.cli.commands import config
from snapman.core.config import SnapmanConfig, load_config_or_default
from snapman.core.errors import SnapNotAvailableError
from snapman.core.executor import CommandExecutor, SudoSession
from snapman.menus import MenuContext, main_menu
from snapman.operators.snap import SnapOperator
from snapman.snapd.client import SnapClient
from snapman.ui.prompts import TerminalUI
from snapman.utils.formatting import console, err_console, print_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="snapman",
    help="Interactive menu for managing Snap packages.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"snapman version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def build_context(settings: SnapmanConfig, dry_run: bool = False) -> MenuContext:
    """Wire client, executor, operator and UI from a configuration.

    Args:
        settings: Effective configuration.
        dry_run: If True, state-changing commands are only logged.

    Returns:
        MenuContext ready for the main menu.
    """
    ui = TerminalUI(console, clear_screen=settings.clear_screen)
    executor = CommandExecutor(
        SudoSession(enabled=settings.use_sudo),
        ui.progress(settings.spinner),
        timeout=settings.command_timeout,
        dry_run=dry_run,
    )
    return MenuContext(
        client=SnapClient(timeout=settings.query_timeout),
        operator=SnapOperator(executor),
        ui=ui,
        config=settings,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would run without changing anything.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to use instead of the default location.",
        ),
    ] = None,
) -> None:
    """snapman - Interactive menu for managing Snap packages.

    Revert snaps, switch channels, hold updates, manage permissions and
    keep offline copies, all from one menu.
    """
    configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["dry_run"] = dry_run
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is not None:
        return

    settings = load_config_or_default(config_path)
    menu_ctx = build_context(settings, dry_run=dry_run)

    try:
        menu_ctx.client.ensure_available()
    except SnapNotAvailableError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        main_menu(menu_ctx)
    except (KeyboardInterrupt, EOFError):
        console.print()
        logger.debug("Interrupted by user")
        raise typer.Exit(code=130) from None


# Register commands
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

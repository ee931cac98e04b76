"""Configuration commands.

Provides `snapman config show`, `snapman config init` and
`snapman config path`.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from snapman.core.config import SnapmanConfig, config_to_dict, load_config, save_config
from snapman.core.errors import ConfigError, ConfigNotFoundError
from snapman.core.paths import get_config_path
from snapman.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and create the snapman configuration.",
    no_args_is_help=True,
)

ConfigPathOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Config file to use instead of the default location.",
    ),
]


def _resolve_path(ctx: typer.Context, config_path: Path | None) -> Path:
    """Pick the subcommand's --config, then the global one, then the default."""
    if config_path is not None:
        return config_path
    global_path = (ctx.obj or {}).get("config_path")
    return global_path or get_config_path()


@app.command()
def show(ctx: typer.Context, config_path: ConfigPathOption = None) -> None:
    """Show the effective configuration."""
    path = _resolve_path(ctx, config_path)
    try:
        config = load_config(path)
        source = str(path)
    except ConfigNotFoundError:
        config = SnapmanConfig()
        source = "built-in defaults"
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title=f"Configuration ({source})",
        show_header=True,
        header_style="title",
        border_style="border",
    )
    table.add_column("Key", no_wrap=True)
    table.add_column("Value", style="info")

    for key, value in config_to_dict(config).items():
        table.add_row(key, str(value))

    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    config_path: ConfigPathOption = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = _resolve_path(ctx, config_path)

    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(SnapmanConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command("path")
def show_path(ctx: typer.Context) -> None:
    """Print the location of the config file in use."""
    typer.echo(str(_resolve_path(ctx, None)))

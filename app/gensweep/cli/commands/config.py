"""Configuration commands.

Provides commands to show the effective configuration and to write a
default configuration file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from gensweep.core.config import ConfigError, SweepConfig, require_config, save_config
from gensweep.core.paths import get_config_path
from gensweep.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize gensweep configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    override = ctx.obj.get("config_path") if ctx.obj else None
    return override or get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration as TOML."""
    path = _config_path(ctx)
    config = require_config(path)

    source = str(path) if path.exists() else "defaults"
    console.print(f"[muted]# source: {source}[/muted]")
    console.print(tomli_w.dumps(config.model_dump()), markup=False, highlight=False)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = _config_path(ctx)

    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(SweepConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")

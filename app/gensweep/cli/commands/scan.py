"""Scan command implementation.

Lists the files that a sweep over a directory would track.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from gensweep.cli.types import OutputFormat, open_fileset
from gensweep.core.config import require_config
from gensweep.utils.formatting import console, create_path_table, print_info


def scan(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Argument(help="Output directory to scan."),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            help="Limit number of files to display.",
        ),
    ] = None,
) -> None:
    """Show every file a sweep of ROOT would consider.

    Hidden files, hidden directories and paths matching the configured
    exclude patterns are left out.

    Examples:
        gensweep scan build/generated             # Table of tracked files
        gensweep scan build/generated -f json     # Output as JSON
    """
    config = require_config(ctx.obj.get("config_path") if ctx.obj else None)
    fileset = open_fileset(root, config)

    relative = sorted(p.relative_to(fileset.root).as_posix() for p in fileset.unused)
    display = relative[:limit] if limit else relative

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps({"root": str(fileset.root), "files": display}))
        return

    if not relative:
        print_info(f"No tracked files under {fileset.root}.")
        return

    table = create_path_table(f"Tracked Files ({fileset.root})")
    table.add_column("Path", no_wrap=True)
    for rel in display:
        table.add_row(rel)
    console.print(table)

    console.print(f"\n[muted]{len(relative)} file(s) tracked[/muted]")
    if limit and len(display) < len(relative):
        console.print(f"[muted](showing {len(display)} of {len(relative)})[/muted]")

"""Sweep command implementation.

Deletes files under an output directory that a generator run did not
produce, given the list of files the run wrote.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer

from gensweep.cli.types import open_fileset
from gensweep.core.config import require_config
from gensweep.fileset import FileSet, SweepReport
from gensweep.utils.formatting import (
    console,
    create_path_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def sweep(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Argument(help="Output directory to clean."),
    ],
    keep_file: Annotated[
        Path,
        typer.Option(
            "--keep-file",
            "-k",
            help="File listing generated paths relative to ROOT, one per line ('-' for stdin).",
        ),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Keep the files listed in --keep-file and delete every other file under ROOT.

    Directories emptied by a deletion are removed as well (one level).
    Hidden and excluded paths are never touched.

    Examples:
        gensweep sweep out/ -k written.txt             # Delete stale files
        gensweep sweep out/ -k written.txt --dry-run   # Preview only
        generator --list | gensweep sweep out/ -k - -y
    """
    config = require_config(ctx.obj.get("config_path") if ctx.obj else None)
    dry_run = dry_run or config.dry_run

    keep = _read_keep_list(keep_file)
    fileset = open_fileset(root, config, dry_run=dry_run)
    _claim_all(fileset, keep)

    stale = sorted(fileset.unused)
    if not stale:
        print_success(f"Nothing to sweep under {fileset.root}.")
        return

    _print_plan(fileset, stale, dry_run)

    if not dry_run and config.confirm and not yes:
        confirmed = typer.confirm(
            f"\nProceed with deleting {len(stale)} file(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    report = fileset.finalize()
    _print_report(report)

    if not report.ok:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _read_keep_list(keep_file: Path) -> list[str]:
    """Read generated paths, skipping blank lines and '#' comments."""
    try:
        if str(keep_file) == "-":
            lines = sys.stdin.read().splitlines()
        else:
            with keep_file.open(encoding="utf-8") as f:
                lines = f.read().splitlines()
    except OSError as e:
        print_error(f"Cannot read keep list {keep_file}: {e}")
        raise typer.Exit(code=1) from e

    return [line.strip() for line in lines if line.strip() and not line.lstrip().startswith("#")]


def _claim_all(fileset: FileSet, keep: list[str]) -> None:
    """Claim every listed path, refusing to continue on paths outside the root."""
    rejected: list[str] = []
    for rel in keep:
        try:
            fileset.keep(rel)
        except ValueError as e:
            rejected.append(str(e))

    if rejected:
        for reason in rejected:
            print_error(reason)
        raise typer.Exit(code=1)


def _print_plan(fileset: FileSet, stale: list[Path], dry_run: bool) -> None:
    """Display planned deletions."""
    label = "Planned Deletions (dry-run)" if dry_run else "Planned Deletions"
    table = create_path_table(label)
    table.add_column("Path", style="removed", no_wrap=True)

    for path in stale:
        table.add_row(path.relative_to(fileset.root).as_posix())

    console.print(table)


def _print_report(report: SweepReport) -> None:
    """Display deletion results."""
    table = create_path_table("Sweep Results")
    table.add_column("Path", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="muted")

    for r in report.results:
        if r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would delete"
        elif r.success:
            status = "[success]deleted[/]"
            detail = f"Removed empty {r.removed_parent}" if r.removed_parent else ""
        else:
            status = "[error]failed[/]"
            detail = r.error or "Unknown error"
        table.add_row(r.path, status, detail)

    console.print(table)

    dry_count = sum(1 for r in report.results if r.dry_run)
    fail_count = len(report.failed)
    success_count = len(report.results) - fail_count

    if dry_count:
        print_info(f"Dry-run: {dry_count} file(s) would be deleted.")
    elif fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"All {success_count} file(s) deleted.")

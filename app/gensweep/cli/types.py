"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from gensweep.core.config import SweepConfig
from gensweep.fileset import ConstructionError, FileSet
from gensweep.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def open_fileset(root: Path, config: SweepConfig, *, dry_run: bool = False) -> FileSet:
    """Build a FileSet over root or exit with an error message.

    Args:
        root: Directory to track.
        config: Loaded configuration (supplies exclude patterns).
        dry_run: Whether finalize should only report.

    Returns:
        Initialized FileSet.

    Raises:
        typer.Exit: If the root cannot be scanned.
    """
    try:
        return FileSet(root, exclude=config.exclude, dry_run=dry_run)
    except ConstructionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

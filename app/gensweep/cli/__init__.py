"""CLI package for gensweep.

This package contains the Typer application and all subcommands.
"""

from gensweep.cli.main import app

__all__ = ["app"]

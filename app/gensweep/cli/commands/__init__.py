"""CLI commands for gensweep.

This package contains all subcommand implementations.
"""

from gensweep.cli.commands import config, scan, sweep

__all__ = ["config", "scan", "sweep"]

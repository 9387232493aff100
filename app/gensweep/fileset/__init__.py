"""Generated-output tracking and cleanup.

This module provides the survivor set that records files present
before a generator run, the scoped writer handed out for each claimed
file, and the sweep that removes files the run did not produce.
"""

from gensweep.fileset.errors import ConstructionError, DeletionError, FileSetError
from gensweep.fileset.fileset import FileSet
from gensweep.fileset.hidden import is_excluded, is_hidden
from gensweep.fileset.models import DeletionResult, SweepReport
from gensweep.fileset.scanner import scan_files
from gensweep.fileset.updater import FileUpdater

__all__ = [
    "ConstructionError",
    "DeletionError",
    "DeletionResult",
    "FileSet",
    "FileSetError",
    "FileUpdater",
    "SweepReport",
    "is_excluded",
    "is_hidden",
    "scan_files",
]

"""Exceptions raised by the fileset domain."""

from pathlib import Path


class FileSetError(Exception):
    """Base exception for file set tracking errors."""


class ConstructionError(FileSetError):
    """Raised when the initial walk of the root directory fails.

    Attributes:
        root: Root directory that was being walked.
    """

    def __init__(self, root: Path, message: str) -> None:
        super().__init__(message)
        self.root = root


class DeletionError(FileSetError):
    """A single path that could not be removed during a sweep.

    These are collected in a SweepReport rather than raised, so one bad
    entry never stops the rest of the sweep.

    Attributes:
        path: Absolute path that failed to delete.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path

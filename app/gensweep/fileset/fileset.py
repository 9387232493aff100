"""Survivor tracking for generated output directories.

Records the files present under a root directory before a generator
runs, lets the generator claim the files it (re)writes, and deletes
whatever was not claimed once the run is over.
"""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from gensweep.fileset.errors import FileSetError
from gensweep.fileset.models import DeletionResult, SweepReport
from gensweep.fileset.scanner import scan_files
from gensweep.fileset.updater import FileUpdater

logger = logging.getLogger(__name__)


class FileSet:
    """Records files under a root and deletes those not regenerated.

    Lifecycle: construct once, claim any number of paths, finalize once.

    Args:
        root: Directory tree to track. Must exist.
        exclude: Glob patterns (root-relative) that are never tracked.
        dry_run: If True, finalize reports what would be deleted
            without touching the filesystem.

    Raises:
        ConstructionError: If the root cannot be walked.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        *,
        exclude: Sequence[str] = (),
        dry_run: bool = False,
    ) -> None:
        self._root = Path(os.path.abspath(root))
        self._dry_run = dry_run
        self._unused: set[Path] = scan_files(self._root, exclude)
        self._finalized = False

    @property
    def root(self) -> Path:
        """Absolute root directory."""
        return self._root

    @property
    def unused(self) -> frozenset[Path]:
        """Files seen at construction that have not been claimed yet."""
        return frozenset(self._unused)

    @property
    def finalized(self) -> bool:
        """True once finalize() has run."""
        return self._finalized

    def resolve(self, relative_path: str | os.PathLike[str]) -> Path:
        """Resolve a root-relative path without touching the filesystem.

        Raises:
            ValueError: If the path points outside the root or at the root itself.
        """
        resolved = Path(os.path.normpath(self._root / relative_path))
        if resolved == self._root:
            msg = f"Path resolves to the root directory itself: {relative_path}"
            raise ValueError(msg)
        if self._root not in resolved.parents:
            msg = f"Path escapes root {self._root}: {relative_path}"
            raise ValueError(msg)
        return resolved

    def keep(self, relative_path: str | os.PathLike[str]) -> Path:
        """Mark a path as wanted so finalize will not delete it.

        Claiming a path twice, or a path that did not exist when the
        set was built, is not an error.

        Returns:
            The resolved absolute path.
        """
        self._check_open()
        path = self.resolve(relative_path)
        self._unused.discard(path)
        return path

    def claim(self, relative_path: str | os.PathLike[str]) -> FileUpdater:
        """Mark a path as wanted and return a handle for writing it.

        The path is safe from deletion as soon as this returns, whether
        or not anything is written through the handle.
        """
        return FileUpdater(self.keep(relative_path))

    def finalize(self) -> SweepReport:
        """Delete every file that was not claimed.

        After a file is removed its parent directory is removed too if
        nothing is left in it, the root included. Only that one level is
        checked. A failure on one path is recorded and the sweep carries on.

        Returns:
            SweepReport with one result per unclaimed file.

        Raises:
            FileSetError: If the set was already finalized.
        """
        self._check_open()
        self._finalized = True

        report = SweepReport()
        for path in sorted(self._unused):
            report.results.append(self._delete_single(path))
        self._unused.clear()

        if report.failed:
            logger.warning(
                "Sweep of %s finished with %d failure(s)", self._root, len(report.failed)
            )
        return report

    def _delete_single(self, path: Path) -> DeletionResult:
        """Delete one file, then its parent if that left it empty."""
        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return DeletionResult(path=str(path), success=True, dry_run=True)

        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("Already gone: %s", path)
            return DeletionResult(path=str(path), success=True)
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)
            return DeletionResult(path=str(path), success=False, error=str(e))

        logger.debug("Deleted %s", path)

        parent = path.parent
        try:
            with os.scandir(parent) as entries:
                is_empty = next(entries, None) is None
            if not is_empty:
                return DeletionResult(path=str(path), success=True)
            parent.rmdir()
        except OSError as e:
            logger.warning("Failed to remove directory %s: %s", parent, e)
            return DeletionResult(
                path=str(path),
                success=False,
                error=f"Deleted file but could not remove empty directory {parent}: {e}",
            )

        logger.debug("Removed empty directory %s", parent)
        return DeletionResult(path=str(path), success=True, removed_parent=str(parent))

    def _check_open(self) -> None:
        if self._finalized:
            msg = f"File set for {self._root} has already been finalized"
            raise FileSetError(msg)

"""Result models for file set sweeps.

This module defines the data structures returned when unclaimed
files are removed at the end of a generator run.
"""

from dataclasses import dataclass, field

from gensweep.fileset.errors import DeletionError


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of deleting a single unclaimed file.

    Attributes:
        path: Absolute path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
        removed_parent: Parent directory removed because the deletion
            left it empty, None if no directory was removed.
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False
    removed_parent: str | None = None

    def __post_init__(self) -> None:
        """Validate result data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.success and self.error is not None:
            msg = f"Successful result cannot carry an error: {self.error}"
            raise ValueError(msg)


@dataclass(slots=True)
class SweepReport:
    """Outcome of a full sweep over the survivor set.

    Attributes:
        results: One DeletionResult per swept path, in sweep order.
    """

    results: list[DeletionResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if every intended deletion succeeded."""
        return all(r.success for r in self.results)

    @property
    def deleted(self) -> list[str]:
        """Paths that were processed successfully (not dry-run)."""
        return [r.path for r in self.results if r.success and not r.dry_run]

    @property
    def failed(self) -> list[DeletionResult]:
        """Results for paths that could not be removed."""
        return [r for r in self.results if not r.success]

    @property
    def removed_dirs(self) -> list[str]:
        """Parent directories removed because they became empty."""
        return [r.removed_parent for r in self.results if r.removed_parent is not None]

    @property
    def errors(self) -> list[DeletionError]:
        """Failures as DeletionError instances, one per failed path."""
        return [DeletionError(r.path, r.error or "Unknown error") for r in self.failed]

    def __len__(self) -> int:
        return len(self.results)

"""Directory walker that records the files present under a root.

Walks the tree with an explicit worklist. Hidden directories are
detected before their children are listed, so a hidden subtree is
never entered. Symbolic links are recorded as entries and never
followed.
"""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from gensweep.fileset.errors import ConstructionError
from gensweep.fileset.hidden import is_excluded, is_hidden

logger = logging.getLogger(__name__)


def scan_files(root: Path, exclude: Sequence[str] = ()) -> set[Path]:
    """Collect every non-hidden, non-excluded file under root.

    Args:
        root: Absolute, normalised directory to walk.
        exclude: Glob patterns matched against root-relative POSIX paths.
            Matching files are skipped; matching directories are not
            descended into.

    Returns:
        Set of absolute file paths.

    Raises:
        ConstructionError: If root is not a directory or any part of
            the walk fails.
    """
    if not root.is_dir():
        msg = f"Root is not an existing directory: {root}"
        raise ConstructionError(root, msg)

    found: set[Path] = set()
    pending: list[str] = [str(root)]

    try:
        while pending:
            directory = pending.pop()
            if is_hidden(directory):
                logger.debug("Skipping hidden directory: %s", directory)
                continue

            with os.scandir(directory) as entries:
                for entry in entries:
                    if exclude:
                        relative = Path(entry.path).relative_to(root).as_posix()
                        if is_excluded(relative, exclude):
                            logger.debug("Skipping excluded path: %s", relative)
                            continue

                    if entry.is_dir(follow_symlinks=False):
                        pending.append(entry.path)
                    elif not is_hidden(entry.path):
                        found.add(Path(entry.path))
    except OSError as e:
        msg = f"Failed to scan {root}: {e}"
        raise ConstructionError(root, msg) from e

    logger.debug("Tracking %d file(s) under %s", len(found), root)
    return found

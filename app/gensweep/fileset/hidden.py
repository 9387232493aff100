"""Hidden and excluded path checks.

Hidden paths follow the host convention: dot-prefixed names everywhere,
plus the hidden attribute on Windows. Excluded paths come from the
user's configuration and are matched as glob patterns against the
path relative to the tracked root.
"""

import fnmatch
import os
import stat
import sys
from collections.abc import Sequence
from pathlib import PurePath


def is_hidden(path: str | os.PathLike[str]) -> bool:
    """Check if a filesystem path is hidden on this platform.

    A path whose final component starts with "." is hidden. On Windows
    the FILE_ATTRIBUTE_HIDDEN bit is consulted as well.

    Args:
        path: Path to check. Only the final component is examined.

    Returns:
        True if the path is hidden, False otherwise.

    Raises:
        OSError: If the Windows attribute lookup fails.
    """
    name = PurePath(path).name
    if name.startswith("."):
        return True

    if sys.platform == "win32":
        attributes = os.stat(path, follow_symlinks=False).st_file_attributes
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)

    return False


def is_excluded(relative_path: str, patterns: Sequence[str]) -> bool:
    """Check if a root-relative path matches any exclude pattern.

    Patterns are fnmatch-style globs written with forward slashes,
    e.g. "generated/*.lock" or "README.md".

    Args:
        relative_path: POSIX-style path relative to the tracked root.
        patterns: Glob patterns to test against.

    Returns:
        True if the path matches any pattern, False otherwise.
    """
    return any(fnmatch.fnmatch(relative_path, pattern) for pattern in patterns)

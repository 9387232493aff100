"""Scoped writer for a single generated file.

A FileUpdater collects content while its context is open and replaces
the target atomically on a clean exit. On error the target is left
untouched and the temporary file is removed.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from tempfile import NamedTemporaryFile
from types import TracebackType
from typing import IO

logger = logging.getLogger(__name__)


class FileUpdater:
    """Writable handle bound to one absolute file path.

    Usage:
        with FileUpdater(path) as out:
            out.write("generated content")

    Attributes:
        path: Absolute target path.
        encoding: Text encoding used by write().
    """

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        self.path = path
        self.encoding = encoding
        self._file: IO[bytes] | None = None
        self._tmp_path: Path | None = None

    def __repr__(self) -> str:
        return f"FileUpdater({str(self.path)!r})"

    @property
    def is_open(self) -> bool:
        """True while the handle's context is active."""
        return self._file is not None

    def __enter__(self) -> FileUpdater:
        if self._file is not None:
            msg = f"FileUpdater for {self.path} is already open"
            raise RuntimeError(msg)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = NamedTemporaryFile(  # noqa: SIM115
            mode="wb",
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            delete=False,
        )
        self._tmp_path = Path(self._file.name)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        f, tmp_path = self._file, self._tmp_path
        self._file = None
        self._tmp_path = None
        if f is None or tmp_path is None:
            return

        try:
            if exc_type is None:
                f.flush()
                os.fsync(f.fileno())
            f.close()
            if exc_type is None:
                os.chmod(tmp_path, _target_mode(self.path))
                # os.replace() is atomic on POSIX and Windows
                os.replace(tmp_path, self.path)
                logger.debug("Wrote %s", self.path)
                return
        except BaseException:
            f.close()
            tmp_path.unlink(missing_ok=True)
            raise

        tmp_path.unlink(missing_ok=True)
        logger.debug("Discarded pending content for %s", self.path)

    def write(self, text: str) -> None:
        """Append text to the pending content.

        Raises:
            RuntimeError: If called outside the handle's context.
        """
        self.write_bytes(text.encode(self.encoding))

    def write_bytes(self, data: bytes) -> None:
        """Append raw bytes to the pending content.

        Raises:
            RuntimeError: If called outside the handle's context.
        """
        if self._file is None:
            msg = f"FileUpdater for {self.path} is not open"
            raise RuntimeError(msg)
        self._file.write(data)

    def write_text(self, text: str) -> None:
        """Replace the target's content with text in one call."""
        with self:
            self.write(text)


def _target_mode(path: Path) -> int:
    """Permission bits the replaced file should carry.

    An existing target keeps its mode. A new file gets the default
    0o666 filtered through the process umask, like open() would give it.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

"""ActiveLogFile — length accessor for the log file currently being written."""

from __future__ import annotations

from pathlib import Path

from logroll.exceptions import LogFileAccessError


class ActiveLogFile:
    """Exposes the path and on-disk length of the active log file.

    The length is read from the filesystem on every call, so writes made
    through any handle are reflected immediately.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def path(self) -> Path:
        return self._path

    def len_bytes(self) -> int:
        """Return the current file size.

        Raises:
            LogFileAccessError: the file cannot be stat'ed.
        """
        try:
            return self._path.stat().st_size
        except OSError as exc:
            raise LogFileAccessError(str(self._path), exc.strerror or str(exc)) from exc

    def __repr__(self) -> str:
        return f"ActiveLogFile({str(self._path)!r})"

"""Shared pytest fixtures for the logroll test suite."""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from logroll.logfile import ActiveLogFile


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


class FakeClock:
    """Callable clock whose current time is moved explicitly by the test."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2023, 3, 6, 12, 0, 0))


# ---------------------------------------------------------------------------
# Log files
# ---------------------------------------------------------------------------


class FakeLogFile:
    """In-memory LogFile with a settable length."""

    def __init__(self, length: int = 0, path: str = "/var/log/app.log") -> None:
        self.length = length
        self._path = Path(path)
        self.len_calls = 0

    def path(self) -> Path:
        return self._path

    def len_bytes(self) -> int:
        self.len_calls += 1
        return self.length


@pytest.fixture
def log_file() -> FakeLogFile:
    return FakeLogFile()


@pytest.fixture
def disk_log_file(tmp_path: Path) -> ActiveLogFile:
    path = tmp_path / "app.log"
    path.write_bytes(b"")
    return ActiveLogFile(path)

"""Size trigger — rolls once the active file reaches a byte ceiling."""

from __future__ import annotations

from dataclasses import dataclass

from logroll.logging import get_logger
from logroll.triggers.base import LogFile, Trigger
from logroll.triggers.models import MAX_LIMIT

log = get_logger(__name__)


@dataclass(frozen=True)
class SizeTrigger(Trigger):
    """Rolls when the file length is at least ``limit`` bytes.

    A limit of 0 rolls on every evaluation.  Instances are immutable and
    compare equal by ``limit``.
    """

    limit: int

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise ValueError(f"limit must be an integer byte count, got {self.limit!r}")
        if not 0 <= self.limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between 0 and {MAX_LIMIT}, got {self.limit}")

    def evaluate(self, file: LogFile) -> bool:
        length = file.len_bytes()
        if length >= self.limit:
            log.debug("size_limit_reached", limit=self.limit, length=length)
            return True
        return False

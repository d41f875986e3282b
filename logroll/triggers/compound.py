"""Compound trigger — rolls on a size ceiling OR a calendar-date change.

Evaluation order
----------------
1. If date rolling is enabled, read the local date.  When it differs from
   the date seen on the previous evaluation, remember the new date and
   roll immediately; the size is not checked on that call.
2. Otherwise delegate to the embedded :class:`SizeTrigger`.

Each instance owns its own last-seen date.  The read-compare-write of that
date happens under a per-instance ``threading.Lock`` so that concurrent
writers sharing one trigger observe exactly one roll per date change.

The reference date is captured from the clock at construction, so a
process restart does not force a roll unless the size limit is already
exceeded.  Pass a ``clock`` to pin time in tests.
"""

from __future__ import annotations

import threading

from logroll.logging import get_logger
from logroll.time_format import Clock, current_date_string, local_now
from logroll.triggers.base import LogFile, Trigger
from logroll.triggers.size import SizeTrigger

log = get_logger(__name__)


class CompoundTrigger(Trigger):
    """Rolls once the file passes ``limit`` bytes or the date changes.

    Usage::

        trigger = CompoundTrigger(10 * 1024 * 1024, date=True)
        if trigger.evaluate(active_file):
            roller.roll(active_file.path())
    """

    def __init__(self, limit: int, date: bool = False, clock: Clock | None = None) -> None:
        self._size_trigger = SizeTrigger(limit)
        self._clock: Clock = clock or local_now
        self._lock = threading.Lock()
        self._last_rotation_date: str | None = (
            current_date_string(self._clock()) if date else None
        )

    @property
    def limit(self) -> int:
        return self._size_trigger.limit

    @property
    def date_enabled(self) -> bool:
        """True if this trigger also rolls on date changes."""
        return self._last_rotation_date is not None

    def evaluate(self, file: LogFile) -> bool:
        if self._last_rotation_date is not None and self._date_changed():
            return True
        return self._size_trigger.evaluate(file)

    def _date_changed(self) -> bool:
        """Record today's date; return True if it differs from the last one seen."""
        with self._lock:
            today = current_date_string(self._clock())
            previous = self._last_rotation_date
            if today == previous:
                return False
            self._last_rotation_date = today
        log.info("date_rollover", previous_date=previous, current_date=today)
        return True

    def __repr__(self) -> str:
        return f"CompoundTrigger(limit={self.limit}, date={self.date_enabled})"

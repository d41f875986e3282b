"""RollingPolicy — connects a trigger to the component that performs the roll.

The policy never renames, compresses or deletes anything itself.  When the
trigger fires it hands the active path to a :class:`Roller` and reports
that a roll happened, so the caller can reopen a fresh file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from logroll.logging import get_logger, log_context
from logroll.time_format import Clock
from logroll.triggers.base import LogFile, Trigger, TriggerFactory
from logroll.triggers.models import CompoundTriggerConfig, SizeTriggerConfig

log = get_logger(__name__)


class Roller(Protocol):
    """Archives the active file (rename, compress, prune...)."""

    def roll(self, path: Path) -> None: ...


class RollingPolicy:
    """Evaluate a trigger and invoke a roller when it fires.

    Usage::

        policy = RollingPolicy.from_config(settings.trigger, roller)
        if policy.process(active_file):
            reopen_log_file()
    """

    def __init__(self, trigger: Trigger, roller: Roller, name: str = "default") -> None:
        self._trigger = trigger
        self._roller = roller
        self._name = name

    @classmethod
    def from_config(
        cls,
        config: SizeTriggerConfig | CompoundTriggerConfig,
        roller: Roller,
        clock: Clock | None = None,
        name: str = "default",
    ) -> "RollingPolicy":
        return cls(TriggerFactory.create(config, clock=clock), roller, name=name)

    @property
    def trigger(self) -> Trigger:
        return self._trigger

    @property
    def name(self) -> str:
        """Appender name attached to every record logged while processing."""
        return self._name

    def process(self, file: LogFile) -> bool:
        """Roll *file* if the trigger fires.  Returns True when a roll happened."""
        path = file.path()
        with log_context(appender=self._name, log_path=str(path)):
            if not self._trigger.evaluate(file):
                return False
            self._roller.roll(path)
            log.info("log_rolled", trigger=type(self._trigger).__name__)
        return True

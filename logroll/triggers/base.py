"""Trigger — abstract base class for all rollover triggers.

A trigger answers one question on every write to the active log file:
should the file be rolled now?

Contract
--------
- ``evaluate(file)`` — return True when the file must be rolled
- errors raised by ``file.len_bytes()`` propagate unchanged
- the decision itself never raises

Triggers run inline on the writer's hot path, so ``evaluate`` must be
cheap and must not block on anything but a short critical section.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Protocol, runtime_checkable

from logroll.exceptions import TriggerConfigError
from logroll.time_format import Clock
from logroll.triggers.models import CompoundTriggerConfig, SizeTriggerConfig


@runtime_checkable
class LogFile(Protocol):
    """Read-only view of the active log file."""

    def path(self) -> Path:
        """Location of the active file."""

    def len_bytes(self) -> int:
        """Current length of the active file in bytes."""


class Trigger(ABC):
    """Abstract base for all rollover triggers."""

    @abstractmethod
    def evaluate(self, file: LogFile) -> bool:
        """Return True if *file* should be rolled now."""


# ---------------------------------------------------------------------------
# TriggerFactory
# ---------------------------------------------------------------------------


class TriggerFactory:
    """Creates the correct Trigger subclass for a validated config.

    Usage::

        config = parse_trigger_config({"kind": "compound", "limit": "10 mb", "date": True})
        trigger = TriggerFactory.create(config)
    """

    @staticmethod
    def create(
        config: SizeTriggerConfig | CompoundTriggerConfig,
        clock: Clock | None = None,
    ) -> Trigger:
        """Instantiate the trigger selected by *config.kind*."""
        from logroll.triggers.compound import CompoundTrigger
        from logroll.triggers.size import SizeTrigger

        if isinstance(config, SizeTriggerConfig):
            return SizeTrigger(config.limit)
        if isinstance(config, CompoundTriggerConfig):
            return CompoundTrigger(config.limit, date=config.date, clock=clock)
        raise TriggerConfigError(f"No trigger implementation for kind: {getattr(config, 'kind', config)!r}")

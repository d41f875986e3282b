"""logroll — Rollover triggers.

A trigger decides, on each write, whether the active log file must be
rolled.  The rolling subsystem depends only on :class:`Trigger`, never on
a concrete implementation.

Package structure
-----------------
triggers/
  models.py    — Config models: TriggerKind, SizeTriggerConfig, CompoundTriggerConfig
  base.py      — LogFile protocol, Trigger ABC, TriggerFactory
  size.py      — SizeTrigger: byte ceiling
  compound.py  — CompoundTrigger: byte ceiling OR local date change
"""

from logroll.triggers.base import LogFile, Trigger, TriggerFactory
from logroll.triggers.compound import CompoundTrigger
from logroll.triggers.models import (
    CompoundTriggerConfig,
    SizeTriggerConfig,
    TriggerConfig,
    TriggerKind,
    parse_size_limit,
    parse_trigger_config,
)
from logroll.triggers.size import SizeTrigger

__all__ = [
    "CompoundTrigger",
    "CompoundTriggerConfig",
    "LogFile",
    "SizeTrigger",
    "SizeTriggerConfig",
    "Trigger",
    "TriggerConfig",
    "TriggerFactory",
    "TriggerKind",
    "parse_size_limit",
    "parse_trigger_config",
]

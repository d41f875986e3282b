"""logroll — Rollover decisions for active log files.

Given the current state of the log file being written, logroll decides
whether it must be rolled: closed, handed to an archiving roller, and
replaced with a fresh file.

Layers (bottom to top):
    1. Time format — local-date strings and ``{d}/{y}/{m}/{D}`` filename templates
    2. Triggers    — SizeTrigger, CompoundTrigger (size OR date change), config models
    3. Policy      — RollingPolicy: trigger + external roller
    4. Config      — pydantic-settings root, YAML + LOGROLL_ environment variables
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from logroll.logfile import ActiveLogFile
from logroll.policy import Roller, RollingPolicy
from logroll.triggers import CompoundTrigger, LogFile, SizeTrigger, Trigger, TriggerFactory

__all__ = [
    "__version__",
    "ActiveLogFile",
    "CompoundTrigger",
    "LogFile",
    "Roller",
    "RollingPolicy",
    "SizeTrigger",
    "Trigger",
    "TriggerFactory",
]

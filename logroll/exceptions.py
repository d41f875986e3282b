"""logroll — Exception hierarchy.

All exceptions raised by the package inherit from LogRollError so that
callers can catch the full family with a single except clause when needed.

Hierarchy:
    LogRollError
    ├── ConfigurationError
    │   └── TriggerConfigError
    └── LogFileError
        └── LogFileAccessError

Trigger decisions themselves never raise.  Errors surface either at
configuration time or from the active log file accessor.
"""

from __future__ import annotations

from typing import Any


class LogRollError(Exception):
    """Base exception for all logroll errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context})"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(LogRollError):
    """Settings could not be loaded or validated."""


class TriggerConfigError(ConfigurationError):
    """A trigger configuration block failed validation."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message, context={"validation_errors": errors or []})
        self.errors = errors or []


# ---------------------------------------------------------------------------
# Active log file
# ---------------------------------------------------------------------------


class LogFileError(LogRollError):
    """Base for errors raised by the active log file accessor."""


class LogFileAccessError(LogFileError):
    """The length of the active log file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Cannot read log file '{path}': {reason}",
            context={"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason

"""Trigger configuration models.

Triggers are configured from plain mappings (usually a YAML block) and
validated with Pydantic before a concrete trigger is built.

Key classes
-----------
TriggerKind            — which trigger implementation a block selects
SizeTriggerConfig      — roll once the file reaches ``limit`` bytes
CompoundTriggerConfig  — roll on ``limit`` bytes OR a calendar-date change
TriggerConfig          — discriminated union of the above, keyed by ``kind``

Config quick-reference
----------------------
::

    kind: compound

    # The size limit in bytes.  Units (case insensitive): b, kb, kib, mb,
    # mib, gb, gib, tb, tib.  Defaults to bytes.  Required.
    limit: 10 mb

    # Roll when the local date changes.  Optional, defaults to false.
    date: true

Every unit is a binary multiple: ``kb`` and ``kib`` both mean 1024 bytes.
Unknown keys are rejected.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from logroll.exceptions import TriggerConfigError

MAX_LIMIT = 2**64 - 1
"""Largest representable byte limit (unsigned 64-bit)."""

_UNITS: dict[str, int] = {
    "b": 1,
    "kb": 1024,
    "kib": 1024,
    "mb": 1024**2,
    "mib": 1024**2,
    "gb": 1024**3,
    "gib": 1024**3,
    "tb": 1024**4,
    "tib": 1024**4,
}


class TriggerKind(str, Enum):
    """Trigger implementations selectable from configuration."""

    SIZE = "size"
    COMPOUND = "compound"


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------


def parse_size_limit(value: Any) -> int:
    """Convert a configured size into a byte count.

    Accepts a non-negative integer or a string such as ``"10 mb"``,
    ``"512KiB"`` or ``"1024"``.  The digits must open the string; whatever
    follows them, once trimmed, must be a unit.

    Raises:
        ValueError: the value is not a valid byte size.
    """
    if isinstance(value, bool):
        raise ValueError("expected a byte size, got a boolean")

    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        split = next((i for i, c in enumerate(value) if not c.isascii() or not c.isdigit()), len(value))
        digits, unit = value[:split], value[split:]
        if not digits:
            raise ValueError(f"invalid byte size {value!r}: missing number")
        multiplier = 1
        if split < len(value):
            unit = unit.strip()
            try:
                multiplier = _UNITS[unit.lower()]
            except KeyError:
                raise ValueError(
                    f"invalid unit {unit!r}, expected one of: {', '.join(_UNITS)}"
                ) from None
        number = int(digits) * multiplier
    else:
        raise ValueError(f"expected a byte size, got {type(value).__name__}")

    if number < 0:
        raise ValueError(f"byte size must not be negative, got {number}")
    if number > MAX_LIMIT:
        raise ValueError(f"byte size {value!r} exceeds the maximum of {MAX_LIMIT}")
    return number


def parse_date_flag(value: Any) -> bool:
    """Interpret the ``date`` option.

    Booleans pass through.  For strings only the exact text ``"true"``
    enables date rolling; anything else disables it.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value == "true"
    raise ValueError(f"expected true or false, got {type(value).__name__}")


# ---------------------------------------------------------------------------
# Config models
# ---------------------------------------------------------------------------


class _TriggerConfigBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    limit: int = Field(description="Roll once the active file reaches this many bytes.")

    @field_validator("limit", mode="before")
    @classmethod
    def validate_limit(cls, v: Any) -> int:
        return parse_size_limit(v)


class SizeTriggerConfig(_TriggerConfigBase):
    kind: Literal["size"] = TriggerKind.SIZE.value


class CompoundTriggerConfig(_TriggerConfigBase):
    kind: Literal["compound"] = TriggerKind.COMPOUND.value
    date: bool = Field(
        default=False,
        description="Also roll when the local calendar date changes.",
    )

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> bool:
        return parse_date_flag(v)


TriggerConfig = Annotated[
    Union[SizeTriggerConfig, CompoundTriggerConfig],
    Field(discriminator="kind"),
]

_trigger_config_adapter: TypeAdapter[Any] = TypeAdapter(TriggerConfig)


def parse_trigger_config(raw: dict[str, Any]) -> SizeTriggerConfig | CompoundTriggerConfig:
    """Validate a raw trigger block.

    Raises:
        TriggerConfigError: unknown kind, unknown key, or a bad field value.
    """
    try:
        return _trigger_config_adapter.validate_python(raw)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        messages = "; ".join(e.get("msg", "") for e in errors)
        raise TriggerConfigError(
            f"Trigger config validation failed: {messages}",
            errors=errors,
        ) from exc

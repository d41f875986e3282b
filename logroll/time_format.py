"""Calendar helpers shared by date-aware triggers and filename templates.

Dates are rendered in the local timezone, as ``YYYYMMDD`` strings that are
only ever compared for equality.

Template tokens
---------------
{d}   year + month + day   mylog{d}.log  → mylog20230306.log
{y}   year                 mylog{y}.log  → mylog2023.log
{m}   month, zero-padded   mylog{m}.log  → mylog03.log
{D}   day, zero-padded     mylog{D}.log  → mylog06.log

Tokens are substituted in that order, every occurrence, as plain text.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]
"""Zero-argument callable returning the current local time."""

DATE_FORMAT = "%Y%m%d"

_TOKENS: tuple[tuple[str, str], ...] = (
    ("{d}", DATE_FORMAT),
    ("{y}", "%Y"),
    ("{m}", "%m"),
    ("{D}", "%d"),
)


def local_now() -> datetime:
    """Return the current wall-clock time in the local timezone."""
    return datetime.now()


def current_date_string(now: datetime | None = None) -> str:
    """Return *now* (default: local today) formatted as ``YYYYMMDD``."""
    if now is None:
        now = local_now()
    return now.strftime(DATE_FORMAT)


def expand_template(template: str, now: datetime | None = None) -> str:
    """Replace the ``{d}``/``{y}``/``{m}``/``{D}`` tokens in *template*.

    All four tokens are rendered from the same instant.  Unknown tokens and
    malformed braces are left untouched.
    """
    if now is None:
        now = local_now()
    expanded = template
    for token, fmt in _TOKENS:
        expanded = expanded.replace(token, now.strftime(fmt))
    return expanded

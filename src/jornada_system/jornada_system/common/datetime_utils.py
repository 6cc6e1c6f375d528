from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional

from ..core.constants import EMPTY_TIME
from ..core.exceptions import ValidationError

_HHMM_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Fecha no válida: {value!r}") from None


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; empty values map to None.

    Values with a UTC offset are converted to naive local time, the same
    representation the store and the clock use.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Fecha y hora no válida: {value!r}") from None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_hhmm(value: str) -> time:
    """Parse an ``HH:mm`` time input (as sent by ``<input type="time">``)."""
    m = _HHMM_RE.match((value or "").strip())
    if not m:
        raise ValidationError(f"Hora no válida: {value!r} (formato HH:mm)")
    return time(hour=int(m.group(1)), minute=int(m.group(2)))


def combine_date_hhmm(work_date: date, value: Optional[str]) -> Optional[datetime]:
    """Recombine an ``HH:mm`` value with a record's date; blank clears the field."""
    if value is None or not value.strip():
        return None
    return datetime.combine(work_date, parse_hhmm(value))


def format_time(value: Optional[datetime], fmt: str = "%H:%M") -> str:
    if value is None:
        return EMPTY_TIME
    return value.strftime(fmt)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()

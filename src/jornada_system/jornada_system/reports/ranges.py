from __future__ import annotations

import calendar
from datetime import date, timedelta

from ..core.enums import RangeType
from ..core.exceptions import ValidationError

MONTHS_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


def parse_range_type(value: str | None) -> RangeType:
    if not value:
        return RangeType.DAY
    try:
        return RangeType(value.strip().lower())
    except ValueError:
        raise ValidationError(f"Agrupación no válida: {value!r}") from None


def resolve_range(reference: date, range_type: RangeType) -> tuple[date, date]:
    """Inclusive [start, end] for a reference date; weeks start on Monday."""
    if range_type == RangeType.WEEK:
        start = reference - timedelta(days=reference.weekday())
        return start, start + timedelta(days=6)
    if range_type == RangeType.MONTH:
        last_day = calendar.monthrange(reference.year, reference.month)[1]
        return reference.replace(day=1), reference.replace(day=last_day)
    return reference, reference


def long_date_es(value: date) -> str:
    return f"{value.day} de {MONTHS_ES[value.month - 1]} de {value.year}"


def describe_range(reference: date, range_type: RangeType) -> str:
    start, end = resolve_range(reference, range_type)
    if range_type == RangeType.WEEK:
        return (
            f"Semana del {start.day} de {MONTHS_ES[start.month - 1][:3]} "
            f"al {end.day} de {MONTHS_ES[end.month - 1][:3]}, {end.year}"
        )
    if range_type == RangeType.MONTH:
        return f"{MONTHS_ES[reference.month - 1]} {reference.year}"
    return long_date_es(reference)

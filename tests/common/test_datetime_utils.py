from datetime import date, datetime, timezone

import pytest

from src.jornada_system.jornada_system.common.datetime_utils import (
    combine_date_hhmm,
    format_time,
    parse_iso_datetime,
)
from src.jornada_system.jornada_system.core.exceptions import ValidationError


def test_parse_iso_datetime_keeps_naive_values():
    assert parse_iso_datetime("2026-02-02T09:30:00") == datetime(2026, 2, 2, 9, 30)
    assert parse_iso_datetime("") is None
    assert parse_iso_datetime(None) is None


def test_parse_iso_datetime_converts_offset_to_local_naive():
    parsed = parse_iso_datetime("2026-02-02T13:00:00+00:00")

    expected = datetime(2026, 2, 2, 13, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert parsed.tzinfo is None
    assert parsed == expected


def test_parse_iso_datetime_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_iso_datetime("ayer")


def test_combine_date_hhmm():
    assert combine_date_hhmm(date(2026, 2, 2), "08:05") == datetime(2026, 2, 2, 8, 5)
    assert combine_date_hhmm(date(2026, 2, 2), "  ") is None
    with pytest.raises(ValidationError):
        combine_date_hhmm(date(2026, 2, 2), "8h")
    assert format_time(None) == "--:--"

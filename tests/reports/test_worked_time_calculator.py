from datetime import datetime

from src.jornada_system.jornada_system.jornada.model import ShiftMarks
from src.jornada_system.jornada_system.reports.calculator.base import format_worked
from src.jornada_system.jornada_system.reports.calculator.standard_calculator import StandardWorkedTimeCalculator


def at(hour: int, minute: int, second: int = 0) -> datetime:
    return datetime(2026, 2, 2, hour, minute, second)


def test_standard_day_is_eight_hours():
    calc = StandardWorkedTimeCalculator()
    marks = ShiftMarks(shift_start=at(9, 30), lunch_start=at(13, 0), lunch_end=at(13, 30), shift_end=at(18, 0))

    assert calc.worked_minutes(marks) == 480
    assert calc.display(marks) == "8h 00m"


def test_lunch_subtracted_only_when_both_bounds_present():
    calc = StandardWorkedTimeCalculator()
    open_lunch = ShiftMarks(shift_start=at(9, 0), lunch_start=at(13, 0), shift_end=at(17, 0))
    full_lunch = ShiftMarks(shift_start=at(9, 0), lunch_start=at(13, 0), lunch_end=at(13, 45), shift_end=at(17, 0))

    assert calc.worked_minutes(open_lunch) == 480
    assert calc.worked_minutes(open_lunch) - calc.worked_minutes(full_lunch) == 45
    assert calc.display(full_lunch) == "7h 15m"


def test_partial_minutes_are_truncated():
    calc = StandardWorkedTimeCalculator()
    marks = ShiftMarks(shift_start=at(9, 30, 40), shift_end=at(9, 35, 10))

    assert calc.worked_minutes(marks) == 4
    assert calc.display(marks) == "0h 04m"


def test_negative_span_clamps_to_zero():
    calc = StandardWorkedTimeCalculator()
    end_before_start = ShiftMarks(shift_start=at(18, 0), shift_end=at(9, 0))
    lunch_longer_than_shift = ShiftMarks(
        shift_start=at(9, 0), lunch_start=at(8, 0), lunch_end=at(12, 0), shift_end=at(10, 0)
    )

    assert calc.worked_minutes(end_before_start) == 0
    assert calc.worked_minutes(lunch_longer_than_shift) == 0
    assert calc.display(end_before_start) == "0h 00m"


def test_missing_bounds_show_placeholder():
    calc = StandardWorkedTimeCalculator()

    assert calc.display(ShiftMarks(shift_start=at(9, 30))) == "--:--"
    assert calc.display(ShiftMarks(shift_end=at(18, 0))) == "--:--"
    assert calc.worked_minutes(ShiftMarks(shift_start=at(9, 30))) == 0


def test_format_worked_pads_minutes():
    assert format_worked(0) == "0h 00m"
    assert format_worked(605) == "10h 05m"
    assert format_worked(-5) == "0h 00m"

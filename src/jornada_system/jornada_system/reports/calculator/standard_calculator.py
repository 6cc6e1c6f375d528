from __future__ import annotations

from datetime import datetime

from .base import WorkedTimeCalculator
from ...jornada.model import ShiftMarks


def _whole_minutes(start: datetime, end: datetime) -> int:
    # Truncate toward zero so a negative span never rounds down to an extra minute.
    return int((end - start).total_seconds() / 60)


class StandardWorkedTimeCalculator(WorkedTimeCalculator):
    """Standard rule: (end - start) - (lunch end - lunch start), not below 0.

    Lunch is only subtracted when both bounds are present.
    """

    def worked_minutes(self, marks: ShiftMarks) -> int:
        if not marks.shift_start or not marks.shift_end:
            return 0
        minutes = _whole_minutes(marks.shift_start, marks.shift_end)
        if marks.lunch_start and marks.lunch_end:
            minutes -= _whole_minutes(marks.lunch_start, marks.lunch_end)
        return max(minutes, 0)

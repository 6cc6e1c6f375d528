from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import EMPTY_TIME
from ...jornada.model import ShiftMarks


def format_worked(minutes: int) -> str:
    minutes = max(int(minutes), 0)
    return f"{minutes // 60}h {minutes % 60:02d}m"


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_minutes(self, marks: ShiftMarks) -> int:
        raise NotImplementedError

    def display(self, marks: ShiftMarks) -> str:
        if not marks.shift_start or not marks.shift_end:
            return EMPTY_TIME
        return format_worked(self.worked_minutes(marks))

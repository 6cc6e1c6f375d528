from __future__ import annotations

from datetime import datetime

from ...core.enums import JornadaAction
from ..model import ShiftMarks
from .base import GateDecision, GateRules, TransitionRule


def minutes_on_lunch(marks: ShiftMarks, now: datetime) -> int:
    """Whole minutes elapsed since lunch start (0 when lunch has not started)."""
    if marks.lunch_start is None:
        return 0
    return int((now - marks.lunch_start).total_seconds() // 60)


class EndLunchRule(TransitionRule):
    """Lunch lasts at least ``min_lunch_minutes``; bypass does not apply."""

    action = JornadaAction.END_LUNCH

    def decide(self, *, marks: ShiftMarks, now: datetime, rules: GateRules, bypass: bool) -> GateDecision:
        elapsed = minutes_on_lunch(marks, now)
        if elapsed >= rules.min_lunch_minutes:
            return self.allow()
        remaining = rules.min_lunch_minutes - elapsed
        return self.deny(
            f"El descanso debe durar al menos {rules.min_lunch_minutes} minutos. "
            f"Podrás finalizar en {remaining} min."
        )

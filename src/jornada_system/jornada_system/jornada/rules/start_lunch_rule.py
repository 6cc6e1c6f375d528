from __future__ import annotations

from datetime import datetime

from ...core.enums import JornadaAction
from ..model import ShiftMarks
from .base import GateDecision, GateRules, TransitionRule


class StartLunchRule(TransitionRule):
    """Lunch may start inside [window_start, window_end)."""

    action = JornadaAction.START_LUNCH

    def decide(self, *, marks: ShiftMarks, now: datetime, rules: GateRules, bypass: bool) -> GateDecision:
        if bypass or rules.lunch_window_start <= now.time() < rules.lunch_window_end:
            return self.allow()
        return self.deny(
            "El almuerzo solo puede iniciar entre las "
            f"{rules.lunch_window_start.strftime('%H:%M')} y las {rules.lunch_window_end.strftime('%H:%M')}."
        )

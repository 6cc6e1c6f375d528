from __future__ import annotations

from datetime import datetime

from ...core.enums import JornadaAction
from ..model import ShiftMarks
from .base import GateDecision, GateRules, TransitionRule


class ClockOutRule(TransitionRule):
    """No time restriction once the shift has started."""

    action = JornadaAction.CLOCK_OUT

    def decide(self, *, marks: ShiftMarks, now: datetime, rules: GateRules, bypass: bool) -> GateDecision:
        return self.allow()

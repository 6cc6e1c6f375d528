from __future__ import annotations

from datetime import datetime

from ...core.enums import JornadaAction
from ..model import ShiftMarks
from .base import GateDecision, GateRules, TransitionRule


class ClockInRule(TransitionRule):
    """Start shift only at or after the configured hour (default 09:30)."""

    action = JornadaAction.CLOCK_IN

    def decide(self, *, marks: ShiftMarks, now: datetime, rules: GateRules, bypass: bool) -> GateDecision:
        if bypass or now.time() >= rules.clock_in_earliest:
            return self.allow()
        return self.deny(
            f"Solo se puede iniciar jornada a partir de las {rules.clock_in_earliest.strftime('%H:%M')}."
        )

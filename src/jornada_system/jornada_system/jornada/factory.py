from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import JornadaAction
from .model import ShiftMarks
from .rules.base import TransitionRule
from .rules.clock_in_rule import ClockInRule
from .rules.clock_out_rule import ClockOutRule
from .rules.end_lunch_rule import EndLunchRule
from .rules.start_lunch_rule import StartLunchRule


def _default_rules() -> dict[JornadaAction, TransitionRule]:
    return {rule.action: rule for rule in (ClockInRule(), StartLunchRule(), EndLunchRule(), ClockOutRule())}


@dataclass
class TransitionRuleFactory:
    """Factory Pattern: pick the actions a record offers and the rule for each."""

    rules: dict[JornadaAction, TransitionRule] = field(default_factory=_default_rules)

    def for_action(self, action: JornadaAction) -> TransitionRule:
        return self.rules[action]

    def offered_actions(self, marks: ShiftMarks) -> list[JornadaAction]:
        if marks.shift_end:
            return []
        if not marks.shift_start:
            return [JornadaAction.CLOCK_IN]
        if not marks.lunch_start:
            return [JornadaAction.START_LUNCH, JornadaAction.CLOCK_OUT]
        if not marks.lunch_end:
            return [JornadaAction.END_LUNCH]
        return [JornadaAction.CLOCK_OUT]

    def not_offered_reason(self, action: JornadaAction, marks: ShiftMarks) -> Optional[str]:
        """Why ``action`` is out of sequence for ``marks`` (None when it is offered)."""
        if action in self.offered_actions(marks):
            return None
        if marks.shift_end:
            return "La jornada ya está finalizada."
        if action == JornadaAction.CLOCK_IN:
            return "La jornada ya fue iniciada hoy."
        if not marks.shift_start:
            return "La jornada aún no ha iniciado."
        if action == JornadaAction.START_LUNCH:
            return "El almuerzo ya fue iniciado."
        if action == JornadaAction.END_LUNCH:
            return "El almuerzo no ha iniciado." if not marks.lunch_start else "El almuerzo ya fue finalizado."
        return "Finaliza el almuerzo antes de terminar la jornada."

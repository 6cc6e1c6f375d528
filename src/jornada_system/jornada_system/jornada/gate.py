from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import JornadaAction
from ..core.exceptions import ValidationError
from .factory import TransitionRuleFactory
from .model import ShiftMarks
from .rules.base import GateDecision, GateRules

IN_FLIGHT_REASON = "Hay una operación en curso."


class TransitionGate:
    """Which of the four actions a record offers, and whether each is allowed now."""

    def __init__(self, rules: Optional[GateRules] = None, *, factory: Optional[TransitionRuleFactory] = None):
        self._rules = rules or GateRules()
        self._factory = factory or TransitionRuleFactory()

    @property
    def rules(self) -> GateRules:
        return self._rules

    def evaluate(
        self,
        marks: ShiftMarks,
        *,
        now: datetime,
        bypass: bool = False,
        in_flight: bool = False,
    ) -> list[GateDecision]:
        decisions = []
        for action in self._factory.offered_actions(marks):
            if in_flight:
                decisions.append(GateDecision(action=action, allowed=False, reason=IN_FLIGHT_REASON))
                continue
            rule = self._factory.for_action(action)
            decisions.append(rule.decide(marks=marks, now=now, rules=self._rules, bypass=bypass))
        return decisions

    def check(self, action: JornadaAction, marks: ShiftMarks, *, now: datetime, bypass: bool = False) -> None:
        """Raise ValidationError unless ``action`` is offered and allowed right now."""
        reason = self._factory.not_offered_reason(action, marks)
        if reason:
            raise ValidationError(reason)

        decision = self._factory.for_action(action).decide(marks=marks, now=now, rules=self._rules, bypass=bypass)
        if not decision.allowed:
            raise ValidationError(decision.reason or "Acción no permitida en este momento.")

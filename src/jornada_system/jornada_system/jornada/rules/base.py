from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, time
from typing import Any, Mapping, Optional

from ...common.datetime_utils import parse_hhmm
from ...core.constants import (
    DEFAULT_CLOCK_IN_EARLIEST,
    DEFAULT_LUNCH_WINDOW_END,
    DEFAULT_LUNCH_WINDOW_START,
    DEFAULT_MIN_LUNCH_MINUTES,
)
from ...core.enums import JornadaAction
from ..model import ShiftMarks


@dataclass(frozen=True)
class GateRules:
    """Time-of-day thresholds for the four transitions."""

    clock_in_earliest: time = DEFAULT_CLOCK_IN_EARLIEST
    lunch_window_start: time = DEFAULT_LUNCH_WINDOW_START
    lunch_window_end: time = DEFAULT_LUNCH_WINDOW_END
    min_lunch_minutes: int = DEFAULT_MIN_LUNCH_MINUTES

    @classmethod
    def from_settings(cls, values: Optional[Mapping[str, Any]]) -> "GateRules":
        """Build from a settings dict; missing keys keep the defaults.

        Times may be given as ``datetime.time`` or ``HH:mm`` strings.
        """
        values = dict(values or {})

        def _time(key: str, default: time) -> time:
            value = values.get(key)
            if value is None:
                return default
            return value if isinstance(value, time) else parse_hhmm(str(value))

        return cls(
            clock_in_earliest=_time("clock_in_earliest", DEFAULT_CLOCK_IN_EARLIEST),
            lunch_window_start=_time("lunch_window_start", DEFAULT_LUNCH_WINDOW_START),
            lunch_window_end=_time("lunch_window_end", DEFAULT_LUNCH_WINDOW_END),
            min_lunch_minutes=int(values.get("min_lunch_minutes", DEFAULT_MIN_LUNCH_MINUTES)),
        )


@dataclass(frozen=True)
class GateDecision:
    action: JornadaAction
    allowed: bool
    reason: Optional[str] = None


class TransitionRule(ABC):
    """Strategy Pattern: one time rule per jornada action."""

    action: JornadaAction

    @abstractmethod
    def decide(self, *, marks: ShiftMarks, now: datetime, rules: GateRules, bypass: bool) -> GateDecision:
        raise NotImplementedError

    def allow(self) -> GateDecision:
        return GateDecision(action=self.action, allowed=True)

    def deny(self, reason: str) -> GateDecision:
        return GateDecision(action=self.action, allowed=False, reason=reason)

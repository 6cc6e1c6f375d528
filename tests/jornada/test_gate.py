from __future__ import annotations

from datetime import datetime, time

import pytest

from src.jornada_system.jornada_system.core.enums import JornadaAction
from src.jornada_system.jornada_system.core.exceptions import ValidationError
from src.jornada_system.jornada_system.jornada.gate import TransitionGate
from src.jornada_system.jornada_system.jornada.model import ShiftMarks
from src.jornada_system.jornada_system.jornada.rules.base import GateRules

DAY = (2026, 2, 2)


def at(hour: int, minute: int, second: int = 0) -> datetime:
    return datetime(*DAY, hour, minute, second)


def _decision(decisions, action):
    return next(d for d in decisions if d.action == action)


@pytest.mark.parametrize(
    "now, allowed",
    [(at(9, 29, 59), False), (at(9, 30), True), (at(16, 0), True), (at(0, 5), False)],
)
def test_clock_in_allowed_from_0930(now, allowed):
    decisions = TransitionGate().evaluate(ShiftMarks(), now=now)

    assert [d.action for d in decisions] == [JornadaAction.CLOCK_IN]
    assert decisions[0].allowed is allowed
    if not allowed:
        assert "09:30" in decisions[0].reason


def test_clock_in_bypass_ignores_time_of_day():
    decisions = TransitionGate().evaluate(ShiftMarks(), now=at(7, 0), bypass=True)

    assert decisions[0].allowed is True


@pytest.mark.parametrize(
    "now, allowed",
    [(at(12, 59), False), (at(13, 0), True), (at(14, 59, 59), True), (at(15, 0), False)],
)
def test_start_lunch_window(now, allowed):
    marks = ShiftMarks(shift_start=at(9, 30))
    decisions = TransitionGate().evaluate(marks, now=now)

    assert [d.action for d in decisions] == [JornadaAction.START_LUNCH, JornadaAction.CLOCK_OUT]
    assert _decision(decisions, JornadaAction.START_LUNCH).allowed is allowed
    # clock out never depends on the time of day
    assert _decision(decisions, JornadaAction.CLOCK_OUT).allowed is True


def test_end_lunch_enabled_at_exactly_minute_30():
    marks = ShiftMarks(shift_start=at(9, 30), lunch_start=at(13, 0))
    gate = TransitionGate()

    before = gate.evaluate(marks, now=at(13, 29, 59))
    exactly = gate.evaluate(marks, now=at(13, 30))

    assert [d.action for d in before] == [JornadaAction.END_LUNCH]
    assert before[0].allowed is False
    assert "Podrás finalizar en 1 min." in before[0].reason
    assert exactly[0].allowed is True


def test_end_lunch_minimum_is_not_bypassed():
    marks = ShiftMarks(shift_start=at(9, 30), lunch_start=at(13, 0))

    decisions = TransitionGate().evaluate(marks, now=at(13, 10), bypass=True)

    assert decisions[0].allowed is False
    assert "20 min" in decisions[0].reason


def test_after_lunch_only_clock_out_and_finished_has_nothing():
    gate = TransitionGate()
    after_lunch = ShiftMarks(shift_start=at(9, 30), lunch_start=at(13, 0), lunch_end=at(13, 30))
    finished = ShiftMarks(shift_start=at(9, 30), shift_end=at(18, 0))

    decisions = gate.evaluate(after_lunch, now=at(23, 0))

    assert [(d.action, d.allowed) for d in decisions] == [(JornadaAction.CLOCK_OUT, True)]
    assert gate.evaluate(finished, now=at(18, 5)) == []


def test_in_flight_disables_every_offered_action():
    marks = ShiftMarks(shift_start=at(9, 30))

    decisions = TransitionGate().evaluate(marks, now=at(13, 30), in_flight=True)

    assert decisions and all(not d.allowed for d in decisions)


def test_check_rejects_out_of_sequence_and_outside_window():
    gate = TransitionGate()

    with pytest.raises(ValidationError, match="ya fue iniciada"):
        gate.check(JornadaAction.CLOCK_IN, ShiftMarks(shift_start=at(9, 30)), now=at(10, 0))
    with pytest.raises(ValidationError, match="aún no ha iniciado"):
        gate.check(JornadaAction.CLOCK_OUT, ShiftMarks(), now=at(10, 0))
    with pytest.raises(ValidationError, match="Finaliza el almuerzo"):
        gate.check(JornadaAction.CLOCK_OUT, ShiftMarks(shift_start=at(9, 30), lunch_start=at(13, 0)), now=at(14, 0))
    with pytest.raises(ValidationError, match="almuerzo solo puede iniciar"):
        gate.check(JornadaAction.START_LUNCH, ShiftMarks(shift_start=at(9, 30)), now=at(11, 0))

    gate.check(JornadaAction.START_LUNCH, ShiftMarks(shift_start=at(9, 30)), now=at(13, 0))


def test_rules_from_settings_accepts_hhmm_strings():
    rules = GateRules.from_settings({"clock_in_earliest": "08:00", "min_lunch_minutes": "45"})

    assert rules.clock_in_earliest == time(8, 0)
    assert rules.lunch_window_start == time(13, 0)
    assert rules.min_lunch_minutes == 45

    decisions = TransitionGate(rules).evaluate(ShiftMarks(), now=at(8, 0))
    assert decisions[0].allowed is True

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from ..colaboradores.model import Colaborador
from ..colaboradores.repository import ColaboradorRepository
from ..common.datetime_utils import format_time, now_local, to_iso
from ..core.constants import DEFAULT_HISTORY_PAGE_SIZE
from ..core.enums import JornadaAction
from ..core.exceptions import NotFoundError
from ..reports.calculator.base import WorkedTimeCalculator
from ..reports.calculator.standard_calculator import StandardWorkedTimeCalculator
from .gate import TransitionGate
from .model import Jornada, ShiftMarks, marks_of
from .repository import JornadaRepository
from .status import StatusView, admin_status, panel_status

logger = logging.getLogger(__name__)

# Field stamped by each action after clock-in.
_ACTION_FIELD = {
    JornadaAction.START_LUNCH: "lunch_start",
    JornadaAction.END_LUNCH: "lunch_end",
    JornadaAction.CLOCK_OUT: "shift_end",
}

ACTION_LABELS = {
    JornadaAction.CLOCK_IN: ("Iniciar Jornada", "btn-success"),
    JornadaAction.START_LUNCH: ("Iniciar Almuerzo", "btn-warning"),
    JornadaAction.END_LUNCH: ("Finalizar Almuerzo", "btn-info"),
    JornadaAction.CLOCK_OUT: ("Finalizar Jornada", "btn-danger"),
}

SUCCESS_MESSAGES = {
    JornadaAction.CLOCK_IN: ("Jornada Iniciada", "Se ha iniciado la jornada para {name}."),
    JornadaAction.START_LUNCH: ("Descanso Iniciado", "¡Buen provecho!"),
    JornadaAction.END_LUNCH: ("Descanso Finalizado", "¡De vuelta al trabajo!"),
    JornadaAction.CLOCK_OUT: ("Jornada Finalizada", "Se ha finalizado la jornada para {name}."),
}


def success_message(action: JornadaAction, colaborador: Colaborador) -> str:
    title, body = SUCCESS_MESSAGES[action]
    return f"{title}: {body.format(name=colaborador.name)}"


@dataclass(frozen=True)
class ActionButton:
    action: JornadaAction
    label: str
    css_class: str
    allowed: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class ClockPanel:
    """Everything the clock page renders for one colaborador and day."""

    colaborador: Colaborador
    record: Optional[Jornada]
    status: StatusView
    times: list[tuple[str, str]]
    buttons: list[ActionButton]
    marks_iso: dict[str, Optional[str]]
    bypass: bool

    @property
    def completed(self) -> bool:
        return self.record is not None and self.record.shift_end is not None


class JornadaService:
    def __init__(
        self,
        jornadas: JornadaRepository,
        colaboradores: ColaboradorRepository,
        *,
        gate: TransitionGate | None = None,
        calculator: WorkedTimeCalculator | None = None,
        history_page_size: int = DEFAULT_HISTORY_PAGE_SIZE,
        clock: Callable[[], datetime] = now_local,
    ):
        self._jornadas = jornadas
        self._colaboradores = colaboradores
        self._gate = gate or TransitionGate()
        self._calculator = calculator or StandardWorkedTimeCalculator()
        self._history_page_size = int(history_page_size)
        self._clock = clock

    @property
    def gate(self) -> TransitionGate:
        return self._gate

    def now(self) -> datetime:
        return self._clock()

    def get_today(self, colaborador_id: str, *, now: datetime | None = None) -> Optional[Jornada]:
        now = now or self._clock()
        return self._jornadas.get_for_colaborador_and_date(colaborador_id, now.date())

    def perform(
        self,
        colaborador_id: str,
        action: JornadaAction,
        *,
        now: datetime | None = None,
        bypass: bool = False,
    ) -> Jornada:
        """Apply one transition to today's record, after the gate allows it."""
        now = (now or self._clock()).replace(microsecond=0)
        today = now.date()

        if not self._colaboradores.get_by_id(colaborador_id):
            raise NotFoundError("Colaborador no encontrado")

        record = self._jornadas.get_for_colaborador_and_date(colaborador_id, today)
        self._gate.check(action, marks_of(record), now=now, bypass=bypass)

        if action == JornadaAction.CLOCK_IN and record is None:
            updated = self._jornadas.create_clock_in(colaborador_id=colaborador_id, work_date=today, shift_start=now)
        else:
            # A record without shift start (cleared by an admin) is reused, not duplicated.
            field = "shift_start" if action == JornadaAction.CLOCK_IN else _ACTION_FIELD[action]
            updated = self._jornadas.update_times(jornada_id=record.jornada_id, changes={field: now})
            if updated is None:
                raise NotFoundError("Registro de jornada no encontrado")

        logger.info(
            "jornada %s: %s colaborador=%s at=%s bypass=%s",
            updated.jornada_id,
            action.name,
            colaborador_id,
            now.isoformat(),
            bypass,
        )
        return updated

    def clock_in(self, colaborador_id: str, *, now: datetime | None = None, bypass: bool = False) -> Jornada:
        return self.perform(colaborador_id, JornadaAction.CLOCK_IN, now=now, bypass=bypass)

    def start_lunch(self, colaborador_id: str, *, now: datetime | None = None, bypass: bool = False) -> Jornada:
        return self.perform(colaborador_id, JornadaAction.START_LUNCH, now=now, bypass=bypass)

    def end_lunch(self, colaborador_id: str, *, now: datetime | None = None, bypass: bool = False) -> Jornada:
        return self.perform(colaborador_id, JornadaAction.END_LUNCH, now=now, bypass=bypass)

    def clock_out(self, colaborador_id: str, *, now: datetime | None = None, bypass: bool = False) -> Jornada:
        return self.perform(colaborador_id, JornadaAction.CLOCK_OUT, now=now, bypass=bypass)

    def evaluate_actions(
        self,
        marks: ShiftMarks,
        *,
        now: datetime | None = None,
        bypass: bool = False,
        in_flight: bool = False,
    ) -> list[ActionButton]:
        now = now or self._clock()
        buttons = []
        for decision in self._gate.evaluate(marks, now=now, bypass=bypass, in_flight=in_flight):
            label, css = ACTION_LABELS[decision.action]
            buttons.append(
                ActionButton(
                    action=decision.action,
                    label=label,
                    css_class=css,
                    allowed=decision.allowed,
                    reason=decision.reason,
                )
            )
        return buttons

    def get_panel(self, colaborador: Colaborador, *, now: datetime | None = None, bypass: bool = False) -> ClockPanel:
        now = now or self._clock()
        record = self.get_today(colaborador.colaborador_id, now=now)
        marks = marks_of(record)
        return ClockPanel(
            colaborador=colaborador,
            record=record,
            status=panel_status(record),
            times=[
                ("Inicio Jornada", format_time(marks.shift_start, "%H:%M:%S")),
                ("Inicio Almuerzo", format_time(marks.lunch_start, "%H:%M:%S")),
                ("Fin Almuerzo", format_time(marks.lunch_end, "%H:%M:%S")),
                ("Fin Jornada", format_time(marks.shift_end, "%H:%M:%S")),
            ],
            buttons=self.evaluate_actions(marks, now=now, bypass=bypass),
            marks_iso={name: to_iso(value) for name, value in marks.as_dict().items()},
            bypass=bypass,
        )

    def get_history_ui(self, colaborador_id: str, *, page: int = 1) -> list[dict]:
        rows = self._jornadas.list_history(colaborador_id, page=max(int(page), 1), page_size=self._history_page_size)
        return [self._to_ui(r) for r in rows]

    @property
    def history_page_size(self) -> int:
        return self._history_page_size

    def _to_ui(self, r: Jornada) -> dict:
        view = admin_status(r.marks)
        return {
            "date": r.work_date.strftime("%Y-%m-%d"),
            "shift_start": format_time(r.shift_start),
            "lunch_start": format_time(r.lunch_start),
            "lunch_end": format_time(r.lunch_end),
            "shift_end": format_time(r.shift_end),
            "worked": self._calculator.display(r.marks),
            "status": view.label,
            "css_class": view.css_class,
        }

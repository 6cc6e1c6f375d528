from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Optional

from ..colaboradores.model import Colaborador

# Column name in `registros_jornada` for each time field, left to right.
TIME_COLUMNS = {
    "shift_start": "hora_inicio_jornada",
    "lunch_start": "hora_inicio_almuerzo",
    "lunch_end": "hora_fin_almuerzo",
    "shift_end": "hora_fin_jornada",
}
TIME_FIELDS = tuple(TIME_COLUMNS)


@dataclass(frozen=True)
class ShiftMarks:
    """The four optional timestamps of a jornada, with no identity attached."""

    shift_start: Optional[datetime] = None
    lunch_start: Optional[datetime] = None
    lunch_end: Optional[datetime] = None
    shift_end: Optional[datetime] = None

    def as_dict(self) -> dict[str, Optional[datetime]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


EMPTY_MARKS = ShiftMarks()


@dataclass(frozen=True)
class Jornada:
    """Entidad de dominio: Registro de jornada (un colaborador, un día)."""

    jornada_id: int
    colaborador_id: str
    work_date: date
    shift_start: Optional[datetime] = None
    lunch_start: Optional[datetime] = None
    lunch_end: Optional[datetime] = None
    shift_end: Optional[datetime] = None

    @property
    def marks(self) -> ShiftMarks:
        return ShiftMarks(
            shift_start=self.shift_start,
            lunch_start=self.lunch_start,
            lunch_end=self.lunch_end,
            shift_end=self.shift_end,
        )


def marks_of(record: Optional[Jornada]) -> ShiftMarks:
    return record.marks if record is not None else EMPTY_MARKS


@dataclass(frozen=True)
class JornadaRow:
    """Read-model del listado de administración (jornada + identidad)."""

    jornada: Jornada
    colaborador: Optional[Colaborador]

    @property
    def colaborador_name(self) -> str:
        return self.colaborador.full_name if self.colaborador else "-"

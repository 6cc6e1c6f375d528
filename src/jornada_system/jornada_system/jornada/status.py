from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import JornadaStatus
from .model import Jornada, ShiftMarks, marks_of


def derive_status(marks: ShiftMarks) -> JornadaStatus:
    """Map the four timestamps to a status.

    Fields are checked end to start; the first one set decides, so a record
    edited out of order still gets exactly one status.
    """
    if marks.shift_end:
        return JornadaStatus.FINISHED
    if marks.lunch_end:
        return JornadaStatus.WORKING_AFTER_LUNCH
    if marks.lunch_start:
        return JornadaStatus.ON_LUNCH
    if marks.shift_start:
        return JornadaStatus.WORKING
    return JornadaStatus.ABSENT


def status_of(record: Optional[Jornada]) -> JornadaStatus:
    return derive_status(marks_of(record))


@dataclass(frozen=True)
class StatusView:
    status: JornadaStatus
    label: str
    css_class: str


# Self-service panel wording.
_PANEL_LABELS = {
    JornadaStatus.ABSENT: ("Fuera de servicio", "text-secondary"),
    JornadaStatus.WORKING: ("Trabajando", "text-primary"),
    JornadaStatus.ON_LUNCH: ("En almuerzo", "text-warning"),
    JornadaStatus.WORKING_AFTER_LUNCH: ("Trabajando", "text-primary"),
    JornadaStatus.FINISHED: ("Jornada finalizada", "text-success"),
}

# Admin table wording (badges).
_ADMIN_LABELS = {
    JornadaStatus.ABSENT: ("Ausente", "bg-danger"),
    JornadaStatus.WORKING: ("Trabajando", "bg-secondary"),
    JornadaStatus.ON_LUNCH: ("En Almuerzo", "bg-light text-dark border"),
    JornadaStatus.WORKING_AFTER_LUNCH: ("Trabajando", "bg-secondary"),
    JornadaStatus.FINISHED: ("Finalizada", "bg-primary"),
}


def panel_status(record: Optional[Jornada]) -> StatusView:
    status = status_of(record)
    label, css = _PANEL_LABELS[status]
    return StatusView(status=status, label=label, css_class=css)


def admin_status(marks: ShiftMarks) -> StatusView:
    status = derive_status(marks)
    label, css = _ADMIN_LABELS[status]
    return StatusView(status=status, label=label, css_class=css)

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Mapping, Optional

from ..colaboradores.model import Colaborador
from ..colaboradores.repository import ColaboradorRepository
from ..common.datetime_utils import combine_date_hhmm
from ..core.enums import JornadaAction, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import TIME_FIELDS, Jornada, ShiftMarks
from .repository import JornadaRepository
from .service import JornadaService

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "shift_start": "Inicio Jornada",
    "lunch_start": "Inicio Almuerzo",
    "lunch_end": "Fin Almuerzo",
    "shift_end": "Fin Jornada",
}

DEFAULT_ADMIN_ROLES = frozenset({Role.ADMIN.value, Role.FINANZAS_SENIOR.value})


def consistency_warnings(marks: ShiftMarks) -> list[str]:
    """Describe where ``marks`` break the left-to-right fill order.

    Used only to inform the admin; an inconsistent record is still saved.
    """
    warnings: list[str] = []
    values = marks.as_dict()

    if not marks.shift_start and any(values[name] for name in TIME_FIELDS[1:]):
        warnings.append("Hay horas registradas sin inicio de jornada.")
    if marks.lunch_end and not marks.lunch_start:
        warnings.append("Fin de almuerzo sin inicio de almuerzo.")

    present = [(name, value) for name, value in values.items() if value is not None]
    for (prev_name, prev), (name, value) in zip(present, present[1:]):
        if value < prev:
            warnings.append(f"{FIELD_LABELS[name]} es anterior a {FIELD_LABELS[prev_name]}.")
    return warnings


@dataclass(frozen=True)
class EditForm:
    jornada: Jornada
    colaborador: Optional[Colaborador]
    values: dict[str, str]


@dataclass(frozen=True)
class EditResult:
    jornada: Jornada
    warnings: list[str]


class AdminJornadaService:
    """Use case: administrator corrections and admin-assisted clocking."""

    def __init__(
        self,
        jornadas: JornadaRepository,
        colaboradores: ColaboradorRepository,
        jornada_service: JornadaService,
        *,
        admin_roles: Iterable[str] = DEFAULT_ADMIN_ROLES,
    ):
        self._jornadas = jornadas
        self._colaboradores = colaboradores
        self._jornada_service = jornada_service
        self._admin_roles = frozenset(str(r) for r in admin_roles)

    def is_admin(self, role: Optional[str]) -> bool:
        return bool(role) and str(role) in self._admin_roles

    def _require_admin(self, current_role: Optional[str]) -> None:
        if not self.is_admin(current_role):
            raise AuthorizationError("No tienes permisos para esta acción")

    def _get(self, jornada_id: int) -> Jornada:
        record = self._jornadas.get_by_id(int(jornada_id))
        if not record:
            raise NotFoundError("Registro de jornada no encontrado")
        return record

    def get_edit_form(self, *, current_role: Optional[str], jornada_id: int) -> EditForm:
        self._require_admin(current_role)
        record = self._get(jornada_id)
        return EditForm(
            jornada=record,
            colaborador=self._colaboradores.get_by_id(record.colaborador_id),
            values={
                name: value.strftime("%H:%M") if value else ""
                for name, value in record.marks.as_dict().items()
            },
        )

    def edit_times(
        self,
        *,
        current_role: Optional[str],
        jornada_id: int,
        values: Mapping[str, Optional[str]],
    ) -> EditResult:
        """Overwrite time fields from ``HH:mm`` inputs.

        Each given field is recombined with the record's date; a blank value
        clears it. Fields not present in ``values`` are left untouched. No
        ordering check blocks the write.
        """
        self._require_admin(current_role)
        record = self._get(jornada_id)

        changes: dict[str, Optional[datetime]] = {}
        for name in TIME_FIELDS:
            if name in values:
                changes[name] = combine_date_hhmm(record.work_date, values[name])

        updated = self._jornadas.update_times(jornada_id=record.jornada_id, changes=changes)
        if updated is None:
            raise NotFoundError("Registro de jornada no encontrado")

        warnings = consistency_warnings(updated.marks)
        logger.info("jornada %s: admin overwrite fields=%s", updated.jornada_id, sorted(changes))
        if warnings:
            logger.warning("jornada %s saved with inconsistencies: %s", updated.jornada_id, "; ".join(warnings))
        return EditResult(jornada=updated, warnings=warnings)

    def assisted_action(
        self,
        *,
        current_role: Optional[str],
        colaborador_id: str,
        action: JornadaAction,
        now: datetime | None = None,
    ) -> Jornada:
        """Register an action for any colaborador with time-of-day limits bypassed."""
        self._require_admin(current_role)
        return self._jornada_service.perform(colaborador_id, action, now=now, bypass=True)

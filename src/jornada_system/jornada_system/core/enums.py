from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles asignados por la aplicación anfitriona (solo lectura aquí)."""

    ADMIN = "admin"
    FINANZAS_SENIOR = "finanzas_senior"
    COLABORADOR = "colaborador"


class JornadaStatus(str, Enum):
    """Estado derivado de los cuatro timestamps de una jornada."""

    ABSENT = "ABSENT"
    WORKING = "WORKING"
    ON_LUNCH = "ON_LUNCH"
    WORKING_AFTER_LUNCH = "WORKING_AFTER_LUNCH"
    FINISHED = "FINISHED"


class JornadaAction(str, Enum):
    """Las cuatro transiciones de una jornada, en orden.

    The value doubles as the URL slug used by the controllers.
    """

    CLOCK_IN = "iniciar"
    START_LUNCH = "iniciar-almuerzo"
    END_LUNCH = "finalizar-almuerzo"
    CLOCK_OUT = "finalizar"


class RangeType(str, Enum):
    """Agrupación del listado de administración."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"

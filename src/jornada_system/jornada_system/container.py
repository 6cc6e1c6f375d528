from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from .colaboradores.mysql_colaborador_repository import MySQLColaboradorRepository
from .colaboradores.repository import ColaboradorRepository
from .colaboradores.service import ColaboradorService
from .core.constants import DEFAULT_GATE_REFRESH_SECONDS, DEFAULT_HISTORY_PAGE_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .jornada.admin_service import DEFAULT_ADMIN_ROLES, AdminJornadaService
from .jornada.gate import TransitionGate
from .jornada.mysql_jornada_repository import MySQLJornadaRepository
from .jornada.repository import JornadaRepository
from .jornada.rules.base import GateRules
from .jornada.service import JornadaService
from .reports.service import JornadaReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    colaboradores_repo: ColaboradorRepository
    jornadas_repo: JornadaRepository

    colaborador_service: ColaboradorService
    jornada_service: JornadaService
    admin_jornada_service: AdminJornadaService
    report_service: JornadaReportService

    gate_refresh_seconds: int = DEFAULT_GATE_REFRESH_SECONDS


def build_services(
    *,
    colaboradores_repo: ColaboradorRepository,
    jornadas_repo: JornadaRepository,
    conn: Optional[DatabaseConnection] = None,
    jornada_rules: Optional[Mapping[str, Any]] = None,
    admin_roles: Iterable[str] = DEFAULT_ADMIN_ROLES,
    history_page_size: int = DEFAULT_HISTORY_PAGE_SIZE,
    gate_refresh_seconds: int = DEFAULT_GATE_REFRESH_SECONDS,
    **service_kwargs: Any,
) -> Container:
    """Wire services over any repository implementation (MySQL or in-memory)."""
    gate = TransitionGate(GateRules.from_settings(jornada_rules))
    jornada_service = JornadaService(
        jornadas_repo,
        colaboradores_repo,
        gate=gate,
        history_page_size=history_page_size,
        **service_kwargs,
    )

    return Container(
        conn=conn,
        colaboradores_repo=colaboradores_repo,
        jornadas_repo=jornadas_repo,
        colaborador_service=ColaboradorService(colaboradores_repo),
        jornada_service=jornada_service,
        admin_jornada_service=AdminJornadaService(
            jornadas_repo,
            colaboradores_repo,
            jornada_service,
            admin_roles=admin_roles,
        ),
        report_service=JornadaReportService(jornadas_repo),
        gate_refresh_seconds=int(gate_refresh_seconds),
    )


def build_container(*, db_config: dict, **options: Any) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        colaboradores_repo=MySQLColaboradorRepository(conn),
        jornadas_repo=MySQLJornadaRepository(conn),
        conn=conn,
        **options,
    )

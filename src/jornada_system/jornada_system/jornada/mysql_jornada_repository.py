from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Optional, Sequence

from ..colaboradores.model import Colaborador
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_datetime
from .model import TIME_COLUMNS, Jornada, JornadaRow
from .repository import JornadaRepository

_SELECT = """
    SELECT rj.id, rj.colaborador_id, rj.fecha,
           rj.hora_inicio_jornada, rj.hora_inicio_almuerzo,
           rj.hora_fin_almuerzo, rj.hora_fin_jornada
    FROM registros_jornada rj
"""


def _row_to_jornada(r: dict) -> Jornada:
    return Jornada(
        jornada_id=int(r["id"]),
        colaborador_id=str(r["colaborador_id"]),
        work_date=r["fecha"],
        shift_start=normalize_mysql_datetime(r.get("hora_inicio_jornada")),
        lunch_start=normalize_mysql_datetime(r.get("hora_inicio_almuerzo")),
        lunch_end=normalize_mysql_datetime(r.get("hora_fin_almuerzo")),
        shift_end=normalize_mysql_datetime(r.get("hora_fin_jornada")),
    )


class MySQLJornadaRepository(JornadaRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_by_id(self, cur, jornada_id: int) -> Optional[Jornada]:
        cur.execute(_SELECT + " WHERE rj.id=%s", (int(jornada_id),))
        r = fetchone(cur)
        return _row_to_jornada(r) if r else None

    def get_by_id(self, jornada_id: int) -> Optional[Jornada]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._get_by_id(cur, jornada_id)

    def get_for_colaborador_and_date(self, colaborador_id: str, work_date: date) -> Optional[Jornada]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE rj.colaborador_id=%s AND rj.fecha=%s ORDER BY rj.id ASC LIMIT 1",
                (colaborador_id, work_date),
            )
            r = fetchone(cur)
            return _row_to_jornada(r) if r else None

    def create_clock_in(self, *, colaborador_id: str, work_date: date, shift_start: datetime) -> Jornada:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO registros_jornada(colaborador_id, fecha, hora_inicio_jornada)
                VALUES(%s,%s,%s)
                """,
                (colaborador_id, work_date, shift_start),
            )
            return Jornada(
                jornada_id=int(cur.lastrowid),
                colaborador_id=colaborador_id,
                work_date=work_date,
                shift_start=shift_start,
            )

    def update_times(self, *, jornada_id: int, changes: Mapping[str, Optional[datetime]]) -> Optional[Jornada]:
        unknown = set(changes) - set(TIME_COLUMNS)
        if unknown:
            raise KeyError(f"Unknown time fields: {sorted(unknown)}")

        with db_cursor(self._conn_factory) as (_, cur):
            if changes:
                assignments = ", ".join(f"{TIME_COLUMNS[name]}=%s" for name in changes)
                cur.execute(
                    f"UPDATE registros_jornada SET {assignments} WHERE id=%s",
                    (*changes.values(), int(jornada_id)),
                )
            return self._get_by_id(cur, jornada_id)

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        colaborador_id: Optional[str] = None,
    ) -> Sequence[JornadaRow]:
        clauses = ["rj.fecha BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if colaborador_id:
            clauses.append("rj.colaborador_id=%s")
            params.append(colaborador_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    rj.id, rj.colaborador_id, rj.fecha,
                    rj.hora_inicio_jornada, rj.hora_inicio_almuerzo,
                    rj.hora_fin_almuerzo, rj.hora_fin_jornada,
                    c.id AS c_id, c.user_id AS c_user_id, c.name AS c_name, c.apellidos AS c_apellidos
                FROM registros_jornada rj
                LEFT JOIN colaboradores c ON c.id = rj.colaborador_id
                WHERE {where}
                ORDER BY rj.fecha DESC, rj.colaborador_id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

            return [
                JornadaRow(
                    jornada=_row_to_jornada(r),
                    colaborador=(
                        Colaborador(
                            colaborador_id=str(r["c_id"]),
                            name=r["c_name"],
                            apellidos=r.get("c_apellidos"),
                            user_id=r.get("c_user_id"),
                        )
                        if r.get("c_id")
                        else None
                    ),
                )
                for r in rows
            ]

    def list_history(self, colaborador_id: str, *, page: int, page_size: int) -> Sequence[Jornada]:
        page = max(int(page), 1)
        page_size = max(int(page_size), 1)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE rj.colaborador_id=%s ORDER BY rj.fecha DESC LIMIT %s OFFSET %s",
                (colaborador_id, page_size, (page - 1) * page_size),
            )
            return [_row_to_jornada(r) for r in fetchall(cur)]

from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Colaborador
from .repository import ColaboradorRepository

_COLUMNS = "id, user_id, name, apellidos"


def row_to_colaborador(r: dict) -> Colaborador:
    return Colaborador(
        colaborador_id=str(r["id"]),
        name=r["name"],
        apellidos=r.get("apellidos"),
        user_id=r.get("user_id"),
    )


class MySQLColaboradorRepository(ColaboradorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, colaborador_id: str) -> Optional[Colaborador]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM colaboradores WHERE id=%s", (colaborador_id,))
            row = fetchone(cur)
            return row_to_colaborador(row) if row else None

    def get_by_user_id(self, user_id: str) -> Optional[Colaborador]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM colaboradores WHERE user_id=%s LIMIT 1",
                (user_id,),
            )
            row = fetchone(cur)
            return row_to_colaborador(row) if row else None

    def list_all(self) -> Sequence[Colaborador]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM colaboradores ORDER BY name ASC")
            return [row_to_colaborador(r) for r in fetchall(cur)]

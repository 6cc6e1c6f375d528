from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Mapping, Optional

import pytest

from src.jornada_system.jornada_system.colaboradores.model import Colaborador
from src.jornada_system.jornada_system.container import build_services
from src.jornada_system.jornada_system.jornada.model import TIME_FIELDS, Jornada, JornadaRow
from src.jornada_system.jornada_system.main import create_app

ANA = Colaborador(colaborador_id="c-ana", name="Ana", apellidos="Pérez", user_id="u-ana")
LUIS = Colaborador(colaborador_id="c-luis", name="Luis", apellidos="Martínez", user_id="u-luis")
MARTA = Colaborador(colaborador_id="c-marta", name="Marta", apellidos="Sánchez", user_id=None)


class InMemoryColaboradores:
    def __init__(self, items):
        self._by_id = {c.colaborador_id: c for c in items}

    def get_by_id(self, colaborador_id: str) -> Optional[Colaborador]:
        return self._by_id.get(colaborador_id)

    def get_by_user_id(self, user_id: str) -> Optional[Colaborador]:
        return next((c for c in self._by_id.values() if c.user_id == user_id), None)

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda c: c.name)


class InMemoryJornadas:
    def __init__(self, colaboradores: Optional[InMemoryColaboradores] = None):
        self._by_id: dict[int, Jornada] = {}
        self._id = 0
        self._colaboradores = colaboradores
        self.fail_with: Optional[Exception] = None

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def add(self, colaborador_id: str, work_date: date, **marks: Optional[datetime]) -> Jornada:
        self._id += 1
        rec = Jornada(jornada_id=self._id, colaborador_id=colaborador_id, work_date=work_date, **marks)
        self._by_id[rec.jornada_id] = rec
        return rec

    def all(self) -> list[Jornada]:
        return list(self._by_id.values())

    def get_by_id(self, jornada_id: int) -> Optional[Jornada]:
        self._maybe_fail()
        return self._by_id.get(int(jornada_id))

    def get_for_colaborador_and_date(self, colaborador_id: str, work_date: date) -> Optional[Jornada]:
        self._maybe_fail()
        matches = [r for r in self._by_id.values() if r.colaborador_id == colaborador_id and r.work_date == work_date]
        return min(matches, key=lambda r: r.jornada_id) if matches else None

    def create_clock_in(self, *, colaborador_id: str, work_date: date, shift_start: datetime) -> Jornada:
        self._maybe_fail()
        return self.add(colaborador_id, work_date, shift_start=shift_start)

    def update_times(self, *, jornada_id: int, changes: Mapping[str, Optional[datetime]]) -> Optional[Jornada]:
        self._maybe_fail()
        assert set(changes) <= set(TIME_FIELDS)
        rec = self._by_id.get(int(jornada_id))
        if rec is None:
            return None
        rec = replace(rec, **changes)
        self._by_id[rec.jornada_id] = rec
        return rec

    def list_range(self, *, start_date: date, end_date: date, colaborador_id: Optional[str] = None):
        self._maybe_fail()
        items = [
            r
            for r in self._by_id.values()
            if start_date <= r.work_date <= end_date and (colaborador_id is None or r.colaborador_id == colaborador_id)
        ]
        items.sort(key=lambda r: r.colaborador_id)
        items.sort(key=lambda r: r.work_date, reverse=True)
        lookup = self._colaboradores.get_by_id if self._colaboradores else (lambda _id: None)
        return [JornadaRow(jornada=r, colaborador=lookup(r.colaborador_id)) for r in items]

    def list_history(self, colaborador_id: str, *, page: int, page_size: int):
        self._maybe_fail()
        items = sorted(
            (r for r in self._by_id.values() if r.colaborador_id == colaborador_id),
            key=lambda r: r.work_date,
            reverse=True,
        )
        start = (page - 1) * page_size
        return items[start : start + page_size]


@dataclass
class FakeClock:
    now: datetime

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return datetime(2026, 2, 2, 10, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def colaboradores_repo() -> InMemoryColaboradores:
    return InMemoryColaboradores([ANA, LUIS, MARTA])


@pytest.fixture
def jornadas_repo(colaboradores_repo) -> InMemoryJornadas:
    return InMemoryJornadas(colaboradores_repo)


@pytest.fixture
def container(colaboradores_repo, jornadas_repo, clock):
    return build_services(
        colaboradores_repo=colaboradores_repo,
        jornadas_repo=jornadas_repo,
        clock=clock,
    )


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(client):
    def _login(user_id: str, *, role: str = "colaborador", name: str = "Test") -> None:
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
            sess["role"] = role
            sess["name"] = name

    return _login

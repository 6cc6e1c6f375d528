from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Optional, Protocol, Sequence

from .model import Jornada, JornadaRow


class JornadaRepository(Protocol):
    def get_by_id(self, jornada_id: int) -> Optional[Jornada]:
        raise NotImplementedError

    def get_for_colaborador_and_date(self, colaborador_id: str, work_date: date) -> Optional[Jornada]:
        raise NotImplementedError

    def create_clock_in(self, *, colaborador_id: str, work_date: date, shift_start: datetime) -> Jornada:
        raise NotImplementedError

    def update_times(self, *, jornada_id: int, changes: Mapping[str, Optional[datetime]]) -> Optional[Jornada]:
        """Overwrite the given time fields (keys from ``TIME_FIELDS``).

        Returns the stored record afterwards, or None when it does not exist.
        """

        raise NotImplementedError

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        colaborador_id: Optional[str] = None,
    ) -> Sequence[JornadaRow]:
        raise NotImplementedError

    def list_history(self, colaborador_id: str, *, page: int, page_size: int) -> Sequence[Jornada]:
        raise NotImplementedError

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Colaborador


class ColaboradorRepository(Protocol):
    """Repository interface for Colaborador.

    Services depend on this Protocol, never on the MySQL implementation.
    """

    def get_by_id(self, colaborador_id: str) -> Optional[Colaborador]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: str) -> Optional[Colaborador]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Colaborador]:
        raise NotImplementedError

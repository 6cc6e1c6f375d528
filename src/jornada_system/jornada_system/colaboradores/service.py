from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import NotFoundError
from .model import Colaborador
from .repository import ColaboradorRepository


class ColaboradorService:
    """Use case: resolve colaborador identities for the clock and admin views."""

    def __init__(self, colaboradores: ColaboradorRepository):
        self._colaboradores = colaboradores

    def get_profile(self, user_id: Optional[str]) -> Optional[Colaborador]:
        """Profile linked to an auth identity, or None when the account is not linked."""
        if not user_id:
            return None
        return self._colaboradores.get_by_user_id(str(user_id))

    def get(self, colaborador_id: str) -> Colaborador:
        colaborador = self._colaboradores.get_by_id(colaborador_id)
        if not colaborador:
            raise NotFoundError("Colaborador no encontrado")
        return colaborador

    def list_all(self) -> Sequence[Colaborador]:
        return self._colaboradores.list_all()

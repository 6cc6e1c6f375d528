from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Colaborador:
    """Entidad de dominio: Colaborador (identidad externa, solo lectura aquí)."""

    colaborador_id: str
    name: str
    apellidos: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.apellidos or ''}".strip()

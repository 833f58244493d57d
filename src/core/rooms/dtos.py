"""
Data Transfer Objects (DTOs) do Registro de Salas.
"""

from dataclasses import dataclass
from typing import Optional

from .entities import RoomEntity


@dataclass(frozen=True)
class CreateRoomInputDTO:
    """
    DTO de entrada para criar sala.

    Attributes:
        name: Nome/número da sala
        description: Descrição opcional
        active: Se a sala nasce ativa
    """

    name: str
    description: Optional[str] = None
    active: bool = True


@dataclass(frozen=True)
class UpdateRoomInputDTO:
    """DTO de alteração parcial de sala (None mantém o valor atual)."""

    name: Optional[str] = None
    description: Optional[str] = None
    active: Optional[bool] = None


@dataclass
class RoomOutputDTO:
    """
    DTO de saída de sala.

    Attributes:
        chamados_abertos: Chamados da sala fora do status terminal
    """

    id: int
    name: str
    description: str
    active: bool
    qr_token: str
    chamados_abertos: int = 0

    @classmethod
    def from_entity(cls, entity: RoomEntity, open_tickets: int = 0) -> "RoomOutputDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            active=entity.active,
            qr_token=entity.qr_token,
            chamados_abertos=open_tickets,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "active": self.active,
            "qr_token": self.qr_token,
            "chamados_abertos": self.chamados_abertos,
        }

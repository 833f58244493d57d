"""
Data Transfer Objects (DTOs) do Catálogo de Status.
"""

from dataclasses import dataclass
from typing import Optional

from .entities import StatusEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateStatusInputDTO:
    """
    DTO de entrada para criar status.

    Attributes:
        name: Nome do status
        color: Cor de exibição (padrão "#000000")
        active: Se o status nasce ativo
    """

    name: str
    color: Optional[str] = None
    active: bool = True


@dataclass(frozen=True)
class UpdateStatusInputDTO:
    """
    DTO de alteração parcial de status.

    Campos None mantêm o valor atual.
    """

    name: Optional[str] = None
    color: Optional[str] = None
    active: Optional[bool] = None


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class StatusOutputDTO:
    """DTO de saída de status."""

    id: int
    name: str
    color: str
    active: bool

    @classmethod
    def from_entity(cls, entity: StatusEntity) -> "StatusOutputDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            color=entity.color,
            active=entity.active,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "active": self.active,
        }

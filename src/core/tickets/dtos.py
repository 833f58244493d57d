"""
Data Transfer Objects (DTOs) do Domínio de Chamados.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de modelos internos (entidades) para camadas externas.

Tipos de DTOs:
- Input DTOs: Recebem dados de entrada (da camada HTTP)
- Output DTOs: Formatam dados para resposta, com a projeção de
  exibição (nome da sala, nome e cor do status)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.core.rooms.entities import RoomEntity
from src.core.statuses.entities import DEFAULT_COLOR, StatusEntity

from .entities import TicketEntity


ROOM_NOT_FOUND_LABEL = "Sala não encontrada"
STATUS_NOT_FOUND_LABEL = "Status não encontrado"


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateTicketInputDTO:
    """
    DTO de entrada para criar chamado.

    Imutável (frozen=True) para garantir que dados
    recebidos não sejam alterados acidentalmente.

    Attributes:
        title: Título do chamado
        room_id: Sala onde o problema ocorre
        description: Descrição detalhada
        priority: "low" | "medium" | "high" (ou valor antigo em português)
        requester: Quem abriu o chamado
        assignee: Responsável
        notes: Observações
        status_id: Status inicial (None usa "Aberto")
    """

    title: str
    room_id: int
    description: str
    priority: Optional[str] = None
    requester: Optional[str] = None
    assignee: Optional[str] = None
    notes: Optional[str] = None
    status_id: Optional[int] = None

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "title": self.title,
            "room_id": self.room_id,
            "description": self.description,
            "priority": self.priority,
            "requester": self.requester,
            "assignee": self.assignee,
            "notes": self.notes,
            "status_id": self.status_id,
        }


@dataclass(frozen=True)
class UpdateTicketInputDTO:
    """
    DTO de alteração parcial de chamado.

    Campos None mantêm o valor atual. Para requester, assignee e
    notes, string vazia limpa o campo.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    requester: Optional[str] = None
    assignee: Optional[str] = None
    notes: Optional[str] = None
    room_id: Optional[int] = None
    status_id: Optional[int] = None


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class TicketOutputDTO:
    """
    DTO de saída completo com dados do chamado.

    A projeção de exibição é calculada na leitura e nunca armazenada.

    Attributes:
        room_name: Nome da sala ("Sala não encontrada" se ausente)
        status_name: Nome do status ("Status não encontrado" se ausente)
        status_color: Cor do status ("#000000" se ausente)
    """

    id: int
    title: str
    room_id: int
    status_id: int
    description: str
    priority: str
    requester: Optional[str]
    assignee: Optional[str]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime
    closed_at: Optional[datetime]
    room_name: str = ROOM_NOT_FOUND_LABEL
    status_name: str = STATUS_NOT_FOUND_LABEL
    status_color: str = DEFAULT_COLOR

    @classmethod
    def from_entity(
        cls,
        entity: TicketEntity,
        room: Optional[RoomEntity] = None,
        status: Optional[StatusEntity] = None,
    ) -> "TicketOutputDTO":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Entidade TicketEntity
            room: Sala referenciada (None usa o texto padrão)
            status: Status referenciado (None usa o texto padrão)
        """
        return cls(
            id=entity.id,
            title=entity.title,
            room_id=entity.room_id,
            status_id=entity.status_id,
            description=entity.description,
            priority=entity.priority.value,
            requester=entity.requester,
            assignee=entity.assignee,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            closed_at=entity.closed_at,
            room_name=room.name if room else ROOM_NOT_FOUND_LABEL,
            status_name=status.name if status else STATUS_NOT_FOUND_LABEL,
            status_color=status.color if status else DEFAULT_COLOR,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "title": self.title,
            "room_id": self.room_id,
            "status_id": self.status_id,
            "description": self.description,
            "priority": self.priority,
            "requester": self.requester,
            "assignee": self.assignee,
            "notes": self.notes,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
            "closed_at": _iso(self.closed_at),
            "room_name": self.room_name,
            "status_name": self.status_name,
            "status_color": self.status_color,
        }


@dataclass
class TicketSummaryDTO:
    """
    Contadores do painel: total e chamados por status.

    Attributes:
        total: Total de chamados
        by_status: {status_id: quantidade} para cada status do catálogo
    """

    total: int
    by_status: dict

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "by_status": {str(key): value for key, value in self.by_status.items()},
        }

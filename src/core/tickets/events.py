"""
Domain Events do Domínio de Chamados.

Eventos:
- TicketCreatedEvent: Novo chamado foi aberto
- TicketStatusChangedEvent: Status do chamado mudou
- TicketClosedEvent: Chamado entrou no status terminal
- TicketReopenedEvent: Chamado saiu do status terminal
- TicketDeletedEvent: Chamado foi removido

Uso:
    Eventos são criados pela fachada e publicados através do
    UnitOfWork somente após commit bem-sucedido. Não são
    armazenados (não existe trilha de auditoria).

    with uow:
        ticket = store.create(data)
        uow.publish_event(TicketCreatedEvent(aggregate_id=ticket.id, ...))
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.shared.events import DomainEvent


@dataclass
class TicketCreatedEvent(DomainEvent):
    """
    Evento: Chamado foi aberto.

    Attributes:
        title: Título do chamado
        room_id: Sala do chamado
        status_id: Status inicial
        priority: Prioridade
    """

    title: str = ""
    room_id: int = 0
    status_id: int = 0
    priority: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "room_id": self.room_id,
            "status_id": self.status_id,
            "priority": self.priority,
        }


@dataclass
class TicketStatusChangedEvent(DomainEvent):
    """Evento: Status do chamado mudou."""

    previous_status_id: int = 0
    new_status_id: int = 0
    assignee: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    def _get_event_data(self) -> Dict[str, Any]:
        data = {
            "previous_status_id": self.previous_status_id,
            "new_status_id": self.new_status_id,
        }
        if self.assignee:
            data["assignee"] = self.assignee
        return data


@dataclass
class TicketClosedEvent(DomainEvent):
    """
    Evento: Chamado entrou no status terminal.

    Attributes:
        room_id: Sala do chamado (o contador de abertos diminui)
        closed_at: Momento do fechamento (ISO 8601)
    """

    room_id: int = 0
    closed_at: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"room_id": self.room_id, "closed_at": self.closed_at}


@dataclass
class TicketReopenedEvent(DomainEvent):
    """Evento: Chamado saiu do status terminal."""

    room_id: int = 0
    new_status_id: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"room_id": self.room_id, "new_status_id": self.new_status_id}


@dataclass
class TicketDeletedEvent(DomainEvent):
    """Evento: Chamado foi removido."""

    room_id: int = 0
    status_id: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"room_id": self.room_id, "status_id": self.status_id}

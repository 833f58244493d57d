"""
Tickets Domain - Chamados abertos contra salas.
"""

from .entities import TicketEntity, TicketPriority, utc_now
from .dtos import (
    CreateTicketInputDTO,
    UpdateTicketInputDTO,
    TicketOutputDTO,
    TicketSummaryDTO,
)
from .events import (
    TicketCreatedEvent,
    TicketStatusChangedEvent,
    TicketClosedEvent,
    TicketReopenedEvent,
    TicketDeletedEvent,
)
from .ports import TicketRepository, InMemoryTicketRepository
from .store import TicketStore

__all__ = [
    "TicketEntity",
    "TicketPriority",
    "utc_now",
    "CreateTicketInputDTO",
    "UpdateTicketInputDTO",
    "TicketOutputDTO",
    "TicketSummaryDTO",
    "TicketCreatedEvent",
    "TicketStatusChangedEvent",
    "TicketClosedEvent",
    "TicketReopenedEvent",
    "TicketDeletedEvent",
    "TicketRepository",
    "InMemoryTicketRepository",
    "TicketStore",
]

"""
Ticket Store - CRUD e transições de status dos chamados.

A loja valida apenas os campos do próprio chamado. A existência
da sala e do status referenciados é verificada pela fachada.
"""

import logging
from typing import List, Optional

from src.core.shared.exceptions import EntityNotFoundError
from src.core.statuses.entities import OPEN_STATUS_ID

from .dtos import CreateTicketInputDTO, UpdateTicketInputDTO
from .entities import TicketEntity
from .ports import TicketRepository

logger = logging.getLogger(__name__)


def _newest_first(tickets: List[TicketEntity]) -> List[TicketEntity]:
    return sorted(tickets, key=lambda ticket: ticket.id, reverse=True)


class TicketStore:
    """
    Loja de chamados sobre um TicketRepository.

    Listagens retornam os chamados mais recentes primeiro.
    """

    ENTITY_TYPE = "Chamado"

    def __init__(self, repository: TicketRepository):
        self.repository = repository

    def list(self) -> List[TicketEntity]:
        return _newest_first(self.repository.list_all())

    def list_by_status(self, status_id: int) -> List[TicketEntity]:
        return _newest_first(self.repository.list_by_status(status_id))

    def list_by_room(self, room_id: int) -> List[TicketEntity]:
        return _newest_first(self.repository.list_by_room(room_id))

    def get_by_id(self, ticket_id: int) -> TicketEntity:
        """
        Raises:
            EntityNotFoundError: Se o chamado não existir
        """
        ticket = self.repository.get_by_id(ticket_id)
        if ticket is None:
            raise self._not_found(ticket_id)
        return ticket

    def create(
        self,
        data: CreateTicketInputDTO,
        status_id: int = OPEN_STATUS_ID,
    ) -> TicketEntity:
        """
        Cria chamado; o repositório atribui o próximo id.

        Raises:
            ValidationError: Se título, descrição ou prioridade inválidos
        """
        ticket = TicketEntity.create(
            title=data.title,
            room_id=data.room_id,
            description=data.description,
            priority=data.priority,
            requester=data.requester,
            assignee=data.assignee,
            notes=data.notes,
            status_id=status_id,
        )
        created = self.repository.add(ticket)
        logger.info(f"Ticket created: {created.id} (room {created.room_id})")
        return created

    def update(self, ticket_id: int, patch: UpdateTicketInputDTO) -> TicketEntity:
        ticket = self.get_by_id(ticket_id)
        ticket.apply_patch(
            title=patch.title,
            description=patch.description,
            priority=patch.priority,
            requester=patch.requester,
            assignee=patch.assignee,
            notes=patch.notes,
            room_id=patch.room_id,
            status_id=patch.status_id,
        )
        self.repository.save(ticket)
        logger.info(f"Ticket updated: {ticket_id}")
        return ticket

    def update_status(
        self,
        ticket_id: int,
        status_id: int,
        assignee: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> TicketEntity:
        """
        Altera o status do chamado.

        Args:
            assignee: None mantém o valor atual; string substitui
            notes: None mantém o valor atual; string substitui
        """
        ticket = self.get_by_id(ticket_id)
        ticket.change_status(status_id, assignee=assignee, notes=notes)
        self.repository.save(ticket)
        logger.info(f"Ticket {ticket_id} status changed to {status_id}")
        return ticket

    def delete(self, ticket_id: int) -> None:
        if not self.repository.delete(ticket_id):
            raise self._not_found(ticket_id)
        logger.info(f"Ticket deleted: {ticket_id}")

    def count(self) -> int:
        return self.repository.count()

    def count_open_by_room(self, room_id: int) -> int:
        return self.repository.count_open_by_room(room_id)

    def count_by_room(self, room_id: int) -> int:
        return self.repository.count_by_room(room_id)

    def count_by_status(self, status_id: int) -> int:
        return self.repository.count_by_status(status_id)

    def _not_found(self, ticket_id) -> EntityNotFoundError:
        return EntityNotFoundError(
            "Chamado não encontrado",
            entity_type=self.ENTITY_TYPE,
            entity_id=ticket_id,
        )

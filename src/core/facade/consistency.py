"""
Consistency Facade - Ponto de entrada único da camada de dados.

A fachada é o único componente que lê mais de uma coleção na
mesma operação. É ela que garante as invariantes entre entidades:

- Todo chamado referencia sala e status existentes
- Sala inativa não recebe chamado novo
- Sala ou status referenciado por chamado não pode ser excluído

Cada operação de escrita é uma seção crítica: leitura, validação e
escrita acontecem sob o mesmo lock e dentro do mesmo Unit of Work.
Eventos de domínio só são publicados após o commit.

Example:
    facade = ConsistencyFacade(rooms, statuses, tickets, uow)
    room = facade.create_room(CreateRoomInputDTO(name="Lab 1"))
    ticket = facade.create_ticket(CreateTicketInputDTO(
        title="Projetor quebrado",
        room_id=room.id,
        description="O projetor não liga desde ontem",
    ))
"""

import logging
import threading
from typing import Dict, List, Optional

from src.core.shared.exceptions import (
    EntityNotFoundError,
    InvalidStateError,
    ReferentialConflictError,
)
from src.core.shared.interfaces import UnitOfWork

from src.core.rooms.dtos import CreateRoomInputDTO, RoomOutputDTO, UpdateRoomInputDTO
from src.core.rooms.entities import RoomEntity
from src.core.rooms.registry import RoomRegistry
from src.core.statuses.catalog import StatusCatalog
from src.core.statuses.dtos import (
    CreateStatusInputDTO,
    StatusOutputDTO,
    UpdateStatusInputDTO,
)
from src.core.statuses.entities import OPEN_STATUS_ID, StatusEntity, is_terminal_status
from src.core.tickets.dtos import (
    CreateTicketInputDTO,
    TicketOutputDTO,
    TicketSummaryDTO,
    UpdateTicketInputDTO,
)
from src.core.tickets.entities import TicketEntity
from src.core.tickets.events import (
    TicketClosedEvent,
    TicketCreatedEvent,
    TicketDeletedEvent,
    TicketReopenedEvent,
    TicketStatusChangedEvent,
)
from src.core.tickets.store import TicketStore

logger = logging.getLogger(__name__)


class ConsistencyFacade:
    """
    Fachada de consistência sobre as três coleções.

    Attributes:
        rooms: Registro de salas
        statuses: Catálogo de status
        tickets: Loja de chamados
        uow: Unit of Work compartilhado pelos três repositórios
    """

    def __init__(
        self,
        rooms: RoomRegistry,
        statuses: StatusCatalog,
        tickets: TicketStore,
        uow: UnitOfWork,
    ):
        self.rooms = rooms
        self.statuses = statuses
        self.tickets = tickets
        self.uow = uow
        self._lock = threading.RLock()

    # =========================================================================
    # CHAMADOS
    # =========================================================================

    def list_tickets(self) -> List[TicketOutputDTO]:
        with self._lock:
            return self._project_all(self.tickets.list())

    def list_tickets_by_status(self, status_id: int) -> List[TicketOutputDTO]:
        with self._lock:
            return self._project_all(self.tickets.list_by_status(status_id))

    def list_tickets_by_room(self, room_id: int) -> List[TicketOutputDTO]:
        """
        Raises:
            EntityNotFoundError: Se a sala não existir
        """
        with self._lock:
            self.rooms.get_by_id(room_id)
            return self._project_all(self.tickets.list_by_room(room_id))

    def get_ticket(self, ticket_id: int) -> TicketOutputDTO:
        with self._lock:
            return self._project(self.tickets.get_by_id(ticket_id))

    def create_ticket(self, data: CreateTicketInputDTO) -> TicketOutputDTO:
        """
        Abre chamado numa sala ativa.

        Raises:
            EntityNotFoundError: Se sala ou status não existem
            InvalidStateError: Se a sala está inativa
            ValidationError: Se os campos do chamado são inválidos
        """
        status_id = data.status_id if data.status_id is not None else OPEN_STATUS_ID

        with self._lock, self.uow:
            self._require_active_room(data.room_id)
            self.statuses.get_by_id(status_id)

            ticket = self.tickets.create(data, status_id=status_id)

            self.uow.publish_event(
                TicketCreatedEvent(
                    aggregate_id=ticket.id,
                    title=ticket.title,
                    room_id=ticket.room_id,
                    status_id=ticket.status_id,
                    priority=ticket.priority.value,
                )
            )
            result = self._project(ticket)

        logger.info(f"Chamado {ticket.id} aberto na sala {ticket.room_id}")
        return result

    def update_ticket(self, ticket_id: int, patch: UpdateTicketInputDTO) -> TicketOutputDTO:
        """
        Altera campos do chamado (parcial).

        Sala ou status informados são resolvidos de novo; a sala atual
        não é reavaliada quanto a estar ativa.

        Raises:
            EntityNotFoundError: Se chamado, sala ou status não existem
            InvalidStateError: Se a nova sala está inativa
            ValidationError: Se os campos são inválidos
        """
        with self._lock, self.uow:
            current = self.tickets.get_by_id(ticket_id)

            if patch.room_id is not None and patch.room_id != current.room_id:
                self._require_active_room(patch.room_id)
            if patch.status_id is not None:
                self.statuses.get_by_id(patch.status_id)

            ticket = self.tickets.update(ticket_id, patch)
            self._publish_status_events(current, ticket)
            result = self._project(ticket)

        logger.info(f"Chamado {ticket_id} atualizado")
        return result

    def update_ticket_status(
        self,
        ticket_id: int,
        status_id: int,
        assignee: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> TicketOutputDTO:
        """
        Altera o status do chamado.

        Entrar no status terminal preenche `closed_at`; sair dele limpa.

        Raises:
            EntityNotFoundError: Se chamado ou status não existem
        """
        with self._lock, self.uow:
            current = self.tickets.get_by_id(ticket_id)
            self.statuses.get_by_id(status_id)

            ticket = self.tickets.update_status(
                ticket_id,
                status_id,
                assignee=assignee,
                notes=notes,
            )
            self._publish_status_events(current, ticket)
            result = self._project(ticket)

        logger.info(f"Chamado {ticket_id}: status {current.status_id} -> {status_id}")
        return result

    def delete_ticket(self, ticket_id: int) -> None:
        with self._lock, self.uow:
            ticket = self.tickets.get_by_id(ticket_id)
            self.tickets.delete(ticket_id)
            self.uow.publish_event(
                TicketDeletedEvent(
                    aggregate_id=ticket_id,
                    room_id=ticket.room_id,
                    status_id=ticket.status_id,
                )
            )

        logger.info(f"Chamado {ticket_id} removido")

    def summary(self) -> TicketSummaryDTO:
        """Contadores do painel: total e por status do catálogo."""
        with self._lock:
            by_status = {
                status.id: self.tickets.count_by_status(status.id)
                for status in self.statuses.list()
            }
            return TicketSummaryDTO(total=self.tickets.count(), by_status=by_status)

    # =========================================================================
    # SALAS
    # =========================================================================

    def list_rooms(self) -> List[RoomOutputDTO]:
        with self._lock:
            return [self._room_output(room) for room in self.rooms.list()]

    def get_room(self, room_id: int) -> RoomOutputDTO:
        with self._lock:
            return self._room_output(self.rooms.get_by_id(room_id))

    def get_room_by_name(self, name: str) -> RoomOutputDTO:
        with self._lock:
            return self._room_output(self.rooms.get_by_name(name))

    def get_room_by_qr_token(self, token: str) -> RoomOutputDTO:
        with self._lock:
            return self._room_output(self.rooms.get_by_qr_token(token))

    def create_room(self, data: CreateRoomInputDTO) -> RoomOutputDTO:
        """
        Raises:
            ValidationError: Se nome ou descrição inválidos
            DuplicateNameError: Se já existe sala com o mesmo nome
        """
        with self._lock, self.uow:
            room = self.rooms.create(data)
            result = RoomOutputDTO.from_entity(room)

        logger.info(f"Sala {room.id} criada: {room.name}")
        return result

    def update_room(self, room_id: int, patch: UpdateRoomInputDTO) -> RoomOutputDTO:
        with self._lock, self.uow:
            room = self.rooms.update(room_id, patch)
            result = self._room_output(room)

        logger.info(f"Sala {room_id} atualizada")
        return result

    def regenerate_room_qr_token(self, room_id: int) -> RoomOutputDTO:
        with self._lock, self.uow:
            room = self.rooms.regenerate_qr_token(room_id)
            result = self._room_output(room)

        logger.info(f"Sala {room_id}: QR Code regenerado")
        return result

    def delete_room(self, room_id: int) -> None:
        """
        Remove sala sem chamados (abertos ou fechados).

        Raises:
            EntityNotFoundError: Se a sala não existir
            ReferentialConflictError: Se há chamados na sala
        """
        with self._lock, self.uow:
            self.rooms.get_by_id(room_id)

            count = self.tickets.count_by_room(room_id)
            if count:
                raise ReferentialConflictError(
                    f"Não é possível deletar a sala. Existem {count} "
                    f"chamado(s) associado(s) a ela.",
                    entity_type=RoomRegistry.ENTITY_TYPE,
                    entity_id=room_id,
                    count=count,
                )

            self.rooms.delete(room_id)

        logger.info(f"Sala {room_id} removida")

    def count_open_tickets_by_room(self, room_id: int) -> int:
        with self._lock:
            self.rooms.get_by_id(room_id)
            return self.tickets.count_open_by_room(room_id)

    # =========================================================================
    # STATUS
    # =========================================================================

    def list_statuses(self) -> List[StatusOutputDTO]:
        with self._lock:
            return [StatusOutputDTO.from_entity(s) for s in self.statuses.list()]

    def get_status(self, status_id: int) -> StatusOutputDTO:
        with self._lock:
            return StatusOutputDTO.from_entity(self.statuses.get_by_id(status_id))

    def create_status(self, data: CreateStatusInputDTO) -> StatusOutputDTO:
        with self._lock, self.uow:
            status = self.statuses.create(data)

        logger.info(f"Status {status.id} criado: {status.name}")
        return StatusOutputDTO.from_entity(status)

    def update_status(self, status_id: int, patch: UpdateStatusInputDTO) -> StatusOutputDTO:
        with self._lock, self.uow:
            status = self.statuses.update(status_id, patch)

        logger.info(f"Status {status_id} atualizado")
        return StatusOutputDTO.from_entity(status)

    def delete_status(self, status_id: int) -> None:
        """
        Remove status sem chamados.

        Raises:
            EntityNotFoundError: Se o status não existir
            ReferentialConflictError: Se há chamados com o status
        """
        with self._lock, self.uow:
            self.statuses.get_by_id(status_id)

            count = self.tickets.count_by_status(status_id)
            if count:
                raise ReferentialConflictError(
                    f"Não é possível deletar o status. Existem {count} "
                    f"chamado(s) com este status.",
                    entity_type=StatusCatalog.ENTITY_TYPE,
                    entity_id=status_id,
                    count=count,
                )

            self.statuses.delete(status_id)

        logger.info(f"Status {status_id} removido")

    def ensure_status_catalog(self) -> None:
        """
        Aplica o seed do catálogo se estiver vazio.

        Raises:
            LegacyStatusCatalogError: Se o catálogo está no formato legado
        """
        with self._lock, self.uow:
            self.statuses.ensure_seeded()

    def migrate_legacy_status_catalog(self) -> Optional[StatusOutputDTO]:
        """Migração explícita do catálogo legado de 3 entradas."""
        with self._lock, self.uow:
            created = self.statuses.migrate_legacy_catalog()

        if created is None:
            return None
        logger.warning(f"Catálogo de status migrado: '{created.name}' adicionado")
        return StatusOutputDTO.from_entity(created)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require_active_room(self, room_id: int) -> RoomEntity:
        room = self.rooms.get_by_id(room_id)
        if not room.active:
            raise InvalidStateError(
                "Sala inativa não pode receber novos chamados",
                rule="sala_inativa",
            )
        return room

    def _publish_status_events(self, before: TicketEntity, after: TicketEntity) -> None:
        if before.status_id == after.status_id:
            return

        self.uow.publish_event(
            TicketStatusChangedEvent(
                aggregate_id=after.id,
                previous_status_id=before.status_id,
                new_status_id=after.status_id,
                assignee=after.assignee,
            )
        )

        was_closed = is_terminal_status(before.status_id)
        if after.is_closed and not was_closed:
            self.uow.publish_event(
                TicketClosedEvent(
                    aggregate_id=after.id,
                    room_id=after.room_id,
                    closed_at=after.closed_at.isoformat(),
                )
            )
        elif was_closed and not after.is_closed:
            self.uow.publish_event(
                TicketReopenedEvent(
                    aggregate_id=after.id,
                    room_id=after.room_id,
                    new_status_id=after.status_id,
                )
            )

    def _project(self, ticket: TicketEntity) -> TicketOutputDTO:
        room = self.rooms.repository.get_by_id(ticket.room_id)
        status = self.statuses.repository.get_by_id(ticket.status_id)
        return TicketOutputDTO.from_entity(ticket, room=room, status=status)

    def _project_all(self, tickets: List[TicketEntity]) -> List[TicketOutputDTO]:
        rooms: Dict[int, RoomEntity] = {room.id: room for room in self.rooms.list()}
        statuses: Dict[int, StatusEntity] = {s.id: s for s in self.statuses.list()}
        return [
            TicketOutputDTO.from_entity(
                ticket,
                room=rooms.get(ticket.room_id),
                status=statuses.get(ticket.status_id),
            )
            for ticket in tickets
        ]

    def _room_output(self, room: RoomEntity) -> RoomOutputDTO:
        return RoomOutputDTO.from_entity(
            room,
            open_tickets=self.tickets.count_open_by_room(room.id),
        )

"""
Repositórios Django para salas, status e chamados.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência

As transações são abertas pelo DjangoUnitOfWork; os repositórios
só executam queries.
"""

from typing import List, Optional
import logging

from django.core.management.color import no_style
from django.db import connection

from src.core.rooms.entities import RoomEntity
from src.core.shared.validators import name_key
from src.core.statuses.entities import TERMINAL_STATUS_ID, StatusEntity
from src.core.tickets.entities import TicketEntity

from .mappers import RoomMapper, StatusMapper, TicketMapper
from .models import RoomModel, StatusModel, TicketModel

logger = logging.getLogger(__name__)


def _reset_sequence(model) -> None:
    """
    Ajusta a sequência da tabela após inserir id explícito.

    No SQLite não há o que fazer (AUTOINCREMENT acompanha o maior id);
    no PostgreSQL a sequência precisa avançar.
    """
    statements = connection.ops.sequence_reset_sql(no_style(), [model])
    if not statements:
        return
    with connection.cursor() as cursor:
        for sql in statements:
            cursor.execute(sql)


class DjangoRoomRepository:
    """
    Implementação Django do RoomRepository.

    Example:
        repo = DjangoRoomRepository()
        room = repo.add(RoomEntity.create("Lab 1"))
        repo.get_by_name("LAB 1")
    """

    def __init__(self):
        self._mapper = RoomMapper()

    def add(self, room: RoomEntity) -> RoomEntity:
        fields = self._mapper.to_fields(room)
        if room.id is not None:
            model = RoomModel.objects.create(id=room.id, **fields)
            _reset_sequence(RoomModel)
        else:
            model = RoomModel.objects.create(**fields)
        logger.debug(f"Room inserted: {model.id}")
        return self._mapper.to_entity(model)

    def save(self, room: RoomEntity) -> None:
        RoomModel.objects.filter(id=room.id).update(**self._mapper.to_fields(room))
        logger.debug(f"Room saved: {room.id}")

    def get_by_id(self, room_id: int) -> Optional[RoomEntity]:
        model = RoomModel.objects.filter(id=room_id).first()
        return self._mapper.to_entity(model) if model else None

    def get_by_name(self, name: str) -> Optional[RoomEntity]:
        model = RoomModel.objects.filter(name_key=name_key(name)).first()
        return self._mapper.to_entity(model) if model else None

    def get_by_qr_token(self, token: str) -> Optional[RoomEntity]:
        model = RoomModel.objects.filter(qr_token=token).first()
        return self._mapper.to_entity(model) if model else None

    def delete(self, room_id: int) -> bool:
        deleted_count, _ = RoomModel.objects.filter(id=room_id).delete()
        return deleted_count > 0

    def list_all(self) -> List[RoomEntity]:
        return [self._mapper.to_entity(m) for m in RoomModel.objects.order_by('id')]

    def count(self) -> int:
        return RoomModel.objects.count()


class DjangoStatusRepository:
    """Implementação Django do StatusRepository."""

    def __init__(self):
        self._mapper = StatusMapper()

    def add(self, status: StatusEntity) -> StatusEntity:
        fields = self._mapper.to_fields(status)
        if status.id is not None:
            model = StatusModel.objects.create(id=status.id, **fields)
            _reset_sequence(StatusModel)
        else:
            model = StatusModel.objects.create(**fields)
        logger.debug(f"Status inserted: {model.id}")
        return self._mapper.to_entity(model)

    def save(self, status: StatusEntity) -> None:
        StatusModel.objects.filter(id=status.id).update(**self._mapper.to_fields(status))
        logger.debug(f"Status saved: {status.id}")

    def get_by_id(self, status_id: int) -> Optional[StatusEntity]:
        model = StatusModel.objects.filter(id=status_id).first()
        return self._mapper.to_entity(model) if model else None

    def get_by_name(self, name: str) -> Optional[StatusEntity]:
        model = StatusModel.objects.filter(name_key=name_key(name)).first()
        return self._mapper.to_entity(model) if model else None

    def delete(self, status_id: int) -> bool:
        deleted_count, _ = StatusModel.objects.filter(id=status_id).delete()
        return deleted_count > 0

    def list_all(self) -> List[StatusEntity]:
        return [self._mapper.to_entity(m) for m in StatusModel.objects.order_by('id')]

    def count(self) -> int:
        return StatusModel.objects.count()


class DjangoTicketRepository:
    """
    Implementação Django do TicketRepository.

    Features:
    - CRUD completo
    - Filtros por sala e por status
    - Contagens usadas pela fachada (exclusão protegida, abertos por sala)
    """

    def __init__(self):
        self._mapper = TicketMapper()

    def add(self, ticket: TicketEntity) -> TicketEntity:
        fields = self._mapper.to_fields(ticket)
        if ticket.id is not None:
            model = TicketModel.objects.create(id=ticket.id, **fields)
            _reset_sequence(TicketModel)
        else:
            model = TicketModel.objects.create(**fields)
        logger.info(f"Ticket inserted: {model.id}")
        return self._mapper.to_entity(model)

    def save(self, ticket: TicketEntity) -> None:
        """Atualiza chamado existente."""
        TicketModel.objects.filter(id=ticket.id).update(**self._mapper.to_fields(ticket))
        logger.info(f"Ticket saved: {ticket.id}")

    def get_by_id(self, ticket_id: int) -> Optional[TicketEntity]:
        try:
            model = TicketModel.objects.get(id=ticket_id)
            return self._mapper.to_entity(model)
        except TicketModel.DoesNotExist:
            logger.debug(f"Ticket not found: {ticket_id}")
            return None

    def delete(self, ticket_id: int) -> bool:
        deleted_count, _ = TicketModel.objects.filter(id=ticket_id).delete()
        return deleted_count > 0

    def list_all(self) -> List[TicketEntity]:
        return self._mapper.to_entity_list(TicketModel.objects.order_by('id'))

    def list_by_status(self, status_id: int) -> List[TicketEntity]:
        return self._mapper.to_entity_list(
            TicketModel.objects.filter(status_id=status_id).order_by('id')
        )

    def list_by_room(self, room_id: int) -> List[TicketEntity]:
        return self._mapper.to_entity_list(
            TicketModel.objects.filter(room_id=room_id).order_by('id')
        )

    def count(self) -> int:
        return TicketModel.objects.count()

    def count_by_room(self, room_id: int) -> int:
        return TicketModel.objects.filter(room_id=room_id).count()

    def count_open_by_room(self, room_id: int) -> int:
        return (
            TicketModel.objects
            .filter(room_id=room_id)
            .exclude(status_id=TERMINAL_STATUS_ID)
            .count()
        )

    def count_by_status(self, status_id: int) -> int:
        return TicketModel.objects.filter(status_id=status_id).count()

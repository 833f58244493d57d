"""
Mappers para conversão entre Entities (Core) e Models (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados

Entidades carregadas do banco não passam pelos factory methods:
os dados já foram validados quando foram gravados.
"""

from typing import Any, Dict, List

from src.core.rooms.entities import RoomEntity
from src.core.statuses.entities import StatusEntity
from src.core.tickets.entities import TicketEntity, TicketPriority

from .models import RoomModel, StatusModel, TicketModel


class RoomMapper:
    """Mapper entre RoomEntity e RoomModel."""

    @staticmethod
    def to_fields(entity: RoomEntity) -> Dict[str, Any]:
        """Campos para create/update (sem o id)."""
        return {
            'name': entity.name,
            'name_key': entity.name_key,
            'description': entity.description or '',
            'active': entity.active,
            'qr_token': entity.qr_token,
        }

    @staticmethod
    def to_entity(model: RoomModel) -> RoomEntity:
        return RoomEntity(
            id=model.id,
            name=model.name,
            description=model.description or '',
            active=model.active,
            qr_token=model.qr_token,
        )


class StatusMapper:
    """Mapper entre StatusEntity e StatusModel."""

    @staticmethod
    def to_fields(entity: StatusEntity) -> Dict[str, Any]:
        return {
            'name': entity.name,
            'name_key': entity.name_key,
            'color': entity.color,
            'active': entity.active,
        }

    @staticmethod
    def to_entity(model: StatusModel) -> StatusEntity:
        return StatusEntity(
            id=model.id,
            name=model.name,
            color=model.color,
            active=model.active,
        )


class TicketMapper:
    """
    Mapper para conversão entre TicketEntity e TicketModel.

    Responsável por:
    - to_fields(): Entity → campos do Model
    - to_entity(): Model → Entity
    - to_entity_list(): List[Model] → List[Entity]
    """

    @staticmethod
    def to_fields(entity: TicketEntity) -> Dict[str, Any]:
        return {
            'title': entity.title,
            'description': entity.description,
            'room_id': entity.room_id,
            'status_id': entity.status_id,
            'priority': entity.priority.value,
            'requester': entity.requester,
            'assignee': entity.assignee,
            'notes': entity.notes,
            'created_at': entity.created_at,
            'updated_at': entity.updated_at,
            'closed_at': entity.closed_at,
        }

    @staticmethod
    def to_entity(model: TicketModel) -> TicketEntity:
        return TicketEntity(
            id=model.id,
            title=model.title,
            description=model.description,
            room_id=model.room_id,
            status_id=model.status_id,
            priority=TicketPriority(model.priority),
            requester=model.requester,
            assignee=model.assignee,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
            closed_at=model.closed_at,
        )

    @classmethod
    def to_entity_list(cls, models) -> List[TicketEntity]:
        return [cls.to_entity(model) for model in models]

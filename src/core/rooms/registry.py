"""
Room Registry - CRUD da coleção de salas.
"""

import logging
from typing import List, Optional

from src.core.shared.exceptions import DuplicateNameError, EntityNotFoundError

from .dtos import CreateRoomInputDTO, UpdateRoomInputDTO
from .entities import RoomEntity
from .ports import RoomRepository

logger = logging.getLogger(__name__)


class RoomRegistry:
    """
    Registro de salas sobre um RoomRepository.

    A exclusão de sala com chamados é barrada pela fachada antes
    de chegar aqui.
    """

    ENTITY_TYPE = "Sala"

    def __init__(self, repository: RoomRepository):
        self.repository = repository

    def list(self) -> List[RoomEntity]:
        return self.repository.list_all()

    def get_by_id(self, room_id: int) -> RoomEntity:
        """
        Raises:
            EntityNotFoundError: Se a sala não existir
        """
        room = self.repository.get_by_id(room_id)
        if room is None:
            raise self._not_found(room_id)
        return room

    def get_by_name(self, name: str) -> RoomEntity:
        room = self.repository.get_by_name(name or "")
        if room is None:
            raise EntityNotFoundError(
                "Sala não encontrada",
                entity_type=self.ENTITY_TYPE,
                entity_id=name,
            )
        return room

    def get_by_qr_token(self, token: str) -> RoomEntity:
        room = self.repository.get_by_qr_token(token or "")
        if room is None:
            raise EntityNotFoundError(
                "QR Code inválido ou sala não encontrada",
                entity_type=self.ENTITY_TYPE,
                entity_id=token,
            )
        return room

    def create(self, data: CreateRoomInputDTO) -> RoomEntity:
        """
        Cria sala nova com token de QR Code próprio.

        Raises:
            ValidationError: Se nome ou descrição inválidos
            DuplicateNameError: Se já existe sala com o mesmo nome
        """
        room = RoomEntity.create(
            name=data.name,
            description=data.description,
            active=data.active,
        )
        self._ensure_unique_name(room.name)
        created = self.repository.add(room)
        logger.info(f"Room created: {created.id} ({created.name})")
        return created

    def update(self, room_id: int, patch: UpdateRoomInputDTO) -> RoomEntity:
        room = self.get_by_id(room_id)
        room.apply_patch(
            name=patch.name,
            description=patch.description,
            active=patch.active,
        )
        self._ensure_unique_name(room.name, exclude_id=room_id)
        self.repository.save(room)
        logger.info(f"Room updated: {room_id}")
        return room

    def regenerate_qr_token(self, room_id: int) -> RoomEntity:
        """Gera token novo; o anterior deixa de resolver a sala."""
        room = self.get_by_id(room_id)
        room.regenerate_qr_token()
        self.repository.save(room)
        logger.info(f"Room QR token regenerated: {room_id}")
        return room

    def delete(self, room_id: int) -> None:
        if not self.repository.delete(room_id):
            raise self._not_found(room_id)
        logger.info(f"Room deleted: {room_id}")

    def _ensure_unique_name(self, name: str, exclude_id: Optional[int] = None) -> None:
        existing = self.repository.get_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateNameError(
                f"Já existe uma sala com o nome '{name}'",
                entity_type=self.ENTITY_TYPE,
                name=name,
            )

    def _not_found(self, room_id) -> EntityNotFoundError:
        return EntityNotFoundError(
            "Sala não encontrada",
            entity_type=self.ENTITY_TYPE,
            entity_id=room_id,
        )

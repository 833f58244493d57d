"""
Ports (Interfaces) do Registro de Salas.
"""

from typing import List, Optional, Protocol, runtime_checkable

from src.core.shared.repositories import InMemoryRepository
from src.core.shared.validators import name_key

from .entities import RoomEntity


@runtime_checkable
class RoomRepository(Protocol):
    """
    Interface para persistência de Salas.

    Implementações:
    - DjangoRoomRepository (banco relacional via ORM)
    - InMemoryRoomRepository (backends memória e efêmero, testes)
    """

    def add(self, room: RoomEntity) -> RoomEntity:
        ...

    def save(self, room: RoomEntity) -> None:
        ...

    def get_by_id(self, room_id: int) -> Optional[RoomEntity]:
        ...

    def get_by_name(self, name: str) -> Optional[RoomEntity]:
        """Busca sala pelo nome, sem diferenciar maiúsculas."""
        ...

    def get_by_qr_token(self, token: str) -> Optional[RoomEntity]:
        ...

    def delete(self, room_id: int) -> bool:
        ...

    def list_all(self) -> List[RoomEntity]:
        ...

    def count(self) -> int:
        ...


class InMemoryRoomRepository(InMemoryRepository[RoomEntity]):
    """Implementação em memória do RoomRepository."""

    def get_by_name(self, name: str) -> Optional[RoomEntity]:
        key = name_key(name)
        for room in self._values():
            if room.name_key == key:
                return room.copy()
        return None

    def get_by_qr_token(self, token: str) -> Optional[RoomEntity]:
        for room in self._values():
            if room.qr_token == token:
                return room.copy()
        return None

"""
Rooms Domain - Registro de salas.
"""

from .entities import RoomEntity, new_qr_token
from .dtos import CreateRoomInputDTO, UpdateRoomInputDTO, RoomOutputDTO
from .ports import RoomRepository, InMemoryRoomRepository
from .registry import RoomRegistry

__all__ = [
    "RoomEntity",
    "new_qr_token",
    "CreateRoomInputDTO",
    "UpdateRoomInputDTO",
    "RoomOutputDTO",
    "RoomRepository",
    "InMemoryRoomRepository",
    "RoomRegistry",
]

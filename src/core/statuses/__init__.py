"""
Statuses Domain - Catálogo de status dos chamados.
"""

from .entities import (
    OPEN_STATUS_ID,
    IN_PROGRESS_STATUS_ID,
    TERMINAL_STATUS_ID,
    CANCELLED_STATUS_ID,
    DEFAULT_COLOR,
    StatusEntity,
    default_status_seed,
    is_legacy_catalog,
    is_terminal_status,
)
from .dtos import CreateStatusInputDTO, UpdateStatusInputDTO, StatusOutputDTO
from .ports import StatusRepository, InMemoryStatusRepository
from .catalog import StatusCatalog

__all__ = [
    "OPEN_STATUS_ID",
    "IN_PROGRESS_STATUS_ID",
    "TERMINAL_STATUS_ID",
    "CANCELLED_STATUS_ID",
    "DEFAULT_COLOR",
    "StatusEntity",
    "default_status_seed",
    "is_legacy_catalog",
    "is_terminal_status",
    "CreateStatusInputDTO",
    "UpdateStatusInputDTO",
    "StatusOutputDTO",
    "StatusRepository",
    "InMemoryStatusRepository",
    "StatusCatalog",
]

"""
Banco em memória - As três coleções do backend em processo.

Agrupa os repositórios em memória e converte o estado para o
formato do arquivo JSON (snapshot) usado pelo backend `memory`.

Formato do snapshot:
    {
        "version": 1,
        "next_ids": {"rooms": 3, "statuses": 5, "tickets": 3},
        "rooms": [...],
        "statuses": [...],
        "tickets": [...]
    }

Os contadores de id são gravados para que ids nunca sejam
reutilizados após reiniciar o processo.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging
import os
import tempfile

from src.core.rooms.entities import RoomEntity
from src.core.rooms.ports import InMemoryRoomRepository
from src.core.statuses.entities import StatusEntity
from src.core.statuses.ports import InMemoryStatusRepository
from src.core.tickets.entities import TicketEntity, TicketPriority
from src.core.tickets.ports import InMemoryTicketRepository

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _parse(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


# =============================================================================
# Serialização por entidade
# =============================================================================

def room_to_dict(room: RoomEntity) -> Dict[str, Any]:
    return {
        "id": room.id,
        "name": room.name,
        "description": room.description,
        "active": room.active,
        "qr_token": room.qr_token,
    }


def room_from_dict(data: Dict[str, Any]) -> RoomEntity:
    room = RoomEntity(
        id=int(data["id"]),
        name=data["name"],
        description=data.get("description") or "",
        active=bool(data.get("active", True)),
    )
    if data.get("qr_token"):
        room.qr_token = data["qr_token"]
    return room


def status_to_dict(status: StatusEntity) -> Dict[str, Any]:
    return {
        "id": status.id,
        "name": status.name,
        "color": status.color,
        "active": status.active,
    }


def status_from_dict(data: Dict[str, Any]) -> StatusEntity:
    return StatusEntity.create(
        name=data["name"],
        color=data.get("color"),
        active=data.get("active", True),
        status_id=int(data["id"]),
    )


def ticket_to_dict(ticket: TicketEntity) -> Dict[str, Any]:
    return {
        "id": ticket.id,
        "title": ticket.title,
        "room_id": ticket.room_id,
        "status_id": ticket.status_id,
        "description": ticket.description,
        "priority": ticket.priority.value,
        "requester": ticket.requester,
        "assignee": ticket.assignee,
        "notes": ticket.notes,
        "created_at": _iso(ticket.created_at),
        "updated_at": _iso(ticket.updated_at),
        "closed_at": _iso(ticket.closed_at),
    }


def ticket_from_dict(data: Dict[str, Any]) -> TicketEntity:
    return TicketEntity(
        id=int(data["id"]),
        title=data["title"],
        room_id=int(data["room_id"]),
        status_id=int(data["status_id"]),
        description=data["description"],
        priority=TicketPriority.from_string(data.get("priority")),
        requester=data.get("requester"),
        assignee=data.get("assignee"),
        notes=data.get("notes"),
        created_at=_parse(data["created_at"]),
        updated_at=_parse(data["updated_at"]),
        closed_at=_parse(data.get("closed_at")),
    )


# =============================================================================
# Banco
# =============================================================================

class InMemoryDatabase:
    """
    Conjunto dos três repositórios em memória.

    Example:
        db = InMemoryDatabase()
        db.load_file("database/chamados.json")
        db.rooms.list_all()
    """

    def __init__(self):
        self.rooms = InMemoryRoomRepository()
        self.statuses = InMemoryStatusRepository()
        self.tickets = InMemoryTicketRepository()

    @property
    def repositories(self):
        return (self.rooms, self.statuses, self.tickets)

    def snapshot(self):
        return [repo.snapshot() for repo in self.repositories]

    def restore(self, snapshot) -> None:
        for repo, records in zip(self.repositories, snapshot):
            repo.restore(records)

    def is_empty(self) -> bool:
        return all(repo.count() == 0 for repo in self.repositories)

    # Snapshot JSON -------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        rooms, rooms_next = self.rooms.export()
        statuses, statuses_next = self.statuses.export()
        tickets, tickets_next = self.tickets.export()
        return {
            "version": SNAPSHOT_VERSION,
            "next_ids": {
                "rooms": rooms_next,
                "statuses": statuses_next,
                "tickets": tickets_next,
            },
            "rooms": [room_to_dict(room) for room in rooms],
            "statuses": [status_to_dict(status) for status in statuses],
            "tickets": [ticket_to_dict(ticket) for ticket in tickets],
        }

    def load_dict(self, data: Dict[str, Any]) -> None:
        next_ids = data.get("next_ids") or {}
        self.rooms.load(
            [room_from_dict(item) for item in data.get("rooms", [])],
            next_ids.get("rooms"),
        )
        self.statuses.load(
            [status_from_dict(item) for item in data.get("statuses", [])],
            next_ids.get("statuses"),
        )
        self.tickets.load(
            [ticket_from_dict(item) for item in data.get("tickets", [])],
            next_ids.get("tickets"),
        )

    def save_file(self, path) -> None:
        """
        Grava o snapshot de forma atômica (arquivo temporário + rename).

        Raises:
            OSError: Se a gravação falhar (o arquivo anterior permanece)
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{target.name}.",
            suffix=".tmp",
            dir=str(target.parent),
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, ensure_ascii=False, indent=2)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, target)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

        logger.debug(f"Snapshot saved to {target}")

    def load_file(self, path) -> bool:
        """
        Carrega o snapshot, se existir.

        Returns:
            False se o arquivo não existe ou está vazio

        Raises:
            ValueError: Se o conteúdo não é JSON válido
        """
        target = Path(path)
        if not target.exists() or target.stat().st_size == 0:
            return False

        with target.open(encoding="utf-8") as fh:
            data = json.load(fh)

        self.load_dict(data)
        logger.info(
            f"Snapshot loaded from {target}: "
            f"{self.rooms.count()} rooms, {self.statuses.count()} statuses, "
            f"{self.tickets.count()} tickets"
        )
        return True

"""
Ports (Interfaces) do Domínio de Chamados.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência e consulta de chamados.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoTicketRepository:
        def save(self, ticket: TicketEntity) -> None:
            model = TicketMapper.to_model(ticket)
            model.save()
"""

from typing import List, Optional, Protocol, runtime_checkable

from src.core.shared.repositories import InMemoryRepository
from src.core.statuses.entities import is_terminal_status

from .entities import TicketEntity


@runtime_checkable
class TicketRepository(Protocol):
    """
    Interface para persistência de Chamados.

    Implementações:
    - DjangoTicketRepository (banco relacional via ORM)
    - InMemoryTicketRepository (backends memória e efêmero, testes)

    Methods:
        add: Insere chamado novo (atribui id)
        save: Atualiza chamado existente
        get_by_id: Busca por ID
        delete: Remove chamado
        list_all: Lista todos
        list_by_status: Filtra por status
        list_by_room: Filtra por sala
        count: Conta total de chamados
        count_by_room: Conta chamados da sala (abertos ou não)
        count_open_by_room: Conta chamados da sala fora do status terminal
        count_by_status: Conta chamados com o status
    """

    def add(self, ticket: TicketEntity) -> TicketEntity:
        ...

    def save(self, ticket: TicketEntity) -> None:
        ...

    def get_by_id(self, ticket_id: int) -> Optional[TicketEntity]:
        ...

    def delete(self, ticket_id: int) -> bool:
        ...

    def list_all(self) -> List[TicketEntity]:
        ...

    def list_by_status(self, status_id: int) -> List[TicketEntity]:
        ...

    def list_by_room(self, room_id: int) -> List[TicketEntity]:
        ...

    def count(self) -> int:
        ...

    def count_by_room(self, room_id: int) -> int:
        ...

    def count_open_by_room(self, room_id: int) -> int:
        ...

    def count_by_status(self, status_id: int) -> int:
        ...


class InMemoryTicketRepository(InMemoryRepository[TicketEntity]):
    """
    Implementação em memória do TicketRepository.

    Example:
        repo = InMemoryTicketRepository()
        ticket = repo.add(ticket)
        found = repo.get_by_id(ticket.id)
    """

    def list_by_status(self, status_id: int) -> List[TicketEntity]:
        """Filtra por status."""
        return [t.copy() for t in self._values() if t.status_id == status_id]

    def list_by_room(self, room_id: int) -> List[TicketEntity]:
        """Filtra por sala."""
        return [t.copy() for t in self._values() if t.room_id == room_id]

    def count_by_room(self, room_id: int) -> int:
        return sum(1 for t in self._values() if t.room_id == room_id)

    def count_open_by_room(self, room_id: int) -> int:
        return sum(
            1 for t in self._values()
            if t.room_id == room_id and not is_terminal_status(t.status_id)
        )

    def count_by_status(self, status_id: int) -> int:
        """Conta por status."""
        return sum(1 for t in self._values() if t.status_id == status_id)

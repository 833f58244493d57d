"""
Ports (Interfaces) do Catálogo de Status.

Implementações:
- DjangoStatusRepository (banco relacional via ORM)
- InMemoryStatusRepository (backends memória e efêmero, testes)
"""

from typing import List, Optional, Protocol, runtime_checkable

from src.core.shared.repositories import InMemoryRepository
from src.core.shared.validators import name_key

from .entities import StatusEntity


@runtime_checkable
class StatusRepository(Protocol):
    """
    Interface para persistência de Status.

    Methods:
        add: Insere status (mantém id explícito do seed)
        save: Atualiza status existente
        get_by_id: Busca por ID
        get_by_name: Busca por nome, sem diferenciar maiúsculas
        delete: Remove status
        list_all: Lista ordenada por id
        count: Conta total
    """

    def add(self, status: StatusEntity) -> StatusEntity:
        ...

    def save(self, status: StatusEntity) -> None:
        ...

    def get_by_id(self, status_id: int) -> Optional[StatusEntity]:
        ...

    def get_by_name(self, name: str) -> Optional[StatusEntity]:
        """
        Busca status pelo nome normalizado.

        Args:
            name: Nome (comparado após strip + casefold)

        Returns:
            Entidade encontrada ou None
        """
        ...

    def delete(self, status_id: int) -> bool:
        ...

    def list_all(self) -> List[StatusEntity]:
        ...

    def count(self) -> int:
        ...


class InMemoryStatusRepository(InMemoryRepository[StatusEntity]):
    """
    Implementação em memória do StatusRepository.

    Example:
        repo = InMemoryStatusRepository()
        status = repo.add(StatusEntity.create("Aberto"))
        repo.get_by_name("ABERTO")
    """

    def get_by_name(self, name: str) -> Optional[StatusEntity]:
        key = name_key(name)
        for status in self._values():
            if status.name_key == key:
                return status.copy()
        return None

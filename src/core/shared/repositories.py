"""
Base para repositórios em memória.

Guarda cópias das entidades: quem lê nunca altera o estado
interno sem passar por `save`. Isso permite que o snapshot da
transação seja uma cópia rasa do dicionário.

Os ids são monotônicos por coleção e nunca reutilizados, nem
mesmo após rollback.
"""

from typing import Dict, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """
    Implementação em memória dos ports de repositório.

    Subclasses só precisam acrescentar consultas específicas.
    As entidades devem expor `id` e `copy()`.
    """

    def __init__(self):
        self._records: Dict[int, T] = {}
        self._next_id = 1

    def add(self, entity: T) -> T:
        """Insere entidade nova e devolve a cópia com id atribuído."""
        stored = entity.copy()
        if stored.id is None:
            stored.id = self._next_id
        self._next_id = max(self._next_id, stored.id + 1)
        self._records[stored.id] = stored
        return stored.copy()

    def save(self, entity: T) -> None:
        """Substitui o registro existente."""
        self._records[entity.id] = entity.copy()

    def get_by_id(self, entity_id: int) -> Optional[T]:
        record = self._records.get(entity_id)
        return record.copy() if record is not None else None

    def delete(self, entity_id: int) -> bool:
        return self._records.pop(entity_id, None) is not None

    def list_all(self) -> List[T]:
        return [self._records[key].copy() for key in sorted(self._records)]

    def count(self) -> int:
        return len(self._records)

    def _values(self):
        """Itera sobre os registros internos, em ordem de id (sem copiar)."""
        return (self._records[key] for key in sorted(self._records))

    # Transação / persistência ------------------------------------------

    @property
    def next_id(self) -> int:
        return self._next_id

    def snapshot(self) -> Dict[int, T]:
        return dict(self._records)

    def restore(self, records: Dict[int, T]) -> None:
        self._records = dict(records)

    def export(self) -> Tuple[List[T], int]:
        """Retorna (registros, próximo id) para serialização."""
        return self.list_all(), self._next_id

    def load(self, entities: List[T], next_id: Optional[int] = None) -> None:
        """Substitui todo o conteúdo (usado ao carregar um snapshot)."""
        self._records = {entity.id: entity.copy() for entity in entities}
        highest = max(self._records, default=0)
        self._next_id = max(next_id or 1, highest + 1)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._records.clear()

"""
Unit of Work - Implementações em memória.

- InMemoryUnitOfWork: backend efêmero e testes. Tira um snapshot das
  coleções ao iniciar e o restaura no rollback.
- JsonFileUnitOfWork: backend `memory` com persistência. Grava o
  arquivo JSON no commit; se a gravação falhar, o estado em memória
  volta ao snapshot e a exceção é propagada.

Os contadores de id não são restaurados no rollback: ids nunca
são reutilizados.
"""

from typing import Optional
import logging

from src.core.shared.interfaces import EventPublisher, UnitOfWork

from .database import InMemoryDatabase

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória.

    Example:
        db = InMemoryDatabase()
        uow = InMemoryUnitOfWork(db)
        with uow:
            db.rooms.add(room)
            uow.publish_event(event)

        assert uow.committed
    """

    def __init__(
        self,
        database: InMemoryDatabase,
        event_publisher: Optional[EventPublisher] = None,
    ):
        super().__init__(event_publisher)
        self.database = database
        self._snapshot = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._snapshot = self.database.snapshot()
        self._committed = False
        self._rolled_back = False

    def commit(self) -> None:
        try:
            self._persist()
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self.rollback()
            raise

        self._snapshot = None
        self._committed = True
        self._dispatch_events()

    def rollback(self) -> None:
        if self._snapshot is not None:
            self.database.restore(self._snapshot)
            self._snapshot = None
            logger.debug("In-memory transaction rolled back")
        self._rolled_back = True
        self.clear_events()

    def _persist(self) -> None:
        """Ponto de extensão para persistência (nada a fazer em memória)."""

    @property
    def committed(self) -> bool:
        """Verifica se a última transação foi comitada."""
        return self._committed

    @property
    def rolled_back(self) -> bool:
        """Verifica se a última transação foi revertida."""
        return self._rolled_back


class JsonFileUnitOfWork(InMemoryUnitOfWork):
    """
    Unit of Work em memória com snapshot em arquivo JSON.

    A gravação termina antes de a operação retornar.
    """

    def __init__(
        self,
        database: InMemoryDatabase,
        path,
        event_publisher: Optional[EventPublisher] = None,
    ):
        super().__init__(database, event_publisher)
        self.path = path

    def _persist(self) -> None:
        self.database.save_file(self.path)

"""
Unit of Work - Implementação Django.

Gerencia transações atômicas entre os três repositórios,
garantindo que uma operação da fachada seja persistida inteira
ou não seja persistida.

Responsabilidades:
- Iniciar/finalizar transações
- Commit/Rollback coordenado
- Publicar eventos após commit bem-sucedido

Usa `transaction.atomic()`, que vira savepoint quando já existe
uma transação aberta (por exemplo, dentro dos testes com banco).
"""

from typing import Optional
import logging

from django.db import transaction

from src.core.shared.interfaces import EventPublisher, UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Eventos são publicados apenas após commit bem-sucedido.

    Example:
        with DjangoUnitOfWork() as uow:
            room_repo.add(room)
            uow.publish_event(MyEvent(...))
        # Commit automático + eventos publicados

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            ticket_repo.save(ticket)
            raise Exception("Erro!")
        # Rollback automático, eventos descartados
    """

    def __init__(
        self,
        event_publisher: Optional[EventPublisher] = None,
        using: Optional[str] = None,
    ):
        super().__init__(event_publisher)
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        self._committed = False
        self._rolled_back = False
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Persiste as mudanças e publica eventos.

        Raises:
            Exception: Se o commit falhar (eventos são descartados)
        """
        atomic, self._atomic = self._atomic, None
        try:
            if atomic is not None:
                atomic.__exit__(None, None, None)
                logger.debug("Transaction committed")
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self._rolled_back = True
            self.clear_events()
            raise

        self._committed = True
        self._dispatch_events()

    def rollback(self) -> None:
        """
        Desfaz todas as mudanças e descarta eventos.

        Chamado automaticamente se exceção ocorrer dentro do contexto.
        """
        atomic, self._atomic = self._atomic, None
        try:
            if atomic is not None:
                atomic.__exit__(RuntimeError, RuntimeError("rollback"), None)
                logger.debug("Transaction rolled back")
        finally:
            self._rolled_back = True
            self.clear_events()

    @property
    def is_committed(self) -> bool:
        """Verifica se transação foi comitada."""
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se transação foi revertida."""
        return self._rolled_back

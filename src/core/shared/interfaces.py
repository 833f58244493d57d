"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports: UnitOfWork, EventPublisher (repositórios: ports de cada domínio)
- Driving Port: ConsistencyFacade (src/core/facade)

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from .events import DomainEvent

logger = logging.getLogger(__name__)


class EventPublisher(ABC):
    """
    Interface para publicação de eventos.

    Adapters implementam para integrar com diferentes destinos
    (log, memória para testes, mensageria futura).
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Publica evento para consumidores.

        Args:
            event: Evento de domínio a ser publicado
        """
        raise NotImplementedError

    @abstractmethod
    def publish_batch(self, events: List[DomainEvent]) -> None:
        """
        Publica múltiplos eventos em batch.

        Args:
            events: Lista de eventos a serem publicados
        """
        raise NotImplementedError


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena escritas atômicas.

    Garante que as escritas de uma operação da fachada sejam
    persistidas como uma única unidade: ou todas são persistidas
    ou nenhuma é, e nenhuma mutação parcial fica visível.

    Pattern: Context Manager
        with uow:
            room_repo.save(room)
            uow.publish_event(event)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    A mesma instância pode ser reutilizada em blocos `with`
    sucessivos (nunca aninhados); cada bloco é uma transação nova.
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        self._events: List[DomainEvent] = []
        self._event_publisher = event_publisher

    def __enter__(self) -> "UnitOfWork":
        """Inicia contexto de transação."""
        self.clear_events()
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Persiste todas as mudanças e publica eventos.

        Ordem de execução:
        1. Persistência no backend
        2. Publicação de eventos enfileirados
        3. Limpeza de estado interno

        Note:
            Se a persistência falhar, o estado é restaurado,
            eventos são descartados e a exceção é propagada.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças e descarta eventos.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """
        Enfileira evento para publicação após commit.

        Args:
            event: Evento de domínio a ser publicado
        """
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Retorna eventos enfileirados (para testing/debugging)."""
        return list(self._events)

    def clear_events(self) -> None:
        """Limpa fila de eventos."""
        self._events.clear()

    def _dispatch_events(self) -> None:
        """
        Entrega eventos ao publisher (chamado após commit).

        Falhas do publisher são logadas e não desfazem o commit,
        que já está visível para chamadas seguintes.
        """
        events = list(self._events)
        self.clear_events()

        if not events or self._event_publisher is None:
            return

        try:
            self._event_publisher.publish_batch(events)
        except Exception as e:
            logger.error(f"Failed to publish events: {e}")

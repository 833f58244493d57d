"""
Event Publishers - Publicadores de Eventos de Domínio.

Implementações:
- LoggingEventPublisher: Loga eventos e chama handlers síncronos (padrão)
- InMemoryEventPublisher: Guarda eventos para verificação em testes

Eventos não são persistidos: não existe trilha de auditoria.
"""

from typing import Callable, Dict, List
import json
import logging

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)


class _HandlerRegistry:
    """Handlers síncronos por tipo de evento."""

    def __init__(self):
        self._handlers: Dict[str, List[Callable[[DomainEvent], None]]] = {}

    def register_handler(
        self,
        event_type: str,
        handler: Callable[[DomainEvent], None]
    ) -> None:
        """Registra handler para tipo de evento."""
        self._handlers.setdefault(event_type, []).append(handler)

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Erro em handler para {event.event_type}: {e}")


class LoggingEventPublisher(_HandlerRegistry, EventPublisher):
    """
    Publisher que loga eventos.

    Usado pelos três backends; o commit já aconteceu quando
    o evento chega aqui.
    """

    def __init__(self, log_level: int = logging.INFO):
        super().__init__()
        self._log_level = log_level

    def publish(self, event: DomainEvent) -> None:
        event_data = event.to_dict()

        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event_data['data'], default=str, ensure_ascii=False)}"
        )

        self._dispatch_to_handlers(event)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)


class InMemoryEventPublisher(_HandlerRegistry, EventPublisher):
    """
    Publisher em memória para testes.

    Armazena eventos publicados para verificação em testes.
    """

    def __init__(self):
        super().__init__()
        self._published_events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)
        self._dispatch_to_handlers(event)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        """Retorna eventos publicados."""
        return self._published_events.copy()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        """Filtra eventos por tipo."""
        return [e for e in self._published_events if e.event_type == event_type]

    def clear(self) -> None:
        self._published_events.clear()

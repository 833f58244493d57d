"""
Domain Events - Comunicação desacoplada entre componentes.

Este módulo define a infraestrutura base para Domain Events,
permitindo que efeitos colaterais (logs, notificações) sejam
disparados sem acoplar os stores a quem os consome.

Características:
- Auto-geração de ID e timestamp
- Serializáveis para logging estruturado
- Rastreáveis via aggregate_id

Pattern:
    - Eventos são enfileirados no UnitOfWork
    - Publicados apenas após commit bem-sucedido
    - Descartados em rollback
    - Não são persistidos (não há trilha de auditoria)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict
import uuid


@dataclass
class DomainEvent(ABC):
    """
    Classe base abstrata para Domain Events.

    Um Domain Event representa algo significativo que aconteceu
    no domínio e que pode ser relevante para outras partes do sistema.

    Características:
    - Nomeados no passado (TicketCreated, não CreateTicket)
    - Representam fatos já comitados

    Attributes:
        event_id: Identificador único do evento
        aggregate_id: ID do agregado que gerou o evento
        occurred_at: Momento em que o evento ocorreu
        version: Versão do schema do evento (para evolução)
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    aggregate_id: int = 0
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    def __post_init__(self):
        """Validação após inicialização."""
        if not self.aggregate_id:
            raise ValueError("aggregate_id é obrigatório")

    @property
    @abstractmethod
    def aggregate_type(self) -> str:
        """
        Retorna o tipo do agregado que gerou este evento.

        Returns:
            Nome do tipo do agregado (ex: "Ticket")
        """
        ...

    @property
    def event_type(self) -> str:
        """Retorna o tipo do evento (nome da classe)."""
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializa evento para dicionário.

        Returns:
            Dicionário com dados do evento
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """
        Retorna dados específicos do evento.

        Pega todos os campos que não são os da classe base.
        """
        base_fields = {"event_id", "aggregate_id", "occurred_at", "version"}
        return {
            key: value
            for key, value in self.__dict__.items()
            if key not in base_fields and not key.startswith("_")
        }

    def __repr__(self) -> str:
        return (
            f"{self.event_type}("
            f"event_id={self.event_id[:8]}..., "
            f"aggregate_id={self.aggregate_id}, "
            f"occurred_at={self.occurred_at.isoformat()}"
            f")"
        )

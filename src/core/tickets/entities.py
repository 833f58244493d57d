"""
Entidades do Domínio de Chamados.

Entidades:
- TicketEntity: Chamado aberto contra uma sala
- TicketPriority: Níveis de prioridade

Regras de Negócio Encapsuladas:
- Validação de título e descrição na criação e na alteração
- Prioridade aceita os valores antigos em português
- Regra de fechamento: `closed_at` preenchido se e somente se o
  chamado está no status terminal
- Qualquer transição de status é permitida (inclusive reabrir)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Optional, Union

from src.core.shared.exceptions import ValidationError
from src.core.shared.validators import validate_length
from src.core.statuses.entities import OPEN_STATUS_ID, is_terminal_status


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TicketPriority(Enum):
    """Níveis de prioridade."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_string(cls, value: Union[str, "TicketPriority", None]) -> "TicketPriority":
        """
        Converte string para enum.

        Aceita o valor ("high"), o nome ("HIGH") e os valores antigos
        em português ("alta", "media", "média", "baixa").

        Raises:
            ValidationError: Se valor inválido
        """
        if value is None:
            return cls.MEDIUM
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().lower()
        if not normalized:
            return cls.MEDIUM

        for priority in cls:
            if priority.value == normalized:
                return priority

        legacy = _LEGACY_PRIORITIES.get(normalized)
        if legacy is not None:
            return legacy

        raise ValidationError(f"Prioridade inválida: {value}", field="priority")


_LEGACY_PRIORITIES = {
    "baixa": TicketPriority.LOW,
    "media": TicketPriority.MEDIUM,
    "média": TicketPriority.MEDIUM,
    "alta": TicketPriority.HIGH,
}


def _optional_text(
    value: Optional[str],
    field: str = "",
    max_length: Optional[int] = None,
) -> Optional[str]:
    """Texto opcional: strip, e vazio vira None."""
    if value is None:
        return None
    cleaned = str(value).strip()
    if max_length is not None and len(cleaned) > max_length:
        raise ValidationError(
            f"{field} deve ter no máximo {max_length} caracteres",
            field=field,
        )
    return cleaned or None


@dataclass
class TicketEntity:
    """
    Entidade de Domínio: Chamado.

    Invariantes:
    - Título com 3 a 200 caracteres
    - Descrição com 10 a 1000 caracteres
    - closed_at não nulo se e somente se status_id é terminal
    - created_at nunca muda; updated_at muda a cada alteração

    A existência da sala e do status é garantida pela fachada.

    Example:
        ticket = TicketEntity.create(
            title="Projetor não funciona",
            room_id=1,
            description="O projetor da sala não liga desde ontem",
            priority="high",
        )
        ticket.change_status(TERMINAL_STATUS_ID)
    """

    id: Optional[int] = None

    title: str = ""
    description: str = ""

    room_id: Optional[int] = None
    status_id: int = OPEN_STATUS_ID
    priority: TicketPriority = TicketPriority.MEDIUM

    requester: Optional[str] = None
    assignee: Optional[str] = None
    notes: Optional[str] = None

    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    closed_at: Optional[datetime] = None

    TITLE_MIN_LENGTH: ClassVar[int] = 3
    TITLE_MAX_LENGTH: ClassVar[int] = 200
    DESCRIPTION_MIN_LENGTH: ClassVar[int] = 10
    DESCRIPTION_MAX_LENGTH: ClassVar[int] = 1000
    PERSON_MAX_LENGTH: ClassVar[int] = 200

    @classmethod
    def create(
        cls,
        title: str,
        room_id: int,
        description: str,
        priority: Union[str, TicketPriority, None] = None,
        requester: Optional[str] = None,
        assignee: Optional[str] = None,
        notes: Optional[str] = None,
        status_id: int = OPEN_STATUS_ID,
    ) -> "TicketEntity":
        """
        Factory method para criar chamado com validações.

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        now = utc_now()
        ticket = cls(
            title=cls._validate_title(title),
            description=cls._validate_description(description),
            room_id=room_id,
            status_id=status_id,
            priority=TicketPriority.from_string(priority),
            requester=_optional_text(requester, "requester", cls.PERSON_MAX_LENGTH),
            assignee=_optional_text(assignee, "assignee", cls.PERSON_MAX_LENGTH),
            notes=_optional_text(notes),
            created_at=now,
            updated_at=now,
        )
        ticket._apply_closure_rule(previous_status_id=None, now=now)
        return ticket

    @classmethod
    def _validate_title(cls, title) -> str:
        return validate_length(
            title,
            field="title",
            label="Título",
            min_length=cls.TITLE_MIN_LENGTH,
            max_length=cls.TITLE_MAX_LENGTH,
        )

    @classmethod
    def _validate_description(cls, description) -> str:
        return validate_length(
            description,
            field="description",
            label="Descrição",
            min_length=cls.DESCRIPTION_MIN_LENGTH,
            max_length=cls.DESCRIPTION_MAX_LENGTH,
        )

    def apply_patch(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        priority: Union[str, TicketPriority, None] = None,
        requester: Optional[str] = None,
        assignee: Optional[str] = None,
        notes: Optional[str] = None,
        room_id: Optional[int] = None,
        status_id: Optional[int] = None,
    ) -> None:
        """
        Aplica alteração parcial.

        None mantém o valor atual; string vazia limpa os campos
        opcionais (requester, assignee, notes).

        Raises:
            ValidationError: Se título, descrição ou prioridade inválidos
        """
        if title is not None:
            self.title = self._validate_title(title)
        if description is not None:
            self.description = self._validate_description(description)
        if priority is not None:
            self.priority = TicketPriority.from_string(priority)
        if requester is not None:
            self.requester = _optional_text(requester, "requester", self.PERSON_MAX_LENGTH)
        if assignee is not None:
            self.assignee = _optional_text(assignee, "assignee", self.PERSON_MAX_LENGTH)
        if notes is not None:
            self.notes = _optional_text(notes)
        if room_id is not None:
            self.room_id = room_id

        if status_id is not None:
            self.change_status(status_id)
        else:
            self._touch()

    def change_status(
        self,
        status_id: int,
        assignee: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> None:
        """
        Altera o status aplicando a regra de fechamento.

        Args:
            status_id: Novo status (qualquer transição é permitida)
            assignee: None mantém; string substitui (vazia limpa)
            notes: None mantém; string substitui (vazia limpa)
        """
        previous_status_id = self.status_id
        now = utc_now()

        self.status_id = status_id
        if assignee is not None:
            self.assignee = _optional_text(assignee, "assignee", self.PERSON_MAX_LENGTH)
        if notes is not None:
            self.notes = _optional_text(notes)

        self._apply_closure_rule(previous_status_id, now)
        self.updated_at = now

    def _apply_closure_rule(self, previous_status_id: Optional[int], now: datetime) -> None:
        if is_terminal_status(self.status_id):
            if self.closed_at is None or not is_terminal_status(previous_status_id):
                self.closed_at = now
        else:
            self.closed_at = None

    def _touch(self) -> None:
        self.updated_at = utc_now()

    @property
    def is_closed(self) -> bool:
        return is_terminal_status(self.status_id)

    def copy(self) -> "TicketEntity":
        return TicketEntity(
            id=self.id,
            title=self.title,
            description=self.description,
            room_id=self.room_id,
            status_id=self.status_id,
            priority=self.priority,
            requester=self.requester,
            assignee=self.assignee,
            notes=self.notes,
            created_at=self.created_at,
            updated_at=self.updated_at,
            closed_at=self.closed_at,
        )

    def __str__(self) -> str:
        return f"Chamado #{self.id}: {self.title}"

"""
Entidades do Catálogo de Status.

Um status é um estado nomeado do ciclo de vida de um chamado, com
uma cor de exibição. Os ids 1 a 4 são fixos pelo seed porque a
regra de fechamento depende do id 3.

Regras de Negócio Encapsuladas:
- Nome obrigatório (até 100 caracteres)
- Cor padrão "#000000"
- Predicado único para o status terminal
"""

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from src.core.shared.validators import name_key, validate_length


OPEN_STATUS_ID = 1
IN_PROGRESS_STATUS_ID = 2
TERMINAL_STATUS_ID = 3
CANCELLED_STATUS_ID = 4

DEFAULT_COLOR = "#000000"


def is_terminal_status(status_id: Optional[int]) -> bool:
    """
    Indica se o status dispara o preenchimento de `closed_at`.

    Único lugar onde o id terminal é comparado.
    """
    return status_id == TERMINAL_STATUS_ID


@dataclass
class StatusEntity:
    """
    Entidade de Domínio: Status.

    Attributes:
        id: Identificador (atribuído pelo repositório)
        name: Nome único (sem diferenciar maiúsculas)
        color: Cor de exibição
        active: Se o status está ativo
    """

    id: Optional[int] = None
    name: str = ""
    color: str = DEFAULT_COLOR
    active: bool = True

    NAME_MAX_LENGTH: ClassVar[int] = 100

    @classmethod
    def create(
        cls,
        name: str,
        color: Optional[str] = None,
        active: bool = True,
        status_id: Optional[int] = None,
    ) -> "StatusEntity":
        """
        Factory method para criar status com validações.

        Raises:
            ValidationError: Se nome inválido
        """
        return cls(
            id=status_id,
            name=cls._validate_name(name),
            color=cls._clean_color(color) or DEFAULT_COLOR,
            active=bool(active),
        )

    @classmethod
    def _validate_name(cls, name) -> str:
        return validate_length(
            name,
            field="name",
            label="Nome do status",
            min_length=1,
            max_length=cls.NAME_MAX_LENGTH,
        )

    @staticmethod
    def _clean_color(color: Optional[str]) -> Optional[str]:
        if color is None:
            return None
        return str(color).strip() or None

    def apply_patch(
        self,
        name: Optional[str] = None,
        color: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> None:
        """
        Aplica alteração parcial; campos None mantêm o valor atual.

        Raises:
            ValidationError: Se nome inválido
        """
        if name is not None:
            self.name = self._validate_name(name)
        cleaned_color = self._clean_color(color)
        if cleaned_color is not None:
            self.color = cleaned_color
        if active is not None:
            self.active = bool(active)

    @property
    def name_key(self) -> str:
        return name_key(self.name)

    @property
    def is_terminal(self) -> bool:
        return is_terminal_status(self.id)

    def copy(self) -> "StatusEntity":
        return StatusEntity(id=self.id, name=self.name, color=self.color, active=self.active)


def default_status_seed() -> List[StatusEntity]:
    """Catálogo canônico: 4 entradas, id 3 terminal."""
    return [
        StatusEntity(id=OPEN_STATUS_ID, name="Aberto", color="#ff6b6b", active=True),
        StatusEntity(id=IN_PROGRESS_STATUS_ID, name="Em Andamento", color="#feca57", active=True),
        StatusEntity(id=TERMINAL_STATUS_ID, name="Concluído", color="#48dbfb", active=True),
        StatusEntity(id=CANCELLED_STATUS_ID, name="Cancelado", color="#ff9ff3", active=True),
    ]


# Formato antigo (banco SQLite inicial): sem cor, sem "Cancelado".
LEGACY_STATUS_NAMES = ("Aberto", "Em Andamento", "Finalizado")


def is_legacy_catalog(statuses: List[StatusEntity]) -> bool:
    """Detecta o catálogo legado de 3 entradas."""
    if len(statuses) != len(LEGACY_STATUS_NAMES):
        return False
    by_id = {s.id: s.name_key for s in statuses}
    return all(
        by_id.get(index) == name_key(legacy_name)
        for index, legacy_name in enumerate(LEGACY_STATUS_NAMES, start=1)
    )

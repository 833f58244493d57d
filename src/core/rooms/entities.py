"""
Entidades do Registro de Salas.

Regras de Negócio Encapsuladas:
- Nome de 2 a 100 caracteres (único, sem diferenciar maiúsculas)
- Descrição opcional de até 500 caracteres
- Token de QR Code gerado na criação
"""

import uuid
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from src.core.shared.validators import name_key, validate_length


def new_qr_token() -> str:
    return uuid.uuid4().hex


@dataclass
class RoomEntity:
    """
    Entidade de Domínio: Sala.

    Attributes:
        id: Identificador (atribuído pelo repositório)
        name: Nome/número da sala
        description: Descrição livre
        active: Salas inativas não recebem chamados novos
        qr_token: Token opaco usado pela leitura do QR Code
    """

    id: Optional[int] = None
    name: str = ""
    description: str = ""
    active: bool = True
    qr_token: str = field(default_factory=new_qr_token)

    NAME_MIN_LENGTH: ClassVar[int] = 2
    NAME_MAX_LENGTH: ClassVar[int] = 100
    DESCRIPTION_MAX_LENGTH: ClassVar[int] = 500

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str] = None,
        active: bool = True,
    ) -> "RoomEntity":
        """
        Factory method para criar sala com validações.

        Raises:
            ValidationError: Se nome ou descrição inválidos
        """
        return cls(
            name=cls._validate_name(name),
            description=cls._validate_description(description),
            active=bool(active),
        )

    @classmethod
    def _validate_name(cls, name) -> str:
        return validate_length(
            name,
            field="name",
            label="Nome da sala",
            min_length=cls.NAME_MIN_LENGTH,
            max_length=cls.NAME_MAX_LENGTH,
        )

    @classmethod
    def _validate_description(cls, description) -> str:
        return validate_length(
            description,
            field="description",
            label="Descrição da sala",
            max_length=cls.DESCRIPTION_MAX_LENGTH,
            required=False,
        )

    def apply_patch(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> None:
        """
        Aplica alteração parcial; campos None mantêm o valor atual.

        Descrição vazia limpa o campo.
        """
        if name is not None:
            self.name = self._validate_name(name)
        if description is not None:
            self.description = self._validate_description(description)
        if active is not None:
            self.active = bool(active)

    def regenerate_qr_token(self) -> str:
        self.qr_token = new_qr_token()
        return self.qr_token

    @property
    def name_key(self) -> str:
        return name_key(self.name)

    def copy(self) -> "RoomEntity":
        return RoomEntity(
            id=self.id,
            name=self.name,
            description=self.description,
            active=self.active,
            qr_token=self.qr_token,
        )

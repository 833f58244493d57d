"""
Exceções de Domínio da Gestão de Chamados.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Cada exceção carrega um ``http_status`` determinístico, para que a
camada HTTP (colaborador externo) possa mapear falhas sem inspecionar
mensagens.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)              → 400
    ├── EntityNotFoundError (entidade não existe)           → 404
    ├── DuplicateNameError (nome já utilizado)              → 409
    ├── ReferentialConflictError (exclusão bloqueada)       → 409
    ├── LegacyStatusCatalogError (catálogo em formato antigo) → 409
    └── BusinessRuleViolationError (regra de negócio)       → 400
        └── InvalidStateError (operação sobre sala inativa)
"""

from typing import Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            facade.delete_room(room_id)
        except DomainException as e:
            return JsonResponse(e.to_dict(), status=e.http_status)
    """

    http_status: int = 400

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento. Nunca deve ser re-tentada.

    Example:
        if len(title) < 3:
            raise ValidationError("Título deve ter pelo menos 3 caracteres", field="title")
    """

    http_status = 400

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID (ou nome/token) não retorna resultado.

    Example:
        room = repo.get_by_id(room_id)
        if not room:
            raise EntityNotFoundError("Sala não encontrada", "Room", room_id)
    """

    http_status = 404

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result


class DuplicateNameError(DomainException):
    """
    Violação de unicidade de nome (comparação sem diferenciar maiúsculas).

    Example:
        if repo.get_by_name(name):
            raise DuplicateNameError("Já existe uma sala com este nome", "Room", name)
    """

    http_status = 409

    def __init__(self, message: str, entity_type: str = None, name: str = None):
        self.entity_type = entity_type
        self.name = name
        super().__init__(message, "DUPLICATE_NAME")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.name:
            result["name"] = self.name
        return result


class ReferentialConflictError(DomainException):
    """
    Exclusão bloqueada por chamados que ainda referenciam a entidade.

    Attributes:
        count: Quantidade de chamados que bloqueiam a exclusão
    """

    http_status = 409

    def __init__(
        self,
        message: str,
        entity_type: str = None,
        entity_id=None,
        count: int = 0,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.count = count
        super().__init__(message, "REFERENTIAL_CONFLICT")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["count"] = self.count
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio.
    """

    http_status = 400

    def __init__(self, message: str, rule: str = None, code: str = "BUSINESS_RULE_VIOLATION"):
        self.rule = rule
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class InvalidStateError(BusinessRuleViolationError):
    """
    Operação rejeitada pelo estado atual da entidade.

    Example:
        if not room.active:
            raise InvalidStateError(
                "Não é possível criar chamados para salas inativas",
                rule="sala_inativa",
            )
    """

    def __init__(self, message: str, rule: Optional[str] = None):
        super().__init__(message, rule=rule, code="INVALID_STATE")


class LegacyStatusCatalogError(DomainException):
    """
    Catálogo de status persistido no formato legado (3 entradas).

    O formato legado não possui o status "Cancelado" e usa outro nome
    para o status final. Exige migração explícita antes do uso.
    """

    http_status = 409

    def __init__(self, message: str):
        super().__init__(message, "LEGACY_STATUS_CATALOG")

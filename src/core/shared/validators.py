"""
Helpers de normalização de texto usados pelas entidades.
"""

from typing import Optional

from .exceptions import ValidationError


def name_key(name: str) -> str:
    """Chave de comparação de nomes (sem diferenciar maiúsculas)."""
    return name.strip().casefold()


def validate_length(
    value,
    field: str,
    label: str,
    min_length: int = 0,
    max_length: Optional[int] = None,
    required: bool = True,
) -> str:
    """
    Valida tipo e tamanho de um campo texto e retorna o valor limpo.

    Args:
        value: Valor recebido
        field: Nome do campo (para ValidationError.field)
        label: Rótulo usado na mensagem de erro
        min_length: Tamanho mínimo após strip
        max_length: Tamanho máximo após strip
        required: Se o campo é obrigatório

    Raises:
        ValidationError: Se tipo ou tamanho inválidos
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            raise ValidationError(f"{label} é obrigatório", field=field)
        return ""

    if not isinstance(value, str):
        raise ValidationError(f"{label} deve ser um texto", field=field)

    cleaned = value.strip()

    if len(cleaned) < min_length:
        raise ValidationError(
            f"{label} deve ter pelo menos {min_length} caracteres",
            field=field,
        )

    if max_length is not None and len(cleaned) > max_length:
        raise ValidationError(
            f"{label} deve ter no máximo {max_length} caracteres",
            field=field,
        )

    return cleaned

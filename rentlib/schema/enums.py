"""
Core enumeration types for rental records.
"""

from enum import Enum
from typing import Optional, Union


class _LabeledEnum(Enum):
    """Enum whose value is the stored code, with a display label per member."""

    def __new__(cls, code: str, label: str):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.label = label
        return obj

    @classmethod
    def parse(cls, code: Union[str, "_LabeledEnum", None]) -> Optional["_LabeledEnum"]:
        """Return the member for ``code``, or None when the code is unknown."""
        if isinstance(code, cls):
            return code
        if not isinstance(code, str):
            return None
        try:
            return cls(code.strip().lower())
        except ValueError:
            return None


class PropertyType(_LabeledEnum):
    """Property types."""

    APARTAMENTO = ("apartamento", "Apartamento")
    CASA = ("casa", "Casa")
    COMERCIAL = ("comercial", "Comercial")
    TERRENO = ("terreno", "Terreno")


class ContractStatus(_LabeledEnum):
    """Contract lifecycle states."""

    ATIVO = ("ativo", "Ativo")
    PENDENTE = ("pendente", "Pendente")
    ENCERRADO = ("encerrado", "Encerrado")
    RENOVADO = ("renovado", "Renovado")  # Replaced by a renewal contract

"""
Contract Validation Module

Модуль для валидации JSON контрактов (таблица единиц).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    UnitMapValidator,
    validate_unit_map,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UnitMapValidator",
    # Functions
    "validate_unit_map",
]

"""
Contract Validation Module

Модуль для валидации JSON контрактов GML времени.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TimeInstantValidator,
    TimePositionValidator,
    validate_time_instant,
    validate_time_position,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TimePositionValidator",
    "TimeInstantValidator",
    # Functions
    "validate_time_position",
    "validate_time_instant",
]

"""
Indeterminate — Символические (неопределённые) значения времени

GML indeterminatePosition и расширенные значения протокола (first/latest).

Оба перечисления закрытые: неизвестная строка отклоняется pydantic
при построении модели, а не при сравнении.
"""

from enum import Enum
from typing import Union


# =============================================================================
# ENUMS
# =============================================================================


class TimeIndeterminateValue(str, Enum):
    """
    Основной indeterminate marker (GML TimeIndeterminateValueType).

    first/latest включены для совместимости со старыми клиентами,
    которые передают их в основном поле.
    """

    AFTER = "after"
    BEFORE = "before"
    NOW = "now"
    UNKNOWN = "unknown"
    TEMPLATE = "template"
    FIRST = "first"
    LATEST = "latest"


class ExtendedIndeterminateTime(str, Enum):
    """Расширенный marker протокола (дополнительно к основному)"""

    FIRST = "first"
    LATEST = "latest"


IndeterminateMarker = Union[TimeIndeterminateValue, ExtendedIndeterminateTime]

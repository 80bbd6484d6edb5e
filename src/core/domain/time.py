"""
Time — Базовая модель GML времени

Общая часть для TimeInstant и TimePeriod:
- gml_id (опциональный идентификатор элемента)
- TimeOrder — результат слабого сравнения
- UnresolvableMarker — единственная ошибка разрешения времени
- ResolutionPolicy — внешняя политика marker → datetime
"""

from datetime import datetime, timezone
from enum import IntEnum
from typing import Callable, Optional

from pydantic import BaseModel, Field

from .indeterminate import IndeterminateMarker


# =============================================================================
# ORDERING
# =============================================================================


class TimeOrder(IntEnum):
    """
    Результат сравнения времени.

    EQUAL_OR_INCOMPARABLE означает и равенство, и невозможность сравнения
    (нет конкретного значения с одной из сторон). Порядок слабый.
    """

    BEFORE = -1
    EQUAL_OR_INCOMPARABLE = 0
    AFTER = 1


# =============================================================================
# RESOLUTION
# =============================================================================


# Политика разрешения: marker → datetime, либо None если marker не разрешим
ResolutionPolicy = Callable[[IndeterminateMarker], Optional[datetime]]


class UnresolvableMarker(Exception):
    """
    Невозможно получить конкретное время.

    Возникает только в resolve_value(): значение не задано, а политика
    не знает marker (или marker отсутствует вовсе, marker is None).
    """

    def __init__(self, marker: Optional[IndeterminateMarker]):
        self.marker = marker
        label = marker.value if marker is not None else "<none>"
        super().__init__(f"No resolution for indeterminate time '{label}'")


# =============================================================================
# HELPERS
# =============================================================================


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Нормализация datetime в UTC.

    Naive datetime считается уже заданным в UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# =============================================================================
# BASE MODEL
# =============================================================================


class Time(BaseModel):
    """Абстрактное GML время (instant или period)"""

    gml_id: Optional[str] = Field(None, min_length=1, description="gml:id элемента")

    model_config = {"frozen": True}

    def is_set_gml_id(self) -> bool:
        return self.gml_id is not None

    def is_empty(self) -> bool:
        """Пустое время: нет ни одного заданного атрибута"""
        return not self.is_set_gml_id()

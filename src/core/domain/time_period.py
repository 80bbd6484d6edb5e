"""
TimePeriod — GML период времени

Минимальная модель диапазона: опциональные start/end (UTC).
Используется TimeInstant.compare_to() для асимметричного сравнения.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pydantic import Field, field_validator

from .time import Time, to_utc

if TYPE_CHECKING:
    from .time_instant import TimeInstant


class TimePeriod(Time):
    """
    Период времени [start, end].

    Любая граница может отсутствовать (открытый период).
    Порядок start <= end не проверяется.
    """

    start: Optional[datetime] = Field(None, description="Начало периода (UTC)")
    end: Optional[datetime] = Field(None, description="Конец периода (UTC)")

    @field_validator("start", "end")
    @classmethod
    def normalize_bound(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_utc(v)

    @classmethod
    def from_instants(cls, start: "TimeInstant", end: "TimeInstant") -> "TimePeriod":
        """Период из конкретных значений двух instant (marker-only → без границы)"""
        return cls(start=start.value, end=end.value)

    def is_set_start(self) -> bool:
        return self.start is not None

    def is_set_end(self) -> bool:
        return self.end is not None

    def is_empty(self) -> bool:
        return not self.is_set_start() and not self.is_set_end() and super().is_empty()

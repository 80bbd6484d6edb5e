"""
TimeInstant — Момент времени GML (конкретный или неопределённый)

Immutable Pydantic модель. Три независимых опциональных поля:
- value: конкретное время (всегда UTC после валидации)
- indeterminate_value: основной marker (now, unknown, latest, ...)
- extended_indeterminate_time: расширенный marker протокола

Поля не взаимоисключающие: время может нести и value, и marker
(например, value, помеченное как latest). Сравнение и равенство
предпочитают value, если оно задано.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value нормализуется в UTC при построении
2. compare_to() никогда не бросает исключений: слабый порядок,
   несравнимые значения дают EQUAL_OR_INCOMPARABLE
3. Равные instant имеют одинаковый hash
4. Отсутствие поля — валидное состояние, не ошибка
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from pydantic import Field, field_validator

from .indeterminate import (
    ExtendedIndeterminateTime,
    IndeterminateMarker,
    TimeIndeterminateValue,
)
from .time import ResolutionPolicy, Time, TimeOrder, UnresolvableMarker, to_utc
from .time_period import TimePeriod
from .time_position import TimePosition

_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)

# hash для instant без конкретного значения
_NO_VALUE_HASH = 7


class TimeInstant(Time):
    """
    Момент времени.

    Immutable модель (frozen=True). Изменение полей выполняется через
    with_*() методы, которые создают новый провалидированный экземпляр.
    """

    value: Optional[datetime] = Field(None, description="Конкретное время (UTC)")
    indeterminate_value: Optional[TimeIndeterminateValue] = Field(
        None, description="Основной indeterminate marker"
    )
    extended_indeterminate_time: Optional[ExtendedIndeterminateTime] = Field(
        None, description="Расширенный marker протокола (first/latest)"
    )
    requested_time_length: int = Field(
        0, ge=0, description="Запрошенная длина (precision) даты, только для форматирования"
    )

    @field_validator("value")
    @classmethod
    def normalize_value(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Любое конкретное время хранится в UTC"""
        return to_utc(v)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_timestamp(cls, ts: datetime) -> "TimeInstant":
        return cls(value=ts)

    @classmethod
    def from_indeterminate(cls, marker: TimeIndeterminateValue) -> "TimeInstant":
        return cls(indeterminate_value=marker)

    @classmethod
    def from_extended_marker(cls, marker: ExtendedIndeterminateTime) -> "TimeInstant":
        """Только расширенный marker: value и основной marker не задаются"""
        return cls(extended_indeterminate_time=marker)

    @classmethod
    def from_timestamp_with_indeterminate(
        cls, ts: Optional[datetime], marker: Optional[TimeIndeterminateValue]
    ) -> "TimeInstant":
        return cls(value=ts, indeterminate_value=marker)

    @classmethod
    def from_wall_clock_date(cls, date: Optional[datetime]) -> "TimeInstant":
        """
        Построение из даты "настенных часов".

        Naive дата трактуется как локальное время процесса и переводится
        в UTC. None — валидный вход: получаем instant с marker unknown.

        Args:
            date: Дата или None

        Returns:
            TimeInstant с value в UTC, либо с indeterminate_value=unknown
        """
        if date is None:
            return cls(indeterminate_value=TimeIndeterminateValue.UNKNOWN)
        return cls(value=date.astimezone(timezone.utc))

    @classmethod
    def from_timestamp_ms(cls, ts_utc_ms: int) -> "TimeInstant":
        """Построение из epoch миллисекунд (UTC)"""
        return cls(value=_EPOCH_UTC + timedelta(milliseconds=ts_utc_ms))

    # -------------------------------------------------------------------------
    # Copy-with-change
    # -------------------------------------------------------------------------

    def _replace(self, **changes: Any) -> "TimeInstant":
        return type(self)(**{**dict(self), **changes})

    def with_value(self, value: Optional[datetime]) -> "TimeInstant":
        return self._replace(value=value)

    def with_indeterminate_value(
        self, marker: Optional[TimeIndeterminateValue]
    ) -> "TimeInstant":
        return self._replace(indeterminate_value=marker)

    def with_extended_indeterminate_time(
        self, marker: Optional[ExtendedIndeterminateTime]
    ) -> "TimeInstant":
        return self._replace(extended_indeterminate_time=marker)

    def with_requested_time_length(self, length: int) -> "TimeInstant":
        return self._replace(requested_time_length=length)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def is_set_value(self) -> bool:
        return self.value is not None

    def is_set_indeterminate_value(self) -> bool:
        return self.indeterminate_value is not None

    def is_set_extended_indeterminate_time(self) -> bool:
        return self.extended_indeterminate_time is not None

    def is_indeterminate_value_equal_to(self, marker: IndeterminateMarker) -> bool:
        return self.is_set_indeterminate_value() and self.indeterminate_value == marker

    def is_empty(self) -> bool:
        """
        Пустой instant: нет value, нет ни одного marker и база пуста.

        Используется для детекции "временной фильтр не задан".
        """
        return (
            not self.is_set_value()
            and not self.is_set_indeterminate_value()
            and not self.is_set_extended_indeterminate_time()
            and super().is_empty()
        )

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve_value(self, policy: ResolutionPolicy) -> datetime:
        """
        Эффективное конкретное время.

        Args:
            policy: Политика marker → datetime (clock, границы датасета)

        Returns:
            value, если задано; иначе результат политики (UTC)

        Raises:
            UnresolvableMarker: Если marker отсутствует или политика его не знает
        """
        if self.value is not None:
            return self.value

        marker: Optional[IndeterminateMarker] = (
            self.indeterminate_value
            if self.indeterminate_value is not None
            else self.extended_indeterminate_time
        )
        if marker is None:
            raise UnresolvableMarker(None)

        resolved = policy(marker)
        if resolved is None:
            raise UnresolvableMarker(marker)
        return to_utc(resolved)

    # -------------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------------

    def compare_to(self, other: Time) -> TimeOrder:
        """
        Слабое сравнение с instant или period.

        Instant: определено только если value задано с обеих сторон.
        Period: BEFORE если раньше start, AFTER если позже end; нужны
        value и обе границы.

        Returns:
            TimeOrder; EQUAL_OR_INCOMPARABLE если сравнить нельзя
        """
        if self.value is None:
            return TimeOrder.EQUAL_OR_INCOMPARABLE

        if isinstance(other, TimeInstant):
            if other.value is not None:
                if self.value < other.value:
                    return TimeOrder.BEFORE
                if self.value > other.value:
                    return TimeOrder.AFTER
        elif isinstance(other, TimePeriod):
            if other.start is not None and other.end is not None:
                if self.value < other.start:
                    return TimeOrder.BEFORE
                if self.value > other.end:
                    return TimeOrder.AFTER
        return TimeOrder.EQUAL_OR_INCOMPARABLE

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # Приоритет: value → основной marker → расширенный marker
        if not isinstance(other, TimeInstant):
            return NotImplemented
        if self.value is not None and other.value is not None:
            return self.value == other.value
        if self.indeterminate_value is not None and other.indeterminate_value is not None:
            return self.indeterminate_value == other.indeterminate_value
        if (
            self.extended_indeterminate_time is not None
            and other.extended_indeterminate_time is not None
        ):
            return self.extended_indeterminate_time == other.extended_indeterminate_time
        return False

    def __hash__(self) -> int:
        if self.value is not None:
            return hash(self.value)
        return _NO_VALUE_HASH

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def get_time_position(self) -> TimePosition:
        """
        Позиция времени для внешнего форматтера.

        Основной marker важнее value (как в gml:timePosition с
        indeterminatePosition). Расширенный marker используется,
        только если нет ни value, ни основного marker.
        """
        if self.indeterminate_value is not None:
            return TimePosition(indeterminate_position=self.indeterminate_value)
        if self.value is not None:
            return TimePosition(
                value=self.value, requested_time_length=self.requested_time_length
            )
        if self.extended_indeterminate_time is not None:
            return TimePosition(indeterminate_position=self.extended_indeterminate_time)
        return TimePosition()

    def __str__(self) -> str:
        result = "Time instant: "
        if self.value is not None:
            result += self.value.isoformat() + ","
        marker = self.indeterminate_value.value if self.indeterminate_value else None
        return result + str(marker)

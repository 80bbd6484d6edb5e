"""
Ordering — Слабое упорядочивание времени

compare_to() задаёт слабый (частичный) порядок: instant без value
"равен" всему. Поэтому:
- сортировка использует cmp_to_key и стабильный sorted(),
  ничьи сохраняют исходный порядок
- антисимметрия и транзитивность для marker-only instant не гарантируются
- TimeInstant не определяет __lt__, чтобы не маскировать это поведение
"""

import logging
from functools import cmp_to_key
from typing import Callable, Iterable, List, Optional, TypeVar

from src.core.domain.time import Time, TimeOrder
from src.core.domain.time_instant import TimeInstant

logger = logging.getLogger(__name__)

T = TypeVar("T")


def compare(a: TimeInstant, b: Time) -> TimeOrder:
    """
    Сравнение instant с instant или period.

    Returns:
        BEFORE / AFTER / EQUAL_OR_INCOMPARABLE
    """
    return a.compare_to(b)


def sort_by_time(
    items: Iterable[T], key: Optional[Callable[[T], TimeInstant]] = None
) -> List[T]:
    """
    Стабильная сортировка по времени (например, observations).

    Args:
        items: Элементы для сортировки
        key: Извлечение TimeInstant из элемента (по умолчанию сам элемент)

    Returns:
        Новый отсортированный список
    """
    get_time = key if key is not None else (lambda item: item)

    def _cmp(left: T, right: T) -> int:
        return int(get_time(left).compare_to(get_time(right)))

    result = sorted(items, key=cmp_to_key(_cmp))
    logger.debug("Sorted %d items by time", len(result))
    return result


def earliest(instants: Iterable[TimeInstant]) -> Optional[TimeInstant]:
    """Instant с минимальным value; instant без value пропускаются"""
    concrete = [i for i in instants if i.is_set_value()]
    if not concrete:
        return None
    return min(concrete, key=lambda i: i.value)


def most_recent(instants: Iterable[TimeInstant]) -> Optional[TimeInstant]:
    """Instant с максимальным value; instant без value пропускаются"""
    concrete = [i for i in instants if i.is_set_value()]
    if not concrete:
        return None
    return max(concrete, key=lambda i: i.value)

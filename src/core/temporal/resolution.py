"""
Resolution — Разрешение indeterminate marker в конкретное время

Политика разрешения передаётся явно (dependency injection):
- now → injected clock
- first / latest → границы датасета, известные вызывающему
- остальные marker (unknown, before, after, template) → не разрешимы

Глобальные часы не читаются неявно: system_clock() нужно передать
в политику самостоятельно.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from src.core.domain.indeterminate import (
    ExtendedIndeterminateTime,
    IndeterminateMarker,
    TimeIndeterminateValue,
)
from src.core.domain.time import to_utc

logger = logging.getLogger(__name__)


def system_clock() -> datetime:
    """Текущее время процесса (UTC)"""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DatasetResolutionPolicy:
    """
    Политика разрешения marker для конкретного датасета.

    Attributes:
        clock: Источник текущего времени (для now)
        first: Самое раннее время в датасете (для first)
        latest: Самое позднее время в датасете (для latest)
    """

    clock: Callable[[], datetime]
    first: Optional[datetime] = None
    latest: Optional[datetime] = None

    def __call__(self, marker: IndeterminateMarker) -> Optional[datetime]:
        """
        Разрешение marker.

        Args:
            marker: Основной или расширенный marker

        Returns:
            Время в UTC, либо None если marker не разрешим
        """
        if marker == TimeIndeterminateValue.NOW:
            resolved = self.clock()
        elif marker in (TimeIndeterminateValue.FIRST, ExtendedIndeterminateTime.FIRST):
            resolved = self.first
        elif marker in (TimeIndeterminateValue.LATEST, ExtendedIndeterminateTime.LATEST):
            resolved = self.latest
        else:
            resolved = None

        if resolved is None:
            logger.debug("No resolution for indeterminate time %r", marker.value)
            return None

        logger.debug("Resolved indeterminate time %r to %s", marker.value, resolved)
        return to_utc(resolved)

"""
TimePosition — Структура для внешнего форматтера gml:timePosition

Модель не рендерит текст: она только переносит значение (+ precision hint)
или indeterminate marker. JSON-представление описано контрактом
contracts/schema/time_position.json.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .indeterminate import IndeterminateMarker
from .time import to_utc


class TimePosition(BaseModel):
    """
    Позиция времени для сериализации.

    requested_time_length — сколько компонентов даты запросил клиент
    (0 = полная дата-время).
    """

    value: Optional[datetime] = Field(None, description="Конкретное время (UTC)")
    indeterminate_position: Optional[IndeterminateMarker] = Field(
        None, description="Indeterminate marker (основной или расширенный)"
    )
    requested_time_length: int = Field(
        0, ge=0, description="Precision hint для форматтера"
    )

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def normalize_value(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_utc(v)

    def is_set_value(self) -> bool:
        return self.value is not None

    def is_set_indeterminate_position(self) -> bool:
        return self.indeterminate_position is not None

    def to_contract(self) -> Dict[str, Any]:
        """
        JSON-представление позиции.

        Returns:
            dict, соответствующий схеме time_position
        """
        return self.model_dump(mode="json")

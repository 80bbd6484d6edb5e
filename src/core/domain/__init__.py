"""
Domain models and value objects.

Contains GML time value objects: TimeInstant, TimePeriod, TimePosition.
"""

from src.core.domain.indeterminate import (
    ExtendedIndeterminateTime,
    IndeterminateMarker,
    TimeIndeterminateValue,
)
from src.core.domain.time import (
    ResolutionPolicy,
    Time,
    TimeOrder,
    UnresolvableMarker,
    to_utc,
)
from src.core.domain.time_instant import TimeInstant
from src.core.domain.time_period import TimePeriod
from src.core.domain.time_position import TimePosition

__all__ = [
    # Indeterminate markers
    "TimeIndeterminateValue",
    "ExtendedIndeterminateTime",
    "IndeterminateMarker",
    # Base
    "Time",
    "TimeOrder",
    "ResolutionPolicy",
    "UnresolvableMarker",
    "to_utc",
    # Models
    "TimeInstant",
    "TimePeriod",
    "TimePosition",
]

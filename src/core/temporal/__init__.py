"""
Temporal algorithms для GML времени

Слабое упорядочивание и разрешение indeterminate marker.
"""

# Ordering
from src.core.temporal.ordering import (
    compare,
    earliest,
    most_recent,
    sort_by_time,
)

# Resolution
from src.core.temporal.resolution import (
    DatasetResolutionPolicy,
    system_clock,
)

__all__ = [
    # Ordering
    "compare",
    "sort_by_time",
    "earliest",
    "most_recent",
    # Resolution
    "DatasetResolutionPolicy",
    "system_clock",
]

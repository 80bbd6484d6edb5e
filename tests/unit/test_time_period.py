"""Тесты для TimePeriod и базового Time"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from src.core.domain import Time, TimeIndeterminateValue, TimeInstant, TimePeriod


UTC = timezone.utc


class TestTimePeriod:
    """Тесты модели TimePeriod"""

    def test_bounds_normalized_to_utc(self) -> None:
        tz = timezone(timedelta(hours=-5))
        period = TimePeriod(start=datetime(2024, 1, 1, 19, 0, tzinfo=tz))
        assert period.start == datetime(2024, 1, 2, 0, 0, tzinfo=UTC)
        assert period.start.tzinfo == UTC

    def test_is_set_bounds(self) -> None:
        period = TimePeriod(start=datetime(2024, 1, 1, tzinfo=UTC))
        assert period.is_set_start()
        assert not period.is_set_end()

    def test_empty(self) -> None:
        assert TimePeriod().is_empty()
        assert not TimePeriod(end=datetime(2024, 1, 1, tzinfo=UTC)).is_empty()
        assert not TimePeriod(gml_id="tp_1").is_empty()

    def test_from_instants(self) -> None:
        start = TimeInstant.from_timestamp(datetime(2024, 1, 1, tzinfo=UTC))
        end = TimeInstant.from_timestamp(datetime(2024, 2, 1, tzinfo=UTC))
        period = TimePeriod.from_instants(start, end)
        assert period.start == start.value
        assert period.end == end.value

    def test_from_instants_marker_only_bound(self) -> None:
        """Marker-only instant даёт открытую границу"""
        start = TimeInstant.from_timestamp(datetime(2024, 1, 1, tzinfo=UTC))
        end = TimeInstant.from_indeterminate(TimeIndeterminateValue.NOW)
        period = TimePeriod.from_instants(start, end)
        assert period.is_set_start()
        assert not period.is_set_end()

    def test_frozen(self) -> None:
        period = TimePeriod()
        with pytest.raises(ValidationError):
            period.start = datetime(2024, 1, 1, tzinfo=UTC)  # type: ignore


class TestTimeBase:
    """Тесты базового Time"""

    def test_empty_without_gml_id(self) -> None:
        assert Time().is_empty()

    def test_gml_id(self) -> None:
        t = Time(gml_id="phenomenonTime")
        assert t.is_set_gml_id()
        assert not t.is_empty()

    def test_blank_gml_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Time(gml_id="")

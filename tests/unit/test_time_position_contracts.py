"""
Tests for TimePosition and JSON Schema contracts

Комплексное тестирование:
- Выбор позиции из TimeInstant (marker vs value vs расширенный marker)
- JSON представление TimePosition и TimeInstant
- Валидация против time_position.json / time_instant.json
- SchemaLoader (кэш, отсутствующие схемы)
"""

from datetime import datetime, timezone

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    SchemaLoader,
    TimeInstantValidator,
    TimePositionValidator,
    validate_time_instant,
    validate_time_position,
)
from src.core.domain import (
    ExtendedIndeterminateTime,
    TimeIndeterminateValue,
    TimeInstant,
    TimePosition,
)


UTC = timezone.utc


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def observation_time() -> datetime:
    """Время наблюдения"""
    return datetime(2024, 1, 1, 12, 30, 15, tzinfo=UTC)


@pytest.fixture
def valid_time_position():
    """Валидная time_position для тестирования."""
    return {
        "value": "2024-01-01T12:30:15Z",
        "indeterminate_position": None,
        "requested_time_length": 0,
    }


# =============================================================================
# TIME POSITION FROM INSTANT
# =============================================================================


class TestGetTimePosition:
    """Тесты TimeInstant.get_time_position()"""

    def test_value_position(self, observation_time: datetime) -> None:
        position = TimeInstant.from_timestamp(observation_time).get_time_position()
        assert position.value == observation_time
        assert not position.is_set_indeterminate_position()

    def test_requested_time_length_carried(self, observation_time: datetime) -> None:
        """Precision hint передаётся форматтеру"""
        ti = TimeInstant(value=observation_time, requested_time_length=4)
        assert ti.get_time_position().requested_time_length == 4

    def test_marker_position(self) -> None:
        position = TimeInstant.from_indeterminate(TimeIndeterminateValue.NOW).get_time_position()
        assert position.indeterminate_position == TimeIndeterminateValue.NOW
        assert not position.is_set_value()

    def test_marker_wins_over_value(self, observation_time: datetime) -> None:
        """Основной marker важнее value"""
        ti = TimeInstant.from_timestamp_with_indeterminate(
            observation_time, TimeIndeterminateValue.LATEST
        )
        position = ti.get_time_position()
        assert position.indeterminate_position == TimeIndeterminateValue.LATEST
        assert position.value is None

    def test_extended_marker_position(self) -> None:
        ti = TimeInstant.from_extended_marker(ExtendedIndeterminateTime.FIRST)
        position = ti.get_time_position()
        assert position.indeterminate_position is ExtendedIndeterminateTime.FIRST

    def test_value_wins_over_extended_marker(self, observation_time: datetime) -> None:
        ti = TimeInstant(
            value=observation_time,
            extended_indeterminate_time=ExtendedIndeterminateTime.LATEST,
        )
        position = ti.get_time_position()
        assert position.value == observation_time
        assert position.indeterminate_position is None

    def test_empty_position(self) -> None:
        position = TimeInstant().get_time_position()
        assert position == TimePosition()


# =============================================================================
# CONTRACT SERIALIZATION
# =============================================================================


class TestTimePositionContract:
    """Тесты JSON представления TimePosition"""

    def test_value_contract(self, observation_time: datetime) -> None:
        data = TimeInstant.from_timestamp(observation_time).get_time_position().to_contract()
        assert data["value"] == "2024-01-01T12:30:15Z"
        assert data["indeterminate_position"] is None
        validate_time_position(data)

    def test_marker_contract(self) -> None:
        data = TimeInstant.from_wall_clock_date(None).get_time_position().to_contract()
        assert data == {
            "value": None,
            "indeterminate_position": "unknown",
            "requested_time_length": 0,
        }
        validate_time_position(data)

    def test_extended_marker_contract(self) -> None:
        ti = TimeInstant.from_extended_marker(ExtendedIndeterminateTime.LATEST)
        data = ti.get_time_position().to_contract()
        assert data["indeterminate_position"] == "latest"
        validate_time_position(data)

    def test_valid_fixture(self, valid_time_position) -> None:
        assert TimePositionValidator().is_valid(valid_time_position)

    def test_unknown_marker_rejected(self, valid_time_position) -> None:
        valid_time_position["indeterminate_position"] = "soon"
        with pytest.raises(ValidationError):
            validate_time_position(valid_time_position)

    def test_non_utc_value_rejected(self, valid_time_position) -> None:
        valid_time_position["value"] = "2024-01-01T15:30:15+03:00"
        with pytest.raises(ValidationError):
            validate_time_position(valid_time_position)

    def test_negative_length_rejected(self, valid_time_position) -> None:
        valid_time_position["requested_time_length"] = -1
        assert not TimePositionValidator().is_valid(valid_time_position)

    def test_missing_required_field(self, valid_time_position) -> None:
        del valid_time_position["requested_time_length"]
        with pytest.raises(ValidationError, match="requested_time_length"):
            validate_time_position(valid_time_position)

    def test_iter_errors(self) -> None:
        """Все ошибки собираются за один проход"""
        data = {"value": 42, "indeterminate_position": "soon", "requested_time_length": -1}
        errors = list(TimePositionValidator().iter_errors(data))
        assert len(errors) == 3


class TestTimeInstantContract:
    """Тесты JSON представления TimeInstant"""

    def test_full_instant_dump(self, observation_time: datetime) -> None:
        ti = TimeInstant(
            gml_id="phenomenonTime_1",
            value=observation_time,
            indeterminate_value=TimeIndeterminateValue.LATEST,
            extended_indeterminate_time=ExtendedIndeterminateTime.LATEST,
            requested_time_length=2,
        )
        data = ti.model_dump(mode="json")
        assert data["value"] == "2024-01-01T12:30:15Z"
        assert data["indeterminate_value"] == "latest"
        validate_time_instant(data)

    def test_empty_instant_dump(self) -> None:
        validate_time_instant(TimeInstant().model_dump(mode="json"))

    def test_dump_roundtrip_equal(self, observation_time: datetime) -> None:
        """JSON dump → model_validate даёт равный instant"""
        ti = TimeInstant.from_timestamp(observation_time)
        assert TimeInstant.model_validate(ti.model_dump(mode="json")) == ti

    def test_extended_marker_rejects_primary_only_values(self, observation_time: datetime) -> None:
        data = TimeInstant.from_timestamp(observation_time).model_dump(mode="json")
        data["extended_indeterminate_time"] = "now"
        assert not TimeInstantValidator().is_valid(data)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("time_position") is loader.load_schema("time_position")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("observation")

    @pytest.mark.parametrize("name", ["time_position", "time_instant"])
    def test_schemas_declare_draft_2020_12(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert schema["additionalProperties"] is False

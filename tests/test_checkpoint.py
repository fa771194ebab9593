"""Tests for Checkpoint and MeasurementAggregate."""
from __future__ import annotations

import dataclasses

import pytest

from speedo.domain.checkpoint import Checkpoint, MeasurementAggregate


class TestCheckpoint:
    def test_fields(self) -> None:
        cp = Checkpoint("src/a.cpp", 10)
        assert cp.file == "src/a.cpp"
        assert cp.line == 10

    def test_frozen(self) -> None:
        cp = Checkpoint("src/a.cpp", 10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cp.line = 11  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Checkpoint("a.cpp", 1) == Checkpoint("a.cpp", 1)
        assert Checkpoint("a.cpp", 1) != Checkpoint("a.cpp", 2)


class TestFromDurations:
    def test_folds_samples(self) -> None:
        agg = MeasurementAggregate.from_durations(
            Checkpoint("a.cpp", 1), Checkpoint("a.cpp", 9), [1000, 2000, 3000]
        )
        assert agg.count == 3
        assert agg.overall_duration == 6000
        assert agg.average_duration == 2000

    def test_average_is_floored(self) -> None:
        agg = MeasurementAggregate.from_durations(
            Checkpoint("a.cpp", 1), Checkpoint("a.cpp", 9), [1, 2]
        )
        assert agg.average_duration == 1

    def test_accepts_generator(self) -> None:
        agg = MeasurementAggregate.from_durations(
            Checkpoint("a.cpp", 1), Checkpoint("a.cpp", 9), (d for d in [5, 5])
        )
        assert agg.count == 2
        assert agg.overall_duration == 10

    def test_no_samples(self) -> None:
        agg = MeasurementAggregate.from_durations(
            Checkpoint("a.cpp", 1), Checkpoint("a.cpp", 9), []
        )
        assert agg.count == 0
        assert agg.average_duration == 0
        assert agg.overall_duration == 0


class TestFromDict:
    def _data(self) -> dict:
        return {
            "start": {"file": "src/a.cpp", "line": 10},
            "end": {"file": "src/b.cpp", "line": 20},
            "count": 2,
            "average_duration": 1500,
            "overall_duration": 3000,
        }

    def test_valid(self) -> None:
        agg = MeasurementAggregate.from_dict(self._data())
        assert agg == MeasurementAggregate(
            start=Checkpoint("src/a.cpp", 10),
            end=Checkpoint("src/b.cpp", 20),
            count=2,
            average_duration=1500,
            overall_duration=3000,
        )

    @pytest.mark.parametrize(
        "key", ["start", "end", "count", "average_duration", "overall_duration"]
    )
    def test_missing_key(self, key: str) -> None:
        data = self._data()
        del data[key]
        with pytest.raises(ValueError, match=key):
            MeasurementAggregate.from_dict(data)

    def test_missing_checkpoint_line(self) -> None:
        data = self._data()
        del data["start"]["line"]
        with pytest.raises(ValueError, match="line"):
            MeasurementAggregate.from_dict(data)

    def test_non_integer_count(self) -> None:
        data = self._data()
        data["count"] = "2"
        with pytest.raises(ValueError, match="count"):
            MeasurementAggregate.from_dict(data)

    def test_bool_is_not_an_integer(self) -> None:
        data = self._data()
        data["end"]["line"] = True
        with pytest.raises(ValueError, match="line"):
            MeasurementAggregate.from_dict(data)

    def test_checkpoint_must_be_object(self) -> None:
        data = self._data()
        data["start"] = "src/a.cpp:10"
        with pytest.raises(ValueError, match="start"):
            MeasurementAggregate.from_dict(data)

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ValueError, match="expected an object"):
            MeasurementAggregate.from_dict([1, 2, 3])  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [None, 123, ["src/a.cpp"]])
    def test_file_must_be_a_string(self, value: object) -> None:
        data = self._data()
        data["start"]["file"] = value
        with pytest.raises(ValueError, match="'file' must be a string"):
            MeasurementAggregate.from_dict(data)

    @pytest.mark.parametrize("line", [0, -5])
    def test_line_must_be_positive(self, line: int) -> None:
        data = self._data()
        data["end"]["line"] = line
        with pytest.raises(ValueError, match="'line' must be positive"):
            MeasurementAggregate.from_dict(data)

    def test_first_line_is_accepted(self) -> None:
        data = self._data()
        data["start"]["line"] = 1
        assert MeasurementAggregate.from_dict(data).start.line == 1

"""Checkpoint and MeasurementAggregate -- the read-only input of a report.

A checkpoint is a source location in an instrumented program. An
aggregate summarizes every measurement taken between the same pair of
checkpoints: how many samples were folded in, their mean duration and
their total duration, all in whole microseconds.

Aggregates are produced by the timing side of the program and handed to
the report renderer as-is. They are frozen so the renderer cannot change
them; the invariants (overall == average * count, count >= 1) are the
producer's responsibility and are not checked here.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from speedo.domain.types import Microseconds, SourceLine


@dataclass(frozen=True, slots=True)
class Checkpoint:
    """A named source location: file path plus line number."""
    file: str
    line: SourceLine

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Checkpoint:
        """Build a checkpoint from {"file": ..., "line": ...}.

        Line numbers are 1-based; anything below 1 raises ValueError.
        """
        line = _require_int(data, "line")
        if line < 1:
            raise ValueError(f"'line' must be positive, got {line!r}")
        return cls(file=_require_str(data, "file"), line=line)


@dataclass(frozen=True, slots=True)
class MeasurementAggregate:
    """Statistics of all measurements between two checkpoints."""
    start: Checkpoint
    end: Checkpoint
    count: int
    average_duration: Microseconds
    overall_duration: Microseconds

    @classmethod
    def from_durations(
        cls,
        start: Checkpoint,
        end: Checkpoint,
        durations: Iterable[Microseconds],
    ) -> MeasurementAggregate:
        """Fold raw samples into an aggregate.

        The average is the integer mean (floor division), 0 when no
        samples were given.
        """
        samples = list(durations)
        overall = sum(samples)
        average = overall // len(samples) if samples else 0
        return cls(
            start=start,
            end=end,
            count=len(samples),
            average_duration=average,
            overall_duration=overall,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MeasurementAggregate:
        """Build an aggregate from a plain mapping (e.g. parsed JSON).

        Raises ValueError naming the offending key when a field is
        missing or is not an integer.
        """
        return cls(
            start=Checkpoint.from_dict(_require_mapping(data, "start")),
            end=Checkpoint.from_dict(_require_mapping(data, "end")),
            count=_require_int(data, "count"),
            average_duration=_require_int(data, "average_duration"),
            overall_duration=_require_int(data, "overall_duration"),
        )


def _require(data: Mapping[str, Any], key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {data!r}")
    if key not in data:
        raise ValueError(f"missing key {key!r}")
    return data[key]


def _require_int(data: Mapping[str, Any], key: str) -> int:
    value = _require(data, key)
    # bool is an int subclass, but True is not a line number
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key!r} must be an integer, got {value!r}")
    return value


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string, got {value!r}")
    return value


def _require_mapping(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = _require(data, key)
    if not isinstance(value, Mapping):
        raise ValueError(f"{key!r} must be an object, got {value!r}")
    return value

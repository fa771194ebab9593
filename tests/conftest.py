"""Shared test fixtures for the report tests."""
from __future__ import annotations

import io

import pytest

from speedo.domain.checkpoint import Checkpoint, MeasurementAggregate
from speedo.report.renderer import ReportRenderer


def make_aggregate(
    start_file: str = "src/a.cpp",
    start_line: int = 10,
    end_file: str = "src/a.cpp",
    end_line: int = 20,
    count: int = 2,
    average: int = 1500,
    overall: int | None = None,
) -> MeasurementAggregate:
    """Build an aggregate with overall = average * count unless given."""
    return MeasurementAggregate(
        start=Checkpoint(start_file, start_line),
        end=Checkpoint(end_file, end_line),
        count=count,
        average_duration=average,
        overall_duration=average * count if overall is None else overall,
    )


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def renderer(sink: io.StringIO) -> ReportRenderer:
    return ReportRenderer(sink=sink)

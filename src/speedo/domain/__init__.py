"""Domain model for speedo.

Re-exports all public types for convenient access:
    from speedo.domain import Checkpoint, MeasurementAggregate
"""
from speedo.domain.checkpoint import Checkpoint, MeasurementAggregate
from speedo.domain.types import Microseconds, SourceLine

__all__ = [
    "Checkpoint",
    "MeasurementAggregate",
    "Microseconds",
    "SourceLine",
]

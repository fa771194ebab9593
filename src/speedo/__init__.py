"""speedo -- fixed-width performance reports for checkpoint timings.

    from speedo import Checkpoint, MeasurementAggregate, ReportRenderer
"""
from speedo.domain import Checkpoint, MeasurementAggregate
from speedo.report import LogArchiver, ReportLayout, ReportRenderer

__all__ = [
    "Checkpoint",
    "LogArchiver",
    "MeasurementAggregate",
    "ReportLayout",
    "ReportRenderer",
]

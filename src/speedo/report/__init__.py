"""Report rendering for speedo aggregates."""

from speedo.report.archive import LogArchiver, default_log_dir
from speedo.report.formatting import Align, crop_path, insert_separators, pad_field
from speedo.report.layout import Column, ReportLayout
from speedo.report.renderer import ReportRenderer

__all__ = [
    "Align",
    "Column",
    "LogArchiver",
    "ReportLayout",
    "ReportRenderer",
    "crop_path",
    "default_log_dir",
    "insert_separators",
    "pad_field",
]

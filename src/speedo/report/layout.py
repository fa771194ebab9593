"""Fixed-width layout of the profiling report.

The report is 80 columns wide with five columns separated by '|':

    File                          | Line |    Count |  Average [us] |   Overall [us]

Widths and labels live here so the renderer only composes fields.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from speedo.report.formatting import Align, pad_field


@dataclass(frozen=True, slots=True)
class Column:
    """One report column: header label, minimum width, alignment."""
    label: str
    width: int
    align: Align

    def fit(self, text: str) -> str:
        return pad_field(text, self.width, self.align)


def _default_columns() -> tuple[Column, ...]:
    return (
        Column("File", 30, Align.LEFT),
        Column("Line ", 6, Align.RIGHT),
        Column("Count ", 10, Align.RIGHT),
        Column("Average [us] ", 15, Align.RIGHT),
        Column("Overall [us]", 15, Align.RIGHT),
    )


@dataclass(frozen=True, slots=True)
class ReportLayout:
    """Line width, columns, title and fill characters of a report.

    The column order is fixed: file, line, count, average, overall.
    """
    line_width: int = 80
    columns: tuple[Column, ...] = field(default_factory=_default_columns)
    title: str = " PROFILING WITH SPEEDO "
    column_separator: str = "|"
    banner_fill: str = "#"
    header_fill: str = "="
    row_fill: str = "-"
    last_row_fill: str = "#"

    @property
    def file_column(self) -> Column:
        return self.columns[0]

    @property
    def line_column(self) -> Column:
        return self.columns[1]

    @property
    def count_column(self) -> Column:
        return self.columns[2]

    @property
    def average_column(self) -> Column:
        return self.columns[3]

    @property
    def overall_column(self) -> Column:
        return self.columns[4]

    def hline(self, fill: str) -> str:
        """A full-width horizontal line of the given character."""
        return fill * self.line_width

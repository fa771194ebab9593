"""ReportRenderer -- turns measurement aggregates into the profiling report.

Output for one aggregate measured between src/a.cpp:10 and src/a.cpp:20:

    ################################################################################
    ############################ PROFILING WITH SPEEDO #############################
    ################################################################################
    File                          | Line |    Count |  Average [us] |   Overall [us]
    ================================================================================
    a.cpp                         |    10|          |               |
                                  |    20|         2|          1,500|          3,000
    ################################################################################

Each aggregate takes two rows: where the measurement started, then
where it ended together with its statistics. The end file is left
blank when it is the same file as the start. Aggregates are separated
by '-' lines; the last one closes the report with '#'.

The renderer only reads the aggregates it was given. Rendering the same
sequence twice yields the same text.
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from speedo.domain.checkpoint import MeasurementAggregate
from speedo.report.formatting import crop_path, insert_separators
from speedo.report.layout import ReportLayout

if TYPE_CHECKING:
    from speedo.report.archive import LogArchiver

log = logging.getLogger(__name__)


class ReportRenderer:
    """Collects aggregates in insertion order and renders them as a table.

    Args:
        sink: text stream the report is written to (default: sys.stderr,
            looked up at render time)
        layout: column widths, title and fill characters
        archiver: optional collaborator that persists each rendered report

    Not thread-safe: callers populating it from several threads must
    serialize add() themselves and must not render while adding.
    """

    def __init__(
        self,
        sink: TextIO | None = None,
        layout: ReportLayout | None = None,
        archiver: LogArchiver | None = None,
    ) -> None:
        self._sink = sink
        self._layout = layout or ReportLayout()
        self._archiver = archiver
        self._aggregates: list[MeasurementAggregate] = []

    def add(self, aggregate: MeasurementAggregate) -> None:
        """Append an aggregate. Duplicates are kept as separate entries."""
        self._aggregates.append(aggregate)

    def __len__(self) -> int:
        return len(self._aggregates)

    @property
    def aggregates(self) -> tuple[MeasurementAggregate, ...]:
        return tuple(self._aggregates)

    @property
    def layout(self) -> ReportLayout:
        return self._layout

    def render(self) -> None:
        """Write the report to the sink, then hand it to the archiver if any."""
        text = self.format_report()
        log.debug("Rendering report with %d aggregates", len(self._aggregates))
        sink = self._sink if self._sink is not None else sys.stderr
        sink.write(text)
        sink.flush()
        if self._archiver is not None:
            self._archiver.save(text)

    def format_report(self) -> str:
        """Return the full report text, one '\\n'-terminated line per row."""
        lines = self._title_lines()
        lines.extend(self._header_lines())

        last = len(self._aggregates) - 1
        for i, aggregate in enumerate(self._aggregates):
            lines.extend(self._aggregate_lines(aggregate))
            fill = self._layout.row_fill if i < last else self._layout.last_row_fill
            lines.append(self._layout.hline(fill))

        return "".join(line + "\n" for line in lines)

    def _title_lines(self) -> list[str]:
        layout = self._layout
        fill = layout.banner_fill
        title = layout.title
        pad = fill * ((layout.line_width - len(title)) // 2)
        # odd title length leaves one column over on an even line width
        parity = fill if len(title) % 2 else ""
        return [
            layout.hline(fill),
            pad + title + parity + pad,
            layout.hline(fill),
        ]

    def _header_lines(self) -> list[str]:
        layout = self._layout
        header = layout.column_separator.join(
            column.fit(column.label) for column in layout.columns
        )
        return [header, layout.hline(layout.header_fill)]

    def _aggregate_lines(self, aggregate: MeasurementAggregate) -> list[str]:
        layout = self._layout
        sep = layout.column_separator

        file_start = crop_path(aggregate.start.file)
        start_row = (
            layout.file_column.fit(file_start) + sep
            + layout.line_column.fit(str(aggregate.start.line)) + sep
            + layout.count_column.fit(" ") + sep
            + layout.average_column.fit(" ") + sep
        )

        file_end = crop_path(aggregate.end.file)
        if file_end == file_start:
            file_end = ""
        end_row = (
            layout.file_column.fit(file_end) + sep
            + layout.line_column.fit(str(aggregate.end.line)) + sep
            + layout.count_column.fit(str(aggregate.count)) + sep
            + layout.average_column.fit(insert_separators(aggregate.average_duration)) + sep
            + layout.overall_column.fit(insert_separators(aggregate.overall_duration))
        )

        return [start_row, end_row]

"""Template Method pattern: report exporters.

`ReportExporter.export` fixes the order of the steps; subclasses only fill in
how each step looks.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping, Sequence

Row = Mapping[str, object]


class ReportExporter(abc.ABC):
    """Fixed export algorithm with overridable steps.

    `export` always emits the header, one line per row, then an optional
    footer. Subclasses fill in `header` and `row`, and may override `footer`.
    """

    def export(self, rows: Sequence[Row]) -> str:
        """Run the export. Subclasses override the steps, never this method."""
        columns = list(rows[0]) if rows else []
        lines = [*self.header(columns)]
        lines.extend(self.row(columns, row) for row in rows)
        if (footer := self.footer(rows)) is not None:
            lines.append(footer)
        return "\n".join(lines)

    @abc.abstractmethod
    def header(self, columns: list[str]) -> list[str]: ...

    @abc.abstractmethod
    def row(self, columns: list[str], row: Row) -> str: ...

    def footer(self, rows: Sequence[Row]) -> str | None:
        """Optional hook; no footer by default."""
        return None


class CsvExporter(ReportExporter):
    def header(self, columns: list[str]) -> list[str]:
        return [",".join(columns)]

    def row(self, columns: list[str], row: Row) -> str:
        return ",".join(str(row[c]) for c in columns)


class MarkdownExporter(ReportExporter):
    """GitHub-style table followed by a row count."""

    def header(self, columns: list[str]) -> list[str]:
        return [
            "| " + " | ".join(columns) + " |",
            "|" + "|".join("---" for _ in columns) + "|",
        ]

    def row(self, columns: list[str], row: Row) -> str:
        return "| " + " | ".join(str(row[c]) for c in columns) + " |"

    def footer(self, rows: Sequence[Row]) -> str | None:
        return f"\n_{len(rows)} rows_"


def demo() -> list[str]:
    """Export the same rows as CSV and as a Markdown table."""
    rows = [{"pattern": "Composite", "posts": 1}, {"pattern": "Visitor", "posts": 1}]
    lines: list[str] = []
    for exporter in (CsvExporter(), MarkdownExporter()):
        lines.extend(exporter.export(rows).splitlines())
    return lines

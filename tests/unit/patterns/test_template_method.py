"""Unit tests for the Template Method example."""

from patternbook.patterns.template_method import CsvExporter, MarkdownExporter

ROWS = [{"name": "a", "n": 1}, {"name": "b", "n": 2}]


def test_csv_export():
    assert CsvExporter().export(ROWS) == "name,n\na,1\nb,2"


def test_markdown_export_has_footer():
    assert MarkdownExporter().export(ROWS).splitlines() == [
        "| name | n |",
        "|---|---|",
        "| a | 1 |",
        "| b | 2 |",
        "",
        "_2 rows_",
    ]


def test_export_with_no_rows():
    """The steps still run in order when there is nothing to export."""
    assert CsvExporter().export([]) == ""
    assert MarkdownExporter().export([]).endswith("_0 rows_")

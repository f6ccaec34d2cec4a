"""Unit tests for core/render/tables.py"""

from bs4 import BeautifulSoup

from nbmd.core.models import ParseOptions, RenderContext
from nbmd.core.render.tables import parse_alignments, render_tables, split_row


TABLE_MD = "| A | B |\n| :--- | ---: |\n| 1 | 2 |"


def _table(text: str, ctx):
    return BeautifulSoup(render_tables(text, ctx).text, "html.parser").find("table")


def test_split_row_outer_pipes_optional():
    """Outer pipes are dropped; inner empty cells are kept."""
    assert split_row("| a |  | c |") == ["a", "", "c"]
    assert split_row("a | b") == ["a", "b"]


def test_split_row_escaped_pipe():
    """An escaped pipe stays inside its cell."""
    assert split_row(r"| a \| b | c |") == ["a | b", "c"]


def test_parse_alignments():
    """Colons on the separator cells set left/center/right."""
    assert parse_alignments("| :--- | :---: | ---: | --- |") == ["left", "center", "right", "left"]


def test_parse_alignments_rejects_non_separator():
    """Rows that are not all dashes and colons are not separators."""
    assert parse_alignments("| a | b |") is None
    assert parse_alignments("|   |   |") is None


def test_alignment_classes(raw_ctx):
    """Right-aligned cells carry an align class, default-left cells do not."""
    table = _table(TABLE_MD, raw_ctx)
    first, second = table.find("tbody").find_all("td")
    assert first["class"] == ["nb-md-table-cell"]
    assert "nb-md-align-right" in second["class"]
    headers = table.find("thead").find_all("th")
    assert [th.get_text() for th in headers] == ["A", "B"]
    assert "nb-md-align-right" in headers[1]["class"]


def test_center_alignment(raw_ctx):
    """':---:' produces the center class."""
    table = _table("| A |\n| :---: |\n| x |", raw_ctx)
    assert "nb-md-align-center" in table.find("td")["class"]


def test_body_rows_until_line_without_pipe(raw_ctx):
    """Body rows continue until the first line without '|'."""
    result = render_tables(TABLE_MD + "\n| 3 | 4 |\nafter", raw_ctx).text
    soup = BeautifulSoup(result, "html.parser")
    assert len(soup.find("tbody").find_all("tr")) == 2
    assert result.rstrip().endswith("after")


def test_mismatched_column_counts(raw_ctx):
    """Rows with fewer or more cells than the header render as-is."""
    table = _table("| A | B |\n| --- | --- |\n| 1 |\n| 1 | 2 | 3 |", raw_ctx)
    rows = table.find("tbody").find_all("tr")
    assert [len(r.find_all("td")) for r in rows] == [1, 3]


def test_header_without_separator_is_not_a_table(raw_ctx):
    """A pipe line not followed by a separator row is left alone."""
    text = "| A | B |\n| 1 | 2 |"
    assert render_tables(text, raw_ctx).text == text


def test_gfm_disabled_is_noop():
    """With gfm off the stage returns its input unchanged."""
    ctx = RenderContext(ParseOptions(gfm=False))
    assert render_tables(TABLE_MD, ctx).text == TABLE_MD

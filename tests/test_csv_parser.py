"""
Tests for processing/csv_parser.py

Covers: plain rows, quoted fields with commas/newlines, doubled-quote
escaping, CRLF / LF terminators, trailing row without newline, blank-row
dropping (first row always kept), and permissive handling of bad quoting.
"""

import pytest

from processing.csv_parser import parse_csv


# ═══════════════════════════════════════════════════════════════════════════
# Plain rows
# ═══════════════════════════════════════════════════════════════════════════

class TestPlainRows:
    """Unquoted cells and row splitting."""

    @pytest.mark.parametrize("cells", [
        ["a", "b", "c"],
        ["Brand Name", "Slug", "Region"],
        ["single"],
        ["x y", " padded ", "123"],
    ])
    def test_join_then_parse_returns_cells(self, cells):
        assert parse_csv(",".join(cells)) == [cells]

    def test_multiple_rows(self):
        rows = parse_csv("a,b\nc,d\n")
        assert rows == [["a", "b"], ["c", "d"]]

    def test_cells_not_trimmed(self):
        assert parse_csv(" a , b ") == [[" a ", " b "]]

    def test_empty_cells_kept_in_row(self):
        assert parse_csv("a,,c") == [["a", "", "c"]]


# ═══════════════════════════════════════════════════════════════════════════
# Quoting
# ═══════════════════════════════════════════════════════════════════════════

class TestQuoting:
    """Double-quoted fields, including malformed quoting."""

    def test_comma_inside_quotes(self):
        assert parse_csv('a,"b,c",d') == [["a", "b,c", "d"]]

    def test_doubled_quote_escape(self):
        assert parse_csv('"He said ""hi"""') == [['He said "hi"']]

    def test_newline_inside_quotes(self):
        rows = parse_csv('Name,Activity\nAcme,"Running\nYoga"\n')
        assert rows == [["Name", "Activity"], ["Acme", "Running\nYoga"]]

    def test_crlf_inside_quotes_preserved(self):
        rows = parse_csv('"line1\r\nline2",x')
        assert rows == [["line1\r\nline2", "x"]]

    def test_empty_quoted_field(self):
        assert parse_csv('a,"",c') == [["a", "", "c"]]

    def test_unterminated_quote_does_not_raise(self):
        """An open quote runs to the end of the text."""
        rows = parse_csv('a,"b,c\nd')
        assert rows == [["a", "b,c\nd"]]

    def test_stray_quote_mid_field(self):
        """Quotes inside an unquoted field toggle quoting and are not kept."""
        assert parse_csv('ab"c"d,e') == [["abcd", "e"]]


# ═══════════════════════════════════════════════════════════════════════════
# Line endings
# ═══════════════════════════════════════════════════════════════════════════

class TestLineEndings:
    """LF, CRLF and a lone CR all end a row."""

    def test_crlf(self):
        assert parse_csv("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]

    def test_lone_cr(self):
        assert parse_csv("a\rb") == [["a"], ["b"]]

    def test_mixed_terminators(self):
        assert parse_csv("a\r\nb\nc") == [["a"], ["b"], ["c"]]

    def test_trailing_row_without_newline(self):
        assert parse_csv("a,b\nc,d") == [["a", "b"], ["c", "d"]]


# ═══════════════════════════════════════════════════════════════════════════
# Blank rows
# ═══════════════════════════════════════════════════════════════════════════

class TestBlankRows:
    """All-blank rows are dropped, except the first row."""

    def test_blank_rows_dropped(self):
        rows = parse_csv("a,b\n,\n\n  ,  \nc,d\n")
        assert rows == [["a", "b"], ["c", "d"]]

    def test_first_row_kept_even_if_blank(self):
        """Row 0 survives so header detection can skip it itself."""
        rows = parse_csv(",\n,\nBrand Name,Slug\n")
        assert rows == [["", ""], ["Brand Name", "Slug"]]

    def test_empty_text_yields_single_blank_row(self):
        assert parse_csv("") == [[""]]

    def test_trailing_newline_does_not_add_row(self):
        assert parse_csv("a\n") == [["a"]]

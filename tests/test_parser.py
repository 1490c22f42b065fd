"""Tests for csv_insight.parser."""

import pytest

from csv_insight.errors import EmptyDataset, MalformedRow
from csv_insight.parser import parse_cell, parse_csv, parse_number, strip_quotes


class TestCells:
    def test_numbers(self):
        assert parse_cell("30") == 30
        assert isinstance(parse_cell("30"), int)
        assert parse_cell("2.5") == 2.5
        assert parse_cell("-1e3") == -1000.0
        assert parse_cell(".5") == 0.5
        assert parse_cell(" 7 ") == 7

    def test_quoted_number(self):
        assert parse_cell('"42"') == 42

    def test_not_numbers(self):
        # no prefix parsing, no special float spellings
        assert parse_cell("12abc") == "12abc"
        assert parse_cell("inf") == "inf"
        assert parse_cell("NaN") == "NaN"
        assert parse_cell("1_000") == "1_000"
        assert parse_cell("2024-01-15") == "2024-01-15"

    def test_overflow_is_not_finite(self):
        assert parse_number("1e999") is None
        assert parse_cell("1e999") == "1e999"

    @pytest.mark.parametrize("digits", [400, 5000])
    def test_huge_integer_stays_text(self, digits):
        big = "9" * digits
        assert parse_number(big) is None
        assert parse_cell(big) == big

    def test_large_finite_integer_stays_int(self):
        big = "9" * 300
        assert parse_cell(big) == int(big)

    def test_empty_is_null(self):
        assert parse_cell("") is None
        assert parse_cell("   ") is None
        assert parse_cell('""') is None

    def test_strip_single_quote_layer(self):
        assert strip_quotes('  "Name"  ') == "Name"
        assert strip_quotes('""x""') == '"x"'


class TestParseCsv:
    def test_basic(self):
        ds = parse_csv("Name,Age\nAlice,30\nBob,\nCara,25")
        assert ds.headers == ("Name", "Age")
        assert len(ds) == 3
        assert ds.records[0] == {"Name": "Alice", "Age": 30}
        assert ds.records[1] == {"Name": "Bob", "Age": None}
        assert ds.column("Age") == [30, None, 25]
        assert ds.malformed_rows == ()

    def test_quoted_headers(self):
        ds = parse_csv('"Name", "Age"\nAlice,30')
        assert ds.headers == ("Name", "Age")

    def test_crlf(self):
        ds = parse_csv("a,b\r\n1,2\r\n3,4\r\n")
        assert ds.records == ({"a": 1, "b": 2}, {"a": 3, "b": 4})

    def test_short_row_null_filled(self):
        ds = parse_csv("a,b,c\n1,2,3\n4\n")
        assert ds.records[1] == {"a": 4, "b": None, "c": None}
        assert len(ds.malformed_rows) == 1
        bad = ds.malformed_rows[0]
        assert (bad.line_number, bad.expected, bad.actual) == (3, 3, 1)

    def test_long_row_extras_ignored(self):
        ds = parse_csv("a,b\n1,2,3,4\n5,6")
        assert ds.records[0] == {"a": 1, "b": 2}
        assert [m.line_number for m in ds.malformed_rows] == [2]

    def test_strict_raises(self):
        with pytest.raises(MalformedRow) as exc:
            parse_csv("a,b\n1,2\n3\n", strict=True)
        assert exc.value.line_number == 3
        assert "missing" in str(exc.value)

    def test_embedded_comma_not_supported(self):
        # quoted commas still split; the row is just wider than the header
        ds = parse_csv('name,city\n"Smith, J",Paris')
        assert ds.records[0] == {"name": "Smith", "city": "J"}
        assert len(ds.malformed_rows) == 1

    def test_duplicate_headers_renamed(self):
        ds = parse_csv("a,a,\n1,2,3")
        assert ds.headers == ("a", "a__2", "col")
        assert len(ds.header_repairs) == 2

    @pytest.mark.parametrize("text", ["", "   \n  ", "Name,Age", "Name,Age\n", "Name,Age\n\n\n"])
    def test_empty_raises(self, text):
        with pytest.raises(EmptyDataset):
            parse_csv(text)

    def test_to_frame(self):
        df = parse_csv("Name,Age\nAlice,30\nBob,\nCara,25").to_frame()
        assert list(df.columns) == ["Name", "Age"]
        assert df.shape == (3, 2)
        assert df["Age"].isna().tolist() == [False, True, False]
        assert df.loc[0, "Age"] == 30

    def test_unknown_column(self, sales_dataset):
        with pytest.raises(KeyError):
            sales_dataset.column("nope")

"""Tests for csv_insight.report (end-to-end analysis of CSV text)."""

import json

import pytest

from csv_insight import EmptyDataset, analyze_csv, build_report
from csv_insight.constants import CATEGORICAL, DATETIME, NUMERIC, TEXT
from csv_insight.parser import Dataset, parse_csv


class TestAnalyzeCsv:
    def test_name_age_example(self):
        rep = analyze_csv("Name,Age\nAlice,30\nBob,\nCara,25")
        assert rep.row_count == 3
        assert rep.column_count == 2
        assert rep.column("Name").type == TEXT
        age = rep.column("Age")
        assert age.type == NUMERIC
        assert age.stats.null_count == 1
        assert age.stats.count == 2
        assert age.stats.mean == 27.5
        assert age.stats.min == 25
        assert age.stats.max == 30
        assert age.stats.median == 30
        assert rep.numeric_columns == ("Age",)
        assert rep.categorical_columns == ()
        assert rep.correlations == {}
        assert len(rep.missing_data) == 1
        miss = rep.missing_data[0]
        assert (miss.column, miss.missing, miss.percentage) == ("Age", 1, 33.33)

    def test_header_only_raises(self):
        with pytest.raises(EmptyDataset):
            analyze_csv("Name,Age\n")

    def test_build_report_checks_rows_first(self):
        with pytest.raises(EmptyDataset):
            build_report(Dataset(("a", "b"), ()))

    def test_counts_match_dataset(self, sales_dataset):
        rep = build_report(sales_dataset)
        assert rep.row_count == len(sales_dataset.records) == 30
        assert rep.column_count == len(sales_dataset.headers) == 6

    def test_column_types_and_lists(self, sales_csv):
        rep = analyze_csv(sales_csv)
        assert [c.type for c in rep.columns] == [NUMERIC, NUMERIC, NUMERIC, CATEGORICAL, TEXT, DATETIME]
        assert rep.numeric_columns == ("id", "units", "revenue")
        assert rep.categorical_columns == ("region",)
        assert rep.category_distributions == {"region": {"North": 20, "South": 10}}
        assert len(rep.correlations) == 3

    def test_numeric_without_nulls(self, sales_csv):
        rep = analyze_csv(sales_csv)
        for name in rep.numeric_columns:
            st = rep.column(name).stats
            assert st.count == rep.row_count
            assert st.null_count == 0
        assert rep.missing_data == ()

    def test_missing_percentage(self):
        rep = analyze_csv("a,b,c\n1,,x\n2,,y\n3,5,\n4,6,z\n5,7,w\n6,8,v")
        got = {m.column: (m.missing, m.percentage) for m in rep.missing_data}
        assert got == {"b": (2, round(2 / 6 * 100, 2)), "c": (1, round(1 / 6 * 100, 2))}
        assert "a" not in got

    def test_previews(self):
        text = "n\n" + "\n".join(str(i) for i in range(1, 26))
        rep = analyze_csv(text)
        assert [r["n"] for r in rep.top_records] == list(range(1, 11))
        assert [r["n"] for r in rep.bottom_records] == list(range(16, 26))

    def test_short_previews(self):
        rep = analyze_csv("n\n1\n2\n3")
        assert rep.top_records == rep.bottom_records
        assert len(rep.top_records) == 3

    def test_previews_are_copies(self):
        ds = parse_csv("n,s\n1,a\n2,b")
        rep = build_report(ds)
        rep.top_records[0]["n"] = 99
        rep.bottom_records[-1]["s"] = "z"
        assert ds.records[0] == {"n": 1, "s": "a"}
        assert ds.records[1] == {"n": 2, "s": "b"}

    def test_overlong_integer_cell(self):
        rows = "\n".join(f"{i},{i + 4}" for i in range(2, 7))
        rep = analyze_csv("a,b\n1," + "9" * 400 + "\n" + rows)
        b = rep.column("b")
        assert b.type == NUMERIC
        assert b.stats.count == 6
        assert (b.stats.min, b.stats.max) == (6, 10)
        assert rep.correlations[("a", "b")] == pytest.approx(1.0)

    def test_integer_past_conversion_limit(self):
        rep = analyze_csv("a\n" + "1" * 5000 + "\n2")
        assert rep.column("a").type == TEXT
        assert rep.column("a").stats.count == 2

    def test_sample_values(self):
        rep = analyze_csv("n\n" + "\n".join(str(i) for i in range(8)))
        assert rep.column("n").sample_values == (0, 1, 2, 3, 4)

    def test_malformed_rows_surface(self):
        rep = analyze_csv("a,b\n1,2\n3\n4,5,6")
        assert [m["line"] for m in rep.malformed_rows] == [3, 4]
        assert rep.column("b").stats.null_count == 1


class TestSerialization:
    def test_to_dict_is_json_safe(self, sales_csv):
        d = analyze_csv(sales_csv).to_dict()
        text = json.dumps(d)
        back = json.loads(text)
        assert back["row_count"] == 30
        assert back["correlations"]["id"]["units"] == pytest.approx(1.0)
        assert set(back["correlations"]) == {"id", "units"}
        assert back["numeric_summary"]["revenue"]["max"] == 60
        assert back["category_distributions"]["region"] == {"North": 20, "South": 10}
        assert len(back["top_records"]) == 10

    def test_numeric_fields_only_on_numeric_columns(self, sales_csv):
        d = analyze_csv(sales_csv).to_dict()
        cols = {c["name"]: c for c in d["columns"]}
        assert "mean" in cols["revenue"]["stats"]
        assert "mean" not in cols["region"]["stats"]

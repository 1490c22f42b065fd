"""Shared pytest fixtures for all tests."""

import pytest

from csv_insight.parser import parse_csv


def _sales_csv(n: int = 30) -> str:
    lines = ["id,units,revenue,region,note,shipped"]
    for i in range(1, n + 1):
        region = "North" if i % 3 else "South"
        shipped = f"2024-01-{(i % 28) + 1:02d}"
        lines.append(f"{i},{i},{2 * i},{region},order {i},{shipped}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def sales_csv() -> str:
    """30 rows: three numeric, one categorical, one text, one date column."""
    return _sales_csv()


@pytest.fixture
def sales_dataset(sales_csv):
    return parse_csv(sales_csv)


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temp file and return its path as a string."""
    def _write(text: str, name: str = "upload.csv") -> str:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return str(p)
    return _write

"""Comma-delimited CSV parsing into typed records.

Deliberately simple: every line is split on ``,`` with no quote awareness, so
embedded commas, embedded newlines and escaped quotes inside quoted fields are
not supported. Cells are trimmed and lose one layer of surrounding double
quotes; numeric-looking cells become numbers, empty cells become ``None``.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union
import logging
import math
import re

import pandas as pd

from .errors import EmptyDataset, MalformedRow

Scalar = Union[int, float, str, None]
Record = Dict[str, Scalar]

log = logging.getLogger("csv_insight.parser")

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_INT_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class Dataset:
    headers: Tuple[str, ...]
    records: Tuple[Record, ...]
    malformed_rows: Tuple[MalformedRow, ...] = ()
    header_repairs: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def column(self, name: str) -> List[Scalar]:
        if name not in self.headers:
            raise KeyError(name)
        return [r.get(name) for r in self.records]

    def columns(self) -> Iterator[Tuple[str, List[Scalar]]]:
        for h in self.headers:
            yield h, self.column(h)

    def to_frame(self) -> pd.DataFrame:
        # object dtype keeps ints as ints and None as None
        rows = [[r.get(h) for h in self.headers] for r in self.records]
        return pd.DataFrame(rows, columns=list(self.headers), dtype=object)


def strip_quotes(s: str) -> str:
    s = s.strip()
    if s.startswith('"'):
        s = s[1:]
    if s.endswith('"'):
        s = s[:-1]
    return s


def parse_number(s: str) -> Optional[Union[int, float]]:
    """Return the number ``s`` spells, or None if it is not a finite decimal."""
    t = s.strip()
    if not t or not _NUMBER_RE.match(t):
        return None
    v = float(t)
    if not math.isfinite(v):
        return None
    # finite means at most ~309 digits, well inside int() limits
    if _INT_RE.match(t):
        return int(t)
    return v


def parse_cell(raw: str) -> Scalar:
    s = strip_quotes(raw)
    if s == '':
        return None
    num = parse_number(s)
    if num is not None:
        return num
    return s


def _repair_headers(names: List[str]) -> Tuple[List[str], List[str]]:
    out = []
    repairs = []
    seen = {}
    for n in names:
        name = n if n else 'col'
        base = name
        i = 1
        while name in seen:
            i += 1
            name = f"{base}__{i}"
        seen[name] = True
        if name != n:
            repairs.append(f"{n!r} -> {name!r}")
        out.append(name)
    return out, repairs


def parse_csv(text: str, strict: bool = False) -> Dataset:
    """Parse CSV text whose first line is the header.

    Rows shorter than the header are null-filled and rows longer than it lose
    their extra fields; each such line is recorded as a :class:`MalformedRow`
    on the returned dataset. With ``strict=True`` the first one is raised
    instead. Raises :class:`EmptyDataset` when there are no data lines.
    """
    body = (text or '').strip()
    if not body:
        raise EmptyDataset('CSV file is empty')

    lines = [l.rstrip('\r') for l in body.split('\n')]
    headers, repairs = _repair_headers([strip_quotes(h) for h in lines[0].split(',')])
    if len(lines) < 2:
        raise EmptyDataset('CSV file has a header but no data rows')

    records = []
    malformed = []
    for lineno, line in enumerate(lines[1:], start=2):
        fields = line.split(',')
        if len(fields) != len(headers):
            bad = MalformedRow(lineno, len(headers), len(fields))
            if strict:
                raise bad
            malformed.append(bad)
        row: Record = {}
        for idx, h in enumerate(headers):
            row[h] = parse_cell(fields[idx]) if idx < len(fields) else None
        records.append(row)

    if malformed:
        log.warning(f"{len(malformed)} malformed rows (field count != {len(headers)}); short rows null-filled, extra fields dropped")
    log.debug(f"Parsed {len(records)} records x {len(headers)} columns")
    return Dataset(tuple(headers), tuple(records), tuple(malformed), tuple(repairs))

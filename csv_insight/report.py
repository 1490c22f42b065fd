"""Assembly of the full analysis report from a parsed dataset.

:func:`build_report` runs type inference, per-column profiling and the
cross-column analysis, then packages everything into an immutable
:class:`AnalysisReport`. :func:`analyze_csv` is the text-in, report-out entry
point used by the pipeline.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import logging

from .constants import DEFAULT_CONFIG, NUMERIC, CATEGORICAL
from .correlation import (
    CorrelationMatrix, compute_correlations, category_distributions, correlations_to_nested,
)
from .errors import EmptyDataset
from .parser import Dataset, Record, parse_csv
from .profiler import ColumnStats, profile_column
from .schema import infer_column_type
from .utils import to_jsonable

log = logging.getLogger("csv_insight.report")


@dataclass(frozen=True)
class ColumnProfile:
    name: str
    type: str
    stats: ColumnStats
    sample_values: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'type': self.type,
            'stats': self.stats.to_dict(),
            'sample_values': list(self.sample_values),
        }


@dataclass(frozen=True)
class MissingData:
    column: str
    missing: int
    percentage: float


@dataclass(frozen=True)
class AnalysisReport:
    row_count: int
    column_count: int
    columns: Tuple[ColumnProfile, ...]
    numeric_columns: Tuple[str, ...]
    categorical_columns: Tuple[str, ...]
    correlations: CorrelationMatrix
    category_distributions: Dict[str, Dict[Any, int]]
    missing_data: Tuple[MissingData, ...]
    top_records: Tuple[Record, ...]
    bottom_records: Tuple[Record, ...]
    malformed_rows: Tuple[Dict[str, int], ...] = field(default=())

    def column(self, name: str) -> ColumnProfile:
        for c in self.columns:
            if c.name == name:
                return c
        raise KeyError(name)

    def columns_of_type(self, column_type: str) -> List[str]:
        return [c.name for c in self.columns if c.type == column_type]

    @property
    def numeric_summary(self) -> Dict[str, ColumnStats]:
        return {c.name: c.stats for c in self.columns if c.type == NUMERIC}

    def to_dict(self) -> Dict[str, Any]:
        out = {
            'row_count': self.row_count,
            'column_count': self.column_count,
            'columns': [c.to_dict() for c in self.columns],
            'numeric_columns': list(self.numeric_columns),
            'categorical_columns': list(self.categorical_columns),
            'numeric_summary': {k: v.to_dict() for k, v in self.numeric_summary.items()},
            'correlations': correlations_to_nested(self.correlations),
            'category_distributions': self.category_distributions,
            'missing_data': [
                {'column': m.column, 'missing': m.missing, 'percentage': m.percentage}
                for m in self.missing_data
            ],
            'top_records': [dict(r) for r in self.top_records],
            'bottom_records': [dict(r) for r in self.bottom_records],
            'malformed_rows': list(self.malformed_rows),
        }
        return to_jsonable(out)


def missing_summary(columns: List[ColumnProfile], row_count: int) -> List[MissingData]:
    out = []
    for c in columns:
        if c.stats.null_count > 0:
            pct = round(c.stats.null_count / row_count * 100, 2)
            out.append(MissingData(c.name, c.stats.null_count, pct))
    return out


def build_report(dataset: Dataset, preview_rows: Optional[int] = None,
                 sample_values: Optional[int] = None) -> AnalysisReport:
    n_preview = DEFAULT_CONFIG['preview_rows'] if preview_rows is None else preview_rows
    n_sample = DEFAULT_CONFIG['sample_values'] if sample_values is None else sample_values

    row_count = len(dataset.records)
    if row_count == 0:
        raise EmptyDataset('CSV file is empty')

    columns: List[ColumnProfile] = []
    for name, values in dataset.columns():
        ctype = infer_column_type(values)
        stats = profile_column(values, ctype)
        columns.append(ColumnProfile(name, ctype, stats, tuple(values[:n_sample])))

    numeric = [c.name for c in columns if c.type == NUMERIC]
    categorical = [c.name for c in columns if c.type == CATEGORICAL]

    correlations = compute_correlations(dataset, numeric)
    distributions = category_distributions(dataset, categorical)

    records = dataset.records
    # copies, so mutating a preview row never touches the dataset
    top = [dict(r) for r in records[:n_preview]]
    bottom = [dict(r) for r in records[max(0, row_count - n_preview):]]

    log.debug(f"Report built: {row_count} rows, {len(numeric)} numeric, {len(categorical)} categorical")
    return AnalysisReport(
        row_count=row_count,
        column_count=len(dataset.headers),
        columns=tuple(columns),
        numeric_columns=tuple(numeric),
        categorical_columns=tuple(categorical),
        correlations=correlations,
        category_distributions=distributions,
        missing_data=tuple(missing_summary(columns, row_count)),
        top_records=tuple(top),
        bottom_records=tuple(bottom),
        malformed_rows=tuple(m.to_dict() for m in dataset.malformed_rows),
    )


def analyze_csv(text: str, strict: bool = False, preview_rows: Optional[int] = None,
                sample_values: Optional[int] = None) -> AnalysisReport:
    dataset = parse_csv(text, strict=strict)
    return build_report(dataset, preview_rows=preview_rows, sample_values=sample_values)

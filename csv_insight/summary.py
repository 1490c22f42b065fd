from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_CONFIG, DATETIME, TEXT
from .correlation import top_categories, top_correlations
from .report import AnalysisReport


@dataclass
class ProfileSummary:
    computed: Dict[str, Any] = field(default_factory=dict)
    tables: Dict[str, Any] = field(default_factory=dict)
    summary: str = ""
    warnings: List[str] = field(default_factory=list)


def summarize(report: AnalysisReport, cfg: Optional[Dict[str, Any]] = None) -> ProfileSummary:
    """Dashboard-facing rollup of a report: headline counts and rankings."""
    cfg = cfg or DEFAULT_CONFIG
    res = ProfileSummary()

    res.computed['rows'] = report.row_count
    res.computed['cols'] = report.column_count
    res.computed['numeric_columns'] = len(report.numeric_columns)
    res.computed['categorical_columns'] = len(report.categorical_columns)
    res.computed['datetime_columns'] = len(report.columns_of_type(DATETIME))
    res.computed['text_columns'] = len(report.columns_of_type(TEXT))
    total_cells = report.row_count * report.column_count
    total_missing = sum(m.missing for m in report.missing_data)
    res.computed['missing_fraction_overall'] = total_missing / total_cells if total_cells else 0.0
    # constant columns: at most one distinct non-null value
    const = [c.name for c in report.columns if c.stats.unique <= 1]
    res.computed['constant_columns'] = const

    if report.correlations:
        res.tables['top_correlations'] = top_correlations(
            report.correlations, cfg.get('top_correlations', 5))

    n_top = cfg.get('top_categories', 5)
    cats = []
    for name, dist in report.category_distributions.items():
        cats.append({
            'column': name,
            'top_values': [{'value': v, 'count': n} for v, n in top_categories(dist, n_top)],
        })
    if cats:
        res.tables['top_categories'] = cats

    if report.missing_data:
        worst = max(report.missing_data, key=lambda m: m.percentage)
        res.warnings.append(f"{len(report.missing_data)} columns have missing values; "
                            f"worst is {worst.column} ({worst.percentage}%)")

    # plain english
    res.summary = (
        f"Dataset: {report.row_count} rows × {report.column_count} cols. "
        f"{res.computed['numeric_columns']} numeric, {res.computed['categorical_columns']} categorical, "
        f"{res.computed['datetime_columns']} datetime, {res.computed['text_columns']} text columns. "
        f"{len(report.missing_data)} columns with missing data, {len(const)} constant columns."
    )
    return res

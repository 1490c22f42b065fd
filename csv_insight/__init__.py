"""CSV profiling engine.

Parses an uploaded CSV, infers a type per column, profiles each column and
the relationships between them, and returns an :class:`AnalysisReport`::

    from csv_insight import analyze_csv
    report = analyze_csv(open("sales.csv").read())
    report.to_dict()
"""
from .errors import EmptyDataset, LoadError, MalformedRow, ProfilerError, ValidationError
from .parser import Dataset, parse_csv
from .report import AnalysisReport, analyze_csv, build_report

__all__ = [
    "AnalysisReport",
    "Dataset",
    "EmptyDataset",
    "LoadError",
    "MalformedRow",
    "ProfilerError",
    "ValidationError",
    "analyze_csv",
    "build_report",
    "parse_csv",
]
__version__ = "0.1.0"

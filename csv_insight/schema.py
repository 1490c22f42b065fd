from typing import Any, Dict, List, Sequence
import re

from .constants import (
    NUMERIC, CATEGORICAL, DATETIME, TEXT,
    NUMERIC_RATIO_THRESHOLD, DATE_RATIO_THRESHOLD, CATEGORICAL_UNIQUE_RATIO_THRESHOLD,
)

# ISO prefix (YYYY-MM-DD...) or a trailing D/M/YY[YY]
date_re = re.compile(r"^\d{4}-\d{2}-\d{2}|\d{1,2}/\d{1,2}/\d{2,4}$")


def is_missing(v: Any) -> bool:
    return v is None or v == ''


def is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def non_null(values: Sequence[Any]) -> List[Any]:
    return [v for v in values if not is_missing(v)]


def looks_like_date(v: Any) -> bool:
    return isinstance(v, str) and date_re.search(v) is not None


def infer_column_type(values: Sequence[Any]) -> str:
    """Classify one column from its own values only.

    numeric when >80% of non-null values are numbers, datetime when >80% are
    date-like strings, categorical when fewer than 10% of them are distinct,
    text otherwise (including an all-null column).
    """
    vals = non_null(values)
    if not vals:
        return TEXT
    n = len(vals)

    numeric_ratio = sum(1 for v in vals if is_number(v)) / n
    if numeric_ratio > NUMERIC_RATIO_THRESHOLD:
        return NUMERIC

    date_ratio = sum(1 for v in vals if looks_like_date(v)) / n
    if date_ratio > DATE_RATIO_THRESHOLD:
        return DATETIME

    unique_ratio = len(set(vals)) / n
    if unique_ratio < CATEGORICAL_UNIQUE_RATIO_THRESHOLD:
        return CATEGORICAL

    return TEXT


def infer_schema(dataset) -> Dict[str, Any]:
    types = {NUMERIC: [], CATEGORICAL: [], DATETIME: [], TEXT: []}
    mapping: Dict[str, str] = {}
    for name, values in dataset.columns():
        t = infer_column_type(values)
        types[t].append(name)
        mapping[name] = t
    return {"types": types, "mapping": mapping}

from typing import Any, Dict, List, Optional, Tuple

from .parser import Dataset

def validate_dataset(dataset: Dataset, cfg: Dict[str, Any], delimiter: Optional[str] = None) -> Tuple[List[str], List[str]]:
    warnings = []
    errors = []

    n_rows = len(dataset.records)
    n_cols = len(dataset.headers)
    if n_rows > cfg.get('max_rows', 250000):
        errors.append(f"Row count {n_rows} exceeds max {cfg.get('max_rows')}")
    if n_cols > cfg.get('max_cols', 2000):
        errors.append(f"Column count {n_cols} exceeds max {cfg.get('max_cols')}")

    if n_rows < 10:
        warnings.append('Very small number of rows (<10)')

    if dataset.header_repairs:
        warnings.append(f"Duplicate or empty column names renamed: {list(dataset.header_repairs)[:10]}")

    if dataset.malformed_rows:
        lines = [m.line_number for m in dataset.malformed_rows]
        warnings.append(f"{len(lines)} rows with a field count different from the header "
                        f"(short rows null-filled, extra fields ignored): lines {lines[:10]}")

    # mostly-empty columns
    df = dataset.to_frame()
    if n_rows > 0:
        threshold = cfg.get('missing_warning_threshold', 0.95)
        na_frac = df.isna().mean()
        many_missing = na_frac[na_frac > threshold].index.tolist()
        if many_missing:
            warnings.append(f"Columns with >{threshold:.0%} missing values: {many_missing[:10]}")

    # single-column parse of a file that is delimited by something else
    if n_cols == 1 and delimiter and delimiter != ',':
        s = df.iloc[:, 0].astype(str).head(100).tolist()
        delim_lines = sum(1 for r in s if delimiter in r)
        if delim_lines > 5 or delimiter in dataset.headers[0]:
            warnings.append(f"File looks {delimiter!r}-delimited; only comma-delimited CSV is supported.")

    return warnings, errors

"""Cross-column analysis: numeric correlation and categorical distributions."""
from collections import Counter
from typing import Any, Dict, List, Sequence, Tuple
import math

import numpy as np

from .schema import is_missing, is_number

CorrelationMatrix = Dict[Tuple[str, str], float]


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson r of two equal-length sequences.

    Returns 0.0 for empty, mismatched or non-finite input, and whenever
    either side has zero variance. The result is clamped to [-1, 1].
    """
    if len(x) != len(y) or len(x) == 0:
        return 0.0
    xa = np.asarray(x, dtype=float)
    ya = np.asarray(y, dtype=float)
    if not (np.all(np.isfinite(xa)) and np.all(np.isfinite(ya))):
        return 0.0
    if np.all(xa == xa[0]) or np.all(ya == ya[0]):
        return 0.0
    # r is scale invariant; unit max magnitude keeps the products finite
    xa = xa / np.max(np.abs(xa))
    ya = ya / np.max(np.abs(ya))
    dx = xa - xa.mean()
    dy = ya - ya.mean()
    denom = float(np.sqrt(np.sum(dx * dx) * np.sum(dy * dy)))
    if denom == 0:
        return 0.0
    r = float(np.sum(dx * dy)) / denom
    if not math.isfinite(r):
        return 0.0
    return max(-1.0, min(1.0, r))


def aligned_pairs(dataset, col_a: str, col_b: str) -> Tuple[List[float], List[float]]:
    # rows pair up by index; a row counts only if both cells are numbers
    xs, ys = [], []
    for rec in dataset.records:
        a = rec.get(col_a)
        b = rec.get(col_b)
        if is_number(a) and is_number(b):
            xs.append(a)
            ys.append(b)
    return xs, ys


def compute_correlations(dataset, numeric_columns: Sequence[str]) -> CorrelationMatrix:
    out: CorrelationMatrix = {}
    cols = list(numeric_columns)
    for i in range(len(cols)):
        for j in range(i + 1, len(cols)):
            xs, ys = aligned_pairs(dataset, cols[i], cols[j])
            out[(cols[i], cols[j])] = pearson(xs, ys)
    return out


def correlations_to_nested(matrix: CorrelationMatrix) -> Dict[str, Dict[str, float]]:
    nested: Dict[str, Dict[str, float]] = {}
    for (a, b), r in matrix.items():
        nested.setdefault(a, {})[b] = r
    return nested


def top_correlations(matrix: CorrelationMatrix, n: int = 5) -> List[Dict[str, Any]]:
    ranked = sorted(matrix.items(), key=lambda kv: abs(kv[1]), reverse=True)
    return [{'pair': [a, b], 'corr': r} for (a, b), r in ranked[:n]]


def category_distributions(dataset, categorical_columns: Sequence[str]) -> Dict[str, Dict[Any, int]]:
    out: Dict[str, Dict[Any, int]] = {}
    for c in categorical_columns:
        out[c] = dict(Counter(v for v in dataset.column(c) if not is_missing(v)))
    return out


def top_categories(distribution: Dict[Any, int], n: int = 5) -> List[Tuple[Any, int]]:
    # sorted() is stable, so equal counts keep first-occurrence order
    return sorted(distribution.items(), key=lambda kv: kv[1], reverse=True)[:n]

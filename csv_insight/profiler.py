from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import numpy as np

from .constants import NUMERIC
from .schema import is_number, non_null


@dataclass(frozen=True)
class ColumnStats:
    count: int
    null_count: int
    unique: int
    mode: Any = None
    # numeric columns only
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    std: Optional[float] = None
    median: Optional[float] = None

    @property
    def has_numeric(self) -> bool:
        return self.mean is not None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            'count': self.count,
            'null_count': self.null_count,
            'unique': self.unique,
            'mode': self.mode,
        }
        if self.has_numeric:
            out.update({'min': self.min, 'max': self.max, 'mean': self.mean,
                        'std': self.std, 'median': self.median})
        return out


def mode_of(values: Sequence[Any]) -> Any:
    if not values:
        return None
    # Counter keeps first-seen order and most_common(1) returns the first
    # maximal entry, so ties go to the earliest value in row order
    return Counter(values).most_common(1)[0][0]


def numeric_stats(numbers: Sequence[Any]) -> Dict[str, float]:
    arr = np.sort(np.asarray(numbers, dtype=float))
    n = arr.size
    mean = float(arr.mean())
    return {
        'min': float(arr[0]),
        'max': float(arr[-1]),
        'mean': mean,
        # lower median: index n // 2 of the sorted values, never an average
        'median': float(arr[n // 2]),
        'std': float(np.sqrt(np.mean((arr - mean) ** 2))),
    }


def profile_column(values: Sequence[Any], column_type: str) -> ColumnStats:
    vals = non_null(values)
    extra: Dict[str, float] = {}
    if column_type == NUMERIC:
        numbers = [v for v in vals if is_number(v)]
        if numbers:
            extra = numeric_stats(numbers)

    return ColumnStats(
        count=len(vals),
        null_count=len(values) - len(vals),
        unique=len(set(vals)),
        mode=mode_of(vals),
        **extra,
    )

from datetime import datetime
from typing import Any
import csv
import math
import uuid

import chardet
import numpy as np
import pandas as pd

def detect_encoding(raw: bytes) -> str:
    try:
        res = chardet.detect(raw[:4096])
        enc = res.get("encoding") or "utf-8"
        # chardet reports plain ascii for most csv exports; utf-8 is a superset
        if enc.lower() == "ascii":
            return "utf-8"
        return enc
    except Exception:
        return "utf-8"

def detect_delimiter(sample: str) -> str:
    # sniff using csv.Sniffer and fallback heuristics
    sample = sample[:16384]
    sniffer = csv.Sniffer()
    try:
        delim = sniffer.sniff(sample, delimiters=",\t;|").delimiter
        # sometimes sniffer returns '\r' or unexpected - guard
        if delim and isinstance(delim, str) and delim.strip():
            return delim
    except csv.Error:
        pass

    # fallback: test common delimiters and pick the one with most columns
    candidates = [',', '\t', ';', '|']
    best = ','
    best_score = -1.0
    lines = [l for l in sample.splitlines() if l.strip()][:20]
    if not lines:
        return ','
    for d in candidates:
        counts = [len(l.split(d)) for l in lines]
        # score prefers more columns and low variance
        score = (sum(counts) / len(counts)) - (max(counts) - min(counts)) * 0.1
        if score > best_score:
            best_score = score
            best = d
    return best

def now_id() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]

def to_jsonable(x: Any) -> Any:
    if isinstance(x, dict):
        return {str(k): to_jsonable(v) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return [to_jsonable(v) for v in x]
    if isinstance(x, (np.integer,)):
        return int(x)
    if isinstance(x, (np.floating,)):
        x = float(x)
    if isinstance(x, float) and not math.isfinite(x):
        return None
    if isinstance(x, (np.ndarray,)):
        return [to_jsonable(v) for v in x.tolist()]
    if isinstance(x, (pd.Timestamp,)):
        return x.isoformat()
    return x

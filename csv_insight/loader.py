from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import logging

from .errors import LoadError, ValidationError
from .utils import detect_encoding, detect_delimiter

log = logging.getLogger("csv_insight.loader")


@dataclass(frozen=True)
class LoadedFile:
    text: str
    encoding: str
    delimiter: str
    size_bytes: int
    source_type: str = "csv"


def load(path: str, cfg: Dict[str, Any]) -> LoadedFile:
    """Read an uploaded CSV from disk into memory as text."""
    p = Path(path)
    if not p.exists():
        raise LoadError(f"File not found: {path}")
    if not p.is_file():
        raise LoadError(f"Not a file: {path}")

    size = p.stat().st_size
    max_mb = cfg.get('max_upload_mb', 50)
    if size > max_mb * 1024 * 1024:
        raise ValidationError(f"File size {size / (1024 * 1024):.1f}MB exceeds max {max_mb}MB")

    try:
        raw = p.read_bytes()
    except OSError as e:
        log.exception("CSV read failed")
        raise LoadError(f"CSV read failed: {e}") from e

    return decode(raw, source_name=p.name)


def decode(raw: bytes, source_name: str = '<upload>') -> LoadedFile:
    enc = detect_encoding(raw)
    try:
        text = raw.decode(enc, errors='replace')
    except LookupError:
        log.warning(f"Unknown encoding {enc!r} for {source_name}, falling back to utf-8")
        enc = 'utf-8'
        text = raw.decode(enc, errors='replace')

    # remove BOM
    if text.startswith('\ufeff'):
        text = text.lstrip('\ufeff')

    delim = detect_delimiter(text)
    log.info(f"CSV loaded: {source_name} encoding={enc} sniffed delimiter={delim!r}")
    return LoadedFile(text=text, encoding=enc, delimiter=delim, size_bytes=len(raw))

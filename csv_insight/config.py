from pathlib import Path
from typing import Any, Dict, Optional
import copy
import json

import yaml

from .constants import DEFAULT_CONFIG


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if not config_path:
        return cfg

    p = Path(config_path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    text = p.read_text(encoding="utf-8", errors="ignore")

    if p.suffix.lower() in (".yaml", ".yml"):
        user_cfg = yaml.safe_load(text) or {}
    elif p.suffix.lower() == ".json":
        user_cfg = json.loads(text)
    else:
        raise ValueError("Config must be .yaml/.yml or .json")

    if not isinstance(user_cfg, dict):
        raise ValueError(f"Config root must be a mapping, got {type(user_cfg).__name__}")

    return _deep_merge(cfg, user_cfg)

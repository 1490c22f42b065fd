import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import load_config
from .pipeline import PipelineConfig, run_pipeline


def _parse_args(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    p = argparse.ArgumentParser(prog="csv-insight", description="Statistical profile of a CSV file")
    p.add_argument("--input", type=str, required=True, help="CSV file to profile")
    p.add_argument("--config", type=str, default=None, help="Path to config.yaml or config.json")
    p.add_argument("--output-dir", type=str, default=None, help="Where run folders are written")
    p.add_argument("--strict", action="store_true", help="Reject rows whose field count differs from the header")
    p.add_argument("--log-level", type=str, default=None, help="DEBUG|INFO|WARNING|ERROR")
    p.add_argument("--no-artifacts", action="store_true", help="Profile only, write nothing")
    args = p.parse_args(argv)
    return vars(args)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    cfg = load_config(args.get("config"))

    if args.get("output_dir"):
        cfg["output_dir"] = args["output_dir"]
    if args.get("strict"):
        cfg["strict_rows"] = True
    if args.get("log_level"):
        cfg["log_level"] = args["log_level"]

    level = str(cfg.get("log_level") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )
    log = logging.getLogger("csv_insight.cli")

    pr = run_pipeline(args["input"], cfg=PipelineConfig.from_dict(cfg),
                      write_artifacts=not args.get("no_artifacts"))
    for w in pr.warnings:
        log.warning(w)
    if not pr.ok:
        for e in pr.errors:
            print(f"error: {e}", file=sys.stderr)
        return 1

    print(pr.summary.summary)
    if pr.artifacts.get("report_json"):
        print(pr.artifacts["report_json"])
    return 0


if __name__ == "__main__":
    sys.exit(main())

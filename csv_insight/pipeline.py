from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging
import time

from .artifacts import make_run_dir, save_csv, write_report
from .constants import DEFAULT_CONFIG
from .errors import ProfilerError
from .loader import load
from .parser import parse_csv
from .report import AnalysisReport, build_report
from .schema import infer_schema
from .summary import ProfileSummary, summarize
from .utils import now_id
from .validator import validate_dataset

log = logging.getLogger("csv_insight.pipeline")


@dataclass
class PipelineConfig:
    max_upload_mb: int = DEFAULT_CONFIG['max_upload_mb']
    max_rows: int = DEFAULT_CONFIG['max_rows']
    max_cols: int = DEFAULT_CONFIG['max_cols']
    preview_rows: int = DEFAULT_CONFIG['preview_rows']
    sample_values: int = DEFAULT_CONFIG['sample_values']
    top_categories: int = DEFAULT_CONFIG['top_categories']
    top_correlations: int = DEFAULT_CONFIG['top_correlations']
    strict_rows: bool = DEFAULT_CONFIG['strict_rows']
    missing_warning_threshold: float = DEFAULT_CONFIG['missing_warning_threshold']
    enable_preview_export: bool = DEFAULT_CONFIG['enable_preview_export']
    output_dir: str = DEFAULT_CONFIG['output_dir']
    log_level: str = DEFAULT_CONFIG['log_level']

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "PipelineConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (cfg or {}).items() if k in known})

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class PipelineResult:
    run_id: str
    input_name: str
    report: Optional[AnalysisReport]
    summary: Optional[ProfileSummary]
    warnings: List[str]
    errors: List[str]
    artifacts: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.report is not None and not self.errors


def run_pipeline(file_path: str, filename: Optional[str] = None, cfg: Optional[PipelineConfig] = None,
                 write_artifacts: bool = True) -> PipelineResult:
    cfg = cfg or PipelineConfig()
    opts = cfg.as_dict()
    filename = filename or Path(file_path).name
    run_id = now_id()
    start = time.time()
    warnings: List[str] = []
    errors: List[str] = []

    def _failed(stage: str, e: Exception) -> PipelineResult:
        log.error(f"{stage} failed for {filename}: {e}")
        errors.append(str(e))
        return PipelineResult(run_id, filename, None, None, warnings, errors,
                              meta={'run_id': run_id, 'input_name': filename, 'failed_stage': stage,
                                    'elapsed_seconds': time.time() - start})

    # load
    try:
        loaded = load(file_path, opts)
    except ProfilerError as e:
        return _failed('load', e)

    # parse
    try:
        dataset = parse_csv(loaded.text, strict=cfg.strict_rows)
    except ProfilerError as e:
        return _failed('parse', e)

    # validate
    vwarns, verrs = validate_dataset(dataset, opts, delimiter=loaded.delimiter)
    warnings.extend(vwarns)
    if verrs:
        errors.extend(verrs)
        log.error(f"Validation failed for {filename}: {verrs}")
        return PipelineResult(run_id, filename, None, None, warnings, errors,
                              meta={'run_id': run_id, 'input_name': filename, 'failed_stage': 'validate',
                                    'elapsed_seconds': time.time() - start})

    # profile
    try:
        report = build_report(dataset, preview_rows=cfg.preview_rows, sample_values=cfg.sample_values)
    except ProfilerError as e:
        return _failed('profile', e)
    summary = summarize(report, opts)
    warnings.extend(summary.warnings)

    meta = {
        'run_id': run_id,
        'input_name': filename,
        'source_type': loaded.source_type,
        'encoding': loaded.encoding,
        'size_bytes': loaded.size_bytes,
        'rows': report.row_count,
        'cols': report.column_count,
        'schema': infer_schema(dataset)['types'],
        'elapsed_seconds': time.time() - start,
    }
    log.info(f"Profiled {filename}: {report.row_count} rows x {report.column_count} cols in {meta['elapsed_seconds']:.3f}s")

    artifacts: Dict[str, Any] = {}
    if write_artifacts:
        try:
            out_dir = make_run_dir(cfg.output_dir, run_id)
            artifacts['output_dir'] = out_dir
            artifacts['files'] = []
            doc = {
                'run_id': run_id,
                'created_at': time.strftime('%Y-%m-%dT%H:%M:%S'),
                'input': filename,
                'meta': meta,
                'analysis': report.to_dict(),
                'summary': {
                    'computed': summary.computed,
                    'tables': summary.tables,
                    'summary': summary.summary,
                },
                'warnings': warnings,
                'errors': errors,
            }
            paths = write_report(doc, out_dir)
            artifacts.update(paths)
            artifacts['files'].extend(['report.json', 'report.md'])
            if cfg.enable_preview_export:
                preview = dataset.to_frame().head(cfg.preview_rows)
                save_csv(preview, str(Path(out_dir) / 'preview.csv'))
                artifacts['files'].append('preview.csv')
        except OSError as e:
            log.warning(f"Writing artifacts failed: {e}")
            warnings.append(f"Artifact export failed: {e}")

    return PipelineResult(
        run_id=run_id,
        input_name=filename,
        report=report,
        summary=summary,
        warnings=warnings,
        errors=errors,
        artifacts=artifacts,
        meta=meta,
    )

from pathlib import Path
import json
from typing import Dict, Any

import pandas as pd

def make_run_dir(base: str, run_id: str) -> str:
    basep = Path(base) / run_id
    basep.mkdir(parents=True, exist_ok=True)
    return str(basep)

def _fmt(v: Any) -> str:
    if isinstance(v, float):
        return f"{v:,.4f}"
    return '' if v is None else str(v)

def write_report(report: Dict[str, Any], output_dir: str) -> Dict[str, str]:
    p = Path(output_dir)
    json_path = p / 'report.json'
    with open(json_path, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2, default=str)

    analysis = report.get('analysis', {})
    md_lines = []
    md_lines.append("# Data Profile\n")
    md_lines.append(f"**Run ID:** {report.get('run_id')}\n")
    md_lines.append(f"**Input:** {report.get('input')}\n")
    summ = report.get('summary', {})
    if summ.get('summary'):
        md_lines.append(summ['summary'] + '\n')

    md_lines.append("## Columns\n")
    md_lines.append("| column | type | count | nulls | unique | mode | mean | std | min | median | max |")
    md_lines.append("|---|---|---|---|---|---|---|---|---|---|---|")
    for c in analysis.get('columns', []):
        s = c.get('stats', {})
        md_lines.append('| ' + ' | '.join([
            str(c.get('name')), str(c.get('type')), _fmt(s.get('count')), _fmt(s.get('null_count')),
            _fmt(s.get('unique')), _fmt(s.get('mode')), _fmt(s.get('mean')), _fmt(s.get('std')),
            _fmt(s.get('min')), _fmt(s.get('median')), _fmt(s.get('max')),
        ]) + ' |')

    missing = analysis.get('missing_data') or []
    if missing:
        md_lines.append("\n## Missing Data\n")
        for m in missing:
            md_lines.append(f"- **{m['column']}**: {m['missing']} ({m['percentage']}%)")

    tables = summ.get('tables') or {}
    if tables.get('top_correlations'):
        md_lines.append("\n## Strongest Correlations\n")
        for t in tables['top_correlations']:
            a, b = t['pair']
            md_lines.append(f"- {a} ~ {b}: {t['corr']:.3f}")
    for cat in tables.get('top_categories') or []:
        md_lines.append(f"\n### Top values: {cat['column']}\n")
        for tv in cat['top_values']:
            md_lines.append(f"- {tv['value']}: {tv['count']}")

    warnings = report.get('warnings') or []
    if warnings:
        md_lines.append("\n## Warnings\n")
        for w in warnings:
            md_lines.append(f"- {w}")

    md_path = p / 'report.md'
    md_path.write_text('\n'.join(md_lines) + '\n', encoding='utf-8')
    return {'report_json': str(json_path), 'report_md': str(md_path)}

def save_csv(df: pd.DataFrame, path: str) -> None:
    df.to_csv(path, index=False)

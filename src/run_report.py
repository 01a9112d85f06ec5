"""Generate score_report.json for auditability."""

import json
from pathlib import Path

from src.utils import iso_now


def write_score_report(
    output_path: Path,
    run_id: str,
    source: str,
    payload_hash: str,
    breakdown: dict,
) -> None:
    """
    Write score_report.json with payload hash, per-rule contributions and total.
    Receipt contents are not copied into the report.
    """
    report = {
        "run_id": run_id,
        "timestamp": iso_now(),
        "source": source,
        "payload_hash": payload_hash,
        "rules": breakdown.get("rules", {}),
        "total": breakdown.get("total"),
    }
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2), encoding="utf-8")

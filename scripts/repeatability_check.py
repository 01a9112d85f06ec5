#!/usr/bin/env python3
"""
Repeatability harness: score every sample receipt N times; assert identical results.
Exits 0 if stable and every total matches samples/expected_points.json, 1 otherwise.
Prints a variance report on failure.

Usage: python scripts/repeatability_check.py [--runs 10] [--samples samples]
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.pipeline import ValidationRejected, validate
from src.scoring import score_breakdown
from src.utils import hash_payload

DEFAULT_RUNS = 10
DEFAULT_SAMPLES = "samples"
EXPECTED_FILE = "expected_points.json"


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--samples", default=DEFAULT_SAMPLES)
    args = parser.parse_args()

    root = Path(__file__).resolve().parent.parent
    samples_dir = root / args.samples
    if not samples_dir.is_dir():
        print(f"Error: samples directory not found: {samples_dir}", file=sys.stderr)
        sys.exit(1)

    expected_path = samples_dir / EXPECTED_FILE
    expected = json.loads(expected_path.read_text(encoding="utf-8")) if expected_path.exists() else {}
    receipt_files = sorted(p for p in samples_dir.glob("*.json") if p.name != EXPECTED_FILE)

    print(f"Scoring {len(receipt_files)} receipts {args.runs} times each...")
    variances = []
    totals = {}

    for path in receipt_files:
        payload = json.loads(path.read_text(encoding="utf-8"))
        results = []
        for _ in range(args.runs):
            try:
                results.append(score_breakdown(validate(payload)))
            except ValidationRejected:
                variances.append((path.name, "validation", "receipt was rejected"))
                break
        if not results:
            continue

        first = results[0]
        totals[path.name] = (first["total"], hash_payload(payload))
        for i, r in enumerate(results[1:], start=2):
            if r != first:
                diff = {
                    name: (r["rules"].get(name), pts)
                    for name, pts in first["rules"].items()
                    if r["rules"].get(name) != pts
                }
                variances.append((path.name, f"run {i}", f"rule diffs: {diff}"))
        if path.name in expected and first["total"] != expected[path.name]:
            variances.append((path.name, "expected", f"{first['total']} != {expected[path.name]}"))

    if variances:
        print("\n=== VARIANCE REPORT ===\n")
        print(f"Runs: {args.runs} | Samples: {samples_dir}")
        print()
        for name, stage, detail in variances:
            print(f"  {name} - {stage}: {detail}")
        print("\nRepeatability check FAILED.")
        sys.exit(1)
    else:
        print("\nPASS: Repeatability check passed.")
        print("\n--- Totals ---")
        for name, (total, payload_hash) in totals.items():
            print(f"  {name}: {total} (payload_hash {payload_hash[:16]})")
        sys.exit(0)


if __name__ == "__main__":
    main()

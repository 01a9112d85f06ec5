#!/usr/bin/env python3
"""CLI for validating and scoring receipt JSON files offline."""

import argparse
import json
import sys
import uuid
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from src.pipeline import INVALID_RECEIPT_MESSAGE, ValidationRejected, validate
from src.scoring import score_breakdown
from src.utils import hash_payload
from src.run_report import write_score_report


def _load_payload(path_str: str):
    path = Path(path_str)
    if not path.exists():
        print(f"Error: Receipt file not found: {path}", file=sys.stderr)
        sys.exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except ValueError:
        print(INVALID_RECEIPT_MESSAGE, file=sys.stderr)
        sys.exit(1)


def cmd_validate(args: argparse.Namespace) -> None:
    """Validate only: exit 0 if the receipt would be accepted."""
    payload = _load_payload(args.receipt)
    try:
        validate(payload)
    except ValidationRejected:
        print(INVALID_RECEIPT_MESSAGE, file=sys.stderr)
        sys.exit(1)
    print("valid")


def cmd_score(args: argparse.Namespace) -> None:
    """Validate + score. Optionally write a score report."""
    payload = _load_payload(args.receipt)
    try:
        receipt = validate(payload)
    except ValidationRejected:
        print(INVALID_RECEIPT_MESSAGE, file=sys.stderr)
        sys.exit(1)

    breakdown = score_breakdown(receipt)

    if args.report:
        run_id = str(uuid.uuid4())[:8]
        write_score_report(
            Path(args.report),
            run_id=run_id,
            source=str(args.receipt),
            payload_hash=hash_payload(payload),
            breakdown=breakdown,
        )
        print(f"Score report saved: {args.report}", file=sys.stderr)

    # Output
    if args.json:
        print(json.dumps(breakdown, indent=2))
    else:
        print("=== Score ===")
        print(f"Total: {breakdown['total']}")
        print("\nPer rule:")
        for name, points in breakdown["rules"].items():
            print(f"  {name}: {points}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Receipt points: validate and score receipt JSON files")
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Check a receipt against the submission rules")
    p_validate.add_argument("receipt", help="Path to receipt JSON")
    p_validate.set_defaults(func=cmd_validate)

    p_score = sub.add_parser("score", help="Score a receipt")
    p_score.add_argument("receipt", help="Path to receipt JSON")
    p_score.add_argument("--report", help="Write score report JSON to this path")
    p_score.add_argument("--json", action="store_true", help="Print per-rule breakdown as JSON")
    p_score.set_defaults(func=cmd_score)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()

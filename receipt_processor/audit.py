"""Audit trail for receipt submissions and points lookups."""

import json
import logging
import os
from pathlib import Path

from src.utils import iso_now

AUDIT_DIR = Path(
    os.environ.get("RECEIPT_PROCESSOR_LOG_DIR") or Path(__file__).resolve().parent.parent / "logs"
)
AUDIT_FILE = AUDIT_DIR / "audit.log"
APP_LOG_FILE = AUDIT_DIR / "app.log"


def _ensure_log_dir():
    AUDIT_DIR.mkdir(parents=True, exist_ok=True)


def audit_log(
    action: str,
    status: str,
    *,
    receipt_id: str | None = None,
    points: int | None = None,
    payload_hash: str | None = None,
    item_count: int | None = None,
    error: str | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    _ensure_log_dir()
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
    }
    if receipt_id:
        entry["receipt_id"] = receipt_id
    if points is not None:
        entry["points"] = points
    if payload_hash:
        entry["payload_hash"] = payload_hash
    if item_count is not None:
        entry["item_count"] = item_count
    if error:
        entry["error"] = error

    with open(AUDIT_FILE, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")


def setup_app_logging():
    """Configure application logging to console and file."""
    _ensure_log_dir()
    logger = logging.getLogger("receipt_processor")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(APP_LOG_FILE, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger

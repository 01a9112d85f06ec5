"""Utilities for identifiers, hashing and audit timestamps."""

import hashlib
import json
import uuid
from datetime import datetime, timezone


def new_receipt_id() -> str:
    """Fresh opaque receipt identifier (random UUID4)."""
    return str(uuid.uuid4())


def hash_payload(payload) -> str:
    """SHA256 of the canonical JSON form of a payload. Same content → same hash regardless of key order."""
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def iso_now() -> str:
    """Current UTC timestamp as ISO string."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

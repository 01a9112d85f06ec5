"""2-stage pipeline: validate → score."""

from src.pipeline.normalize import (
    INVALID_RECEIPT_MESSAGE,
    ValidationRejected,
    normalize_receipt,
    validate,
)

__all__ = [
    "INVALID_RECEIPT_MESSAGE",
    "ValidationRejected",
    "normalize_receipt",
    "validate",
]

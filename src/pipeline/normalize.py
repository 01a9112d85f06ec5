"""Stage A: Deterministic validation of raw receipt strings into a trusted Receipt."""

import logging
import re
from datetime import datetime

import jsonschema

from src.models import Item, RawReceipt, Receipt
from src.validation import validate_receipt_payload

log = logging.getLogger("receipt_processor.normalize")

INVALID_RECEIPT_MESSAGE = "The receipt is invalid."

NAME_PATTERN = re.compile(r"[A-Za-z0-9 &-]+")
AMOUNT_PATTERN = re.compile(r"(\d+)\.(\d{2})", re.ASCII)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}", re.ASCII)
DATETIME_FORMAT = "%Y-%m-%d %H:%M"


class ValidationRejected(ValueError):
    """Raised for any invalid receipt. Carries no field-level detail."""

    def __init__(self):
        super().__init__(INVALID_RECEIPT_MESSAGE)


def _reject(reason: str, *args) -> ValidationRejected:
    # Cause stays in the debug log; callers only ever see the uniform message.
    log.debug("Receipt rejected: " + reason, *args)
    return ValidationRejected()


def _check_name(value: str, field: str) -> str:
    if not NAME_PATTERN.fullmatch(value):
        raise _reject("%s %r has characters outside the allowed set", field, value)
    return value


def _parse_cents(value: str, field: str) -> int:
    """'12.34' -> 1234. Whole units and cents are read separately; no float rounding."""
    m = AMOUNT_PATTERN.fullmatch(value)
    if not m:
        raise _reject("%s %r is not a two-decimal amount", field, value)
    return int(m.group(1)) * 100 + int(m.group(2))


def _parse_purchased_at(date_str: str, time_str: str) -> datetime:
    if not DATE_PATTERN.fullmatch(date_str) or not TIME_PATTERN.fullmatch(time_str):
        raise _reject("purchase date/time %r %r has the wrong shape", date_str, time_str)
    try:
        return datetime.strptime(f"{date_str} {time_str}", DATETIME_FORMAT)
    except ValueError:
        raise _reject("purchase date/time %r %r is not on the calendar", date_str, time_str) from None


def normalize_receipt(raw: RawReceipt) -> Receipt:
    """
    Convert a RawReceipt into a Receipt.
    Checks retailer, purchase date/time, total, then items in order; the first failure
    raises ValidationRejected. No partial receipts.
    """
    retailer = _check_name(raw.retailer, "retailer")
    purchased_at = _parse_purchased_at(raw.purchase_date, raw.purchase_time)
    total_cents = _parse_cents(raw.total, "total")

    if not raw.items:
        raise _reject("receipt has no items")

    items = []
    for idx, raw_item in enumerate(raw.items):
        description = _check_name(raw_item.short_description, f"items[{idx}].shortDescription")
        price_cents = _parse_cents(raw_item.price, f"items[{idx}].price")
        items.append(Item(short_description=description, price_cents=price_cents))

    return Receipt(
        retailer=retailer,
        purchased_at=purchased_at,
        total_cents=total_cents,
        items=tuple(items),
    )


def validate(payload: dict) -> Receipt:
    """
    Strict-schema check plus field normalization of a decoded JSON payload.
    Returns a Receipt or raises ValidationRejected.
    """
    if not isinstance(payload, dict):
        raise _reject("payload is %s, not an object", type(payload).__name__)
    try:
        validate_receipt_payload(payload)
    except jsonschema.ValidationError as e:
        raise _reject("schema violation at %s: %s", list(e.absolute_path), e.message) from None
    return normalize_receipt(RawReceipt.from_payload(payload))

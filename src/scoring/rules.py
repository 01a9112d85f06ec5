"""Scoring rules. Each rule is a pure function of a Receipt returning its own contribution."""

from datetime import time

from src.models import Receipt

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
POINTS_PER_ITEM_PAIR = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

# Exclusive on both ends: 14:00 and 16:00 earn nothing.
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)


def retailer_name(receipt: Receipt) -> int:
    """One point for every alphanumeric character in the retailer name."""
    return sum(1 for c in receipt.retailer if c.isalnum())


def round_dollar_total(receipt: Receipt) -> int:
    return ROUND_DOLLAR_POINTS if receipt.total_cents % 100 == 0 else 0


def quarter_multiple_total(receipt: Receipt) -> int:
    return QUARTER_MULTIPLE_POINTS if receipt.total_cents % 25 == 0 else 0


def item_pairs(receipt: Receipt) -> int:
    """5 points for every two items on the receipt."""
    return (len(receipt.items) // 2) * POINTS_PER_ITEM_PAIR


def description_points(price_cents: int) -> int:
    """ceil(price * 0.2) with price in dollars, i.e. ceil(cents / 500), in exact integer math."""
    return -(-price_cents // 500)


def description_length(receipt: Receipt) -> int:
    """
    For each item whose trimmed description length is a multiple of 3,
    multiply the price by 0.2 and round up. An all-whitespace description has length 0 and counts.
    """
    return sum(
        description_points(item.price_cents)
        for item in receipt.items
        if len(item.short_description.strip()) % 3 == 0
    )


def odd_purchase_day(receipt: Receipt) -> int:
    return ODD_DAY_POINTS if receipt.purchased_at.day % 2 == 1 else 0


def afternoon_purchase(receipt: Receipt) -> int:
    """10 points if the purchase time is after 2:00pm and before 4:00pm."""
    t = receipt.purchased_at.time()
    return AFTERNOON_POINTS if AFTERNOON_START < t < AFTERNOON_END else 0


RULES = (
    ("retailer_name", retailer_name),
    ("round_dollar_total", round_dollar_total),
    ("quarter_multiple_total", quarter_multiple_total),
    ("item_pairs", item_pairs),
    ("description_length", description_length),
    ("odd_purchase_day", odd_purchase_day),
    ("afternoon_purchase", afternoon_purchase),
)

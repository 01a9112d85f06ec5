"""Scoring rules: each rule in isolation, including boundary times and the description ceiling."""

from datetime import datetime

import pytest

from src.models import Item, Receipt
from src.scoring import compute_score, score_breakdown
from src.scoring.rules import (
    afternoon_purchase,
    description_length,
    description_points,
    item_pairs,
    odd_purchase_day,
    quarter_multiple_total,
    retailer_name,
    round_dollar_total,
)


def _receipt(
    retailer="a",
    purchased_at=datetime(2025, 1, 2, 0, 0),
    total_cents=1,
    items=(Item("item", 1),),
) -> Receipt:
    return Receipt(retailer=retailer, purchased_at=purchased_at, total_cents=total_cents, items=tuple(items))


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Target", 6),
        ("M&M Corner Market", 14),
        ("abcdefghijklmnopqrstuvwxyz", 26),
        ("7-Eleven", 7),
        (" - & ", 0),
    ],
)
def test_retailer_name(name, expected):
    assert retailer_name(_receipt(retailer=name)) == expected


@pytest.mark.parametrize("cents,expected", [(100, 50), (900, 50), (0, 50), (125, 0), (101, 0), (3535, 0)])
def test_round_dollar_total(cents, expected):
    assert round_dollar_total(_receipt(total_cents=cents)) == expected


@pytest.mark.parametrize("cents,expected", [(25, 25), (175, 25), (900, 25), (0, 25), (265, 0), (3535, 0)])
def test_quarter_multiple_total(cents, expected):
    assert quarter_multiple_total(_receipt(total_cents=cents)) == expected


@pytest.mark.parametrize("count,expected", [(1, 0), (2, 5), (3, 5), (4, 10), (5, 10), (11, 25)])
def test_item_pairs(count, expected):
    items = [Item("item", 1)] * count
    assert item_pairs(_receipt(items=items)) == expected


@pytest.mark.parametrize(
    "cents,expected",
    [
        (0, 0),
        (1, 1),
        (499, 1),
        (500, 1),
        (501, 2),
        (526, 2),
        (1200, 3),
        (1225, 3),
        (8274, 17),
        (92425, 185),
    ],
)
def test_description_points_round_up(cents, expected):
    """price * 0.2 rounded up; exact whole values are not bumped."""
    assert description_points(cents) == expected


def test_description_length_only_multiples_of_three():
    items = [
        Item("abc", 526),
        Item("abc", 8274),
        Item("abc", 92425),
        Item("abcd", 127803),
    ]
    assert description_length(_receipt(items=items)) == 2 + 17 + 185


def test_description_length_trims_whitespace():
    # "   Klarbrunn 12-PK 12 FL OZ  " trims to 24 characters
    assert description_length(_receipt(items=[Item("   Klarbrunn 12-PK 12 FL OZ  ", 1200)])) == 3
    assert description_length(_receipt(items=[Item(" ab ", 1200)])) == 0


def test_description_length_blank_description_counts():
    """Trimmed length 0 is a multiple of 3."""
    assert description_length(_receipt(items=[Item("   ", 526)])) == 2


@pytest.mark.parametrize("day,expected", [(1, 6), (2, 0), (3, 6), (20, 0), (31, 6)])
def test_odd_purchase_day(day, expected):
    assert odd_purchase_day(_receipt(purchased_at=datetime(2025, 1, day, 0, 0))) == expected


@pytest.mark.parametrize(
    "hour,minute,expected",
    [
        (13, 59, 0),
        (14, 0, 0),
        (14, 1, 10),
        (15, 0, 10),
        (15, 59, 10),
        (16, 0, 0),
        (16, 1, 0),
        (2, 30, 0),
    ],
)
def test_afternoon_purchase_boundaries(hour, minute, expected):
    receipt = _receipt(purchased_at=datetime(2025, 1, 2, hour, minute))
    assert afternoon_purchase(receipt) == expected


def test_rules_are_additive():
    """Every rule contributes; none suppresses another."""
    receipt = _receipt(
        retailer="Fetch",
        purchased_at=datetime(2025, 1, 3, 15, 0),
        total_cents=1000,
        items=[Item("Thing1", 400), Item("Thing2", 600)],
    )
    breakdown = score_breakdown(receipt)
    assert breakdown["rules"] == {
        "retailer_name": 5,
        "round_dollar_total": 50,
        "quarter_multiple_total": 25,
        "item_pairs": 5,
        "description_length": 1 + 2,
        "odd_purchase_day": 6,
        "afternoon_purchase": 10,
    }
    assert compute_score(receipt) == 104


def test_custom_rule_list():
    receipt = _receipt(retailer="abc")
    assert compute_score(receipt, rules=(("retailer_name", retailer_name),)) == 3
    assert compute_score(receipt, rules=()) == 0
    assert score_breakdown(receipt, rules=()) == {"rules": {}, "total": 0}


def test_minimal_receipt_scores_non_negative():
    assert compute_score(_receipt(retailer=" ", total_cents=1, items=[Item("ab", 0)])) == 0

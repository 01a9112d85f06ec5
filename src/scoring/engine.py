"""Stage B: Deterministic scoring engine. Pure code, no I/O."""

from src.models import Receipt
from src.scoring.rules import RULES


def score_breakdown(receipt: Receipt, rules=RULES) -> dict:
    """
    Apply each rule independently to a validated Receipt.
    Returns per-rule contributions (in rule order) and the total.
    """
    contributions = {name: rule(receipt) for name, rule in rules}
    return {
        "rules": contributions,
        "total": sum(contributions.values()),
    }


def compute_score(receipt: Receipt, rules=RULES) -> int:
    """Total points for a validated Receipt. Never fails; always >= 0."""
    return sum(rule(receipt) for _, rule in rules)

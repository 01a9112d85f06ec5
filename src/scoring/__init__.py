"""Deterministic scoring engine (Stage B)."""

from src.scoring.engine import compute_score, score_breakdown
from src.scoring.rules import RULES

__all__ = ["compute_score", "score_breakdown", "RULES"]

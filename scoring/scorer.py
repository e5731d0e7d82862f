"""
Score arithmetic shared by the evaluators, plus display helpers.

Scoring model:
- Every evaluator starts at BASE_SCORE and subtracts the deduction of each rule
  that fires. Lint findings cost `min(cap, count * per_item)` per severity.
- The running total is never clamped; only the final value is rounded half-up
  and floored at 0.
"""
from __future__ import annotations

import math

from config import BASE_SCORE, SCORE_BANDS


def lint_deduction(count: int, per_item: float, cap: float) -> float:
    return min(cap, count * per_item)


def finalize_score(total_deduction: float) -> int:
    """BASE_SCORE minus deductions, rounded half-up, floored at 0."""
    raw = BASE_SCORE - total_deduction
    return max(0, min(BASE_SCORE, math.floor(raw + 0.5)))


def overall_score(scores: dict[str, int]) -> float:
    """Unweighted mean of the per-content-type scores."""
    if not scores:
        return 0.0
    return round(sum(scores.values()) / len(scores), 1)


def score_label(score: float) -> str:
    for label, lower, _ in SCORE_BANDS:
        if score >= lower:
            return label
    return SCORE_BANDS[-1][0]


def score_color(score: float) -> str:
    for _, lower, color in SCORE_BANDS:
        if score >= lower:
            return color
    return SCORE_BANDS[-1][2]

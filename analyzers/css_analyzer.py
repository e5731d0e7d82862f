"""
CSS evaluator: lint findings, !important usage, modern layout features,
custom properties, size and selector specificity.

`!important` is read twice: once as its own tiered concern and once more
under specificity. Both deductions apply.
"""
from __future__ import annotations

import re
from typing import Optional

from analyzers.base import BaseEvaluator, missing, missing_all
from analyzers.lint import CssLinter, LintCapability
from config import (
    CSS_IMPORTANT_EXCESSIVE,
    CSS_IMPORTANT_FREQUENT,
    CSS_LARGE_CHARS,
    CSS_LINT_ERROR,
    CSS_LINT_WARNING,
    CSS_MAX_ID_SELECTORS,
    CSS_VERY_LARGE_CHARS,
)
from models import LintPolicy, Rule

_ID_SELECTOR = re.compile(r"#[a-zA-Z]")


def important_count(content: str) -> int:
    return content.count("!important")


CSS_LINT_POLICY = LintPolicy(
    label="CSS",
    error_per_item=CSS_LINT_ERROR[0],
    error_cap=CSS_LINT_ERROR[1],
    warning_per_item=CSS_LINT_WARNING[0],
    warning_cap=CSS_LINT_WARNING[1],
)

CSS_RULES: tuple[Rule, ...] = (
    # ── !important (15) ──────────────────────────────────────────────────────
    Rule(
        "important_excessive", "important", 15,
        f"Excessive use of !important (>{CSS_IMPORTANT_EXCESSIVE} times) (-{{points}} points)",
        lambda content: important_count(content) > CSS_IMPORTANT_EXCESSIVE,
    ),
    Rule(
        "important_frequent", "important", 10,
        f"Frequent use of !important (>{CSS_IMPORTANT_FREQUENT} times) (-{{points}} points)",
        lambda content: CSS_IMPORTANT_FREQUENT < important_count(content) <= CSS_IMPORTANT_EXCESSIVE,
    ),
    Rule(
        "important_used", "important", 5,
        "Avoid using !important in CSS (-{points} points)",
        lambda content: 0 < important_count(content) <= CSS_IMPORTANT_FREQUENT,
    ),

    # ── Modern features (15) ─────────────────────────────────────────────────
    Rule(
        "no_flexbox", "modern", 5,
        "No use of Flexbox found for modern layouts (-{points} points)",
        missing_all("display: flex", "display:flex"),
    ),
    Rule(
        "no_grid", "modern", 5,
        "No use of CSS Grid found for advanced layouts (-{points} points)",
        missing_all("display: grid", "display:grid"),
    ),
    Rule(
        "no_media_queries", "modern", 5,
        "No media queries found for responsive design (-{points} points)",
        missing("@media"),
    ),

    # ── Custom properties (10) ───────────────────────────────────────────────
    Rule(
        "no_variables", "variables", 10,
        "No CSS variables used for maintainable code (-{points} points)",
        missing("var(--"),
    ),

    # ── Size ─────────────────────────────────────────────────────────────────
    Rule(
        "very_large_file", "size", 10,
        "CSS file is very large (>10KB); consider modularizing (-{points} points)",
        lambda content: len(content) > CSS_VERY_LARGE_CHARS,
    ),
    Rule(
        "large_file", "size", 5,
        "CSS file is large (>5KB); consider splitting into modules (-{points} points)",
        lambda content: CSS_LARGE_CHARS < len(content) <= CSS_VERY_LARGE_CHARS,
    ),

    # ── Specificity ──────────────────────────────────────────────────────────
    Rule(
        "too_many_ids", "specificity", 5,
        "Too many ID selectors; prefer class selectors for reusability (-{points} points)",
        lambda content: len(_ID_SELECTOR.findall(content)) > CSS_MAX_ID_SELECTORS,
    ),
    Rule(
        "important_overrides", "specificity", 5,
        "Using !important overrides natural specificity (-{points} points)",
        lambda content: important_count(content) > 0,
    ),
)


class CssEvaluator(BaseEvaluator):
    rules = CSS_RULES
    lint_policy = CSS_LINT_POLICY

    def __init__(self, linter: Optional[LintCapability] = None) -> None:
        super().__init__(linter if linter is not None else CssLinter())


def evaluate_css(content: str, linter: Optional[LintCapability] = None):
    return CssEvaluator(linter).evaluate(content)

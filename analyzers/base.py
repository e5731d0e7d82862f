"""
Base class for the three content evaluators.
"""
from __future__ import annotations

from typing import Callable, Optional

from analyzers.lint import LintCapability
from config import LINT_SAMPLE_SIZE
from models import LintFinding, LintPolicy, Rule, ScoreReport, Severity, format_points
from scoring.scorer import finalize_score, lint_deduction


class BaseEvaluator:
    """
    Runs lint accounting (when a linter and policy are set) and then the
    ordered rule table. Subclasses only declare `rules` and, optionally,
    `lint_policy`.
    """

    rules: tuple[Rule, ...] = ()
    lint_policy: Optional[LintPolicy] = None

    def __init__(self, linter: Optional[LintCapability] = None) -> None:
        self.linter = linter

    def evaluate(self, content: str) -> ScoreReport:
        content = content or ""
        feedback: list[str] = []
        total = 0.0

        if self.linter is not None and self.lint_policy is not None:
            total += self._apply_lint(self.linter.verify(content), feedback)

        for rule in self.rules:
            if rule.trigger(content):
                total += rule.deduction
                feedback.append(rule.feedback())

        return ScoreReport(score=finalize_score(total), feedback=feedback)

    # ── Lint accounting ───────────────────────────────────────────────────────

    def _apply_lint(self, findings: list[LintFinding], feedback: list[str]) -> float:
        policy = self.lint_policy
        errors = [f for f in findings if f.severity == Severity.ERROR]
        warnings = [f for f in findings if f.severity == Severity.WARNING]

        total = _account(
            errors, "errors", Severity.ERROR,
            policy.error_per_item, policy.error_cap, policy.label, feedback,
        )
        total += _account(
            warnings, "warnings", Severity.WARNING,
            policy.warning_per_item, policy.warning_cap, policy.label, feedback,
        )
        return total


def _account(
    findings: list[LintFinding],
    noun: str,
    severity: str,
    per_item: float,
    cap: float,
    label: str,
    feedback: list[str],
) -> float:
    if not findings:
        return 0.0

    deduction = lint_deduction(len(findings), per_item, cap)
    feedback.append(f"{len(findings)} {label} {noun} found (-{format_points(deduction)} points)")
    for finding in findings[:LINT_SAMPLE_SIZE]:
        feedback.append(f"{Severity.LABELS[severity]}: {finding.message} at line {finding.line}")
    return deduction


# ── Rule-building helpers ─────────────────────────────────────────────────────

def missing(token: str) -> Callable[[str], bool]:
    return lambda content: token not in content


def missing_all(*tokens: str) -> Callable[[str], bool]:
    return lambda content: not any(token in content for token in tokens)


def line_count(content: str) -> int:
    """Same count as splitting on newlines: '' is one line."""
    return content.count("\n") + 1

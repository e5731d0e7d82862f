"""
Core data models for Live Code Audit.
All modules import from here; nothing else is cross-imported at this level.

NOTE: `from __future__ import annotations` is intentionally omitted here.
Python 3.13.0 has a regression (bpo-121814) where that import causes a crash
in the dataclasses decorator when the module is not yet fully registered in
sys.modules.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


FAILURE_MESSAGE = "Failed to analyze the live demo link."

CONTENT_TYPES = ("html", "css", "javascript")


# ── Errors ────────────────────────────────────────────────────────────────────
class AuditError(Exception):
    """Base class for failures that abort a whole analysis."""


class PageLoadError(AuditError):
    """The target page could not be fetched."""


class AnalysisError(AuditError):
    """Raised by the orchestrator; wraps whatever stopped the analysis."""


# ── Severity ──────────────────────────────────────────────────────────────────
class Severity:
    ERROR   = "error"
    WARNING = "warning"

    LABELS = {
        ERROR:   "ERROR",
        WARNING: "WARNING",
    }


# ── Rules and reports ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Rule:
    """
    One ordered check. `trigger` receives the raw content and returns True
    when the deduction applies; `message` may reference `{points}`.
    """
    name: str
    category: str
    deduction: float
    message: str
    trigger: Callable[[str], bool]

    def feedback(self) -> str:
        return self.message.format(points=format_points(self.deduction))


@dataclass(frozen=True)
class LintPolicy:
    label: str                  # "CSS" / "JavaScript", used in summary lines
    error_per_item: float
    error_cap: float
    warning_per_item: float
    warning_cap: float


@dataclass
class LintFinding:
    severity: str               # Severity.ERROR / Severity.WARNING
    message: str
    line: Optional[int] = None


@dataclass
class ScoreReport:
    score: int
    feedback: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "feedback": list(self.feedback)}


# ── Page content ──────────────────────────────────────────────────────────────
@dataclass
class PageSources:
    stylesheet_links: list[str] = field(default_factory=list)
    inline_css: str = ""
    script_links: list[str] = field(default_factory=list)
    inline_js: str = ""


@dataclass
class LoadedPage:
    url: str
    final_url: str = ""
    status_code: int = 0
    html: str = ""
    sources: PageSources = field(default_factory=PageSources)


@dataclass
class ContentBundle:
    inline: str = ""
    external_links: list[str] = field(default_factory=list)
    combined: str = ""


# ── Top-level result ──────────────────────────────────────────────────────────
@dataclass
class AnalysisResult:
    url: str
    resolved_url: str = ""
    html: ScoreReport = field(default_factory=lambda: ScoreReport(score=0))
    css: ScoreReport = field(default_factory=lambda: ScoreReport(score=0))
    javascript: ScoreReport = field(default_factory=lambda: ScoreReport(score=0))

    @property
    def reports(self) -> dict[str, ScoreReport]:
        return {
            "html": self.html,
            "css": self.css,
            "javascript": self.javascript,
        }

    @property
    def scores(self) -> dict[str, int]:
        return {name: report.score for name, report in self.reports.items()}

    @property
    def feedback(self) -> dict[str, list[str]]:
        return {name: list(report.feedback) for name, report in self.reports.items()}

    def to_dict(self) -> dict[str, Any]:
        return {"scores": self.scores, "feedback": self.feedback}


def failure_payload(exc: BaseException) -> dict[str, Any]:
    return {
        "error": FAILURE_MESSAGE,
        "message": str(exc),
        "scores": {name: 0 for name in CONTENT_TYPES},
    }


def format_points(points: float) -> str:
    """1.5 -> '1.5', 10.0 -> '10'."""
    return f"{points:g}"

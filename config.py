"""
Global configuration constants for Live Code Audit.
All tunable thresholds live here.
"""
import os

# ── Network ───────────────────────────────────────────────────────────────────
RESOURCE_TIMEOUT = 5                    # seconds, per stylesheet / script
PAGE_TIMEOUT = 15                       # seconds, top-level page
PROBE_TIMEOUT = 10                      # seconds, GitHub Pages HEAD probe
MAX_FETCH_WORKERS = 8
DEFAULT_USER_AGENT = (
    "LiveCodeAudit/1.0 (+https://github.com/live-code-audit)"
)

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LIVE_CODE_AUDIT_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LIVE_CODE_AUDIT_LOG_FILE", "")
LOG_FILE_MAX_BYTES = 10_000_000
LOG_FILE_BACKUPS = 5

# ── Scoring ───────────────────────────────────────────────────────────────────
BASE_SCORE = 100
LINT_SAMPLE_SIZE = 3                    # literal findings echoed per severity

# Lint accounting: (per-item penalty, cap)
CSS_LINT_ERROR = (3, 20)
CSS_LINT_WARNING = (1.5, 10)
JS_LINT_ERROR = (2, 25)
JS_LINT_WARNING = (1, 15)

# ── HTML thresholds ───────────────────────────────────────────────────────────
HTML_VERY_LARGE_LINES = 500
HTML_LARGE_LINES = 300
HTML_MAX_INLINE_STYLES = 10
DEPRECATED_TAGS = ["<font>", "<center>", "<marquee>", "<frame>", "<frameset>"]

# ── CSS thresholds ────────────────────────────────────────────────────────────
CSS_IMPORTANT_EXCESSIVE = 10
CSS_IMPORTANT_FREQUENT = 5
CSS_VERY_LARGE_CHARS = 10_000
CSS_LARGE_CHARS = 5_000
CSS_MAX_ID_SELECTORS = 10

# ── JavaScript thresholds ─────────────────────────────────────────────────────
JS_MAX_CONSOLE_CALLS = 5
JS_VERY_LARGE_LINES = 500
JS_LARGE_LINES = 300
LONG_FUNCTION_LINES = 30
JS_MANY_LONG_FUNCTIONS = 3

# ── Score bands (label, lower bound, colour) ──────────────────────────────────
SCORE_BANDS = [
    ("Excellent",  90, "#00C851"),
    ("Good",       75, "#FFD700"),
    ("Needs Work", 50, "#FF8800"),
    ("Poor",        0, "#FF4444"),
]

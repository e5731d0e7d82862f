"""
Converts AnalysisResult data to Pandas DataFrames, CSV bytes and JSON for
export.
"""
from __future__ import annotations

import io
import json
import re
from typing import Any

import pandas as pd

from models import AnalysisResult
from scoring.scorer import score_label

_POINTS = re.compile(r"\(-([\d.]+) points\)$")

_DISPLAY_NAMES = {
    "html": "HTML",
    "css": "CSS",
    "javascript": "JavaScript",
}


# ── Scores DataFrame ───────────────────────────────────────────────────────────

def scores_to_df(result: AnalysisResult) -> pd.DataFrame:
    rows = []
    for name, report in result.reports.items():
        rows.append({
            "Content":  _DISPLAY_NAMES[name],
            "Score":    report.score,
            "Rating":   score_label(report.score),
            "Findings": len(report.feedback),
        })
    return pd.DataFrame(rows)


# ── Feedback DataFrame ─────────────────────────────────────────────────────────

def feedback_to_df(result: AnalysisResult) -> pd.DataFrame:
    """
    One row per feedback line, in emission order. Lint detail lines
    (ERROR:/WARNING:) carry no deduction of their own.
    """
    columns = ["Content", "Order", "Feedback", "Deduction"]
    rows = []
    for name, report in result.reports.items():
        for order, line in enumerate(report.feedback, start=1):
            rows.append({
                "Content":   _DISPLAY_NAMES[name],
                "Order":     order,
                "Feedback":  line,
                "Deduction": deduction_of(line),
            })

    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows, columns=columns)


def deduction_of(line: str) -> float:
    match = _POINTS.search(line)
    return float(match.group(1)) if match else 0.0


# ── CSV / JSON export ──────────────────────────────────────────────────────────

def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def to_json_bytes(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload, indent=2).encode("utf-8")

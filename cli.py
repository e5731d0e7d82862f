"""
Command-line entry point: score a live page and print the result.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from analyzers.orchestrator import analyze
from models import AuditError, failure_payload
from reporting.exporter import feedback_to_df, to_csv_bytes
from scoring.scorer import score_label

_TITLES = {"html": "HTML", "css": "CSS", "javascript": "JavaScript"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="live-code-audit",
        description="Score the HTML, CSS and JavaScript of a deployed web page.",
    )
    parser.add_argument("url", help="Live page URL or GitHub repository URL")
    parser.add_argument("--json", action="store_true", help="Print the JSON result")
    parser.add_argument("--csv", type=Path, help="Also write the feedback table to this CSV file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        result = analyze(args.url)
    except AuditError as exc:
        print(json.dumps(failure_payload(exc), indent=2))
        return 1

    if args.csv:
        args.csv.write_bytes(to_csv_bytes(feedback_to_df(result)))

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    for name, report in result.reports.items():
        print(f"{_TITLES[name]}: {report.score}/100 ({score_label(report.score)})")
        for line in report.feedback:
            print(f"  {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

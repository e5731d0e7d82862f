"""
JavaScript evaluator: lint findings, modern syntax, console noise, file size,
long functions and error handling.
"""
from __future__ import annotations

import re
from typing import Optional

from analyzers.base import BaseEvaluator, line_count, missing_all
from analyzers.lint import JsLinter, LintCapability
from config import (
    JS_LARGE_LINES,
    JS_LINT_ERROR,
    JS_LINT_WARNING,
    JS_MANY_LONG_FUNCTIONS,
    JS_MAX_CONSOLE_CALLS,
    JS_VERY_LARGE_LINES,
    LONG_FUNCTION_LINES,
)
from models import LintPolicy, Rule

# Function heads up to (and including) the opening brace of the body
FUNCTION_HEAD = re.compile(r"function\s*\w*\s*\([^)]*\)\s*\{")
ARROW_HEAD = re.compile(r"\([^)]*\)\s*=>\s*\{")


# ── Long-function heuristic ───────────────────────────────────────────────────

def function_bodies(content: str, head: re.Pattern) -> list[str]:
    """
    Text of every function matched by `head`, from the head to its balanced
    closing brace.

    This is a textual approximation, not a parser: braces inside strings,
    comments, template literals and regex literals are counted like any other
    brace, so unusual input can shift or hide a match. Matches do not overlap;
    scanning resumes after the end of each matched body, so functions nested
    inside a matched one are not reported separately. A head whose body never
    closes yields nothing.
    """
    bodies: list[str] = []
    pos = 0
    while True:
        match = head.search(content, pos)
        if match is None:
            return bodies

        depth = 1
        i = match.end()
        while i < len(content) and depth:
            ch = content[i]
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
            i += 1

        if depth == 0:
            bodies.append(content[match.start():i])
            pos = i
        else:
            pos = match.start() + 1


def long_function_count(content: str, max_lines: int = LONG_FUNCTION_LINES) -> int:
    bodies = function_bodies(content, FUNCTION_HEAD) + function_bodies(content, ARROW_HEAD)
    return sum(1 for body in bodies if line_count(body) > max_lines)


# ── Rules ─────────────────────────────────────────────────────────────────────

JS_LINT_POLICY = LintPolicy(
    label="JavaScript",
    error_per_item=JS_LINT_ERROR[0],
    error_cap=JS_LINT_ERROR[1],
    warning_per_item=JS_LINT_WARNING[0],
    warning_cap=JS_LINT_WARNING[1],
)

JS_RULES: tuple[Rule, ...] = (
    # ── Modern syntax (20) ───────────────────────────────────────────────────
    Rule(
        "no_arrow_functions", "modern", 5,
        "No arrow functions found; consider using ES6+ features (-{points} points)",
        missing_all("=>"),
    ),
    Rule(
        "no_block_scoping", "modern", 5,
        "No const/let declarations found; avoid using var (-{points} points)",
        missing_all("const ", "let "),
    ),
    Rule(
        "no_async_await", "modern", 5,
        "No async/await usage for modern asynchronous code (-{points} points)",
        missing_all("async ", "await "),
    ),
    Rule(
        "no_modules", "modern", 5,
        "No ES modules (import/export) detected for code organization (-{points} points)",
        missing_all("import ", "export "),
    ),

    # ── Code quality (20) ────────────────────────────────────────────────────
    Rule(
        "console_statements", "quality", 5,
        "Excessive console statements in production code (-{points} points)",
        lambda content: content.count("console.") > JS_MAX_CONSOLE_CALLS,
    ),
    Rule(
        "very_large_file", "quality", 10,
        f"JavaScript file is very large (>{JS_VERY_LARGE_LINES} lines); consider modularizing (-{{points}} points)",
        lambda content: line_count(content) > JS_VERY_LARGE_LINES,
    ),
    Rule(
        "large_file", "quality", 5,
        f"JavaScript file is large (>{JS_LARGE_LINES} lines); consider splitting into modules (-{{points}} points)",
        lambda content: JS_LARGE_LINES < line_count(content) <= JS_VERY_LARGE_LINES,
    ),

    # ── Function length (10) ─────────────────────────────────────────────────
    Rule(
        "many_long_functions", "functions", 10,
        f"Multiple very long functions (>{LONG_FUNCTION_LINES} lines); break down into smaller functions (-{{points}} points)",
        lambda content: long_function_count(content) > JS_MANY_LONG_FUNCTIONS,
    ),
    Rule(
        "some_long_functions", "functions", 5,
        "Some functions are too long; consider refactoring into smaller units (-{points} points)",
        lambda content: 0 < long_function_count(content) <= JS_MANY_LONG_FUNCTIONS,
    ),

    # ── Error handling (10) ──────────────────────────────────────────────────
    Rule(
        "no_try_catch", "errors", 5,
        "No error handling (try/catch) found for robust code (-{points} points)",
        missing_all("try", "catch"),
    ),
    Rule(
        "fetch_without_catch", "errors", 5,
        "Fetch API used without error handling (.catch) (-{points} points)",
        lambda content: "fetch(" in content and ".catch(" not in content,
    ),
)


class JsEvaluator(BaseEvaluator):
    rules = JS_RULES
    lint_policy = JS_LINT_POLICY

    def __init__(self, linter: Optional[LintCapability] = None) -> None:
        super().__init__(linter if linter is not None else JsLinter())


def evaluate_js(content: str, linter: Optional[LintCapability] = None):
    return JsEvaluator(linter).evaluate(content)

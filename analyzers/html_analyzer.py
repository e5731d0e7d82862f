"""
HTML evaluator: semantic structure, SEO, accessibility, modern markup and
readability, all checked on the raw page text (substring / regex only, no DOM).
"""
from __future__ import annotations

import re

from analyzers.base import BaseEvaluator, line_count, missing
from config import (
    DEPRECATED_TAGS,
    HTML_LARGE_LINES,
    HTML_MAX_INLINE_STYLES,
    HTML_VERY_LARGE_LINES,
)
from models import Rule

_IMG_WITH_ALT = re.compile(r'<img[^>]+alt="[^"]*"')
_HTML_WITH_LANG = re.compile(r'<html[^>]+lang="[^"]*"')
_LABEL_WITH_FOR = re.compile(r'<label[^>]+for="[^"]*"')
_DEPRECATED = re.compile("|".join(re.escape(tag) for tag in DEPRECATED_TAGS))
_INLINE_STYLE = re.compile(r'style="')


def _semantic(tag: str, points: int) -> Rule:
    return Rule(
        f"missing_{tag.strip('<>')}", "semantic", points,
        f"Missing {tag} for improved semantic structure (-{{points}} points)",
        missing(tag),
    )


def _seo(name: str, element: str, points: int) -> Rule:
    return Rule(
        name, "seo", points,
        f"Missing {element} for better SEO (-{{points}} points)",
        missing(element),
    )


def _images_without_alt(content: str) -> bool:
    return "<img" in content and not _IMG_WITH_ALT.search(content)


def _inputs_without_labels(content: str) -> bool:
    return "<input" in content and not _LABEL_WITH_FOR.search(content)


def _too_many_inline_styles(content: str) -> bool:
    return len(_INLINE_STYLE.findall(content)) > HTML_MAX_INLINE_STYLES


HTML_RULES: tuple[Rule, ...] = (
    # ── Semantic tags (30) ───────────────────────────────────────────────────
    _semantic("<header>", 5),
    _semantic("<main>", 5),
    _semantic("<footer>", 5),
    _semantic("<section>", 3),
    _semantic("<article>", 3),
    _semantic("<nav>", 3),
    _semantic("<aside>", 3),
    _semantic("<figure>", 3),

    # ── SEO (15) ─────────────────────────────────────────────────────────────
    _seo("missing_title", "<title>", 5),
    _seo("missing_description", '<meta name="description"', 5),
    _seo("missing_keywords", '<meta name="keywords"', 3),
    _seo("missing_h1", "<h1>", 2),

    # ── Accessibility (25) ───────────────────────────────────────────────────
    Rule(
        "images_missing_alt", "accessibility", 10,
        "Images are missing alt attributes for accessibility (-{points} points)",
        _images_without_alt,
    ),
    Rule(
        "missing_lang", "accessibility", 5,
        "Missing lang attribute on html tag (-{points} points)",
        lambda content: not _HTML_WITH_LANG.search(content),
    ),
    Rule(
        "inputs_missing_labels", "accessibility", 5,
        "Form fields missing associated labels (-{points} points)",
        _inputs_without_labels,
    ),
    Rule(
        "missing_aria", "accessibility", 5,
        "No ARIA attributes found for enhanced accessibility (-{points} points)",
        missing("aria-"),
    ),

    # ── Modern markup (15) ───────────────────────────────────────────────────
    Rule(
        "deprecated_tags", "modern", 10,
        "Deprecated tags found (e.g., <font>, <center>) (-{points} points)",
        lambda content: bool(_DEPRECATED.search(content)),
    ),
    Rule(
        "missing_doctype", "modern", 5,
        "Missing HTML5 doctype declaration (-{points} points)",
        missing("<!DOCTYPE html>"),
    ),

    # ── Structure / readability (15) ─────────────────────────────────────────
    Rule(
        "very_large_file", "structure", 8,
        "HTML file is very large; consider splitting into components (-{points} points)",
        lambda content: line_count(content) > HTML_VERY_LARGE_LINES,
    ),
    Rule(
        "large_file", "structure", 5,
        "HTML file is large; consider modularizing (-{points} points)",
        lambda content: HTML_LARGE_LINES < line_count(content) <= HTML_VERY_LARGE_LINES,
    ),
    Rule(
        "inline_styles", "structure", 7,
        "Excessive inline styles found; use external stylesheets instead (-{points} points)",
        _too_many_inline_styles,
    ),
)


class HtmlEvaluator(BaseEvaluator):
    rules = HTML_RULES


def evaluate_html(content: str):
    return HtmlEvaluator().evaluate(content)

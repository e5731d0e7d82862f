"""
Lint capabilities used by the CSS and JavaScript evaluators.

Anything with a `verify(text) -> list[LintFinding]` method can be injected into
an evaluator. The defaults below are deliberately small rule sets on top of
real parsers (tinycss2 for CSS, tree-sitter for JavaScript).
"""
from __future__ import annotations

import re
from typing import Optional, Protocol

import tinycss2
import tree_sitter_javascript
from tree_sitter import Language, Parser

from models import LintFinding, Severity


class LintCapability(Protocol):
    def verify(self, text: str) -> list[LintFinding]:
        ...


# ── CSS ───────────────────────────────────────────────────────────────────────

# At-rules whose block holds further rules rather than declarations
_NESTED_AT_RULES = {
    "media", "supports", "document", "layer", "container", "scope",
    "keyframes", "-webkit-keyframes", "-moz-keyframes",
}

# Some tinycss2 messages carry an unformatted "{token.type}" placeholder
_UNFORMATTED = re.compile(r",?\s*got \{[^}]*\}|\{[^}]*\}")


class CssLinter:
    """
    Errors: anything tinycss2 reports as a parse error.
    Warnings: empty rules, duplicate properties, zero values with units.
    """

    def verify(self, text: str) -> list[LintFinding]:
        findings: list[LintFinding] = []
        rules = tinycss2.parse_stylesheet(text or "", skip_comments=True, skip_whitespace=True)
        self._check_rules(rules, findings)
        return findings

    def _check_rules(self, rules, findings: list[LintFinding]) -> None:
        for rule in rules:
            if rule.type == "error":
                findings.append(_css_error(rule))
            elif rule.type == "qualified-rule":
                self._check_block(rule, rule.content, findings)
            elif rule.type == "at-rule" and rule.content is not None:
                if rule.lower_at_keyword in _NESTED_AT_RULES:
                    nested = tinycss2.parse_rule_list(
                        rule.content, skip_comments=True, skip_whitespace=True,
                    )
                    self._check_rules(nested, findings)
                else:
                    self._check_block(rule, rule.content, findings)

    def _check_block(self, rule, content, findings: list[LintFinding]) -> None:
        declarations = tinycss2.parse_declaration_list(
            content, skip_comments=True, skip_whitespace=True,
        )
        if not declarations:
            findings.append(LintFinding(Severity.WARNING, "Rule is empty.", rule.source_line))
            return

        seen: set[str] = set()
        for decl in declarations:
            if decl.type == "error":
                findings.append(_css_error(decl))
                continue
            if decl.type != "declaration":
                continue

            name = decl.lower_name
            if name in seen:
                findings.append(LintFinding(
                    Severity.WARNING,
                    f"Duplicate property '{name}' found.",
                    decl.source_line,
                ))
            seen.add(name)

            for token in decl.value:
                if token.type == "dimension" and token.value == 0 and token.unit:
                    findings.append(LintFinding(
                        Severity.WARNING,
                        "Values of 0 shouldn't have units specified.",
                        token.source_line,
                    ))


def _css_error(node) -> LintFinding:
    message = _UNFORMATTED.sub("", node.message).strip()
    return LintFinding(Severity.ERROR, message or "Invalid CSS.", node.source_line)


# ── JavaScript ────────────────────────────────────────────────────────────────

JS_LANGUAGE = Language(tree_sitter_javascript.language())

# (severity, pattern, message), checked line by line
_JS_LINE_CHECKS = [
    (Severity.ERROR,   re.compile(r"\bdebugger\s*;?"),        "Unexpected 'debugger' statement."),
    (Severity.WARNING, re.compile(r"\bvar\s+[A-Za-z_$]"),     "Unexpected var, use let or const instead."),
    (Severity.WARNING, re.compile(r"[^=!<>]==(?!=)|!=(?!=)"), "Expected '===' or '!==' instead of loose equality."),
    (Severity.WARNING, re.compile(r"\beval\s*\("),            "eval can be harmful."),
]


class JsLinter:
    """
    Errors: the first syntax error tree-sitter finds, `debugger` statements.
    Warnings: `var`, loose equality, `eval(`.
    """

    def verify(self, text: str) -> list[LintFinding]:
        source = text or ""
        findings: list[LintFinding] = []

        syntax_error = self._syntax_error(source)
        if syntax_error is not None:
            findings.append(syntax_error)

        for lineno, line in enumerate(source.split("\n"), start=1):
            for severity, pattern, message in _JS_LINE_CHECKS:
                if pattern.search(line):
                    findings.append(LintFinding(severity, message, lineno))

        return findings

    @staticmethod
    def _syntax_error(source: str) -> Optional[LintFinding]:
        data = source.encode("utf-8")
        tree = Parser(JS_LANGUAGE).parse(data)
        if not tree.root_node.has_error:
            return None

        node = _first_error(tree.root_node)
        if node is None:
            return LintFinding(Severity.ERROR, "Parsing error: invalid syntax", 1)

        if node.is_missing:
            description = f"Missing '{node.type}'"
        else:
            snippet = data[node.start_byte:node.end_byte].decode("utf-8", "replace")
            snippet = snippet.strip().split("\n", 1)[0][:40]
            description = f"Unexpected token '{snippet}'" if snippet else "Unexpected end of input"
        return LintFinding(Severity.ERROR, f"Parsing error: {description}", node.start_point[0] + 1)


def _first_error(root):
    """First ERROR or missing node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        stack.extend(child for child in reversed(node.children) if child.has_error or child.is_missing)
    return None

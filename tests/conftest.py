from unittest.mock import MagicMock

import pytest
import requests

from models import LintFinding, Severity


class StaticLinter:
    """Lint capability that returns a fixed list of findings."""

    def __init__(self, findings=None):
        self.findings = list(findings or [])
        self.calls: list[str] = []

    def verify(self, text):
        self.calls.append(text)
        return list(self.findings)


class ExplodingLinter:
    def verify(self, text):
        raise RuntimeError("linter unavailable")


def make_response(text="", status=200, url=None):
    resp = MagicMock()
    resp.text = text
    resp.status_code = status
    resp.url = url
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error for url: {url}")
    return resp


def make_session(routes: dict):
    """
    MagicMock session whose get/head look the URL up in `routes`.
    A route value is a response, an exception instance, or text (HTTP 200).
    Unknown URLs raise ConnectionError.
    """
    def lookup(url, *args, **kwargs):
        value = routes.get(url)
        if value is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(value, Exception):
            raise value
        if isinstance(value, str):
            return make_response(value, url=url)
        return value

    session = MagicMock()
    session.get.side_effect = lookup
    session.head.side_effect = lookup
    return session


def finding(severity, n):
    return LintFinding(severity, f"{severity} number {n}", n)


@pytest.fixture
def no_findings():
    return StaticLinter()


@pytest.fixture
def lint_findings():
    def build(errors=0, warnings=0):
        return StaticLinter(
            [finding(Severity.ERROR, i) for i in range(1, errors + 1)]
            + [finding(Severity.WARNING, i) for i in range(1, warnings + 1)]
        )
    return build


@pytest.fixture
def exploding_linter():
    return ExplodingLinter()


@pytest.fixture
def fake_session():
    return make_session


@pytest.fixture
def fake_response():
    return make_response

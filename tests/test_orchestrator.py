from unittest.mock import patch

import pytest

from analyzers.orchestrator import analyze, analyze_url
from models import FAILURE_MESSAGE, AnalysisError

PAGE = "https://site.test/"

HTML = """<!DOCTYPE html><html lang="en"><head><title>T</title>
<link rel="stylesheet" href="main.css"><link rel="stylesheet" href="gone.css">
<style>.inline{display:flex}</style></head>
<body><script src="app.js"></script><script>const x = 1;</script></body></html>"""


def same_url(url, session):
    return url


@pytest.fixture
def site(fake_session):
    return fake_session({
        PAGE: HTML,
        "https://site.test/main.css": ".main{display:grid}",
        "https://site.test/app.js": "export const y = () => 2;",
    })


class TestAnalyze:
    def test_scores_every_content_type(self, site, no_findings):
        result = analyze(PAGE, session=site, resolver=same_url,
                         css_linter=no_findings, js_linter=no_findings)
        assert set(result.scores) == {"html", "css", "javascript"}
        assert all(0 <= score <= 100 for score in result.scores.values())
        assert result.resolved_url == PAGE

    def test_combined_content_reaches_the_linters(self, site, lint_findings):
        css_linter, js_linter = lint_findings(), lint_findings()
        analyze(PAGE, session=site, resolver=same_url,
                css_linter=css_linter, js_linter=js_linter)
        assert css_linter.calls == [".inline{display:flex}.main{display:grid}"]
        assert js_linter.calls == ["const x = 1;export const y = () => 2;"]

    def test_missing_resource_is_tolerated(self, site, no_findings):
        result = analyze(PAGE, session=site, resolver=same_url,
                         css_linter=no_findings, js_linter=no_findings)
        # flexbox and grid both present once main.css is in; gone.css is dropped
        assert not any("Flexbox" in line or "Grid" in line for line in result.css.feedback)

    def test_resolver_result_is_loaded(self, site, no_findings):
        result = analyze("https://github.com/alice/site", session=site,
                         resolver=lambda url, session: PAGE,
                         css_linter=no_findings, js_linter=no_findings)
        assert result.url == "https://github.com/alice/site"
        assert result.resolved_url == PAGE

    def test_page_failure_raises(self, fake_session, no_findings):
        with pytest.raises(AnalysisError):
            analyze(PAGE, session=fake_session({}), resolver=same_url,
                    css_linter=no_findings, js_linter=no_findings)

    def test_linter_failure_raises(self, site, exploding_linter, no_findings):
        with pytest.raises(AnalysisError, match="linter unavailable"):
            analyze(PAGE, session=site, resolver=same_url,
                    css_linter=exploding_linter, js_linter=no_findings)

    @patch("analyzers.orchestrator.make_session")
    def test_own_session_is_closed(self, mock_make_session, site, no_findings):
        site.__enter__.return_value = site
        mock_make_session.return_value = site
        result = analyze(PAGE, resolver=same_url, css_linter=no_findings, js_linter=no_findings)
        assert result.resolved_url == PAGE
        site.__exit__.assert_called_once()

    @pytest.mark.parametrize("url", ["", "   "])
    def test_blank_url(self, url):
        with pytest.raises(AnalysisError):
            analyze(url)

    def test_progress_reaches_completion(self, site, no_findings):
        events = []
        analyze(PAGE, session=site, resolver=same_url, css_linter=no_findings,
                js_linter=no_findings, progress_callback=events.append)
        assert events[0]["pct"] == 0
        assert events[-1] == {"message": "Analysis complete.", "pct": 100}

    def test_broken_progress_callback_is_ignored(self, site, no_findings):
        def callback(event):
            raise ValueError("ui gone")

        result = analyze(PAGE, session=site, resolver=same_url, css_linter=no_findings,
                         js_linter=no_findings, progress_callback=callback)
        assert result.html.score > 0


class TestAnalyzeUrl:
    def test_success_shape(self, site, no_findings):
        payload = analyze_url(PAGE, session=site, resolver=same_url,
                              css_linter=no_findings, js_linter=no_findings)
        assert set(payload) == {"scores", "feedback"}
        assert set(payload["feedback"]) == {"html", "css", "javascript"}

    def test_failure_shape(self, fake_session, no_findings):
        payload = analyze_url(PAGE, session=fake_session({}), resolver=same_url,
                              css_linter=no_findings, js_linter=no_findings)
        assert payload["error"] == FAILURE_MESSAGE
        assert payload["message"]
        assert payload["scores"] == {"html": 0, "css": 0, "javascript": 0}
        assert "feedback" not in payload

    def test_linter_failure_gives_failure_shape(self, site, exploding_linter, no_findings):
        payload = analyze_url(PAGE, session=site, resolver=same_url,
                              css_linter=no_findings, js_linter=exploding_linter)
        assert payload["error"] == FAILURE_MESSAGE
        assert payload["scores"] == {"html": 0, "css": 0, "javascript": 0}

"""
Runs one analysis: resolve the live URL, load the page, assemble the CSS and
JavaScript bundles, score all three content types.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional

import requests

from analyzers.css_analyzer import CssEvaluator
from analyzers.html_analyzer import HtmlEvaluator
from analyzers.js_analyzer import JsEvaluator
from analyzers.lint import LintCapability
from config import PAGE_TIMEOUT, RESOURCE_TIMEOUT
from loader.fetcher import fetch_bundle, load_page, make_session
from loader.resolver import resolve_live_url
from logger import get_logger
from models import AnalysisError, AnalysisResult, AuditError, failure_payload

logger = get_logger(__name__)

Resolver = Callable[[str, requests.Session], str]


def analyze(
    url: str,
    session: Optional[requests.Session] = None,
    resolver: Resolver = resolve_live_url,
    css_linter: Optional[LintCapability] = None,
    js_linter: Optional[LintCapability] = None,
    progress_callback: Optional[Callable[[dict], None]] = None,
    page_timeout: float = PAGE_TIMEOUT,
    resource_timeout: float = RESOURCE_TIMEOUT,
) -> AnalysisResult:
    """
    Score the HTML, CSS and JavaScript of the page at `url`.
    Raises AnalysisError if anything other than a single linked resource fails.
    """
    if not url or not url.strip():
        raise AnalysisError("No URL provided.")

    if session is None:
        with make_session() as own_session:
            return analyze(
                url, own_session, resolver, css_linter, js_linter,
                progress_callback, page_timeout, resource_timeout,
            )

    try:
        _emit(progress_callback, "Resolving live URL…", 0)
        live_url = resolver(url.strip(), session)

        _emit(progress_callback, f"Loading {live_url}…", 10)
        page = load_page(live_url, session, timeout=page_timeout)
        sources = page.sources

        _emit(progress_callback, "Fetching stylesheets and scripts…", 30)
        with ThreadPoolExecutor(max_workers=2) as executor:
            css_future = executor.submit(
                fetch_bundle, sources.inline_css, sources.stylesheet_links,
                live_url, session, resource_timeout,
            )
            js_future = executor.submit(
                fetch_bundle, sources.inline_js, sources.script_links,
                live_url, session, resource_timeout,
            )
            css_bundle = css_future.result()
            js_bundle = js_future.result()

        logger.info("Combined CSS content length: %d", len(css_bundle.combined))
        logger.info("Combined JavaScript content length: %d", len(js_bundle.combined))

        _emit(progress_callback, "Scoring HTML, CSS and JavaScript…", 70)
        with ThreadPoolExecutor(max_workers=3) as executor:
            html_future = executor.submit(HtmlEvaluator().evaluate, page.html)
            css_future = executor.submit(CssEvaluator(css_linter).evaluate, css_bundle.combined)
            js_future = executor.submit(JsEvaluator(js_linter).evaluate, js_bundle.combined)
            result = AnalysisResult(
                url=url,
                resolved_url=live_url,
                html=html_future.result(),
                css=css_future.result(),
                javascript=js_future.result(),
            )
    except AnalysisError:
        raise
    except Exception as exc:
        raise AnalysisError(str(exc)) from exc

    _emit(progress_callback, "Analysis complete.", 100)
    return result


def analyze_url(url: str, **kwargs: Any) -> dict[str, Any]:
    """
    JSON-ready outcome of `analyze`: the result shape on success, the failure
    payload (zeroed scores) otherwise. Never a mix of the two.
    """
    try:
        return analyze(url, **kwargs).to_dict()
    except AuditError as exc:
        logger.error("Error fetching or analyzing the URL %s: %s", url, exc)
        return failure_payload(exc)


def _emit(callback: Optional[Callable[[dict], None]], message: str, pct: int) -> None:
    if callback:
        try:
            callback({"message": message, "pct": pct})
        except Exception:
            logger.debug("Progress callback failed", exc_info=True)

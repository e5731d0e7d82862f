"""
Low-level HTTP fetching: the audited page itself and the stylesheets / scripts
it links to.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Optional
from urllib.parse import urljoin, urlparse

import requests

from config import DEFAULT_USER_AGENT, MAX_FETCH_WORKERS, PAGE_TIMEOUT, RESOURCE_TIMEOUT
from loader.parser import extract_sources, parse_document
from logger import get_logger
from models import ContentBundle, LoadedPage, PageLoadError

logger = get_logger(__name__)


# ── Page ──────────────────────────────────────────────────────────────────────

def fetch_page(
    url: str,
    session: requests.Session,
    timeout: float = PAGE_TIMEOUT,
) -> LoadedPage:
    """
    GET the top-level page. Any network failure or HTTP error status raises
    PageLoadError; there is nothing to score without the page.
    """
    page = LoadedPage(url=url, final_url=url)

    try:
        resp = session.get(url, timeout=timeout, allow_redirects=True)
        resp.raise_for_status()
    except requests.exceptions.SSLError as exc:
        raise PageLoadError(f"SSL Error: {exc}") from exc
    except requests.exceptions.ConnectionError as exc:
        raise PageLoadError(f"Connection Error: {exc}") from exc
    except requests.exceptions.Timeout as exc:
        raise PageLoadError(f"Request timed out after {timeout}s: {url}") from exc
    except requests.exceptions.TooManyRedirects as exc:
        raise PageLoadError("Too many redirects") from exc
    except requests.RequestException as exc:
        raise PageLoadError(str(exc)) from exc

    page.status_code = resp.status_code
    page.final_url = resp.url or url
    page.html = resp.text or ""
    return page


def load_page(
    url: str,
    session: requests.Session,
    timeout: float = PAGE_TIMEOUT,
) -> LoadedPage:
    """Fetch the page and pull out its stylesheet / script sources."""
    page = fetch_page(url, session, timeout)
    soup = parse_document(page.html)
    page.sources = extract_sources(soup)
    logger.info(
        "Loaded %s: %d stylesheet(s), %d script(s)",
        page.final_url,
        len(page.sources.stylesheet_links),
        len(page.sources.script_links),
    )
    return page


# ── Linked resources ──────────────────────────────────────────────────────────

def fetch_all(
    links: list[str],
    base_url: str,
    session: Optional[requests.Session] = None,
    timeout: float = RESOURCE_TIMEOUT,
    max_workers: int = MAX_FETCH_WORKERS,
) -> str:
    """
    Fetch every link (resolved against base_url) and join the bodies that came
    back with newlines, in link order. Failed or empty fetches are logged and
    left out; this never raises for a single bad link.
    """
    if not links:
        return ""

    if session is None:
        with make_session() as own_session:
            return fetch_all(links, base_url, own_session, timeout, max_workers)

    workers = max(1, min(max_workers, len(links)))

    with ThreadPoolExecutor(max_workers=workers) as executor:
        bodies = list(executor.map(
            lambda link: _fetch_resource(link, base_url, session, timeout),
            links,
        ))

    return "\n".join(body for body in bodies if body is not None)


def fetch_bundle(
    inline: str,
    links: list[str],
    base_url: str,
    session: Optional[requests.Session] = None,
    timeout: float = RESOURCE_TIMEOUT,
) -> ContentBundle:
    """Inline content first, then every fetched external body."""
    external = fetch_all(links, base_url, session=session, timeout=timeout)
    return ContentBundle(
        inline=inline,
        external_links=list(links),
        combined=inline + external,
    )


def _fetch_resource(
    link: str,
    base_url: str,
    session: requests.Session,
    timeout: float,
) -> Optional[str]:
    try:
        url = _resolve_link(link, base_url)
        logger.info("Attempting to fetch: %s", url)
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except (requests.RequestException, ValueError) as exc:
        logger.error("Failed to fetch external file at %s: %s", link, exc)
        return None

    body = resp.text
    if not body:
        logger.warning("Empty content received from: %s", url)
        return None

    logger.info("Fetched content from: %s", url)
    return body


def _resolve_link(link: str, base_url: str) -> str:
    """Absolute http(s) URL for link; ValueError when there is none."""
    if link is None or not str(link).strip():
        raise ValueError("empty link")

    url = urljoin(base_url, str(link).strip())
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"cannot resolve {link!r} to an http(s) URL")
    return url


# ── Helpers ───────────────────────────────────────────────────────────────────

def make_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    session = requests.Session()
    # A failed fetch is dropped for the call, never retried.
    adapter = requests.adapters.HTTPAdapter(max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({
        "User-Agent": user_agent,
        "Accept": "text/html,text/css,application/javascript,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
    })
    return session

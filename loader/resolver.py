"""
Maps a GitHub repository URL to its GitHub Pages deployment when one answers.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

import requests
import tldextract

from config import PROBE_TIMEOUT
from logger import get_logger

logger = get_logger(__name__)

# Offline suffix list; no network call on first use.
_extract = tldextract.TLDExtract(suffix_list_urls=())


def github_pages_candidate(url: str) -> Optional[str]:
    """
    https://github.com/<user>/<repo>/... -> https://<user>.github.io/<repo>
    None for anything that is not a repository URL on github.com.
    """
    parsed = urlparse(url.strip())
    ext = _extract(parsed.netloc)
    if (ext.domain, ext.suffix) != ("github", "com") or ext.subdomain not in ("", "www"):
        return None

    parts = [p for p in parsed.path.split("/") if p]
    if len(parts) < 2:
        return None

    user, repo = parts[0], parts[1]
    if repo.endswith(".git"):
        repo = repo[:-4]
    return f"https://{user}.github.io/{repo}"


def resolve_live_url(
    url: str,
    session: requests.Session,
    timeout: float = PROBE_TIMEOUT,
) -> str:
    """
    Return the URL whose page should be audited. GitHub repository URLs are
    swapped for their Pages site when a HEAD probe succeeds; otherwise the
    original URL is kept.
    """
    candidate = github_pages_candidate(url)
    if candidate is None:
        return url

    logger.info("Attempting to access GitHub Pages: %s", candidate)
    try:
        resp = session.head(candidate, timeout=timeout, allow_redirects=True)
        resp.raise_for_status()
    except requests.RequestException as exc:
        logger.info("GitHub Pages not available (%s). Using original URL: %s", exc, url)
        return url

    return candidate

"""
Turns raw page HTML into a queryable tree and pulls out the page's stylesheet
and script sources, inline and linked.
"""
from __future__ import annotations

from bs4 import BeautifulSoup

from models import PageSources


def parse_document(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html or "", "lxml")
    except Exception:
        return BeautifulSoup(html or "", "html.parser")


def extract_sources(soup: BeautifulSoup) -> PageSources:
    """
    Collect, in document order:
    - hrefs of <link rel="stylesheet">
    - text of every <style>
    - srcs of <script src>
    - text of every <script> without src
    Links are returned as written; the fetcher resolves them.
    """
    sources = PageSources()

    for link in soup.find_all("link", rel=_has_rel("stylesheet")):
        href = link.get("href")
        if href:
            sources.stylesheet_links.append(href)

    sources.inline_css = "".join(style.string or "" for style in soup.find_all("style"))

    inline_scripts: list[str] = []
    for script in soup.find_all("script"):
        src = script.get("src")
        if script.has_attr("src"):
            if src:
                sources.script_links.append(src)
            continue
        inline_scripts.append(script.string or "")
    sources.inline_js = "".join(inline_scripts)

    return sources


def _has_rel(value: str):
    def matcher(rel) -> bool:
        if not rel:
            return False
        values = rel if isinstance(rel, list) else str(rel).split()
        return value in (v.lower() for v in values)
    return matcher

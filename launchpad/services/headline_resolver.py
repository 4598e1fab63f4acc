from __future__ import annotations

import html
import re
from typing import Any, Callable, Iterable
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from launchpad.errors import HeadlineExtractionError
from launchpad.schemas.headline import Headline

PLACEHOLDER_TITLE = "Latest from TLDR Tech"

FALLBACK_HEADLINE = Headline(
    title=PLACEHOLDER_TITLE,
    url="https://tldr.tech/",
    summary="Visit TLDR for today’s top startup/tech stories.",
    source="fallback",
)

_ITEM_RE = re.compile(r"<item>.*?</item>", re.DOTALL)
_TITLE_RE = re.compile(r"<title><!\[CDATA\[(.*?)\]\]></title>|<title>(.*?)</title>")
_LINK_RE = re.compile(r"<link>(.*?)</link>")

Strategy = Callable[[], "Headline | None"]


def _first_truthy(*values: Any) -> Any:
    for value in values:
        if value:
            return value
    return None


def _index(value: Any, idx: int) -> Any:
    if isinstance(value, (list, tuple)) and len(value) > idx:
        return value[idx]
    return None


def _field(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    return None


def extract_structured_item(data: Any) -> Headline:
    """Pick the first usable item out of a loosely shaped "latest" payload.

    Candidates are probed in order: ``items[0]``, ``stories[0]``,
    ``sections[0].items[0]``, then the root object itself.
    """
    first = _first_truthy(
        _index(_field(data, "items"), 0),
        _index(_field(data, "stories"), 0),
        _index(_field(_index(_field(data, "sections"), 0), "items"), 0),
        data,
    )

    title = _first_truthy(_field(first, "title"), _field(data, "title"))
    url = _first_truthy(_field(first, "url"), _field(first, "link"), _field(data, "link"))
    if not title or not url:
        raise HeadlineExtractionError("structured payload has no title/url")

    summary = _first_truthy(_field(first, "summary"), _field(first, "tldr"), _field(data, "summary"))
    return Headline(
        title=str(title),
        url=str(url),
        summary=str(summary) if summary else None,
        source="api",
    )


def extract_feed_item(xml: str) -> Headline:
    item = _ITEM_RE.search(xml)
    if item is None:
        raise HeadlineExtractionError("feed has no <item>")

    title_match = _TITLE_RE.search(item.group(0))
    link_match = _LINK_RE.search(item.group(0))

    title = None
    if title_match is not None:
        # CDATA content is literal; plain titles may carry entities.
        title = title_match.group(1) or html.unescape(title_match.group(2) or "")
    url = html.unescape(link_match.group(1)) if link_match is not None else None
    if not title or not url:
        raise HeadlineExtractionError("feed item has no title/link")

    return Headline(title=title, url=url, summary=None, source="feed")


def _origin(base_url: str) -> str:
    parts = urlsplit(base_url)
    return f"{parts.scheme}://{parts.netloc}"


def news_anchor_pattern(base_url: str) -> re.Pattern[str]:
    host = re.escape(urlsplit(base_url).netloc)
    return re.compile(
        rf'<a[^>]+href="((?:https?://{host}/|/)news[^"]*)"[^>]*>(.*?)</a>',
        re.IGNORECASE,
    )


def extract_homepage_anchor(page: str, base_url: str) -> Headline:
    match = news_anchor_pattern(base_url).search(page)
    if match is None:
        raise HeadlineExtractionError("homepage has no news anchor")

    href = match.group(1)
    if not href.startswith("http"):
        href = f"{_origin(base_url)}{href}"
    text = BeautifulSoup(match.group(2), "html.parser").get_text().strip() or PLACEHOLDER_TITLE
    return Headline(title=text, url=href, summary=None, source="scrape")


class HeadlineResolver:
    """Best-effort top headline: API, then feed, then homepage scrape, then a constant."""

    def __init__(self, *, client, fallback: Headline = FALLBACK_HEADLINE) -> None:
        self.client = client
        self.fallback = fallback

    def _attempt(self, name: str, fetch_and_extract: Callable[[], Headline]) -> Headline | None:
        try:
            return fetch_and_extract()
        except Exception as exc:
            print(f"[HEADLINE][strategy_failed] strategy={name} error={exc!r}", flush=True)
            return None

    def _from_api(self) -> Headline | None:
        return self._attempt("api", lambda: extract_structured_item(self.client.fetch_latest()))

    def _from_feed(self) -> Headline | None:
        return self._attempt("feed", lambda: extract_feed_item(self.client.fetch_feed()))

    def _from_homepage(self) -> Headline | None:
        return self._attempt(
            "scrape",
            lambda: extract_homepage_anchor(self.client.fetch_homepage(), self.client.base_url),
        )

    def strategies(self) -> Iterable[Strategy]:
        return (self._from_api, self._from_feed, self._from_homepage)

    def resolve(self) -> Headline:
        attempts = (strategy() for strategy in self.strategies())
        headline = next((h for h in attempts if h is not None), self.fallback)
        print(f"[HEADLINE][resolved] source={headline.source} url={headline.url}", flush=True)
        return headline

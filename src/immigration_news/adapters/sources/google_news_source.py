"""Google News RSS search source fetched through CORS-bypass proxies."""

import re
import sys
from typing import Optional
from urllib.parse import quote, urlencode
from xml.etree import ElementTree as ET

import httpx
from bs4 import BeautifulSoup

from immigration_news.config import PipelineConfig
from immigration_news.core import FeedError, FeedSource, RawFeedItem, try_in_order

# "Headline - Publisher", split at the first separator
TITLE_SOURCE_PATTERN = re.compile(r"^(.*?) - (.+)$", re.DOTALL)


def split_source(title: str, default: str) -> tuple[str, str]:
    """Split a Google News title into (headline, publisher).

    Best effort: a headline that itself contains " - " is cut at its own
    separator. Titles without a separator keep the default publisher.
    """
    title = title.strip()
    match = TITLE_SOURCE_PATTERN.match(title)
    if not match:
        return title, default
    return match.group(1).strip(), match.group(2).strip() or default


def strip_markup(text: str) -> str:
    """Remove HTML tags from a feed description."""
    if "<" not in text:
        return text.strip()
    return BeautifulSoup(text, "html.parser").get_text(" ", strip=True)


class GoogleNewsRSSSource(FeedSource):
    """Fetch one Google News search query, rotating through proxies."""

    emoji = "📰"
    name = "Google News RSS"

    ACCEPT = "application/rss+xml, application/xml, text/xml"

    def __init__(self, query: str, config: Optional[PipelineConfig] = None) -> None:
        self.query = query
        self.config = config or PipelineConfig()

    @property
    def feed_url(self) -> str:
        params = {"q": self.query, **self.config.search_params}
        return f"{self.config.search_base_url}?{urlencode(params, safe=':')}"

    def proxy_url(self, endpoint: str) -> str:
        return f"{endpoint}{quote(self.feed_url, safe='')}"

    async def fetch_items(self, client: httpx.AsyncClient) -> list[RawFeedItem]:
        """Fetch items from the first proxy that yields a usable feed."""
        print(f"  └─ Query: {self.query}", file=sys.stderr)

        async def attempt(endpoint: str) -> list[RawFeedItem]:
            return await self._fetch_via(client, endpoint)

        items = await try_in_order(self.config.proxy_endpoints, attempt)

        if items is None:
            print(f"  └─ ❌ All {len(self.config.proxy_endpoints)} proxies failed", file=sys.stderr)
            return []

        print(f"  └─ Parsed {len(items)} items", file=sys.stderr)
        return items

    async def _fetch_via(self, client: httpx.AsyncClient, endpoint: str) -> list[RawFeedItem]:
        """Fetch and validate the feed through one proxy. Raises on any defect."""
        response = await client.get(self.proxy_url(endpoint), headers={"Accept": self.ACCEPT})

        if not 200 <= response.status_code < 300:
            raise FeedError(f"HTTP {response.status_code}")

        body = response.text
        if len(body) < self.config.min_body_length:
            raise FeedError(f"response too short ({len(body)} chars)")

        items = self.parse_feed(body)
        if not items:
            raise FeedError("no items in feed")

        return items

    def parse_feed(self, xml_content: str) -> list[RawFeedItem]:
        """Parse an RSS 2.0 document into raw items.

        Raises:
            FeedError: If the document is not well-formed XML
        """
        try:
            root = ET.fromstring(xml_content)
        except ET.ParseError as e:
            raise FeedError(f"XML parsing error: {e}") from e

        items: list[RawFeedItem] = []

        for element in root.findall(".//item")[: self.config.item_cap_per_query]:
            raw_title = self._text(element, "title")
            if not raw_title:
                continue

            title, source = split_source(raw_title, self.config.default_source)
            if not title:
                continue

            items.append(RawFeedItem(
                title=title,
                link=self._text(element, "link"),
                published_at=self._text(element, "pubDate"),
                description=strip_markup(self._text(element, "description")),
                source=source,
            ))

        return items

    @staticmethod
    def _text(element: ET.Element, tag: str) -> str:
        child = element.find(tag)
        return child.text.strip() if child is not None and child.text else ""

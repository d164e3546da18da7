"""Business logic use cases."""

import sys
import time
from typing import Optional

import httpx

from immigration_news.adapters.sources import GoogleNewsRSSSource
from immigration_news.config import PipelineConfig
from immigration_news.core import (
    FeedSource,
    NewsItem,
    RawFeedItem,
    categorize,
    fallback_news,
    is_urgent,
)
from immigration_news.core.dates import recency_key

LINK_PLACEHOLDER = "#"


def deduplicate(items: list[RawFeedItem]) -> list[RawFeedItem]:
    """Drop items whose trimmed, lower-cased title was already seen.

    The first occurrence wins. Near-duplicates with different wording
    are kept.
    """
    seen_titles: set[str] = set()
    unique = []

    for item in items:
        key = item.title.strip().lower()
        if key in seen_titles:
            continue
        seen_titles.add(key)
        unique.append(item)

    return unique


def sort_by_recency(items: list[RawFeedItem]) -> list[RawFeedItem]:
    """Newest first. Unparsable dates go last, ties keep their order."""
    return sorted(items, key=lambda item: recency_key(item.published_at), reverse=True)


def summarize(description: str, limit: int = 200) -> str:
    """Truncate description to limit characters, marking the cut with '...'."""
    if len(description) > limit:
        return description[:limit] + "..."
    return description


def to_news_item(
    raw: RawFeedItem,
    index: int,
    generated_ms: int,
    config: PipelineConfig,
) -> NewsItem:
    """Map a raw feed item to its display shape."""
    return NewsItem(
        id=f"news-{generated_ms}-{index}",
        title=raw.title,
        summary=summarize(raw.description, config.summary_length),
        category=categorize(raw.title, raw.description),
        country=config.country,
        published_at=raw.published_at,
        source=raw.source,
        urgent=is_urgent(raw.title, raw.description),
        link=raw.link or LINK_PLACEHOLDER,
    )


class NewsIngestionPipeline:
    """Fetch, normalize and rank immigration news from syndication feeds."""

    def __init__(self, config: Optional[PipelineConfig] = None) -> None:
        self.config = config or PipelineConfig()

    def build_sources(self) -> list[FeedSource]:
        """One source per configured feed query."""
        return [GoogleNewsRSSSource(query, self.config) for query in self.config.feed_queries]

    async def fetch_news(self) -> list[NewsItem]:
        """Return display-ready news, or the fallback list if nothing was fetched.

        Never raises: fetch and parse failures are logged and absorbed.
        """
        print("\n📥 Fetching immigration news", file=sys.stderr)

        try:
            raw_items = await self._collect()
        except Exception as e:
            print(f"❌ News ingestion failed: {e}", file=sys.stderr)
            raw_items = []

        if not raw_items:
            print("⚠️  No live news available, serving fallback stories", file=sys.stderr)
            return fallback_news()

        try:
            unique_items = deduplicate(raw_items)
            ranked = sort_by_recency(unique_items)[: self.config.max_items]

            generated_ms = int(time.time() * 1000)
            news = [
                to_news_item(raw, index, generated_ms, self.config)
                for index, raw in enumerate(ranked)
            ]
        except Exception as e:
            print(f"❌ News normalization failed: {e}", file=sys.stderr)
            return fallback_news()

        print(
            f"✓ {len(news)} news items from {len(unique_items)} unique "
            f"({len(raw_items)} fetched)",
            file=sys.stderr,
        )
        return news

    async def _collect(self) -> list[RawFeedItem]:
        """Gather raw items from every source in order, tolerating failures."""
        all_items: list[RawFeedItem] = []

        async with httpx.AsyncClient(
            timeout=self.config.request_timeout, follow_redirects=True
        ) as client:
            for source in self.build_sources():
                emoji = getattr(source, "emoji", "🔍")
                name = getattr(source, "name", source.__class__.__name__)
                print(f"\n{emoji} Fetching: {name}", file=sys.stderr)

                try:
                    items = await source.fetch_items(client)
                    all_items.extend(items)
                except Exception as e:
                    print(f"  └─ ❌ Source error: {e}", file=sys.stderr)
                    continue

        return all_items


async def fetch_news(config: Optional[PipelineConfig] = None) -> list[NewsItem]:
    """Run the ingestion pipeline once."""
    return await NewsIngestionPipeline(config).fetch_news()

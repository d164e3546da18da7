"""Source adapters for fetching feeds."""

from immigration_news.adapters.sources.google_news_source import (
    GoogleNewsRSSSource,
    split_source,
    strip_markup,
)

__all__ = ["GoogleNewsRSSSource", "split_source", "strip_markup"]

"""Core domain layer."""

from immigration_news.core.classification import categorize, is_urgent
from immigration_news.core.entities import Category, FeedError, NewsItem, RawFeedItem
from immigration_news.core.fallback import fallback_news
from immigration_news.core.filters import filter_news
from immigration_news.core.interfaces import FeedSource, NewsFormatter
from immigration_news.core.retry import try_in_order

__all__ = [
    "Category",
    "FeedError",
    "NewsItem",
    "RawFeedItem",
    "FeedSource",
    "NewsFormatter",
    "categorize",
    "is_urgent",
    "fallback_news",
    "filter_news",
    "try_in_order",
]

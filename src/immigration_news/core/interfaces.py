"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from datetime import datetime

import httpx

from immigration_news.core.entities import NewsItem, RawFeedItem


class FeedSource(ABC):
    """Interface for fetching raw items from a syndication feed."""

    @abstractmethod
    async def fetch_items(self, client: httpx.AsyncClient) -> list[RawFeedItem]:
        """Fetch raw items using the shared HTTP client."""
        pass


class NewsFormatter(ABC):
    """Interface for rendering news lists."""

    @abstractmethod
    def render(self, items: list[NewsItem], now: datetime) -> str:
        """Render items as text."""
        pass

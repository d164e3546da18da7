"""Immigration and visa news ingestion."""

from immigration_news.use_cases import NewsIngestionPipeline, fetch_news

__all__ = ["NewsIngestionPipeline", "fetch_news"]

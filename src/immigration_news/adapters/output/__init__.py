"""Output formatters."""

from immigration_news.adapters.output.markdown_formatter import MarkdownNewsFormatter

__all__ = ["MarkdownNewsFormatter"]

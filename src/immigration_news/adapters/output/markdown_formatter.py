"""Markdown news digest formatter."""

from datetime import datetime

from immigration_news.core import NewsFormatter, NewsItem
from immigration_news.core.dates import format_published_at


class MarkdownNewsFormatter(NewsFormatter):
    """Render news items as a markdown digest."""

    def __init__(self, title: str = "Immigration News & Updates") -> None:
        self.title = title

    def render(self, items: list[NewsItem], now: datetime) -> str:
        """Render markdown digest, urgent items first."""
        heading = f"# 🗞️ {self.title} ({now.strftime('%d.%m.%Y')})"

        if not items:
            return f"{heading}\n\nNo news matched."

        urgent = [i for i in items if i.urgent]
        regular = [i for i in items if not i.urgent]

        lines = [
            heading,
            "",
            f"Stories: {len(items)}",
            "",
        ]

        if urgent:
            lines.extend([
                "## 🚨 Urgent",
                "",
            ])
            for item in urgent:
                lines.extend(self._format_item(item, now))

        if regular:
            lines.extend([
                "## 📰 Latest",
                "",
            ])
            for item in regular:
                lines.extend(self._format_item(item, now))

        return "\n".join(lines)

    def _format_item(self, item: NewsItem, now: datetime) -> list[str]:
        """Format single news item."""
        lines = [
            f"### [{item.title}]({item.link})",
            "",
            f"*{item.category.value} | {item.source} | {format_published_at(item.published_at, now)}*",
            "",
        ]

        if item.summary:
            lines.extend([item.summary, ""])

        lines.append("---")
        lines.append("")

        return lines

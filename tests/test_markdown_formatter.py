"""Tests for the markdown news formatter."""

from datetime import datetime, timezone

from immigration_news.adapters.output import MarkdownNewsFormatter
from immigration_news.core import fallback_news

NOW = datetime(2024, 1, 20, 12, 0, tzinfo=timezone.utc)


def test_render_empty():
    """Test empty list message."""
    text = MarkdownNewsFormatter().render([], NOW)

    assert text.startswith("# 🗞️ Immigration News & Updates (20.01.2024)")
    assert "No news matched." in text


def test_render_urgent_first():
    """Test urgent stories get their own leading section."""
    text = MarkdownNewsFormatter("Visa Digest").render(fallback_news(NOW), NOW)

    assert text.startswith("# 🗞️ Visa Digest (20.01.2024)")
    assert "Stories: 3" in text
    assert text.index("## 🚨 Urgent") < text.index("## 📰 Latest")
    assert text.index("USCIS Extends") < text.index("## 📰 Latest")
    assert text.index("Immigration Court Backlog") > text.index("## 📰 Latest")


def test_render_item_details():
    """Test each item shows link, labels and relative date."""
    text = MarkdownNewsFormatter().render(fallback_news(NOW), NOW)

    assert "### [Immigration Court Backlog Reaches Record High](https://www.justice.gov)" in text
    assert "*Legal News | Department of Justice | 2 days ago*" in text
    assert "*Work Visa | Immigration News | 1 day ago*" in text

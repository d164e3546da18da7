"""Tests for news list filtering."""

import pytest

from immigration_news.core import Category, NewsItem, filter_news


def make_item(title: str, summary: str, category: Category, country: str = "USA") -> NewsItem:
    return NewsItem(
        id=f"news-0-{title}",
        title=title,
        summary=summary,
        category=category,
        country=country,
        published_at="2024-01-15T10:00:00Z",
        source="AP",
        urgent=False,
        link="https://example.com",
    )


@pytest.fixture
def items() -> list[NewsItem]:
    return [
        make_item("H-1B lottery results", "Selections announced", Category.WORK_VISA),
        make_item("Court blocks rule", "A judge ruled on OPT", Category.LEGAL_NEWS),
        make_item("Express Entry draw", "Canada invites candidates", Category.GENERAL_NEWS, "Canada"),
    ]


def test_filter_defaults_return_everything(items):
    """Test no filters keeps all items in order."""
    assert filter_news(items) == items


def test_filter_search_title_and_summary(items):
    """Test search is case-insensitive over title and summary."""
    assert [i.title for i in filter_news(items, search="lottery")] == ["H-1B lottery results"]
    assert [i.title for i in filter_news(items, search="opt")] == ["Court blocks rule"]
    assert filter_news(items, search="nothing like this") == []


def test_filter_category(items):
    """Test category filter uses the label."""
    assert [i.title for i in filter_news(items, category="Legal News")] == ["Court blocks rule"]
    assert filter_news(items, category="Green Card") == []


def test_filter_country(items):
    """Test country filter."""
    assert [i.title for i in filter_news(items, country="Canada")] == ["Express Entry draw"]


def test_filter_combined(items):
    """Test all conditions must hold."""
    assert filter_news(items, search="draw", country="USA") == []
    assert len(filter_news(items, search="o", category="all", country="USA")) == 2

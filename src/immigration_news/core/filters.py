"""Filtering of display-ready news lists."""

from immigration_news.core.entities import NewsItem

ALL = "all"


def filter_news(
    items: list[NewsItem],
    search: str = "",
    category: str = ALL,
    country: str = ALL,
) -> list[NewsItem]:
    """
    Filter news items by search text, category and country.

    Args:
        items: News items to filter
        search: Text that must appear in the title or summary (case-insensitive)
        category: Category value to keep, or "all"
        country: Country to keep, or "all"

    Returns:
        Matching items in their original order
    """
    needle = search.lower()
    result = []

    for item in items:
        if needle and needle not in item.title.lower() and needle not in item.summary.lower():
            continue
        if category != ALL and item.category.value != category:
            continue
        if country != ALL and item.country != country:
            continue
        result.append(item)

    return result

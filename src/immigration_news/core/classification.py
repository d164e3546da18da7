"""Keyword heuristics for categorizing news and flagging urgency."""

from immigration_news.core.entities import Category

# Ordered cascade, first match wins
CATEGORY_KEYWORDS: list[tuple[Category, list[str]]] = [
    (Category.WORK_VISA, ["h1b", "h-1b", "work visa", "employment visa"]),
    (Category.STUDENT_VISA, ["f1", "f-1", "student visa", "opt", "stem opt", "cpt"]),
    (Category.GREEN_CARD, ["green card", "permanent resident", "eb1", "eb2", "eb3", "eb5"]),
    (Category.TOURIST_VISA, ["tourist visa", "b1", "b-1", "b2", "b-2", "visitor visa"]),
    (Category.FAMILY_VISA, ["family visa", "spouse visa", "k1", "k-1", "fiancé"]),
    (Category.POLICY_UPDATE, ["policy", "law", "regulation", "rule"]),
    (Category.BORDER_SECURITY, ["border", "customs", "enforcement", "ice", "cbp"]),
    (Category.LEGAL_NEWS, ["court", "ruling", "judge", "lawsuit", "appeal"]),
    (Category.IMMIGRATION_REFORM, ["reform", "bill", "congress", "senate", "house"]),
]

URGENCY_KEYWORDS = [
    "breaking",
    "urgent",
    "emergency",
    "immediate",
    "suspended",
    "banned",
    "alert",
    "deadline",
]


def mentions_any(title: str, description: str, keywords: list[str]) -> bool:
    """
    Check whether any keyword occurs in the title or description.

    Args:
        title: Title of the item
        description: Plain-text description of the item
        keywords: Keywords to look for

    Returns:
        True if any keyword is a substring of the combined text (case-insensitive)
    """
    text = f"{title} {description}".lower()
    return any(keyword.lower() in text for keyword in keywords)


def categorize(title: str, description: str) -> Category:
    """Assign the first category whose keywords appear in the text.

    Matching is plain substring matching, so short keywords such as
    "opt" or "ice" also hit inside longer words.
    """
    for category, keywords in CATEGORY_KEYWORDS:
        if mentions_any(title, description, keywords):
            return category
    return Category.GENERAL_NEWS


def is_urgent(title: str, description: str) -> bool:
    """True if any urgency keyword appears in the text."""
    return mentions_any(title, description, URGENCY_KEYWORDS)

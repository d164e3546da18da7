"""Core domain entities."""

from dataclasses import asdict, dataclass
from enum import Enum


class Category(str, Enum):
    """Topic label assigned to a news item."""

    WORK_VISA = "Work Visa"
    STUDENT_VISA = "Student Visa"
    GREEN_CARD = "Green Card"
    TOURIST_VISA = "Tourist Visa"
    FAMILY_VISA = "Family Visa"
    POLICY_UPDATE = "Policy Update"
    BORDER_SECURITY = "Border Security"
    LEGAL_NEWS = "Legal News"
    IMMIGRATION_REFORM = "Immigration Reform"
    GENERAL_NEWS = "General News"


class FeedError(Exception):
    """A proxied feed response could not be used."""


@dataclass(frozen=True)
class RawFeedItem:
    """Syndication entry extracted from a feed, before normalization."""

    title: str
    link: str
    published_at: str
    description: str
    source: str

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError("Title cannot be empty")


@dataclass(frozen=True)
class NewsItem:
    """Display-ready news item."""

    id: str
    title: str
    summary: str
    category: Category
    country: str
    published_at: str
    source: str
    urgent: bool
    link: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["category"] = self.category.value
        return data

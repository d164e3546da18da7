"""Static stories served when live ingestion fails completely."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from immigration_news.core.entities import Category, NewsItem


def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def fallback_news(now: Optional[datetime] = None) -> list[NewsItem]:
    """Return the fixed fallback list, dated relative to now."""
    now = now or datetime.now(timezone.utc)

    return [
        NewsItem(
            id="fallback-1",
            title="USCIS Extends Automatic Extension Period for Employment Authorization Documents",
            summary=(
                "USCIS announced an extension of the automatic extension period for certain "
                "Employment Authorization Documents (EADs) from 180 days to 540 days for "
                "qualifying renewal applicants."
            ),
            category=Category.POLICY_UPDATE,
            country="USA",
            published_at=_iso(now),
            source="USCIS",
            urgent=True,
            link="https://www.uscis.gov",
        ),
        NewsItem(
            id="fallback-2",
            title="New H-1B Registration Process Updates",
            summary=(
                "The U.S. Citizenship and Immigration Services (USCIS) has announced important "
                "updates to the H-1B registration process for the upcoming fiscal year."
            ),
            category=Category.WORK_VISA,
            country="USA",
            published_at=_iso(now - timedelta(days=1)),
            source="Immigration News",
            urgent=False,
            link="https://www.uscis.gov",
        ),
        NewsItem(
            id="fallback-3",
            title="Immigration Court Backlog Reaches Record High",
            summary=(
                "The Executive Office for Immigration Review reports that the immigration court "
                "backlog has reached a new record high, affecting thousands of pending cases."
            ),
            category=Category.LEGAL_NEWS,
            country="USA",
            published_at=_iso(now - timedelta(days=2)),
            source="Department of Justice",
            urgent=False,
            link="https://www.justice.gov",
        ),
    ]

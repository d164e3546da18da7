"""Publication timestamp parsing and display."""

import math
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

# Sort key for timestamps that cannot be parsed
OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def parse_published_at(text: str) -> Optional[datetime]:
    """Parse an RSS pubDate (RFC 822) or ISO-8601 timestamp.

    Naive results are assumed to be UTC; results are normalized to UTC.
    Returns None when the text matches neither format or lies outside
    the representable range.
    """
    text = (text or "").strip()
    if not text:
        return None

    parsed: Optional[datetime] = None
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError, OverflowError):
        parsed = None

    if parsed is None:
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except (ValueError, OverflowError):
            return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)

    try:
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def recency_key(text: str) -> datetime:
    """Sort key placing unparsable timestamps last in a newest-first sort."""
    return parse_published_at(text) or OLDEST


def format_published_at(text: str, now: Optional[datetime] = None) -> str:
    """Format a timestamp relative to now: '1 day ago', 'N days ago' or a date."""
    published = parse_published_at(text)
    if published is None:
        return "Recently"

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff_days = math.ceil(abs((now - published).total_seconds()) / 86400)

    if diff_days == 1:
        return "1 day ago"
    if diff_days < 7:
        return f"{diff_days} days ago"
    return f"{published.strftime('%B')} {published.day}, {published.year}"

"""Best-effort iteration over fallback candidates."""

import sys
from typing import Awaitable, Callable, Iterable, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def try_in_order(
    candidates: Iterable[T],
    attempt: Callable[[T], Awaitable[R]],
) -> Optional[R]:
    """Return the result of the first candidate whose attempt succeeds.

    An attempt fails by raising. Failures are logged and the next
    candidate is tried immediately, without any delay.

    Returns:
        First successful result, or None if every candidate failed
    """
    for candidate in candidates:
        try:
            return await attempt(candidate)
        except Exception as e:
            print(f"  └─ ⚠️  {candidate}: {e}", file=sys.stderr)
            continue

    return None

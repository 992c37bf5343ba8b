"""Post ordering."""

from __future__ import annotations

from typing import Any


def _date_key(post: dict[str, Any]) -> str:
    value = post.get("date")
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def sort_posts(posts: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return posts ordered by ``date``, newest first.

    Dates are compared as strings, which matches chronological order for
    ISO ``YYYY-MM-DD`` values. Missing or empty dates sort last. The sort is
    stable: posts sharing a date keep their input order.
    """
    return sorted(posts, key=_date_key, reverse=True)

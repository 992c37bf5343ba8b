"""Loaded content passed between build stages.

Records stay plain JSON values (``dict``/``list``/``str``/``None``) so that
unknown keys and ``null`` language entries reach the page unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

EXPECTED_SLOT_COUNT = 5


def empty_bilingual() -> dict[str, str]:
    return {"en": "", "es": ""}


@dataclass(frozen=True, slots=True)
class ContentBundle:
    """Everything a template can receive.

    Attributes:
        posts: Post records, already sorted newest first
        unlinked_comments: Comments whose parent post is gone
        about: Bilingual about document
        site: Site-wide settings document
        origin: Origin document, ``None`` when the site has none
        warnings: Authoring problems found while loading

    """

    posts: list[dict[str, Any]] = field(default_factory=list)
    unlinked_comments: Any = field(default_factory=list)
    about: Any = field(default_factory=empty_bilingual)
    site: Any = field(default_factory=dict)
    origin: Any = None
    warnings: tuple[str, ...] = ()

    @property
    def contact_email(self) -> str:
        if not isinstance(self.site, dict):
            return ""
        email = self.site.get("contact_email")
        return str(email) if email else ""

    @property
    def origin_body(self) -> Any:
        if isinstance(self.origin, dict) and "body" in self.origin:
            return self.origin["body"]
        return empty_bilingual()

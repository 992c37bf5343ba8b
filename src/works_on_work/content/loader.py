"""Read JSON content from a site's content directory.

Two reading policies live here on purpose:

- :func:`read_json` is for singleton documents (site settings, about text,
  unlinked comments, origin). Absence is normal for these, so a missing or
  malformed file quietly becomes the caller's default.
- :func:`load_posts` is for per-post files. A malformed post is an authoring
  mistake, so it is skipped *and* reported as a warning.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from typing import TYPE_CHECKING, Any

from works_on_work.content.models import EXPECTED_SLOT_COUNT, ContentBundle, empty_bilingual
from works_on_work.content.sorting import sort_posts

if TYPE_CHECKING:
    from pathlib import Path

    from works_on_work.config.paths import SitePaths

logger = logging.getLogger(__name__)

POST_SUFFIX = ".json"


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not valid JSON"
    raise ValueError(msg)


def _parse_json(text: str) -> Any:
    """Strict ``json.loads``: ``NaN`` and ``Infinity`` are syntax errors."""
    return json.loads(text, parse_constant=_reject_constant)


def read_json(path: Path, default: Any) -> Any:
    """Parse ``path`` as JSON, or return ``default`` if it is missing or malformed."""
    if not path.is_file():
        return default
    try:
        return _parse_json(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("Using default for %s: %s", path, e)
        return default


def load_posts(posts_dir: Path) -> tuple[list[dict[str, Any]], list[str]]:
    """Load every ``*.json`` post in ``posts_dir``.

    Files are visited in file-name order so repeated builds see the same
    input sequence.

    Returns:
        The parsed posts (unsorted) and one warning message per skipped file

    """
    if not posts_dir.is_dir():
        logger.debug("No posts directory at %s", posts_dir)
        return [], []

    posts: list[dict[str, Any]] = []
    warnings: list[str] = []

    for post_file in sorted(posts_dir.iterdir(), key=lambda p: p.name):
        if post_file.suffix != POST_SUFFIX or not post_file.is_file():
            continue
        try:
            data = _parse_json(post_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            message = f"{post_file.name}: {e}"
            logger.warning("⚠  %s", message)
            warnings.append(message)
            continue

        if not isinstance(data, dict):
            message = f"{post_file.name}: expected a JSON object, got {type(data).__name__}"
            logger.warning("⚠  %s", message)
            warnings.append(message)
            continue

        posts.append(data)

    return posts, warnings


def check_posts(posts: list[dict[str, Any]]) -> list[str]:
    """Return authoring warnings for posts that loaded but look wrong.

    Nothing here is fatal: a post with the wrong number of slots or a
    repeated ``id`` is still built.
    """
    warnings: list[str] = []

    for post in posts:
        slots = post.get("slots")
        count = len(slots) if isinstance(slots, list) else 0
        if count != EXPECTED_SLOT_COUNT:
            warnings.append(
                f"post {post.get('id', '<no id>')!r}: expected {EXPECTED_SLOT_COUNT} slots, found {count}"
            )

    id_counts = Counter(post["id"] for post in posts if isinstance(post.get("id"), str))
    warnings.extend(
        f"post id {post_id!r} is used by {count} posts" for post_id, count in id_counts.items() if count > 1
    )

    for message in warnings:
        logger.warning("⚠  %s", message)
    return warnings


def load_content(paths: SitePaths) -> ContentBundle:
    """Load posts and singleton documents for one build."""
    raw_posts, skipped = load_posts(paths.posts_dir)
    posts = sort_posts(raw_posts)
    logger.info("Found %d post(s)", len(posts))

    authoring = check_posts(posts)

    return ContentBundle(
        posts=posts,
        unlinked_comments=read_json(paths.unlinked_comments_file, []),
        about=read_json(paths.about_file, empty_bilingual()),
        site=read_json(paths.site_file, {}),
        origin=read_json(paths.origin_file, None),
        warnings=(*skipped, *authoring),
    )

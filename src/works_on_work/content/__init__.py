"""Content loading: posts, singleton documents and ordering."""

from works_on_work.content.loader import check_posts, load_content, load_posts, read_json
from works_on_work.content.models import ContentBundle
from works_on_work.content.sorting import sort_posts

__all__ = [
    "ContentBundle",
    "check_posts",
    "load_content",
    "load_posts",
    "read_json",
    "sort_posts",
]

"""Template injection by literal sentinel replacement.

Templates are plain HTML documents carrying sentinel comments such as
``/*__POSTS_JSON__*/`` inside their inline scripts. Each sentinel is replaced
once, verbatim, with serialized content; there is no template language.

Replacement runs sequentially in a fixed token order. A serialized value
that itself contains another sentinel is not supported.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from works_on_work.config.settings import TokenSettings
    from works_on_work.content.models import ContentBundle

# Surrogates that survive ``json.loads`` are unpaired; paired escapes decode to one code point.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def escape_lone_surrogates(text: str) -> str:
    """Rewrite unpaired surrogates as ``\\uXXXX`` escapes so the text encodes as UTF-8."""
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def to_pretty_json(value: Any) -> str:
    """Serialize with a two-space indent, keeping key order and non-ASCII text.

    The layout follows ``JSON.stringify(value, null, 2)``. Unpaired surrogates
    are escaped the same way. Floats keep Python's form, so ``1.0`` stays
    ``1.0`` where JavaScript would print ``1``.
    """
    return escape_lone_surrogates(json.dumps(value, indent=2, ensure_ascii=False))


def replace_first(text: str, token: str, replacement: str) -> str:
    """Replace only the first occurrence of ``token``; a missing token is a no-op."""
    return text.replace(token, replacement, 1)


def inject(
    template_text: str,
    bundle: ContentBundle,
    tokens: TokenSettings,
    *,
    include_origin: bool = False,
) -> str:
    """Return ``template_text`` with every known token filled from ``bundle``."""
    replacements: list[tuple[str, str]] = [
        (tokens.posts, to_pretty_json(bundle.posts)),
        (tokens.unlinked_comments, to_pretty_json(bundle.unlinked_comments)),
        (tokens.about, to_pretty_json(bundle.about)),
        (tokens.contact_email, escape_lone_surrogates(bundle.contact_email)),
    ]
    if include_origin:
        replacements.append((tokens.origin, to_pretty_json(bundle.origin_body)))

    text = template_text
    for token, value in replacements:
        text = replace_first(text, token, value)
    return text

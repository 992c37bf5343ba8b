from __future__ import annotations

from pathlib import Path

import pytest
from site_helpers import TEMPLATE, make_post, write_json


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A complete site: two posts, every singleton, a template, assets and a CNAME."""
    root = tmp_path / "site"
    content = root / "content"
    write_json(content / "posts" / "a.json", make_post("a", "2026-02-07"))
    write_json(content / "posts" / "b.json", make_post("b", "2026-01-01"))
    write_json(content / "site.json", {"contact_email": "hello@example.com"})
    write_json(content / "about.json", {"en": "About me", "es": "Sobre mí"})
    write_json(
        content / "unlinked-comments.json",
        [{"author": "Ana", "date": "2025-12-01", "text": "Gracias"}],
    )

    (root / "templates").mkdir(parents=True)
    (root / "templates" / "index.html").write_text(TEMPLATE, encoding="utf-8")

    (root / "assets" / "img").mkdir(parents=True)
    (root / "assets" / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (root / "assets" / "img" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\xff")

    (root / "CNAME").write_text("works.example.com\n", encoding="utf-8")
    return root

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from site_helpers import make_post, write_json

from works_on_work.config import SitePaths, SiteSettings
from works_on_work.content.loader import check_posts, load_content, load_posts, read_json


def test_read_json_returns_default_for_missing_file(tmp_path: Path):
    assert read_json(tmp_path / "nope.json", {"en": "", "es": ""}) == {"en": "", "es": ""}


def test_read_json_returns_default_for_malformed_file_without_warning(tmp_path: Path, caplog):
    bad = tmp_path / "site.json"
    bad.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert read_json(bad, {}) == {}

    assert caplog.records == []


def test_read_json_parses_valid_file(tmp_path: Path):
    path = write_json(tmp_path / "about.json", {"en": "text", "es": None})

    assert read_json(path, None) == {"en": "text", "es": None}


def test_load_posts_skips_bad_file_with_one_warning(tmp_path: Path, caplog):
    posts_dir = tmp_path / "posts"
    for name in ("a", "b", "c", "d"):
        write_json(posts_dir / f"{name}.json", make_post(name, "2026-01-01"))
    (posts_dir / "broken.json").write_text('{"id": "broken",', encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        posts, warnings = load_posts(posts_dir)

    assert sorted(post["id"] for post in posts) == ["a", "b", "c", "d"]
    assert len(warnings) == 1
    assert warnings[0].startswith("broken.json: ")
    broken_records = [r for r in caplog.records if "broken.json" in r.getMessage()]
    assert len(broken_records) == 1
    assert broken_records[0].levelno == logging.WARNING


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_load_posts_rejects_non_standard_constants(tmp_path: Path, constant: str):
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir()
    (posts_dir / "nan.json").write_text(f'{{"id": "nan", "score": {constant}}}', encoding="utf-8")
    write_json(posts_dir / "ok.json", make_post("ok", "2026-01-01"))

    posts, warnings = load_posts(posts_dir)

    assert [post["id"] for post in posts] == ["ok"]
    assert len(warnings) == 1
    assert warnings[0].startswith("nan.json: ")


def test_read_json_treats_nan_as_malformed(tmp_path: Path):
    path = tmp_path / "about.json"
    path.write_text('{"en": NaN}', encoding="utf-8")

    assert read_json(path, {"en": "", "es": ""}) == {"en": "", "es": ""}


def test_load_posts_skips_json_that_is_not_an_object(tmp_path: Path):
    posts_dir = tmp_path / "posts"
    write_json(posts_dir / "list.json", [1, 2, 3])
    write_json(posts_dir / "ok.json", make_post("ok", "2026-01-01"))

    posts, warnings = load_posts(posts_dir)

    assert [post["id"] for post in posts] == ["ok"]
    assert warnings == ["list.json: expected a JSON object, got list"]


def test_load_posts_ignores_other_files(tmp_path: Path):
    posts_dir = tmp_path / "posts"
    write_json(posts_dir / "ok.json", make_post("ok", "2026-01-01"))
    (posts_dir / "notes.txt").write_text("draft", encoding="utf-8")
    (posts_dir / "nested.json").mkdir()

    posts, warnings = load_posts(posts_dir)

    assert [post["id"] for post in posts] == ["ok"]
    assert warnings == []


def test_load_posts_missing_directory(tmp_path: Path):
    assert load_posts(tmp_path / "posts") == ([], [])


def test_check_posts_warns_about_slot_count_and_duplicate_ids():
    posts = [
        make_post("a", "2026-01-01"),
        make_post("a", "2026-01-02"),
        make_post("short", "2026-01-03", slots=[[], []]),
        {"id": "no-slots", "date": "2026-01-04"},
    ]

    warnings = check_posts(posts)

    assert "post 'short': expected 5 slots, found 2" in warnings
    assert "post 'no-slots': expected 5 slots, found 0" in warnings
    assert "post id 'a' is used by 2 posts" in warnings
    assert len(warnings) == 3


def test_check_posts_accepts_well_formed_posts():
    assert check_posts([make_post("a", "2026-01-01"), make_post("b", "2026-01-02")]) == []


def test_load_content_reads_singletons_and_sorts(site_root: Path, caplog):
    with caplog.at_level(logging.INFO, logger="works_on_work"):
        bundle = load_content(SitePaths(site_root, config=SiteSettings()))

    assert [post["id"] for post in bundle.posts] == ["a", "b"]
    assert bundle.contact_email == "hello@example.com"
    assert bundle.about == {"en": "About me", "es": "Sobre mí"}
    assert bundle.unlinked_comments[0]["author"] == "Ana"
    assert bundle.origin is None
    assert bundle.warnings == ()
    assert "Found 2 post(s)" in caplog.text


def test_load_content_uses_defaults_for_missing_singletons(tmp_path: Path):
    write_json(tmp_path / "content" / "posts" / "a.json", make_post("a", "2026-01-01"))

    bundle = load_content(SitePaths(tmp_path, config=SiteSettings()))

    assert bundle.contact_email == ""
    assert bundle.about == {"en": "", "es": ""}
    assert bundle.unlinked_comments == []
    assert bundle.site == {}
    assert bundle.origin_body == {"en": "", "es": ""}


def test_load_content_collects_skipped_and_authoring_warnings(site_root: Path):
    posts_dir = site_root / "content" / "posts"
    (posts_dir / "zz-broken.json").write_text("[", encoding="utf-8")
    write_json(posts_dir / "c.json", make_post("c", "2026-03-01", slots=[]))

    bundle = load_content(SitePaths(site_root, config=SiteSettings()))

    assert [post["id"] for post in bundle.posts] == ["c", "a", "b"]
    assert len(bundle.warnings) == 2
    assert bundle.warnings[0].startswith("zz-broken.json: ")
    assert bundle.warnings[1] == "post 'c': expected 5 slots, found 0"

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from works_on_work.config import (
    CONFIG_FILENAME,
    PageSettings,
    PathsSettings,
    SitePaths,
    SiteSettings,
    load_site_config,
    save_site_config,
)
from works_on_work.config.exceptions import ConfigValidationError


@pytest.fixture(autouse=True)
def _clean_env():
    env = {k: v for k, v in os.environ.items() if not k.startswith("WORKS_ON_WORK_")}
    with patch.dict(os.environ, env, clear=True):
        yield


def test_defaults_match_standard_layout(tmp_path: Path):
    config = load_site_config(tmp_path)

    assert config.paths.output_dir == "dist"
    assert config.tokens.posts == "/*__POSTS_JSON__*/"
    assert config.primary_page == PageSettings(template="index.html", output="index.html")

    paths = SitePaths(tmp_path, config=config)
    assert paths.posts_dir == tmp_path.resolve() / "content" / "posts"
    assert paths.unlinked_comments_file.name == "unlinked-comments.json"
    assert paths.primary_template == tmp_path.resolve() / "templates" / "index.html"
    assert paths.domain_file.name == "CNAME"


def test_loads_values_from_toml(tmp_path: Path):
    (tmp_path / CONFIG_FILENAME).write_text(
        'site_name = "origin"\n\n'
        "[paths]\n"
        'assets_dir = "static"\n\n'
        "[[pages]]\n"
        'template = "index.html"\n'
        'output = "index.html"\n\n'
        "[[pages]]\n"
        'template = "origin.html"\n'
        'output = "origin.html"\n'
        "inject_origin = true\n",
        encoding="utf-8",
    )

    config = load_site_config(tmp_path)

    assert config.site_name == "origin"
    assert config.paths.assets_dir == "static"
    assert config.paths.output_dir == "dist"
    assert [page.template for page in config.pages] == ["index.html", "origin.html"]
    assert config.pages[1].inject_origin is True


def test_environment_overrides_file(tmp_path: Path):
    (tmp_path / CONFIG_FILENAME).write_text('[paths]\noutput_dir = "public"\n', encoding="utf-8")

    with patch.dict(os.environ, {"WORKS_ON_WORK_PATHS__OUTPUT_DIR": "build"}):
        config = load_site_config(tmp_path)

    assert config.paths.output_dir == "build"


def test_invalid_toml_raises(tmp_path: Path):
    (tmp_path / CONFIG_FILENAME).write_text("[paths\n", encoding="utf-8")

    with pytest.raises(ConfigValidationError) as excinfo:
        load_site_config(tmp_path)

    assert excinfo.value.config_path == tmp_path / CONFIG_FILENAME


def test_unknown_keys_are_rejected(tmp_path: Path):
    (tmp_path / CONFIG_FILENAME).write_text('colour = "blue"\n', encoding="utf-8")

    with pytest.raises(ConfigValidationError, match="colour"):
        load_site_config(tmp_path)


def test_empty_pages_are_rejected(tmp_path: Path):
    (tmp_path / CONFIG_FILENAME).write_text("pages = []\n", encoding="utf-8")

    with pytest.raises(ConfigValidationError, match="pages"):
        load_site_config(tmp_path)


@pytest.mark.parametrize("value", ["/tmp/dist", "../dist", "a/../../b"])
def test_paths_must_stay_inside_site_root(value: str):
    with pytest.raises(ValidationError):
        PathsSettings(output_dir=value)


def test_output_dir_cannot_be_site_root():
    with pytest.raises(ValidationError, match="subdirectory"):
        PathsSettings(output_dir=".")


@pytest.mark.parametrize("value", ["", "."])
def test_assets_dir_cannot_be_site_root(value: str):
    with pytest.raises(ValidationError, match="subdirectory"):
        PathsSettings(assets_dir=value)


def test_empty_assets_dir_in_file_is_rejected(tmp_path: Path):
    (tmp_path / CONFIG_FILENAME).write_text('[paths]\nassets_dir = ""\n', encoding="utf-8")

    with pytest.raises(ConfigValidationError, match="assets_dir"):
        load_site_config(tmp_path)


def test_saved_config_loads_back(tmp_path: Path):
    config = SiteSettings(
        site_name="blog",
        pages=[PageSettings(), PageSettings(template="b.html", output="b.html")],
    )

    path = save_site_config(config, tmp_path)

    assert path == tmp_path / CONFIG_FILENAME
    assert load_site_config(tmp_path) == config

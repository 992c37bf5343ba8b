"""Create a starter site that builds out of the box.

The starter contains a ``works_on_work.toml`` with every default spelled out,
the content skeleton (one sample post, about text, site settings, empty
unlinked comments), a template carrying each placeholder token once, and a
stylesheet under ``assets/``. Existing files are left alone unless
``force`` is set.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from works_on_work.config.paths import SitePaths
from works_on_work.config.settings import CONFIG_FILENAME, SiteSettings, save_site_config
from works_on_work.init.exceptions import ScaffoldingError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dataclass(slots=True)
class ScaffoldResult:
    """Files written and files left untouched by :func:`scaffold_site`."""

    site_root: Path
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


def _sample_post() -> dict[str, Any]:
    return {
        "id": "hello-world",
        "date": "2026-01-01",
        "title": {"en": "Hello, world", "es": "Hola, mundo"},
        "body": {"en": "<p>First post.</p>", "es": None},
        "dedication": {"en": None, "es": None},
        "slots": [["welcome"], [], [], [], []],
        "downloads": {"en": None, "es": None},
        "license": "CC BY-SA 4.0",
        "comments": [],
        "archived": False,
    }


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html.jinja"]),
        keep_trailing_newline=True,
    )


def _write(result: ScaffoldResult, path: Path, text: str, *, force: bool) -> None:
    if path.exists() and not force:
        logger.debug("Keeping existing %s", path)
        result.skipped.append(path)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    result.created.append(path)


def _json_text(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False) + "\n"


def scaffold_site(site_root: Path, site_name: str | None = None, *, force: bool = False) -> ScaffoldResult:
    """Create the starter layout under ``site_root``.

    Args:
        site_root: Directory for the new site (created if needed)
        site_name: Name used in the config and page title; defaults to the directory name
        force: Overwrite files that already exist

    Raises:
        ScaffoldingError: If a template fails to render or a file cannot be written

    """
    site_root = site_root.expanduser().resolve()
    settings = SiteSettings(site_name=site_name or site_root.name or "works_on_work")
    paths = SitePaths(site_root, config=settings)
    result = ScaffoldResult(site_root=site_root)

    try:
        site_root.mkdir(parents=True, exist_ok=True)
        config_path = site_root / CONFIG_FILENAME
        if config_path.exists() and not force:
            result.skipped.append(config_path)
        else:
            result.created.append(save_site_config(settings, site_root))

        env = _get_env()
        context = {
            "site_name": settings.site_name,
            "tokens": settings.tokens,
            "assets_dir": Path(settings.paths.assets_dir).name,
            "output_dir": settings.paths.output_dir,
        }
        _write(
            result,
            paths.primary_template,
            env.get_template("index.html.jinja").render(**context),
            force=force,
        )
        _write(
            result,
            paths.assets_dir / "style.css",
            env.get_template("style.css.jinja").render(**context),
            force=force,
        )
        _write(
            result,
            site_root / ".gitignore",
            env.get_template("gitignore.jinja").render(**context),
            force=force,
        )

        _write(result, paths.posts_dir / "hello-world.json", _json_text(_sample_post()), force=force)
        _write(result, paths.about_file, _json_text({"en": "", "es": ""}), force=force)
        _write(result, paths.site_file, _json_text({"contact_email": ""}), force=force)
        _write(result, paths.unlinked_comments_file, _json_text([]), force=force)
    except (TemplateError, OSError) as e:
        raise ScaffoldingError(site_root, e) from e

    logger.info("Scaffolded %d file(s) in %s", len(result.created), site_root)
    return result

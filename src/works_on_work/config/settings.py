"""Site configuration for works-on-work.

This module consolidates the configuration code in one place:
- Pydantic models for ``works_on_work.toml``
- Loading and saving functions

Strategy:
- ONLY loads from ``works_on_work.toml`` at the site root
- A missing file means "use the defaults" (the standard site layout)
- An unreadable or invalid file is fatal; a build never runs on guessed settings
"""

from __future__ import annotations

import logging
import os
import tomllib
from copy import deepcopy
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from works_on_work.config.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "works_on_work.toml"
ENV_PREFIX = "WORKS_ON_WORK_"


def _validate_relative_path(v: str) -> str:
    """Validate path is relative and does not contain traversal sequences."""
    if not v:
        return v
    path = Path(v)
    if path.is_absolute():
        msg = f"Path must be relative, not absolute: {v}"
        raise ValueError(msg)
    if any(part == ".." for part in path.parts):
        msg = f"Path must not contain traversal sequences ('..'): {v}"
        raise ValueError(msg)
    return v


class PathsSettings(BaseModel):
    """Site directory paths configuration.

    All paths are relative to the site root.
    """

    content_dir: str = Field(default="content", description="JSON content directory")
    templates_dir: str = Field(default="templates", description="HTML templates directory")
    assets_dir: str = Field(default="assets", description="Static assets copied verbatim (optional)")
    output_dir: str = Field(default="dist", description="Build output directory (wiped on every build)")
    domain_file: str = Field(default="CNAME", description="Custom domain pinning file (optional)")

    @field_validator("content_dir", "templates_dir", "assets_dir", "output_dir", "domain_file", mode="after")
    @classmethod
    def validate_safe_path(cls, v: str) -> str:
        return _validate_relative_path(v)

    @field_validator("output_dir", mode="after")
    @classmethod
    def validate_output_dir(cls, v: str) -> str:
        if not v or Path(v) == Path():
            msg = "output_dir must name a subdirectory of the site root"
            raise ValueError(msg)
        return v

    @field_validator("assets_dir", mode="after")
    @classmethod
    def validate_assets_dir(cls, v: str) -> str:
        # The assets tree is copied into the output directory, which lives under the site root.
        if not v or Path(v) == Path():
            msg = "assets_dir must name a subdirectory of the site root"
            raise ValueError(msg)
        return v


class ContentSettings(BaseModel):
    """File names inside ``paths.content_dir``."""

    posts_dir: str = Field(default="posts", description="One JSON file per post")
    site_file: str = Field(default="site.json", description="Site-wide settings document")
    about_file: str = Field(default="about.json", description="Bilingual about text")
    unlinked_comments_file: str = Field(
        default="unlinked-comments.json",
        description="Comments whose post no longer exists",
    )
    origin_file: str = Field(default="origin.json", description="Origin text document (optional)")

    @field_validator(
        "posts_dir", "site_file", "about_file", "unlinked_comments_file", "origin_file", mode="after"
    )
    @classmethod
    def validate_safe_path(cls, v: str) -> str:
        return _validate_relative_path(v)


class TokenSettings(BaseModel):
    """Placeholder sentinels replaced in templates."""

    posts: str = Field(default="/*__POSTS_JSON__*/", min_length=1)
    unlinked_comments: str = Field(default="/*__UNLINKED_JSON__*/", min_length=1)
    about: str = Field(default="/*__ABOUT_JSON__*/", min_length=1)
    contact_email: str = Field(default="/*__CONTACT_EMAIL__*/", min_length=1)
    origin: str = Field(default="/*__ORIGIN_JSON__*/", min_length=1)


class PageSettings(BaseModel):
    """One template/output pair."""

    template: str = Field(default="index.html", description="Template file inside templates_dir")
    output: str = Field(default="index.html", description="Output file inside output_dir")
    inject_origin: bool = Field(default=False, description="Replace the origin token on this page")

    @field_validator("template", "output", mode="after")
    @classmethod
    def validate_safe_path(cls, v: str) -> str:
        if not v:
            msg = "Page template and output must not be empty"
            raise ValueError(msg)
        return _validate_relative_path(v)


class SiteSettings(BaseSettings):
    """Root configuration for one site.

    Supports environment variable overrides with the pattern:
    WORKS_ON_WORK_SECTION__KEY (e.g., WORKS_ON_WORK_PATHS__OUTPUT_DIR)
    """

    site_name: str = Field(default="works_on_work", min_length=1, description="Name shown in build logs")
    paths: PathsSettings = Field(default_factory=PathsSettings)
    content: ContentSettings = Field(default_factory=ContentSettings)
    tokens: TokenSettings = Field(default_factory=TokenSettings)
    pages: list[PageSettings] = Field(
        default_factory=lambda: [PageSettings()],
        min_length=1,
        description="Pages to build; the first one is the primary page",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        validate_assignment=True,
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
    )

    @property
    def primary_page(self) -> PageSettings:
        return self.pages[0]


def _collect_env_override_paths() -> set[tuple[str, ...]]:
    """Return the set of config paths defined via environment variables."""
    env_paths: set[tuple[str, ...]] = set()

    for key in os.environ:
        if not key.upper().startswith(ENV_PREFIX):
            continue
        parts = [part.lower() for part in key[len(ENV_PREFIX) :].split("__") if part]
        if parts:
            env_paths.add(tuple(parts))

    return env_paths


def _merge_config(
    base: dict[str, Any],
    override: dict[str, Any],
    env_override_paths: set[tuple[str, ...]],
    current_path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Merge override into base, skipping keys provided via env vars."""
    merged = deepcopy(base)

    for key, value in override.items():
        path = (*current_path, str(key).lower())
        if path in env_override_paths:
            continue

        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_config(merged[key], value, env_override_paths, path)
        else:
            merged[key] = value

    return merged


def load_site_config(site_root: Path | None = None) -> SiteSettings:
    """Load site configuration from ``works_on_work.toml``.

    Configuration priority (highest to lowest):
    1. CLI (applied by the command after loading)
    2. Environment variables (WORKS_ON_WORK_SECTION__KEY)
    3. Config file (works_on_work.toml)
    4. Defaults

    Raises:
        ConfigValidationError: If the file is not valid TOML or fails validation

    """
    if site_root is None:
        site_root = Path.cwd()

    config_path = site_root / CONFIG_FILENAME

    file_data: dict[str, Any] = {}
    if config_path.exists():
        logger.debug("Loading config from %s", config_path)
        try:
            file_data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigValidationError(config_path, [{"loc": (), "msg": str(e)}]) from e
    else:
        logger.debug("No %s in %s, using defaults", CONFIG_FILENAME, site_root)

    try:
        base_dict = SiteSettings().model_dump(mode="json")

        # Env Vars > Config File > Defaults
        env_override_paths = _collect_env_override_paths()
        merged = _merge_config(base_dict, file_data, env_override_paths)

        return SiteSettings.model_validate(merged)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(location_part) for location_part in error["loc"])
            logger.error("  %s: %s", loc, error["msg"])
        raise ConfigValidationError(config_path, e.errors()) from e


def save_site_config(config: SiteSettings, site_root: Path) -> Path:
    """Save SiteSettings to ``works_on_work.toml`` and return its path."""
    site_root.mkdir(parents=True, exist_ok=True)
    config_path = site_root / CONFIG_FILENAME

    data = config.model_dump(exclude_defaults=False, mode="json")
    config_path.write_text(tomli_w.dumps(data), encoding="utf-8")
    logger.debug("Saved config to %s", config_path)

    return config_path


__all__ = [
    "CONFIG_FILENAME",
    "ContentSettings",
    "PageSettings",
    "PathsSettings",
    "SiteSettings",
    "TokenSettings",
    "load_site_config",
    "save_site_config",
]

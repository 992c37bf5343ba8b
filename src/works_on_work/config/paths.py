"""Resolved filesystem locations for one site."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from works_on_work.config.settings import load_site_config

if TYPE_CHECKING:
    from works_on_work.config.settings import PageSettings, SiteSettings

__all__ = ["SitePaths"]


class SitePaths:
    """Absolute paths for a site root, resolved from its settings."""

    def __init__(self, site_root: Path, *, config: SiteSettings | None = None) -> None:
        self.site_root = site_root.expanduser().resolve()

        if config is None:
            config = load_site_config(self.site_root)

        self.config = config
        p = config.paths
        c = config.content

        self.content_dir = self.site_root / p.content_dir
        self.templates_dir = self.site_root / p.templates_dir
        self.assets_dir = self.site_root / p.assets_dir
        self.output_dir = self.site_root / p.output_dir
        self.domain_file = self.site_root / p.domain_file

        self.posts_dir = self.content_dir / c.posts_dir
        self.site_file = self.content_dir / c.site_file
        self.about_file = self.content_dir / c.about_file
        self.unlinked_comments_file = self.content_dir / c.unlinked_comments_file
        self.origin_file = self.content_dir / c.origin_file

    def template_path(self, page: PageSettings) -> Path:
        return self.templates_dir / page.template

    @property
    def primary_template(self) -> Path:
        return self.template_path(self.config.primary_page)

"""Single-pass site build: prepare → load → sort → inject → write."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from works_on_work.config.paths import SitePaths
from works_on_work.config.settings import SiteSettings
from works_on_work.content.loader import load_content
from works_on_work.orchestration.exceptions import TemplateNotFoundError
from works_on_work.output.writer import copy_file, copy_tree, prepare_output_dir, write_page
from works_on_work.rendering.injector import inject

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildResult:
    """Summary of one build."""

    output_dir: Path
    pages: list[Path] = field(default_factory=list)
    post_count: int = 0
    warnings: tuple[str, ...] = ()
    assets_copied: bool = False
    domain_file_copied: bool = False
    elapsed_seconds: float = 0.0


def build_site(site_root: Path, *, config: SiteSettings | None = None) -> BuildResult:
    """Build the site rooted at ``site_root`` into its output directory.

    Raises:
        TemplateNotFoundError: The primary page template is missing. The
            output directory is left empty.
        OutputPreparationError: The output directory could not be reset.

    """
    start = time.perf_counter()
    paths = SitePaths(site_root, config=config)
    settings = paths.config

    logger.info("%s: build started", settings.site_name)
    output_dir = prepare_output_dir(paths.output_dir)

    if not paths.primary_template.is_file():
        logger.error("✗ %s not found, aborting", paths.primary_template)
        raise TemplateNotFoundError(paths.primary_template)

    bundle = load_content(paths)
    result = BuildResult(output_dir=output_dir, post_count=len(bundle.posts), warnings=bundle.warnings)

    for page in settings.pages:
        template_path = paths.template_path(page)
        if not template_path.is_file():
            logger.warning("⚠  %s not found, skipping %s", template_path, page.output)
            result.warnings = (*result.warnings, f"{page.template}: template not found")
            continue

        html = inject(
            template_path.read_text(encoding="utf-8"),
            bundle,
            settings.tokens,
            include_origin=page.inject_origin,
        )
        result.pages.append(write_page(output_dir, page.output, html))
        logger.info("✓ %s", page.output)

    result.assets_copied = copy_tree(paths.assets_dir, output_dir / paths.assets_dir.name)
    if result.assets_copied:
        logger.info("✓ %s/", paths.assets_dir.name)

    result.domain_file_copied = copy_file(paths.domain_file, output_dir)
    if result.domain_file_copied:
        logger.info("✓ %s", paths.domain_file.name)

    result.elapsed_seconds = time.perf_counter() - start
    logger.info("Build complete in %.2fs", result.elapsed_seconds)
    return result

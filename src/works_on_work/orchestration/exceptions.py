"""Exceptions for the build pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from works_on_work.exceptions import WorksOnWorkError

if TYPE_CHECKING:
    from pathlib import Path


class BuildError(WorksOnWorkError):
    """Base exception for build pipeline errors."""


class TemplateNotFoundError(BuildError):
    """Raised when the primary page template is missing."""

    def __init__(self, template_path: Path) -> None:
        self.template_path = template_path
        super().__init__(f"Template not found: {template_path}")

"""Starter site scaffolding."""

from works_on_work.init.scaffolding import ScaffoldResult, scaffold_site

__all__ = ["ScaffoldResult", "scaffold_site"]

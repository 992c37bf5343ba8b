"""Build pipeline orchestration."""

from works_on_work.orchestration.build import BuildResult, build_site

__all__ = ["BuildResult", "build_site"]

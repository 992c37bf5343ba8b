"""works-on-work: JSON content + HTML template static site builder."""

from works_on_work.orchestration.build import BuildResult, build_site

__version__ = "0.1.0"
__all__ = [
    "BuildResult",
    "build_site",
]

"""Utility modules for works-on-work."""

from works_on_work.utils.paths import PathTraversalError, safe_path_join

__all__ = ["PathTraversalError", "safe_path_join"]

"""Placeholder-token injection into HTML templates."""

from works_on_work.rendering.injector import inject, replace_first, to_pretty_json

__all__ = ["inject", "replace_first", "to_pretty_json"]

"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from works_on_work.exceptions import WorksOnWorkError


class ConfigError(WorksOnWorkError):
    """Base exception for all configuration-related errors."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration file cannot be parsed or fails validation."""

    def __init__(self, config_path: Path, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.config_path = config_path
        self.errors = list(errors or [])
        details = "; ".join(_format_error(error) for error in self.errors)
        message = f"Configuration validation failed for {config_path} with {len(self.errors)} error(s)."
        if details:
            message = f"{message} {details}"
        super().__init__(message)


def _format_error(error: dict[str, Any]) -> str:
    loc = " -> ".join(str(part) for part in error.get("loc", ()))
    msg = error.get("msg", "")
    return f"{loc}: {msg}" if loc else msg

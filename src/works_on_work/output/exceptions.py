"""Exceptions raised while writing build output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from works_on_work.exceptions import WorksOnWorkError

if TYPE_CHECKING:
    from pathlib import Path


class OutputError(WorksOnWorkError):
    """Base exception for output errors."""


class OutputPreparationError(OutputError):
    """Raised when the output directory cannot be wiped or recreated."""

    def __init__(self, output_dir: Path, original_exception: Exception) -> None:
        self.output_dir = output_dir
        super().__init__(f"Could not prepare output directory '{output_dir}': {original_exception}")
        self.__cause__ = original_exception


class OutputWriteError(OutputError):
    """Raised when a page or asset cannot be written."""

    def __init__(self, path: Path, original_exception: Exception) -> None:
        self.path = path
        super().__init__(f"Could not write '{path}': {original_exception}")
        self.__cause__ = original_exception

"""Write build artifacts.

The output directory is fully owned by the build: :func:`prepare_output_dir`
is the only destructive operation in the pipeline.
"""

from __future__ import annotations

import logging
import shutil
from typing import TYPE_CHECKING

from works_on_work.output.exceptions import OutputPreparationError, OutputWriteError
from works_on_work.utils.paths import safe_path_join

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def prepare_output_dir(output_dir: Path) -> Path:
    """Remove ``output_dir`` if present, then recreate it empty."""
    try:
        if output_dir.exists():
            logger.debug("Removing previous build at %s", output_dir)
            if output_dir.is_dir() and not output_dir.is_symlink():
                shutil.rmtree(output_dir)
            else:
                output_dir.unlink()
        output_dir.mkdir(parents=True)
    except OSError as e:
        raise OutputPreparationError(output_dir, e) from e
    return output_dir


def write_page(output_dir: Path, filename: str, text: str) -> Path:
    """Write ``text`` as UTF-8 to ``filename`` inside ``output_dir``."""
    target = safe_path_join(output_dir, filename)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except (OSError, UnicodeEncodeError) as e:
        raise OutputWriteError(target, e) from e
    return target


def copy_tree(src: Path, dest: Path) -> bool:
    """Copy the directory tree ``src`` to ``dest`` byte for byte.

    Returns:
        False when ``src`` does not exist (optional input), True otherwise

    """
    if not src.is_dir():
        return False
    try:
        dest.mkdir(parents=True, exist_ok=True)
        for entry in sorted(src.iterdir(), key=lambda p: p.name):
            target = dest / entry.name
            if entry.is_dir():
                copy_tree(entry, target)
            else:
                shutil.copyfile(entry, target)
    except OSError as e:
        raise OutputWriteError(dest, e) from e
    return True


def copy_file(src: Path, dest_dir: Path) -> bool:
    """Copy a single optional file into ``dest_dir`` under the same name."""
    if not src.is_file():
        return False
    target = dest_dir / src.name
    try:
        shutil.copyfile(src, target)
    except OSError as e:
        raise OutputWriteError(target, e) from e
    return True

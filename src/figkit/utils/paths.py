"""Path utility helpers."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .logging import get_logger

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


def normalise_path(path: PathLike) -> Path:
    """Return ``path`` with Windows separators and ``~`` expanded."""

    return Path(str(path).replace("\\", "/")).expanduser()


def output_base(filename: PathLike, directory: Optional[PathLike] = None) -> Path:
    """Join an optional output directory and an extension-free base name."""

    base = normalise_path(filename)
    if directory is not None:
        base = normalise_path(directory) / base
    return base


def ensure_parent_dir(base: Path) -> Optional[Path]:
    """Create the folder holding ``base`` unless it exists or is the working directory.

    Returns the created folder, or ``None`` when nothing had to be created.
    """

    folder = base.parent
    if folder == Path(".") or folder.exists():
        return None
    folder.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Created folder %s", folder)
    return folder

"""Utilities for exporting figures to multiple formats with consistent settings."""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from .errors import require_module
from .units import FigureDimensions, convert_dimensions, validate_units
from .utils.logging import get_logger
from .utils.paths import PathLike, ensure_parent_dir, output_base

LOGGER = get_logger(__name__)

VECTOR_FORMATS: Tuple[str, ...] = ("pdf",)
RASTER_FORMATS: Tuple[str, ...] = ("png", "jpeg")
SUPPORTED_FORMATS: Tuple[str, ...] = VECTOR_FORMATS + RASTER_FORMATS


def validate_filename(filename: PathLike) -> str:
    """Return ``filename`` as a string, rejecting empty names and any ``.``."""

    name = str(filename)
    if not name.strip():
        raise ValueError("filename must not be empty")
    if "." in name:
        raise ValueError(f"filename must be a base name without an extension; got {name!r}")
    return name


def validate_formats(formats: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    """Return the requested formats in export order, rejecting unknown ones."""

    requested = (formats,) if isinstance(formats, str) else tuple(formats)
    if not requested:
        raise ValueError("formats must name at least one of " + ", ".join(SUPPORTED_FORMATS))
    unknown = sorted({fmt for fmt in requested if fmt not in SUPPORTED_FORMATS})
    if unknown:
        raise ValueError(
            f"formats may only contain {', '.join(map(repr, SUPPORTED_FORMATS))}; got {unknown}"
        )
    return tuple(fmt for fmt in SUPPORTED_FORMATS if fmt in requested)


@contextmanager
def _figure_size(figure: Figure, size_inches: Tuple[float, float]) -> Iterator[Figure]:
    """Temporarily resize ``figure``."""

    original = tuple(figure.get_size_inches())
    figure.set_size_inches(size_inches, forward=False)
    try:
        yield figure
    finally:
        figure.set_size_inches(original, forward=False)


def _save_vector(figure: Figure, target: Path, dims: FigureDimensions, cairo: bool) -> None:
    with _figure_size(figure, dims.size_inches):
        figure.savefig(
            target,
            format=target.suffix[1:],
            dpi=dims.dpi,
            backend="cairo" if cairo else None,
        )


def _save_raster(figure: Figure, target: Path, dims: FigureDimensions) -> None:
    width_px, height_px = dims.pixel_size
    with _figure_size(figure, (width_px / dims.dpi, height_px / dims.dpi)):
        figure.savefig(target, format=target.suffix[1:], dpi=dims.dpi)


def export_figure(
    figure: Optional[Figure] = None,
    filename: PathLike = "lastplot",
    width: float = 7,
    height: float = 7,
    units: str = "cm",
    dpi: int = 600,
    path: Optional[PathLike] = None,
    formats: Union[str, Iterable[str]] = SUPPORTED_FORMATS,
    cairo: bool = False,
) -> List[Path]:
    """Save ``figure`` as PDF, PNG and/or JPEG files sharing one base name.

    Parameters
    ----------
    figure:
        Figure to export. Defaults to the current Matplotlib figure.
    filename:
        Base name without extension. It may contain folders; missing folders
        are created.
    width, height:
        Figure size expressed in ``units``.
    units:
        ``"cm"``, ``"in"`` or ``"px"``.
    dpi:
        Resolution used for raster output and for converting pixel sizes.
    path:
        Optional folder prepended to ``filename``.
    formats:
        Any of ``"pdf"``, ``"png"`` and ``"jpeg"``. Files are always written
        in that order.
    cairo:
        Render the PDF through the Cairo backend (requires ``pycairo``).

    Returns
    -------
    list of Path
        The written files.
    """

    validate_filename(filename)
    validate_units(units)
    selected = validate_formats(formats)
    if cairo and "pdf" in selected:
        require_module("cairo", "pycairo")
    if "jpeg" in selected:
        require_module("PIL", "pillow")

    dims = convert_dimensions(width, height, units, dpi)
    base = output_base(filename, path)
    ensure_parent_dir(base)
    figure = figure if figure is not None else plt.gcf()

    written: List[Path] = []
    for extension in selected:
        target = base.with_name(f"{base.name}.{extension}")
        if extension in VECTOR_FORMATS:
            _save_vector(figure, target, dims, cairo)
        else:
            _save_raster(figure, target, dims)
        LOGGER.info("Saved %s file to %s", extension.upper(), target)
        written.append(target)
    return written

"""Conversion of figure sizes between centimetres, inches and pixels."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

SUPPORTED_UNITS: Tuple[str, ...] = ("cm", "in", "px")
CM_PER_INCH = 2.54


@dataclass(frozen=True, slots=True)
class FigureDimensions:
    """A figure size expressed both in inches and in pixels at ``dpi``."""

    width_in: float
    height_in: float
    width_px: float
    height_px: float
    dpi: int

    @property
    def size_inches(self) -> Tuple[float, float]:
        return self.width_in, self.height_in

    @property
    def pixel_size(self) -> Tuple[int, int]:
        """Whole pixel counts used for raster output."""

        return max(1, round(self.width_px)), max(1, round(self.height_px))


def validate_units(units: str) -> str:
    """Return ``units`` unchanged if it is one of :data:`SUPPORTED_UNITS`."""

    if units not in SUPPORTED_UNITS:
        raise ValueError(f"units must be one of {', '.join(map(repr, SUPPORTED_UNITS))}; got {units!r}")
    return units


def convert_dimensions(width: float, height: float, units: str, dpi: int) -> FigureDimensions:
    """Convert ``width`` x ``height`` given in ``units`` into inches and pixels."""

    validate_units(units)
    if dpi <= 0:
        raise ValueError(f"dpi must be positive; got {dpi!r}")
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be positive; got {width!r} x {height!r}")

    if units == "cm":
        width_in, height_in = width / CM_PER_INCH, height / CM_PER_INCH
        width_px, height_px = width * dpi / CM_PER_INCH, height * dpi / CM_PER_INCH
    elif units == "in":
        width_in, height_in = width, height
        width_px, height_px = width * dpi, height * dpi
    else:
        width_in, height_in = width / dpi, height / dpi
        width_px, height_px = width, height
    return FigureDimensions(width_in, height_in, width_px, height_px, dpi)

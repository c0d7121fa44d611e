"""Plotting utilities for publication-grade figure export and theming."""

from .errors import MissingDependencyError
from .exporters import SUPPORTED_FORMATS, export_figure
from .themes import (
    MODIFIED_THEMES,
    THEME_NAMES,
    Theme,
    base_theme,
    generate_modified_theme,
    generate_modified_themes,
    get_theme,
)
from .units import SUPPORTED_UNITS, FigureDimensions, convert_dimensions

__all__ = [
    "MissingDependencyError",
    "SUPPORTED_FORMATS",
    "export_figure",
    "MODIFIED_THEMES",
    "THEME_NAMES",
    "Theme",
    "base_theme",
    "generate_modified_theme",
    "generate_modified_themes",
    "get_theme",
    "SUPPORTED_UNITS",
    "FigureDimensions",
    "convert_dimensions",
]

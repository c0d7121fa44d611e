"""Utility helpers shared across the figkit codebase."""

from .config import AppConfig, ExportSettings, ThemeSettings, load_config
from .logging import configure_logging, get_logger
from .paths import ensure_parent_dir, normalise_path, output_base

__all__ = [
    "AppConfig",
    "ExportSettings",
    "ThemeSettings",
    "load_config",
    "configure_logging",
    "get_logger",
    "ensure_parent_dir",
    "normalise_path",
    "output_base",
]

"""Configuration helpers for figkit."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, field_validator

from .paths import normalise_path

Unit = Literal["cm", "in", "px"]
ExportFormat = Literal["pdf", "png", "jpeg"]


class ExportSettings(BaseModel):
    """Default sizes and formats used when exporting figures."""

    width: float = Field(default=7.0, gt=0)
    height: float = Field(default=7.0, gt=0)
    units: Unit = "cm"
    dpi: int = Field(default=600, gt=0)
    formats: Tuple[ExportFormat, ...] = ("pdf", "png", "jpeg")
    output_dir: Optional[Path] = None
    cairo: bool = False

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("formats must name at least one format")
        return value

    @field_validator("output_dir")
    @classmethod
    def expand_output_dir(cls, value: Optional[Path]) -> Optional[Path]:
        return normalise_path(value) if value is not None else None

    def export_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`figkit.exporters.export_figure`."""

        return {
            "width": self.width,
            "height": self.height,
            "units": self.units,
            "dpi": self.dpi,
            "formats": self.formats,
            "path": self.output_dir,
            "cairo": self.cairo,
        }


class ThemeSettings(BaseModel):
    """Base sizes handed to the theme factory."""

    base_size: float = Field(default=8.0, gt=0)
    base_line_size: float = Field(default=0.5 / 2.126, gt=0)
    base_rect_size: float = Field(default=0.5 / 2.126, gt=0)


class AppConfig(BaseModel):
    """Application level configuration."""

    export: ExportSettings = Field(default_factory=ExportSettings)
    theme: ThemeSettings = Field(default_factory=ThemeSettings)
    log_level: str = "INFO"


def load_config(path: Path) -> AppConfig:
    """Load configuration from a YAML file."""

    data: Dict[str, Any] = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(**data)

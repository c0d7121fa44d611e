"""Derived Matplotlib themes built from the bundled style sheets.

Every name in :data:`THEME_NAMES` is a built-in Matplotlib style sheet. The
factory turns each one into a base theme sized by ``base_size`` (points) and
``base_line_size`` / ``base_rect_size`` (millimetres), then layers the same
cosmetic overrides on top: black tick text, 45 degree x tick labels, a legend
above the plot without a frame, transparent backgrounds, no minor grid and
centred titles. The results are published as ``theme_<name>_modified``::

    from figkit import themes

    with themes.theme_ggplot_modified.context():
        fig, ax = plt.subplots()
        ...
    themes.theme_ggplot_modified.apply(fig)
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from .utils.logging import get_logger

LOGGER = get_logger(__name__)

MM_TO_PT = 72 / 25.4
DEFAULT_BASE_SIZE = 8
DEFAULT_LINE_SIZE_MM = 0.5 / 2.126
DEFAULT_RECT_SIZE_MM = 0.5 / 2.126

THEME_NAMES: Sequence[str] = (
    "ggplot",
    "bmh",
    "classic",
    "grayscale",
    "dark_background",
    "fivethirtyeight",
    "fast",
    "seaborn-v0_8-whitegrid",
    "seaborn-v0_8-white",
    "seaborn-v0_8-ticks",
)

THEME_OVERRIDES: Dict[str, Any] = {
    "xtick.labelcolor": "black",
    "ytick.labelcolor": "black",
    "xtick.color": "black",
    "ytick.color": "black",
    "legend.frameon": False,
    "legend.facecolor": "none",
    "legend.loc": "upper center",
    "axes.facecolor": "none",
    "axes.grid.which": "major",
    "figure.facecolor": "none",
    "savefig.facecolor": "none",
    "axes.titlelocation": "center",
}

# Figure-level settings with no rcParams equivalent.
LAYOUT_OVERRIDES: Dict[str, Any] = {
    "xtick_rotation": 45.0,
    "xtick_ha": "right",
    "xtick_va": "top",
    "legend_position": "top",
}


@dataclass(frozen=True, slots=True)
class Theme:
    """A named, read-only set of rcParams plus figure-level layout settings."""

    name: str
    rc: Mapping[str, Any] = field(default_factory=dict)
    base_name: Optional[str] = None
    xtick_rotation: Optional[float] = None
    xtick_ha: str = "center"
    xtick_va: str = "top"
    legend_position: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rc", MappingProxyType(dict(self.rc)))

    @contextmanager
    def context(self) -> Iterator["Theme"]:
        """Apply Matplotlib defaults and then this theme until the block exits."""

        with plt.style.context(["default", dict(self.rc)]):
            yield self

    def apply(self, figure: Optional[Figure] = None) -> Figure:
        """Apply the layout settings to every axes of ``figure``.

        Existing legends keep their entries and title; only their anchor moves.
        """

        figure = figure if figure is not None else plt.gcf()
        for ax in figure.axes:
            if self.xtick_rotation is not None:
                ax.tick_params(axis="x", labelrotation=self.xtick_rotation)
                for label in ax.get_xticklabels():
                    label.set_horizontalalignment(self.xtick_ha)
                    label.set_verticalalignment(self.xtick_va)
            legend = ax.get_legend()
            if self.legend_position == "top" and legend is not None:
                legend.set_loc("lower center")
                legend.set_bbox_to_anchor((0.5, 1.0), transform=ax.transAxes)
        return figure


def derived_name(name: str) -> str:
    """Published name of the derived theme built from base theme ``name``."""

    return f"theme_{name.replace('-', '_')}_modified"


def base_theme(
    name: str,
    base_size: float = DEFAULT_BASE_SIZE,
    base_line_size: float = DEFAULT_LINE_SIZE_MM,
    base_rect_size: float = DEFAULT_RECT_SIZE_MM,
) -> Theme:
    """Return the Matplotlib style sheet ``name`` with the base sizes applied."""

    if name not in plt.style.library:
        raise KeyError(f"Unknown base theme {name!r}")
    line_pt = base_line_size * MM_TO_PT
    rect_pt = base_rect_size * MM_TO_PT
    rc = dict(plt.style.library[name])
    rc.update(
        {
            "font.size": base_size,
            "grid.linewidth": line_pt,
            "xtick.major.width": line_pt,
            "ytick.major.width": line_pt,
            "xtick.minor.width": line_pt,
            "ytick.minor.width": line_pt,
            "axes.linewidth": rect_pt,
            "patch.linewidth": rect_pt,
        }
    )
    return Theme(name=name, rc=rc, base_name=name)


def base_theme_constructor(name: str) -> Callable[..., Theme]:
    """Return a constructor taking only the base sizes for style sheet ``name``."""

    if name not in plt.style.library:
        raise KeyError(f"Unknown base theme {name!r}")
    return partial(base_theme, name)


def generate_modified_theme(
    base: Callable[..., Theme],
    base_size: float = DEFAULT_BASE_SIZE,
    base_line_size: float = DEFAULT_LINE_SIZE_MM,
    base_rect_size: float = DEFAULT_RECT_SIZE_MM,
    name: Optional[str] = None,
) -> Theme:
    """Build ``base`` with the given sizes and layer the cosmetic overrides on top."""

    theme = base(base_size=base_size, base_line_size=base_line_size, base_rect_size=base_rect_size)
    modified = replace(
        theme,
        name=name or derived_name(theme.name),
        rc={**theme.rc, **THEME_OVERRIDES},
        **LAYOUT_OVERRIDES,
    )
    LOGGER.debug("Generated theme %s from %s", modified.name, theme.name)
    return modified


def generate_modified_themes(
    names: Iterable[str] = THEME_NAMES,
    base_size: float = DEFAULT_BASE_SIZE,
    base_line_size: float = DEFAULT_LINE_SIZE_MM,
    base_rect_size: float = DEFAULT_RECT_SIZE_MM,
) -> Dict[str, Theme]:
    """Return ``{derived name: theme}`` for every base theme in ``names``."""

    themes: Dict[str, Theme] = {}
    for name in names:
        theme = generate_modified_theme(
            base_theme_constructor(name),
            base_size=base_size,
            base_line_size=base_line_size,
            base_rect_size=base_rect_size,
        )
        themes[theme.name] = theme
    return themes


MODIFIED_THEMES: Dict[str, Theme] = generate_modified_themes()


def get_theme(name: str) -> Theme:
    """Look up a published theme by its derived or base name."""

    for key in (name, derived_name(name)):
        if key in MODIFIED_THEMES:
            return MODIFIED_THEMES[key]
    raise KeyError(f"Unknown theme {name!r}; available: {', '.join(MODIFIED_THEMES)}")


def __getattr__(name: str) -> Theme:
    try:
        return MODIFIED_THEMES[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None

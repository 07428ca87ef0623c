"""Recipes and color schemes, and their translation into matplotlib rcParams."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import matplotlib as mpl
import matplotlib.pyplot as plt

from .theme import (
    COLOR_SCHEMES,
    DEFAULT_COLORMAP,
    DEFAULT_SCHEME,
    LAYOUT,
    LINESTYLE_ORDER,
)

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class Recipe:
    """Cosmetic defaults for one plot context. Swapped wholesale, never merged."""

    name: str = "default"

    # Figure
    width: int = LAYOUT["width_px"]
    height: int = LAYOUT["height_px"]

    # Axes
    box: bool = True
    grid: bool = True
    minor_grid: bool = False
    aspect: str | None = None
    padded: bool = False

    # Lines
    line_width: float = LAYOUT["line_width"]
    marker_size: float = LAYOUT["marker_size"]

    # Text
    usetex: bool = False
    tick_size: float = LAYOUT["tick_size"]
    label_size: float = LAYOUT["label_size"]
    title_size: float = LAYOUT["title_size"]
    subtitle_size: float = LAYOUT["subtitle_size"]
    legend_size: float = LAYOUT["legend_size"]

    # Contours
    colormap: str = DEFAULT_COLORMAP

    @property
    def figsize(self) -> tuple[float, float]:
        """Figure size in inches at the layout DPI."""
        return (self.width / LAYOUT["dpi"], self.height / LAYOUT["dpi"])


@dataclass(frozen=True)
class ColorScheme:
    """Foreground, background and the ordered series palette."""

    name: str
    fg: str
    bg: str
    series: tuple[str, ...]


RECIPES: dict[str, Recipe] = {
    "default": Recipe(),
    "trajectory": Recipe(name="trajectory", aspect="equal", padded=True),
}

SCHEMES: dict[str, ColorScheme] = {
    name: ColorScheme(name, fg, bg, tuple(series))
    for name, (fg, bg, series) in COLOR_SCHEMES.items()
}


def get_recipe(name: str) -> Recipe:
    """Look up a recipe by name; unknown names fall back to ``default``."""
    key = name.lower()
    if key not in RECIPES:
        logger.debug("unknown recipe %r, using default", name)
        key = "default"
    return RECIPES[key]


def get_scheme(name: str) -> ColorScheme:
    """Look up a color scheme by name; unknown names fall back to ``default``."""
    key = name.lower()
    if key not in SCHEMES:
        logger.debug("unknown color scheme %r, using default", name)
        key = "default"
    return SCHEMES[key]


def rc_params(recipe: Recipe, scheme: ColorScheme) -> dict:
    """Return the matplotlib rcParams dict for a recipe/scheme pair."""
    return {
        # Figure
        "figure.figsize": recipe.figsize,
        "figure.dpi": LAYOUT["dpi"],
        "figure.facecolor": scheme.bg,
        "figure.edgecolor": "none",
        "savefig.dpi": LAYOUT["export_dpi"],
        "savefig.facecolor": scheme.bg,
        "savefig.edgecolor": "none",

        # Axes
        "axes.facecolor": scheme.bg,
        "axes.edgecolor": scheme.fg,
        "axes.labelcolor": scheme.fg,
        "axes.titlecolor": scheme.fg,
        "axes.titlesize": recipe.title_size,
        "axes.titleweight": "bold",
        "axes.labelsize": recipe.label_size,
        "axes.prop_cycle": mpl.cycler(color=list(scheme.series)),
        "axes.spines.top": recipe.box,
        "axes.spines.right": recipe.box,
        "axes.grid": recipe.grid,
        "axes.axisbelow": True,
        "axes.xmargin": 0.0,  # lines run edge to edge; markers get padded
        "axes.ymargin": LAYOUT["pad"],

        # Grid
        "grid.color": scheme.fg,
        "grid.alpha": 0.15,
        "grid.linewidth": 0.5,

        # Ticks
        "xtick.labelsize": recipe.tick_size,
        "ytick.labelsize": recipe.tick_size,
        "xtick.color": scheme.fg,
        "ytick.color": scheme.fg,
        "xtick.direction": "in",
        "ytick.direction": "in",

        # Lines
        "lines.linewidth": recipe.line_width,
        "lines.linestyle": LINESTYLE_ORDER[0],
        "lines.markersize": recipe.marker_size,

        # Legend
        "legend.frameon": True,
        "legend.facecolor": scheme.bg,
        "legend.edgecolor": scheme.fg,
        "legend.labelcolor": scheme.fg,
        "legend.fontsize": recipe.legend_size,

        # Text
        "text.color": scheme.fg,
        "text.usetex": recipe.usetex,
        "mathtext.fontset": "cm",
        "font.size": recipe.tick_size,

        # Images and contours
        "image.cmap": recipe.colormap,
    }


def apply(
    recipe: str | Recipe = "default",
    scheme: str | ColorScheme = DEFAULT_SCHEME,
) -> None:
    """Apply a recipe and color scheme to matplotlib globally."""
    if isinstance(recipe, str):
        recipe = get_recipe(recipe)
    if isinstance(scheme, str):
        scheme = get_scheme(scheme)
    plt.rcParams.update(rc_params(recipe, scheme))

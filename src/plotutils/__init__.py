"""plotutils: stateful styling and bookkeeping for matplotlib figures."""

from .colors import hex2rgb
from .contour import ContourType
from .errors import (
    ContextClosedError,
    DuplicateNameError,
    InvalidFunctionError,
    NotFoundError,
    PlotUtilsError,
    PlotUtilsWarning,
)
from .figure import PlotContext
from .registry import HandleRegistry
from .style import ColorScheme, Recipe, apply, get_recipe, get_scheme
from .text import latex_exponent
from .theme import COLOR_SCHEMES, LAYOUT, LINESTYLE_ORDER, MARKER_ORDER

__all__ = [
    "PlotContext",
    "HandleRegistry",
    "ContourType",
    "ColorScheme",
    "Recipe",
    "apply",
    "get_recipe",
    "get_scheme",
    "hex2rgb",
    "latex_exponent",
    "COLOR_SCHEMES",
    "LAYOUT",
    "LINESTYLE_ORDER",
    "MARKER_ORDER",
    "ContextClosedError",
    "DuplicateNameError",
    "InvalidFunctionError",
    "NotFoundError",
    "PlotUtilsError",
    "PlotUtilsWarning",
]

"""Pure data: color schemes, cycle orders, and layout constants.

No library imports. This module defines the visual identity as plain
Python dicts and tuples so the style layer and the builders can share it.
"""

# Nord palette (https://www.nordtheme.com), aurora + frost accents
NORD = {
    "polar_night": "#2e3440",
    "snow_storm": "#eceff4",
    "white": "#ffffff",
    "frost": "#5e81ac",
    "green": "#a3be8c",
    "yellow": "#ebcb8b",
    "orange": "#d08770",
    "red": "#bf616a",
    "purple": "#b48ead",
}

NORD_SERIES = (
    NORD["frost"],
    NORD["green"],
    NORD["yellow"],
    NORD["orange"],
    NORD["red"],
    NORD["purple"],
)

# Dracula palette (https://draculatheme.com)
DRACULA = {
    "background": "#282a36",
    "foreground": "#f8f8f2",
    "cyan": "#8be9fd",
    "green": "#50fa7b",
    "orange": "#ffb86c",
    "pink": "#ff79c6",
    "purple": "#bd93f9",
    "red": "#ff5555",
    "yellow": "#f1fa8c",
}

DRACULA_SERIES = (
    DRACULA["cyan"],
    DRACULA["green"],
    DRACULA["orange"],
    DRACULA["pink"],
    DRACULA["purple"],
    DRACULA["red"],
    DRACULA["yellow"],
)

# name -> (foreground, background, series palette)
COLOR_SCHEMES = {
    "nord": (NORD["polar_night"], NORD["snow_storm"], NORD_SERIES),
    "nordwhite": (NORD["polar_night"], NORD["white"], NORD_SERIES),
    "nordnight": (NORD["snow_storm"], NORD["polar_night"], NORD_SERIES),
    "dracula": (DRACULA["foreground"], DRACULA["background"], DRACULA_SERIES),
    "default": (NORD["snow_storm"], NORD["polar_night"], NORD_SERIES),
}

DEFAULT_SCHEME = "nordwhite"

# Line styles cycle once per pass through the palette
LINESTYLE_ORDER = ("-", "--", ":")

# Markers for scatter and single-point series, keyed by line-style position
MARKER_ORDER = ("o", "s", "D", "^")

# Zero-crossing contour for constraint plots
CONSTRAINT_LEVELS = (0.0,)
CONSTRAINT_COLOR = "r"

# Perceptually uniform, close to the CubicYF map used in print figures
DEFAULT_COLORMAP = "viridis"

# Chart layout constants
LAYOUT = {
    "width_px": 1280,
    "height_px": 720,
    "dpi": 100,
    "export_dpi": 200,
    "line_width": 1.0,
    "marker_size": 4,
    "tick_size": 14,
    "label_size": 16,
    "title_size": 18,
    "subtitle_size": 16,
    "legend_size": 12,
    "tiled_font_offset": -3,
    "pad": 0.05,
    "view_3d": (30, 30),
    "view_surface": (30, -40),
}

# Export formats: extension -> (matplotlib format, dpi or None for vector)
EXPORT_FORMATS = {
    ".png": ("png", LAYOUT["export_dpi"]),
    ".eps": ("eps", None),
}

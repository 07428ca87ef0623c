"""Hex color conversion and color-option resolution."""

from __future__ import annotations

import numbers
import warnings
from collections.abc import Sequence
from typing import Any

from matplotlib import colors as mcolors

from .errors import PlotUtilsWarning

RGB = tuple[float, float, float]


def _parse_hex(value: str) -> tuple[int, int, int]:
    digits = value[1:] if value.startswith("#") else value
    if len(digits) != 6:
        raise ValueError(f"expected a six-digit hex color, got {value!r}")
    try:
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    except ValueError:
        raise ValueError(f"invalid hex color {value!r}") from None


def hex2rgb(hex_color: str | Sequence[str], scale: int = 1) -> RGB | list[RGB]:
    """Convert ``"#rrggbb"`` (the ``#`` is optional) to an RGB triple.

    With ``scale=1`` components are normalized to 0–1; ``scale=255`` (or
    ``256``) keeps them on 0–255. A sequence of hex strings returns a list of
    triples in the same order.
    """
    if scale == 1:
        divisor = 255.0
    elif scale in (255, 256):
        divisor = 1.0
    else:
        raise ValueError("scale must be 1 (0 to 1) or 255/256 (0 to 255)")

    if isinstance(hex_color, str):
        r, g, b = _parse_hex(hex_color)
        return (r / divisor, g / divisor, b / divisor)
    return [hex2rgb(h, scale) for h in hex_color]  # type: ignore[misc]


def _is_rgb_triple(value: Any) -> bool:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    return len(value) == 3 and all(
        isinstance(c, numbers.Real) and not isinstance(c, bool) for c in value
    )


def resolve_color(
    spec: Any,
    palette: Sequence[Any],
    default: Any,
    *,
    stacklevel: int = 2,
) -> Any:
    """Turn a user color option into something matplotlib accepts.

    Accepted forms are a color name or hex string, an RGB triple (values
    above 1 are read as 0–255), or a 0-based index into ``palette``. Anything
    else emits a :class:`PlotUtilsWarning` and returns ``default``. The
    warning is attributed ``stacklevel`` frames up, as in :func:`warnings.warn`.
    """
    if spec is None:
        return default

    if isinstance(spec, str):
        if mcolors.is_color_like(spec):
            return spec

    elif isinstance(spec, numbers.Integral) and not isinstance(spec, bool):
        if 0 <= spec < len(palette):
            return palette[spec]

    elif _is_rgb_triple(spec) or (hasattr(spec, "tolist") and _is_rgb_triple(spec.tolist())):
        rgb = tuple(float(c) for c in (spec.tolist() if hasattr(spec, "tolist") else spec))
        if any(c > 1 for c in rgb):
            rgb = tuple(c / 255 for c in rgb)
        if all(0 <= c <= 1 for c in rgb):
            return rgb

    warnings.warn(
        f"Color option {spec!r} is not in a recognized format; using the default color",
        PlotUtilsWarning,
        stacklevel=stacklevel,
    )
    return default

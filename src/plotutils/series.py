"""Option resolution for line, scatter and span-line series."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
from matplotlib import cbook
from matplotlib.lines import Line2D
from numpy.typing import ArrayLike

from .colors import resolve_color
from .cycle import StyleCycle


class SeriesKind(str, Enum):
    LINE = "line"
    VERTICAL_SPAN = "vspan"
    HORIZONTAL_SPAN = "hspan"


@dataclass
class SeriesData:
    kind: SeriesKind
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray

    @property
    def single_point(self) -> bool:
        return self.kind is SeriesKind.LINE and len(self.x) == 1

    @property
    def is_3d(self) -> bool:
        return len(self.z) > 0


def as_array(values: ArrayLike | None) -> np.ndarray:
    """Flatten any array-like (or ``None``) to a 1-D array."""
    if values is None:
        return np.empty(0)
    return np.atleast_1d(np.asarray(values)).ravel()


def prepare_data(
    x: ArrayLike | None,
    y: ArrayLike | None,
    z: ArrayLike | None,
) -> SeriesData:
    """Classify the coordinates and fill in a default x.

    A single value in ``x`` (or ``y``) with the other two arrays empty is a
    span line across the whole axes. Otherwise ``y`` is required and an empty
    ``x`` becomes ``1..len(y)``.
    """
    xs, ys, zs = as_array(x), as_array(y), as_array(z)
    lengths = (len(xs), len(ys), len(zs))

    if sorted(lengths) == [0, 0, 1]:
        if len(xs) == 1:
            return SeriesData(SeriesKind.VERTICAL_SPAN, xs, ys, zs)
        if len(ys) == 1:
            return SeriesData(SeriesKind.HORIZONTAL_SPAN, xs, ys, zs)
        raise ValueError("a span line needs a single x or y value, not z")

    if len(ys) == 0:
        raise ValueError("y must not be empty")
    if len(xs) == 0:
        xs = np.arange(1, len(ys) + 1)
    return SeriesData(SeriesKind.LINE, xs, ys, zs)


def resolve_style(
    cycle: StyleCycle,
    data: SeriesData,
    *,
    scatter: bool = False,
    color: Any = None,
    marker: str = "",
    linestyle: str = "",
    linewidth: float = 1.0,
    marker_size: float = 4,
    plot_kwargs: dict[str, Any] | None = None,
    stacklevel: int = 2,
) -> dict[str, Any]:
    """Build the Line2D keyword arguments for one series.

    Defaults come from the cycle position; explicit options override them and
    ``plot_kwargs`` are applied last.
    """
    plot_kwargs = cbook.normalize_kwargs(plot_kwargs or {}, Line2D)

    resolved_color = cycle.color
    resolved_linestyle = cycle.linestyle
    resolved_marker = "none"

    if (data.single_point or scatter) and "linestyle" not in plot_kwargs:
        resolved_linestyle = "none"
        resolved_marker = cycle.marker

    resolved_color = resolve_color(
        color, cycle.colors, resolved_color, stacklevel=stacklevel + 1
    )

    if marker:
        resolved_marker = marker
    if linestyle:
        resolved_linestyle = linestyle

    kwargs = {
        "color": resolved_color,
        "linestyle": resolved_linestyle,
        "linewidth": linewidth,
        "marker": resolved_marker,
        "markerfacecolor": resolved_color,
        "markeredgecolor": resolved_color,
        "markersize": marker_size,
    }
    kwargs.update(plot_kwargs)
    return kwargs


def is_marker_only(kwargs: dict[str, Any]) -> bool:
    """True when the resolved style draws markers but no connecting line."""
    no_line = kwargs.get("linestyle") in ("none", "None", "", " ")
    return no_line and kwargs.get("marker") not in (None, "", "none", "None")

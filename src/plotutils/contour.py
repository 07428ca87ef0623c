"""Contour and surface builders.

Each :class:`ContourType` has exactly one drawing handler. Handlers take a
meshgrid and return the matplotlib artist that gets registered.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

import numpy as np
from matplotlib.axes import Axes
from numpy.typing import ArrayLike

from .errors import InvalidFunctionError
from .series import as_array
from .theme import CONSTRAINT_COLOR, CONSTRAINT_LEVELS, LAYOUT


class ContourType(str, Enum):
    FILL = "fill"
    LINES = "2d"
    LINES_3D = "3d"
    SURFACE = "surf"
    CONSTRAINT = "constraint"

    @property
    def needs_3d(self) -> bool:
        return self in (ContourType.LINES_3D, ContourType.SURFACE)

    @property
    def uses_colormap(self) -> bool:
        return self is not ContourType.CONSTRAINT

    @property
    def linestyle(self) -> str:
        return "none" if self is ContourType.SURFACE else "solid"


def evaluate_grid(func: Callable[[Any, Any], Any], x: ArrayLike, y: ArrayLike) -> np.ndarray:
    """Evaluate ``func(x[i], y[j])`` into ``grid[j, i]``.

    Raises
    ------
    InvalidFunctionError
        If ``func`` fails on the first coordinate pair.
    """
    xs, ys = as_array(x), as_array(y)
    if len(xs) == 0 or len(ys) == 0:
        raise ValueError("x and y must not be empty")

    grid = np.zeros((len(ys), len(xs)))
    try:
        grid[0, 0] = func(xs[0], ys[0])
    except Exception as exc:
        raise InvalidFunctionError(
            "contour function must be callable as f(x, y) and return a number"
        ) from exc

    for j, yj in enumerate(ys):
        for i, xi in enumerate(xs):
            grid[j, i] = func(xi, yj)
    return grid


def as_grid(z: Any, x: ArrayLike, y: ArrayLike) -> np.ndarray:
    """Return ``z`` as a ``(len(y), len(x))`` array, evaluating it if callable."""
    if callable(z):
        return evaluate_grid(z, x, y)

    grid = np.asarray(z, dtype=float)
    expected = (len(as_array(y)), len(as_array(x)))
    if grid.shape != expected:
        raise ValueError(f"z has shape {grid.shape}, expected {expected} (len(y), len(x))")
    return grid


def _fill(ax: Axes, X, Y, Z, *, levels, cmap, linewidth):
    return ax.contourf(X, Y, Z, levels=levels, cmap=cmap)


def _lines(ax: Axes, X, Y, Z, *, levels, cmap, linewidth):
    return ax.contour(
        X, Y, Z,
        levels=levels,
        cmap=cmap,
        linewidths=linewidth,
        linestyles=ContourType.LINES.linestyle,
    )


def _lines_3d(ax: Axes, X, Y, Z, *, levels, cmap, linewidth):
    return ax.contour(
        X, Y, Z,
        levels=levels,
        cmap=cmap,
        linewidths=linewidth,
        linestyles=ContourType.LINES_3D.linestyle,
    )


def _surface(ax: Axes, X, Y, Z, *, levels, cmap, linewidth):
    surface = ax.plot_surface(X, Y, Z, cmap=cmap, linewidth=0, antialiased=False)
    ax.view_init(*LAYOUT["view_surface"])
    return surface


def _constraint(ax: Axes, X, Y, Z, *, levels, cmap, linewidth):
    return ax.contour(
        X, Y, Z,
        levels=list(CONSTRAINT_LEVELS),
        colors=CONSTRAINT_COLOR,
        linewidths=linewidth,
        linestyles=ContourType.CONSTRAINT.linestyle,
    )


_HANDLERS = {
    ContourType.FILL: _fill,
    ContourType.LINES: _lines,
    ContourType.LINES_3D: _lines_3d,
    ContourType.SURFACE: _surface,
    ContourType.CONSTRAINT: _constraint,
}


def draw(
    ax: Axes,
    kind: ContourType,
    x: ArrayLike,
    y: ArrayLike,
    grid: np.ndarray,
    *,
    linewidth: float,
    cmap: str,
    levels: ArrayLike | None = None,
):
    """Draw ``grid`` on ``ax`` in the given mode and return the artist."""
    X, Y = np.meshgrid(as_array(x), as_array(y))
    if kind is ContourType.SURFACE:
        levels = None
    return _HANDLERS[kind](
        ax, X, Y, grid,
        levels=levels,
        cmap=cmap if kind.uses_colormap else None,
        linewidth=linewidth,
    )

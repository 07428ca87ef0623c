"""Subplot tiling on a single figure."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import Any

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

DIRECTIONS = ("column", "row")

# Compact spacing between tiles, in inches / fraction of the tile
TILE_SPACING = {"w_pad": 0.02, "h_pad": 0.02, "wspace": 0.02, "hspace": 0.02}


class TileLayout:
    """Hand out grid cells of a figure as axes, one tile at a time.

    In a fixed layout the grid is ``grid_size`` and each tile may span several
    cells. In flow mode the grid grows to ``ceil(sqrt(n))`` columns as tiles
    are added and the existing axes are moved into the new grid.
    """

    def __init__(
        self,
        fig: Figure,
        grid_size: tuple[int, int] = (1, 1),
        *,
        flow: bool = False,
        direction: str = "column",
    ) -> None:
        if direction not in DIRECTIONS:
            raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")
        rows, cols = (int(n) for n in grid_size)
        if rows < 1 or cols < 1:
            raise ValueError(f"grid_size must be positive, got {grid_size!r}")

        self.fig = fig
        self.flow = flow
        self.direction = direction
        self.rows, self.cols = (1, 1) if flow else (rows, cols)
        self.axes: list[Axes] = []
        self._occupied = np.zeros((self.rows, self.cols), dtype=bool)
        self._gridspec = fig.add_gridspec(self.rows, self.cols)
        fig.set_layout_engine("constrained", **TILE_SPACING)

    def _cells(self) -> Iterator[tuple[int, int]]:
        if self.direction == "column":
            for c in range(self.cols):
                for r in range(self.rows):
                    yield r, c
        else:
            for r in range(self.rows):
                for c in range(self.cols):
                    yield r, c

    def _fits(self, r: int, c: int, span: tuple[int, int]) -> bool:
        h, w = span
        if r + h > self.rows or c + w > self.cols:
            return False
        return not self._occupied[r:r + h, c:c + w].any()

    def _regrow(self, n: int) -> None:
        self.cols = math.ceil(math.sqrt(n))
        self.rows = math.ceil(n / self.cols)
        self._gridspec = self.fig.add_gridspec(self.rows, self.cols)
        self._occupied = np.zeros((self.rows, self.cols), dtype=bool)
        for ax, (r, c) in zip(self.axes, self._cells()):
            ax.set_subplotspec(self._gridspec[r, c])
            self._occupied[r, c] = True
        logger.debug("flow layout regrown to %dx%d", self.rows, self.cols)

    def next_tile(self, span: tuple[int, int] = (1, 1), **subplot_kw: Any) -> Axes:
        """Create the axes for the next free tile.

        ``span`` is ``(rows, cols)`` and is ignored in flow mode.

        Raises
        ------
        ValueError
            If no free position can hold a tile of that span.
        """
        if self.flow:
            self._regrow(len(self.axes) + 1)
            span = (1, 1)

        h, w = (int(n) for n in span)
        for r, c in self._cells():
            if self._fits(r, c, (h, w)):
                self._occupied[r:r + h, c:c + w] = True
                ax = self.fig.add_subplot(self._gridspec[r:r + h, c:c + w], **subplot_kw)
                self.axes.append(ax)
                logger.debug("tile %d at (%d, %d) span %dx%d", len(self.axes), r, c, h, w)
                return ax

        raise ValueError(
            f"no free {h}x{w} tile left in the {self.rows}x{self.cols} layout"
        )

    def replace(self, old: Axes, new: Axes) -> None:
        """Swap an axes in place, e.g. after converting a tile to 3-D."""
        self.axes[self.axes.index(old)] = new

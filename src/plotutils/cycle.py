"""Per-axes color and line-style cycle.

Each new series takes the current color and line style, then the color
position advances. When the color position wraps past the end of the palette
the line-style position advances, so the palette is reused with a new dash.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .colors import hex2rgb
from .theme import LINESTYLE_ORDER, MARKER_ORDER


@dataclass
class StyleCycle:
    colors: list[Any] = field(default_factory=list)
    linestyles: list[str] = field(default_factory=lambda: list(LINESTYLE_ORDER))
    color_index: int = 0
    linestyle_index: int = 0

    @classmethod
    def from_palette(cls, palette: Sequence[str]) -> StyleCycle:
        """Build a cycle from hex colors, stored as normalized RGB triples."""
        return cls(colors=hex2rgb(list(palette)))

    @property
    def color(self) -> Any:
        return self.colors[self.color_index % len(self.colors)]

    @property
    def linestyle(self) -> str:
        return self.linestyles[self.linestyle_index % len(self.linestyles)]

    @property
    def marker(self) -> str:
        return MARKER_ORDER[self.linestyle_index % len(MARKER_ORDER)]

    def advance(self) -> None:
        self.color_index += 1
        if self.color_index >= len(self.colors):
            self.color_index = 0
            self.linestyle_index = (self.linestyle_index + 1) % len(self.linestyles)

    def reset(self) -> None:
        self.color_index = 0
        self.linestyle_index = 0

    def last_used(self) -> tuple[int, int]:
        """Return the (color, line style) positions of the most recent series."""
        if self.color_index > 0:
            return self.color_index - 1, self.linestyle_index
        return len(self.colors) - 1, (self.linestyle_index - 1) % len(self.linestyles)

    def hold(self, color_index: int, linestyle_index: int) -> None:
        """Freeze the cycle on one color and one line style."""
        color = self.colors[color_index]
        linestyle = self.linestyles[linestyle_index]
        self.colors = [color]
        self.linestyles = [linestyle]
        self.reset()

    def set_palette(self, palette: Sequence[str]) -> None:
        """Swap in a new palette and the full line-style order."""
        self.colors = hex2rgb(list(palette))
        self.linestyles = list(LINESTYLE_ORDER)

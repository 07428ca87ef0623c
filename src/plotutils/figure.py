"""PlotContext: one figure, its axes, style, and named plot handles.

Typical use::

    from plotutils import PlotContext

    plot = PlotContext("decay", color_scheme="nord")
    plot.add_series(y=[3, 2, 1], name="A", labels=["t", "x"])
    plot.add_series(y=[1, 2, 3], name="B", linestyle="--")
    plot.delete_plot("A")
    plot.save(path="figures")

Every style change is applied to the live figure immediately. The figure is
released by :meth:`PlotContext.save` or :meth:`PlotContext.close`; after that
the context raises :class:`~plotutils.errors.ContextClosedError`.
"""

from __future__ import annotations

import functools
import logging
import os
import warnings
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import matplotlib as mpl
import matplotlib.pyplot as plt
import matplotlib.scale as mscale
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.text import Text
from mpl_toolkits.mplot3d.art3d import Line3D
from numpy.typing import ArrayLike

from . import contour
from .contour import ContourType
from .cycle import StyleCycle
from .errors import ContextClosedError, DuplicateNameError, PlotUtilsWarning
from .layout import TileLayout
from .registry import HandleRegistry, Key
from .series import SeriesKind, as_array, is_marker_only, prepare_data, resolve_style
from .style import ColorScheme, Recipe, get_recipe, get_scheme, rc_params
from .theme import DEFAULT_SCHEME, EXPORT_FORMATS, LAYOUT

# Library logging: NullHandler so importing never configures global logging.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

# Default export directory when save() is not given a path
OUTPUT_DIR_ENV = "PLOTUTILS_OUTPUT_DIR"

PADDING_MODES = ("timeseries", "trajectory", "tight", "padded", "equal")

Limits = tuple[float, float]


@dataclass
class _AxesState:
    cycle: StyleCycle
    xlabel: str = ""
    ylabel: str = ""
    zlabel: str | None = None
    subtitle: Text | None = None


def _requires_open(method: Callable) -> Callable:
    @functools.wraps(method)
    def wrapper(self: PlotContext, *args: Any, **kwargs: Any) -> Any:
        if self._closed:
            raise ContextClosedError(f"plot {self.name!r} has already been saved or closed")
        return method(self, *args, **kwargs)

    return wrapper


def _nonzero(limits: ArrayLike | None) -> bool:
    return limits is not None and bool(np.any(np.asarray(limits) != 0))


def _split_labels(labels: str | Sequence[str]) -> tuple[str, str, str | None]:
    if isinstance(labels, str):
        labels = [labels]
    labels = list(labels)
    if not 1 <= len(labels) <= 3:
        raise ValueError("labels takes one to three strings: x, y and optionally z")
    labels += [""] * (2 - len(labels))
    return labels[0], labels[1], labels[2] if len(labels) == 3 else None


class PlotContext:
    """Stateful wrapper around one matplotlib figure.

    Parameters
    ----------
    name:
        Figure name, used as the default export file name. Defaults to
        ``f"fig{number}"``.
    number:
        Counter used for the default name.
    recipe:
        Name of the style recipe (``default`` or ``trajectory``).
    color_scheme:
        Name of the color scheme (``nord``, ``nordwhite``, ``nordnight``,
        ``dracula`` or ``default``).
    hide:
        Build the figure without registering it with pyplot, so it never
        opens a window.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        number: int = 1,
        recipe: str = "default",
        color_scheme: str = DEFAULT_SCHEME,
        hide: bool = False,
    ) -> None:
        self.name = name or f"fig{number}"
        self.recipe: Recipe = get_recipe(recipe)
        self.scheme: ColorScheme = get_scheme(color_scheme)
        self.registry = HandleRegistry()
        self.legend = None
        self.layout: TileLayout | None = None
        self._hidden = hide
        self._closed = False
        self._states: dict[Axes, _AxesState] = {}

        with self._rc():
            self.fig: Figure = Figure() if hide else plt.figure()
            self.fig.set_label(self.name)
            ax = self.fig.add_subplot()
        self.axes: list[Axes] = [ax]
        self._states[ax] = _AxesState(StyleCycle.from_palette(self.scheme.series))
        logger.debug("created plot %r (hidden=%s)", self.name, hide)

        self.set_recipe(self.recipe.name)
        self.color_scheme(self.scheme.name)

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"{len(self.registry)} plots"
        return f"PlotContext({self.name!r}, {state})"

    # Properties ---------------------------------------------------------
    @property
    def ax(self) -> Axes:
        """The current (most recently created) axes."""
        return self.axes[-1]

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def handles(self) -> list[Any]:
        return self.registry.handles()

    def get(self, key: Key) -> Any:
        """Return the artist registered under a name or 1-based index."""
        return self.registry.get(key)

    # Internal helpers ---------------------------------------------------
    def _rc(self):
        return mpl.rc_context(rc_params(self.recipe, self.scheme))

    def _font_offset(self) -> int:
        return LAYOUT["tiled_font_offset"] if self.layout is not None else 0

    def _has_handles(self, ax: Axes) -> bool:
        return any(getattr(h, "axes", None) is ax for h in self.registry.handles())

    def _check_name(self, name: str) -> None:
        if name and name in self.registry:
            raise DuplicateNameError(name)

    def _style_axes(self, ax: Axes) -> None:
        fg, bg = self.scheme.fg, self.scheme.bg
        ax.set_facecolor(bg)
        for spine in ax.spines.values():
            spine.set_color(fg)
        ax.tick_params(which="both", colors=fg)
        ax.xaxis.label.set_color(fg)
        ax.yaxis.label.set_color(fg)
        if ax.name == "3d":
            ax.zaxis.label.set_color(fg)
        ax.title.set_color(fg)

    def _new_axes_state(self, ax: Axes) -> None:
        self._states[ax] = _AxesState(StyleCycle.from_palette(self.scheme.series))
        self._style_axes(ax)

    def _ensure_3d(self) -> Axes:
        """Swap the current 2-D axes for a 3-D one in the same position."""
        ax = self.ax
        if ax.name == "3d":
            return ax
        if ax.has_data() or self._has_handles(ax):
            raise ValueError("cannot draw 3-D data on 2-D axes that already hold plots")

        spec = ax.get_subplotspec()
        state = self._states.pop(ax)
        title = ax.get_title()
        subtitle = state.subtitle.get_text() if state.subtitle is not None else None
        state.subtitle = None
        ax.remove()

        with self._rc():
            new = self.fig.add_subplot(spec, projection="3d")
        new.view_init(*LAYOUT["view_3d"])
        self.axes[-1] = new
        if self.layout is not None:
            self.layout.replace(ax, new)
        self._states[new] = state
        self._style_axes(new)
        self._apply_titles(new, title or None, subtitle)
        logger.debug("converted current axes of %r to 3-D", self.name)
        return new

    def _apply_titles(self, ax: Axes, title: str | None, subtitle: str | None) -> None:
        state = self._states[ax]
        if subtitle is not None:
            if state.subtitle is not None:
                state.subtitle.remove()
                state.subtitle = None
            if subtitle:
                state.subtitle = ax.annotate(
                    subtitle,
                    xy=(0.5, 1.0),
                    xycoords="axes fraction",
                    xytext=(0, 6),
                    textcoords="offset points",
                    ha="center",
                    va="bottom",
                )
        if title is not None:
            ax.set_title(title, fontweight="bold")

    def _refresh_legend(self, ax: Axes) -> None:
        if ax.get_legend() is None:
            return
        handles, _ = ax.get_legend_handles_labels()
        if handles:
            self.legend = ax.legend()
        else:
            ax.get_legend().remove()
            self.legend = None

    # Style --------------------------------------------------------------
    @_requires_open
    def set_recipe(self, name: str) -> None:
        """Replace the current recipe by name and re-apply it."""
        self.recipe = get_recipe(name)
        logger.debug("plot %r uses recipe %r", self.name, self.recipe.name)
        self.update()

    @_requires_open
    def color_scheme(self, name: str) -> None:
        """Apply a color scheme to the figure and the current axes.

        Series already drawn on the current axes are recolored in registration
        order, and later series continue the palette from there. A held color
        (see :meth:`hold_color`) is released.
        """
        self.scheme = get_scheme(name)
        logger.debug("plot %r uses color scheme %r", self.name, self.scheme.name)

        self.fig.set_facecolor(self.scheme.bg)
        ax = self.ax
        self._style_axes(ax)

        cycle = self._states[ax].cycle
        cycle.set_palette(self.scheme.series)
        lines = [
            h for h in self.registry.handles()
            if isinstance(h, Line2D) and h.axes is ax
        ]
        for i, line in enumerate(lines):
            color = cycle.colors[i % len(cycle.colors)]
            line.set_color(color)
            line.set_markerfacecolor(color)
            line.set_markeredgecolor(color)
        cycle.color_index = len(lines) % len(cycle.colors)

        self.update()

    @_requires_open
    def update(self) -> None:
        """Push the recipe and scheme onto the figure and current axes."""
        r = self.recipe
        fg, bg = self.scheme.fg, self.scheme.bg
        offset = self._font_offset()
        ax = self.ax
        state = self._states[ax]

        self.fig.set_size_inches(*r.figsize)

        # Axes
        if ax.name != "3d":
            for side in ("top", "right"):
                ax.spines[side].set_visible(r.box)
            if r.aspect:
                ax.set_aspect(r.aspect, adjustable="datalim")
        ax.grid(r.grid, which="major")
        if r.minor_grid:
            ax.minorticks_on()
            ax.grid(True, which="minor", alpha=0.05)
        ax.tick_params(labelsize=r.tick_size + offset)

        # Labels
        label_style = {"fontsize": r.label_size + offset, "color": fg, "usetex": r.usetex}
        ax.set_xlabel(state.xlabel, **label_style)
        ax.set_ylabel(state.ylabel, **label_style)
        if state.zlabel is not None and ax.name == "3d":
            ax.set_zlabel(state.zlabel, **label_style)

        # Titles
        if state.subtitle is not None:
            state.subtitle.set_fontsize(r.subtitle_size + offset)
            state.subtitle.set_color(fg)
            state.subtitle.set_usetex(r.usetex)
        if ax.get_title():
            pad = 6 + (1.5 * (r.subtitle_size + offset) if state.subtitle is not None else 0)
            ax.set_title(
                ax.get_title(),
                fontweight="bold",
                fontsize=r.title_size + offset,
                color=fg,
                usetex=r.usetex,
                pad=pad,
            )

        # Legend
        legend = ax.get_legend()
        if legend is not None:
            for text in legend.get_texts():
                text.set_fontsize(r.legend_size)
                text.set_color(fg)
                text.set_usetex(r.usetex)
            legend.get_frame().set_facecolor(bg)
            legend.get_frame().set_edgecolor(fg)

    @_requires_open
    def set_labels(self, xlabel: str, ylabel: str, zlabel: str | None = None) -> None:
        state = self._states[self.ax]
        state.xlabel, state.ylabel = xlabel, ylabel
        if zlabel is not None:
            state.zlabel = zlabel
        self.update()

    @_requires_open
    def set_titles(self, title: str, subtitle: str | None = None) -> None:
        self._apply_titles(self.ax, title, subtitle)
        self.update()

    # Plotting -----------------------------------------------------------
    @_requires_open
    def add_series(
        self,
        y: ArrayLike | None = None,
        x: ArrayLike | None = None,
        z: ArrayLike | None = None,
        *,
        name: str = "",
        labels: str | Sequence[str] | None = None,
        scatter: bool = False,
        title: str = "",
        subtitle: str = "",
        color: Any = None,
        marker: str = "",
        marker_size: float | None = None,
        linestyle: str = "",
        linewidth: float | None = None,
        xlim: Limits = (0, 0),
        ylim: Limits = (0, 0),
        zlim: Limits = (0, 0),
        yscale: str = "linear",
        _stacklevel: int = 3,
        **plot_kwargs: Any,
    ) -> Line2D:
        """Plot one series on the current axes and register it.

        ``x`` defaults to ``1..len(y)``. A single ``x`` (or ``y``) value with
        nothing else draws a vertical (or horizontal) span line. Single points
        and ``scatter=True`` draw markers only. A non-empty ``z`` makes the
        current axes 3-D.

        ``color`` is a color name or hex string, an RGB triple (0–1 or 0–255)
        or a 0-based index into the palette; anything else warns and falls
        back to the cycle color. Limits are applied when any component is
        non-zero. Extra keyword arguments go straight to matplotlib.

        Options are checked before anything is drawn; if drawing still fails
        the artist is removed and the cycle is left where it was.

        Returns the plotted :class:`~matplotlib.lines.Line2D`.
        """
        self._check_name(name)
        data = prepare_data(x, y, z)
        split = _split_labels(labels) if labels else None
        if yscale not in mscale.get_scale_names():
            raise ValueError(
                f"yscale must be one of {mscale.get_scale_names()}, got {yscale!r}"
            )

        ax = self._ensure_3d() if data.is_3d else self.ax
        state = self._states[ax]
        first_on_axes = not self._has_handles(ax)

        kwargs = resolve_style(
            state.cycle,
            data,
            scatter=scatter,
            color=color,
            marker=marker,
            linestyle=linestyle,
            linewidth=self.recipe.line_width if linewidth is None else linewidth,
            marker_size=self.recipe.marker_size if marker_size is None else marker_size,
            plot_kwargs=plot_kwargs,
            stacklevel=_stacklevel + 1,
        )
        kwargs.setdefault("label", name or "_nolegend_")

        if data.kind is SeriesKind.VERTICAL_SPAN:
            artist = ax.axvline(data.x[0], **kwargs)
        elif data.kind is SeriesKind.HORIZONTAL_SPAN:
            artist = ax.axhline(data.y[0], **kwargs)
        elif data.is_3d:
            (artist,) = ax.plot(data.x, data.y, data.z, **kwargs)
        else:
            (artist,) = ax.plot(data.x, data.y, **kwargs)

        try:
            # Limits
            if self.recipe.padded:
                ax.margins(LAYOUT["pad"])
            elif first_on_axes and is_marker_only(kwargs):
                ax.margins(LAYOUT["pad"])
            if _nonzero(xlim):
                ax.set_xlim(xlim)
            if _nonzero(ylim):
                ax.set_ylim(ylim)
            if _nonzero(zlim) and ax.name == "3d":
                ax.set_zlim(zlim)
            if yscale != ax.get_yscale():
                ax.set_yscale(yscale)
        except Exception:
            artist.remove()
            raise
        state.cycle.advance()

        if split is not None:
            xlabel, ylabel, zlabel = split
            state.xlabel, state.ylabel = xlabel, ylabel
            if zlabel is not None:
                state.zlabel = zlabel
        self._apply_titles(ax, title or None, subtitle or None)
        if name:
            self.legend = ax.legend()

        self.update()
        self.registry.add(artist, name)
        return artist

    def add_scatter(
        self,
        y: ArrayLike | None = None,
        x: ArrayLike | None = None,
        z: ArrayLike | None = None,
        **options: Any,
    ) -> Line2D:
        """Same as :meth:`add_series` with ``scatter=True``."""
        return self.add_series(y, x, z, scatter=True, _stacklevel=4, **options)

    @_requires_open
    def add_contour(
        self,
        x: ArrayLike,
        y: ArrayLike,
        z: ArrayLike | Callable[[Any, Any], Any],
        *,
        kind: str | ContourType = ContourType.FILL,
        name: str = "",
        title: str = "",
        subtitle: str = "",
        labels: str | Sequence[str] | None = None,
        levels: ArrayLike | None = None,
    ) -> np.ndarray:
        """Draw a contour or surface plot and register it.

        ``z`` is a ``(len(y), len(x))`` grid or a function ``f(x, y)``
        evaluated over every ``(x[i], y[j])``. ``kind`` is one of ``fill``,
        ``2d``, ``3d``, ``surf`` or ``constraint`` (the zero level of ``z``
        in red). Returns the evaluated grid.
        """
        self._check_name(name)
        kind = ContourType(kind)
        grid = contour.as_grid(z, x, y)
        ax = self._ensure_3d() if kind.needs_3d else self.ax

        artist = contour.draw(
            ax, kind, x, y, grid,
            linewidth=self.recipe.line_width,
            cmap=self.recipe.colormap,
            levels=levels,
        )
        if ax.name != "3d":
            ax.set_aspect("equal")
            ax.autoscale(tight=True)

        if labels:
            state = self._states[ax]
            xlabel, ylabel, zlabel = _split_labels(labels)
            state.xlabel, state.ylabel = xlabel, ylabel
            if zlabel is not None:
                state.zlabel = zlabel
        self._apply_titles(ax, title or None, subtitle or None)

        self.update()
        self.registry.add(artist, name)
        return grid

    # Handles ------------------------------------------------------------
    @_requires_open
    def delete_plot(self, key: Key) -> None:
        """Remove a plot by name or 1-based index; later indices move up one."""
        handle = self.registry.delete(key)
        ax = handle.axes
        handle.remove()
        if ax is not None:
            self._refresh_legend(ax)
        self.update()

    @_requires_open
    def update_plot_data(
        self,
        key: Key,
        y: ArrayLike,
        x: ArrayLike | None = None,
        z: ArrayLike | None = None,
        *,
        append: bool = False,
    ) -> bool:
        """Replace or extend the data of a registered line.

        With only ``y`` given, x becomes ``1..len(y)``. Otherwise every
        non-empty array must have the same length. On a length mismatch a
        :class:`PlotUtilsWarning` is emitted, the line is left untouched and
        ``False`` is returned.
        """
        line = self.registry.get(key)
        if not isinstance(line, Line2D):
            raise TypeError(f"plot {key!r} is a {type(line).__name__}, not a line")
        xs, ys, zs = as_array(x), as_array(y), as_array(z)
        if len(ys) == 0:
            raise ValueError("y must not be empty")

        is_3d = isinstance(line, Line3D)
        if len(zs) and not is_3d:
            warnings.warn(
                f"ABORTED: plot {key!r} is 2-D and cannot take z data",
                PlotUtilsWarning,
                stacklevel=3,
            )
            return False

        lengths = {n for n in (len(xs), len(ys), len(zs)) if n}
        if len(lengths) != 1:
            warnings.warn(
                f"ABORTED: data for plot {key!r} has mismatched lengths "
                f"(x={len(xs)}, y={len(ys)}, z={len(zs)})",
                PlotUtilsWarning,
                stacklevel=3,
            )
            return False

        if is_3d:
            old_x, old_y, old_z = (np.asarray(a) for a in line.get_data_3d())
        else:
            old_x, old_y = (np.asarray(a) for a in line.get_data())
            old_z = np.empty(0)

        if append:
            new_y = np.concatenate([old_y, ys])
            new_x = np.concatenate([old_x, xs]) if len(xs) else np.arange(1, len(new_y) + 1)
            new_z = np.concatenate([old_z, zs if len(zs) else np.zeros(len(ys))])
        else:
            new_y = ys
            new_x = xs if len(xs) else np.arange(1, len(ys) + 1)
            new_z = zs if len(zs) else np.zeros(len(ys))

        if is_3d:
            line.set_data_3d(new_x, new_y, new_z)
        else:
            line.set_data(new_x, new_y)
        line.axes.relim()
        line.axes.autoscale_view()
        return True

    @_requires_open
    def clear(self) -> None:
        """Remove every registered plot and restart each axes' color cycle."""
        for handle in self.registry.handles():
            handle.remove()
        self.registry.clear()
        for ax, state in self._states.items():
            state.cycle.set_palette(self.scheme.series)
            state.cycle.reset()
            if ax.get_legend() is not None:
                ax.get_legend().remove()
        self.legend = None

    @_requires_open
    def hold_color(
        self,
        color_index: int | None = None,
        linestyle_index: int | None = None,
    ) -> None:
        """Keep drawing new series in one color and line style.

        With no arguments the most recently used pair is held. Indices are
        0-based positions in the palette and line-style order.
        """
        cycle = self._states[self.ax].cycle
        if color_index is None:
            color_index, linestyle_index = cycle.last_used()
        elif linestyle_index is None:
            linestyle_index = 0
        cycle.hold(color_index, linestyle_index)

    @_requires_open
    def set_padding(self, mode: str) -> None:
        """Adjust the current axes' limits: timeseries, trajectory, tight, padded or equal."""
        mode = mode.lower()
        if mode not in PADDING_MODES:
            raise ValueError(f"padding mode must be one of {PADDING_MODES}, got {mode!r}")
        ax, pad = self.ax, LAYOUT["pad"]
        if mode == "timeseries":
            ax.margins(x=0, y=pad)
        elif mode == "tight":
            ax.margins(0)
        elif mode == "padded":
            ax.margins(pad)
        if mode in ("trajectory", "equal"):
            if mode == "trajectory":
                ax.margins(pad)
            ax.set_aspect("equal", adjustable="datalim")
        ax.autoscale_view()

    # Layout -------------------------------------------------------------
    @_requires_open
    def enable_subplots(
        self,
        *,
        flow: bool = False,
        grid_size: tuple[int, int] = (1, 1),
        title: str = "",
        subtitle: str = "",
        xlabel: str = "",
        ylabel: str = "",
        first_tile_size: tuple[int, int] = (1, 1),
        direction: str = "column",
    ) -> Axes:
        """Start a tiled layout; existing plots are discarded.

        Returns the first tile's axes, which becomes current. Use
        :meth:`next_plot` for the following tiles.
        """
        self.clear()
        self.fig.clear()
        self._states.clear()
        self.layout = TileLayout(self.fig, grid_size, flow=flow, direction=direction)

        r = self.recipe
        heading = "\n".join(t for t in (title, subtitle) if t)
        if heading:
            self.fig.suptitle(
                heading,
                fontsize=r.title_size,
                fontweight="bold",
                color=self.scheme.fg,
                usetex=r.usetex,
            )
        if xlabel:
            self.fig.supxlabel(xlabel, fontsize=r.label_size, color=self.scheme.fg)
        if ylabel:
            self.fig.supylabel(ylabel, fontsize=r.label_size, color=self.scheme.fg)

        with self._rc():
            ax = self.layout.next_tile(first_tile_size)
        self.axes = [ax]
        self._new_axes_state(ax)
        logger.debug("plot %r tiled (flow=%s, grid=%s)", self.name, flow, grid_size)
        self.update()
        return ax

    @_requires_open
    def next_plot(self, size: tuple[int, int] | None = None) -> Axes:
        """Move to the next tile, optionally spanning ``(rows, cols)`` cells."""
        if self.layout is None:
            raise RuntimeError("call enable_subplots() before next_plot()")
        with self._rc():
            ax = self.layout.next_tile(size or (1, 1))
        self.axes.append(ax)
        self._new_axes_state(ax)
        self.update()
        return ax

    # Export -------------------------------------------------------------
    @_requires_open
    def save(
        self,
        *,
        ext: str = ".png",
        path: str | Path | None = None,
        name: str | None = None,
        size: tuple[int, int] | None = None,
    ) -> Path:
        """Write the figure to PNG (200 DPI) or EPS, then close it.

        The extension comes from ``name`` when it ends in ``.png`` or ``.eps``,
        otherwise from ``ext``. The directory is ``path``, else
        ``$PLOTUTILS_OUTPUT_DIR``, else the working directory, and is created
        if missing. ``size`` is ``(width, height)`` in pixels.

        Returns the path of the written file.
        """
        self.update()

        name = str(name or self.name)
        suffix = Path(name).suffix.lower()
        if suffix in EXPORT_FORMATS:
            ext, name = suffix, name[: -len(suffix)]
        ext = ext.lower() if ext.startswith(".") else f".{ext.lower()}"
        if ext not in EXPORT_FORMATS:
            raise ValueError(f"unsupported export format {ext!r}; use one of {list(EXPORT_FORMATS)}")
        fmt, dpi = EXPORT_FORMATS[ext]

        dest = Path(path) if path else Path(os.environ.get(OUTPUT_DIR_ENV) or Path.cwd())
        dest.mkdir(parents=True, exist_ok=True)
        target = dest / f"{name}{ext}"

        if size is not None and all(size):
            px_dpi = dpi or self.fig.dpi
            self.fig.set_size_inches(size[0] / px_dpi, size[1] / px_dpi)

        self.fig.savefig(target, format=fmt, dpi=dpi or "figure", facecolor=self.scheme.bg)
        logger.debug("saved plot %r to %s", self.name, target)
        self.close()
        return target

    def close(self) -> None:
        """Release the figure. The context cannot be used afterwards."""
        if self._closed:
            return
        if not self._hidden:
            plt.close(self.fig)
        self._closed = True
        logger.debug("closed plot %r", self.name)

from __future__ import annotations

import numpy as np
import pytest

from plotutils import NotFoundError, PlotContext, PlotUtilsWarning, get_scheme, hex2rgb


def _data(line):
    return tuple(np.asarray(a).tolist() for a in line.get_data())


def test_replace_y_only_resets_x(plot: PlotContext) -> None:
    line = plot.add_series(y=[1, 2, 3], x=[10, 20, 30], name="s")
    assert plot.update_plot_data("s", y=[4, 5]) is True
    assert _data(line) == ([1, 2], [4, 5])


def test_replace_x_and_y(plot: PlotContext) -> None:
    line = plot.add_series(y=[1, 2, 3])
    plot.update_plot_data(1, y=[7, 8], x=[0.5, 1.5])
    assert _data(line) == ([0.5, 1.5], [7, 8])


def test_append(plot: PlotContext) -> None:
    line = plot.add_series(y=[1, 2], x=[0, 1], name="s")
    plot.update_plot_data("s", y=[3, 4], x=[2, 3], append=True)
    assert _data(line) == ([0, 1, 2, 3], [1, 2, 3, 4])


def test_append_y_only_renumbers_x(plot: PlotContext) -> None:
    line = plot.add_series(y=[1, 2], name="s")
    plot.update_plot_data("s", y=[3], append=True)
    assert _data(line) == ([1, 2, 3], [1, 2, 3])


def test_mismatched_lengths_warn_and_leave_data_unchanged(plot: PlotContext) -> None:
    line = plot.add_series(y=[1, 2, 3], name="s")
    before = _data(line)
    with pytest.warns(PlotUtilsWarning, match="ABORTED"):
        assert plot.update_plot_data("s", y=[1, 2], x=[1, 2, 3]) is False
    assert _data(line) == before
    with pytest.warns(PlotUtilsWarning, match="ABORTED"):
        plot.update_plot_data("s", y=[1, 2], x=[1, 2, 3], append=True)
    assert _data(line) == before


def test_z_on_2d_line_is_refused(plot: PlotContext) -> None:
    line = plot.add_series(y=[1, 2], name="s")
    with pytest.warns(PlotUtilsWarning, match="2-D"):
        plot.update_plot_data("s", y=[1, 2], z=[1, 2])
    assert _data(line) == ([1, 2], [1, 2])


def test_update_3d_line(plot: PlotContext) -> None:
    line = plot.add_series(y=[0, 1], x=[0, 1], z=[0, 1], name="path")
    plot.update_plot_data("path", y=[2, 3], x=[2, 3], z=[5, 6], append=True)
    xs, ys, zs = (np.asarray(a).tolist() for a in line.get_data_3d())
    assert (xs, ys, zs) == ([0, 1, 2, 3], [0, 1, 2, 3], [0, 1, 5, 6])

    plot.update_plot_data("path", y=[9, 9, 9])
    xs, ys, zs = (np.asarray(a).tolist() for a in line.get_data_3d())
    assert (xs, ys, zs) == ([1, 2, 3], [9, 9, 9], [0, 0, 0])


def test_update_rejects_non_lines_and_empty_y(plot: PlotContext) -> None:
    plot.add_contour([0, 1], [0, 1], [[0, 1], [1, 2]], name="c")
    plot.add_series(y=[1, 2], name="s")
    with pytest.raises(TypeError):
        plot.update_plot_data("c", y=[1])
    with pytest.raises(ValueError):
        plot.update_plot_data("s", y=[])


def test_update_unknown_plot(plot: PlotContext) -> None:
    with pytest.raises(NotFoundError):
        plot.update_plot_data("nope", y=[1])


def test_delete_by_index_removes_artist_and_compacts(plot: PlotContext) -> None:
    a = plot.add_series(y=[1, 2], name="A")
    plot.add_series(y=[2, 1], name="B")
    plot.add_series(y=[2, 2], name="C")

    plot.delete_plot(1)

    assert a not in plot.ax.get_lines()
    assert plot.registry.names() == ["B", "C"]
    assert plot.registry.index_of("C") == 2
    assert [t.get_text() for t in plot.ax.get_legend().get_texts()] == ["B", "C"]


def test_delete_last_named_removes_legend(plot: PlotContext) -> None:
    plot.add_series(y=[1, 2], name="A")
    plot.delete_plot("A")
    assert plot.ax.get_legend() is None
    assert plot.legend is None


def test_delete_unknown_plot(plot: PlotContext) -> None:
    with pytest.raises(NotFoundError):
        plot.delete_plot(4)


def test_clear_resets_registry_and_cycle(plot: PlotContext) -> None:
    plot.add_series(y=[1, 2], name="A")
    plot.add_series(y=[2, 1])
    plot.clear()
    assert len(plot.registry) == 0
    assert len(plot.ax.get_lines()) == 0
    assert plot.ax.get_legend() is None
    line = plot.add_series(y=[1, 2], name="A")
    assert line.get_color() == hex2rgb(get_scheme("nordwhite").series[0])


def test_hold_color_defaults_to_last_used(plot: PlotContext) -> None:
    plot.add_series(y=[1, 2])
    second = plot.add_series(y=[2, 1])
    plot.hold_color()
    held = [plot.add_series(y=[0, i]) for i in range(3)]
    assert all(line.get_color() == second.get_color() for line in held)
    assert all(line.get_linestyle() == second.get_linestyle() for line in held)


def test_hold_color_explicit_index_and_release(plot: PlotContext) -> None:
    palette = get_scheme("nordwhite").series
    plot.hold_color(3)
    first = plot.add_series(y=[1, 2])
    second = plot.add_series(y=[2, 1])
    assert first.get_color() == second.get_color() == hex2rgb(palette[3])

    plot.color_scheme("nordwhite")
    third = plot.add_series(y=[1, 1])
    assert third.get_color() == hex2rgb(palette[2])

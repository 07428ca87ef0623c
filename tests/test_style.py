from __future__ import annotations

import matplotlib.pyplot as plt
import pytest
from matplotlib.colors import to_hex

from plotutils import COLOR_SCHEMES, PlotContext, apply, get_recipe, get_scheme, hex2rgb
from plotutils.style import RECIPES, rc_params


def test_recipe_lookup_falls_back_to_default() -> None:
    assert get_recipe("default") is RECIPES["default"]
    assert get_recipe("TRAJECTORY").aspect == "equal"
    assert get_recipe("no-such-recipe") is RECIPES["default"]


def test_recipe_is_immutable() -> None:
    with pytest.raises(AttributeError):
        get_recipe("default").line_width = 3  # type: ignore[misc]


@pytest.mark.parametrize("name", ["nord", "nordwhite", "nordnight", "dracula", "default"])
def test_schemes_have_six_or_seven_series_colors(name: str) -> None:
    scheme = get_scheme(name)
    assert 6 <= len(scheme.series) <= 7
    assert (scheme.fg, scheme.bg, scheme.series) == COLOR_SCHEMES[name]


def test_unknown_scheme_is_default() -> None:
    assert get_scheme("solarized") == get_scheme("default")
    assert get_scheme("Dracula").bg == "#282a36"


def test_rc_params_carry_scheme_colors() -> None:
    params = rc_params(get_recipe("default"), get_scheme("dracula"))
    assert params["axes.facecolor"] == "#282a36"
    assert params["text.color"] == "#f8f8f2"
    assert params["axes.prop_cycle"].by_key()["color"][0] == "#8be9fd"


def test_apply_updates_global_rcparams() -> None:
    with plt.rc_context():
        apply("trajectory", "nordnight")
        assert plt.rcParams["axes.facecolor"] == "#2e3440"
        assert plt.rcParams["lines.linewidth"] == get_recipe("trajectory").line_width


def test_context_applies_scheme_on_construction() -> None:
    plot = PlotContext(hide=True, color_scheme="dracula")
    assert to_hex(plot.fig.get_facecolor()) == "#282a36"
    assert to_hex(plot.ax.get_facecolor()) == "#282a36"
    assert to_hex(plot.ax.spines["left"].get_edgecolor()) == "#f8f8f2"
    plot.close()


def test_color_scheme_recolors_existing_series(plot: PlotContext) -> None:
    lines = [plot.add_series(y=[1, 2, i]) for i in range(8)]

    plot.color_scheme("dracula")

    palette = get_scheme("dracula").series
    for i, line in enumerate(lines):
        assert line.get_color() == hex2rgb(palette[i % len(palette)])
    # cycle continues after the recolored series
    nxt = plot.add_series(y=[0, 1])
    assert nxt.get_color() == hex2rgb(palette[len(lines) % len(palette)])


def test_set_recipe_replaces_wholesale(plot: PlotContext) -> None:
    plot.set_recipe("trajectory")
    assert plot.recipe is get_recipe("trajectory")
    assert plot.ax.get_aspect() == 1.0
    plot.set_recipe("unknown")
    assert plot.recipe is get_recipe("default")


def test_recipe_sets_figure_size(plot: PlotContext) -> None:
    recipe = plot.recipe
    width, height = plot.fig.get_size_inches()
    assert width == pytest.approx(recipe.figsize[0])
    assert height == pytest.approx(recipe.figsize[1])

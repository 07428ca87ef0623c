from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from plotutils import PlotContext  # noqa: E402


@pytest.fixture
def plot():
    ctx = PlotContext("test", hide=True)
    yield ctx
    ctx.close()


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")

"""Example: filled contour of the Rosenbrock function with a constraint line."""

import numpy as np

from plotutils import PlotContext

x = np.linspace(-2, 2, 120)
y = np.linspace(-1, 3, 120)

plot = PlotContext("rosenbrock", hide=True)
plot.add_contour(
    x, y,
    lambda a, b: np.log1p((1 - a) ** 2 + 100 * (b - a * a) ** 2),
    kind="fill",
    title="Rosenbrock",
    subtitle="log scale",
    labels=["x", "y"],
)
plot.add_contour(x, y, lambda a, b: a * a + b * b - 2, kind="constraint")
plot.add_scatter(y=[1], x=[1], color="white", name="minimum")

print(plot.save(path="figures"))

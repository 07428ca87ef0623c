"""Example: tiled figure with a growing trajectory and a 3-D surface."""

import numpy as np

from plotutils import PlotContext

t = np.linspace(0, 2 * np.pi, 200)

plot = PlotContext("orbit-grid", recipe="trajectory", hide=True)
plot.enable_subplots(grid_size=(2, 2), first_tile_size=(2, 1), title="Orbits", xlabel="x")

plot.add_series(np.sin(t[:50]), np.cos(t[:50]), name="orbit")
plot.update_plot_data("orbit", np.sin(t[50:]), np.cos(t[50:]), append=True)

plot.next_plot()
for e in (0.2, 0.5, 0.8):
    plot.add_series(np.sqrt(1 - e * e) * np.sin(t), np.cos(t) + e)
plot.hold_color()
plot.add_scatter(y=[0], x=[0])

plot.next_plot()
g = np.linspace(-1, 1, 40)
plot.add_contour(g, g, lambda a, b: np.exp(-(a * a + b * b)), kind="surf", labels=["x", "y", "z"])

print(plot.save(ext=".eps", path="figures", size=(1600, 1200)))

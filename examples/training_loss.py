"""Example: training and validation loss, then swap the color scheme."""

import numpy as np

from plotutils import PlotContext

epochs = np.arange(1, 51)
rng = np.random.default_rng(42)
train = 2.8 * np.exp(-0.08 * epochs) + 0.15 + rng.normal(0, 0.03, len(epochs))
val = 2.9 * np.exp(-0.07 * epochs) + 0.22 + rng.normal(0, 0.04, len(epochs))

plot = PlotContext("training-loss", hide=True)
plot.add_series(train, epochs, name="train", labels=["Epoch", "Loss"], title="Training Loss")
plot.add_series(val, epochs, name="validation")
plot.add_series(x=[35], linestyle=":", color="gray")  # early stopping point
plot.color_scheme("dracula")

print(plot.save(path="figures"))

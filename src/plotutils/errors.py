"""Exceptions and the warning category raised by plotutils."""

from __future__ import annotations

import numbers


class PlotUtilsError(Exception):
    """Base class for every plotutils failure."""


class DuplicateNameError(PlotUtilsError, KeyError):
    """A handle name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"a plot named {self.name!r} is already registered"


class NotFoundError(PlotUtilsError, KeyError):
    """No handle is registered under the requested name or index."""

    def __init__(self, key: str | int) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        if isinstance(self.key, numbers.Integral):
            return f"no plot registered at index {self.key}"
        return f"no plot registered under the name {self.key!r}"


class InvalidFunctionError(PlotUtilsError, ValueError):
    """A contour function could not be evaluated as ``f(x, y)``."""


class ContextClosedError(PlotUtilsError, RuntimeError):
    """The plot context's figure has already been saved or closed."""


class PlotUtilsWarning(UserWarning):
    """Non-fatal problem: the offending option was ignored or the call aborted."""

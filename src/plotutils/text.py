"""Label helpers."""

from __future__ import annotations


def latex_exponent(num: float, fmt: str = "%.2e", slash: str = "\\") -> str:
    """Format ``num`` in scientific notation as a TeX string.

    >>> latex_exponent(0.000123)
    '1.23\\\\times 10^{-4}'

    ``fmt`` is a printf-style format that must produce an exponent (``%e``).
    ``slash`` is the command prefix, doubled when the result is embedded in
    another escaped string.
    """
    text = (fmt % num).lower()
    if "e" not in text:
        raise ValueError(f"format {fmt!r} did not produce an exponent: {text!r}")
    mantissa, exponent = text.split("e", 1)
    return f"{mantissa}{slash}times 10^{{{int(exponent)}}}"

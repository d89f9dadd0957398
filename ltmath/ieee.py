"""IEEE-754 preserving numeric kernels.

Python's ``/`` operator and the ``math`` module raise ``ZeroDivisionError`` or
``ValueError`` where IEEE-754 arithmetic produces ``inf`` or ``nan``. Angle
operations must let those values propagate instead, so every operation that
can hit such a case is routed through NumPy with floating-point error
reporting switched off.

All functions accept plain Python or NumPy scalars and return a built-in
``float``.

Example:
    >>> divide(1.0, 0.0)
    inf
    >>> fmod(-30.0, 360.0)
    -30.0
    >>> arcsin(1.5)
    nan
"""

from __future__ import annotations

from math import inf

import numpy as np

from .config import Number


def to_double(x: Number) -> float:
    """Convert a real number to a float, saturating to ``±inf`` on overflow.

    ``float()`` raises ``OverflowError`` for ints and fractions beyond the
    double range.
    """
    try:
        return float(x)
    except OverflowError:
        return inf if x > 0 else -inf


def divide(x: Number, y: Number) -> float:
    """Divide ``x`` by ``y``, yielding ``±inf`` or ``nan`` for a zero divisor."""
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(to_double(x)), np.float64(to_double(y))))


def fmod(x: Number, y: Number) -> float:
    """Truncated remainder of ``x / y``; the result takes the sign of ``x``.

    Unlike ``math.fmod`` an infinite dividend or a zero divisor gives ``nan``
    rather than raising.
    """
    with np.errstate(all="ignore"):
        return float(np.fmod(np.float64(to_double(x)), np.float64(to_double(y))))


def sin(x: Number) -> float:
    with np.errstate(all="ignore"):
        return float(np.sin(np.float64(to_double(x))))


def cos(x: Number) -> float:
    with np.errstate(all="ignore"):
        return float(np.cos(np.float64(to_double(x))))


def tan(x: Number) -> float:
    with np.errstate(all="ignore"):
        return float(np.tan(np.float64(to_double(x))))


def arcsin(x: Number) -> float:
    """Inverse sine in radians; ``nan`` outside ``[-1, 1]``."""
    with np.errstate(all="ignore"):
        return float(np.arcsin(np.float64(to_double(x))))


def arccos(x: Number) -> float:
    """Inverse cosine in radians; ``nan`` outside ``[-1, 1]``."""
    with np.errstate(all="ignore"):
        return float(np.arccos(np.float64(to_double(x))))


def arctan(x: Number) -> float:
    with np.errstate(all="ignore"):
        return float(np.arctan(np.float64(to_double(x))))


def arctan2(y: Number, x: Number) -> float:
    """Two-argument arctangent of ``y / x`` in radians, quadrant aware."""
    with np.errstate(all="ignore"):
        return float(np.arctan2(np.float64(to_double(y)), np.float64(to_double(x))))

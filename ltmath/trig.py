"""Free constructors and inverse trigonometric functions returning angles.

These helpers complement the ``Angle`` classes for call sites that start
from plain numbers: building an angle in a given unit, expressing it as a
multiple of π, or recovering it from a sine, cosine, tangent or a pair of
coordinates. Every inverse function returns a ``Radians`` instance.

Out-of-domain inputs follow IEEE-754 rules: ``asin(1.5)`` is ``Radians(nan)``
rather than an exception.

Example:
    >>> from ltmath.trig import atan2, pi_radians_of
    >>> print(pi_radians_of(0.5))  # "90.0°"
    >>> atan2(1, 1).degrees  # 45.0
"""

from __future__ import annotations

import logging
from math import pi

from . import ieee
from .config import Number
from .unit.unit_angle import Angle

log = logging.getLogger(__name__)


def degrees_of(x: Number) -> Angle:
    """Wrap ``x`` as an angle in degrees."""
    return Angle.from_degrees(x)


def radians_of(x: Number) -> Angle:
    """Wrap ``x`` as an angle in radians."""
    return Angle.from_radians(x)


def pi_radians_of(x: Number) -> Angle:
    """Angle of ``x`` half turns, i.e. ``x * π`` radians.

    Args:
        x: Multiple of π.

    Returns:
        Angle: A ``Radians`` instance.
    """
    return Angle.from_radians(ieee.to_double(x) * pi)


def _check_unit_interval(name: str, x: Number) -> None:
    if not -1 <= x <= 1:
        log.debug("%s(%r) is outside [-1, 1]; result is nan", name, x)


def asin(x: Number) -> Angle:
    """Arcsine of ``x`` as an angle in radians."""
    _check_unit_interval("asin", x)
    return Angle.from_radians(ieee.arcsin(x))


def acos(x: Number) -> Angle:
    """Arccosine of ``x`` as an angle in radians."""
    _check_unit_interval("acos", x)
    return Angle.from_radians(ieee.arccos(x))


def atan(x: Number) -> Angle:
    return Angle.from_radians(ieee.arctan(x))


def atan2(y: Number, x: Number) -> Angle:
    """Angle of the point ``(x, y)`` from the positive x axis.

    Args:
        y: Ordinate.
        x: Abscissa.

    Returns:
        Angle: A ``Radians`` instance in ``[-π, π]``.
    """
    return Angle.from_radians(ieee.arctan2(y, x))


__all__ = [
    "degrees_of",
    "radians_of",
    "pi_radians_of",
    "asin",
    "acos",
    "atan",
    "atan2",
]

"""Angular value type with degree and radian variants.

This module provides ``Angle``, an immutable planar angle stored either in
degrees or in radians. The two variants, ``Degrees`` and ``Radians``, are the
only concrete subclasses; every operation that depends on the unit dispatches
on the variant of its left operand.

Unit Rules:
    - ``a + b``, ``a - b`` and ``a % b`` convert ``b`` into the unit of ``a``
      and return an angle of ``a``'s variant.
    - ``a * k``, ``k * a`` and ``a / k`` scale the stored value and keep the
      variant.
    - ``a / b`` converts ``b`` into the unit of ``a`` and returns a plain
      float ratio.
    - ``<``, ``<=``, ``>`` and ``>=`` treat values closer than ``EPSILON`` as
      equal, absorbing round-off introduced by unit conversion.
    - ``==`` is exact: same variant and same value.

Floating-point problems never raise; ``nan`` and ``inf`` propagate through
every operation by ordinary IEEE-754 rules.

Classes:
    Angle: Abstract base of the two angle variants.
    Degrees: Angle measured in degrees.
    Radians: Angle measured in radians.
    Ordering: Result of an epsilon-tolerant comparison.

Example:
    >>> right = Degrees(90)
    >>> print(right + Radians(pi / 2))  # "180.0°"
    >>> (Radians(pi / 2) + Degrees(90)).value  # 3.141592653589793
    >>> Degrees(180) / Radians(pi / 2)  # 2.0
    >>> compare(Degrees(90), Radians(pi / 2))  # Ordering.EQUAL
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from numbers import Real
from typing import ClassVar

from .. import ieee
from ..config import (
    DEGREES_PER_RADIAN,
    EPSILON,
    FULL_TURN_DEGREES,
    FULL_TURN_RADIANS,
    RADIANS_PER_DEGREE,
    Number,
)
from .unit_base import Unit


class Ordering(IntEnum):
    """Outcome of comparing two angles with the fixed tolerance."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Angle(Unit, ABC):
    """Immutable planar angle, stored as either degrees or radians.

    ``Angle`` itself cannot be instantiated; construct one of its variants
    directly or use ``Angle.from_degrees`` / ``Angle.from_radians``.

    Attributes:
        value (float): Magnitude in the variant's own unit.
        PERIOD (ClassVar[float]): One full turn in the variant's unit.
        ZERO (ClassVar[Angle]): The zero angle, ``Degrees(0.0)``.
    """

    value: float

    IS_FAMILY_ROOT = True
    PERIOD: ClassVar[float]
    ZERO: ClassVar[Angle]

    def __post_init__(self):
        object.__setattr__(self, "value", ieee.to_double(self.value))

    # -------------------------------- Construction --------------------------------
    @classmethod
    def from_degrees(cls, value: Number) -> Angle:
        """Create an angle from a value in degrees.

        Args:
            value: Numeric value in degrees.

        Returns:
            Angle: A ``Degrees`` instance.
        """
        return Degrees(value)

    @classmethod
    def from_radians(cls, value: Number) -> Angle:
        """Create an angle from a value in radians.

        Args:
            value: Numeric value in radians.

        Returns:
            Angle: A ``Radians`` instance.
        """
        return Radians(value)

    # -------------------------------- Conversion --------------------------------
    @abstractmethod
    def to_degrees(self) -> Degrees:
        """Return this angle as a ``Degrees`` instance."""

    @abstractmethod
    def to_radians(self) -> Radians:
        """Return this angle as a ``Radians`` instance."""

    def as_unit(self, unit_type: type[Angle]) -> Angle:
        """Convert to the given angle variant.

        Args:
            unit_type: ``Degrees`` or ``Radians``.

        Returns:
            Angle: New instance of ``unit_type`` (or ``self`` if already one).

        Raises:
            TypeError: If ``unit_type`` is not a concrete angle variant.
        """
        if unit_type is Degrees:
            return self.to_degrees()
        if unit_type is Radians:
            return self.to_radians()
        self._check_same_root(unit_type)
        msg = f"{unit_type.__name__} is not a concrete angle unit"
        raise TypeError(msg)

    def to(self, unit_type: type[Angle]) -> float:
        """Return the numeric value of this angle expressed in ``unit_type``."""
        return self.as_unit(unit_type).value

    @property
    def degrees(self) -> float:
        """Value in degrees, whatever the stored variant."""
        return self.to_degrees().value

    @property
    def radians(self) -> float:
        """Value in radians, whatever the stored variant."""
        return self.to_radians().value

    def _coerce(self, other: object) -> Angle | None:
        """Convert ``other`` into this angle's unit.

        Returns ``None`` when ``other`` is not a unit at all, so that the
        calling operator can return ``NotImplemented``.
        """
        if not isinstance(other, Unit):
            return None
        self._check_same_root(type(other))
        return other.as_unit(type(self))

    # -------------------------------- Normalization --------------------------------
    @property
    def normalized(self) -> Angle:
        """Same-variant angle reduced into ``[0, PERIOD)``.

        The truncated remainder is shifted by one period when negative.
        """
        period = self.PERIOD
        value = ieee.fmod(self.value, period)
        if value < 0:
            value += period
            # a tiny negative remainder rounds up to a whole period
            if value >= period:
                value = 0.0
        return type(self)(value)

    # -------------------------------- Trigonometry --------------------------------
    @property
    def sin(self) -> float:
        return ieee.sin(self.radians)

    @property
    def cos(self) -> float:
        return ieee.cos(self.radians)

    @property
    def tan(self) -> float:
        return ieee.tan(self.radians)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: Angle) -> Angle:
        """Add an angle; the result keeps this angle's variant.

        Args:
            other: Angle to add, converted into this angle's unit first.

        Returns:
            Angle: Sum in this angle's unit.

        Raises:
            TypeError: If ``other`` is a unit of another family.
        """
        converted = self._coerce(other)
        if converted is None:
            return NotImplemented
        return type(self)(self.value + converted.value)

    def __sub__(self, other: Angle) -> Angle:
        """Subtract an angle; the result keeps this angle's variant.

        Args:
            other: Angle to subtract, converted into this angle's unit first.

        Returns:
            Angle: Difference in this angle's unit.
        """
        converted = self._coerce(other)
        if converted is None:
            return NotImplemented
        return type(self)(self.value - converted.value)

    def __mod__(self, other: Angle) -> Angle:
        """Truncated remainder of this angle divided by another angle.

        The remainder takes the sign of this angle, matching C ``fmod``.
        """
        converted = self._coerce(other)
        if converted is None:
            return NotImplemented
        return type(self)(ieee.fmod(self.value, converted.value))

    def __mul__(self, k: Number) -> Angle:
        """Scale this angle by a dimensionless factor.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            Angle: Scaled angle of the same variant.
        """
        if isinstance(k, Real):
            return type(self)(self.value * ieee.to_double(k))
        return NotImplemented

    def __rmul__(self, k: Number) -> Angle:
        return self.__mul__(k)

    def __truediv__(self, other: Angle | Number) -> Angle | float:
        """Divide by an angle or by a scalar.

        Args:
            other: An angle, converted into this angle's unit first, or a
                numeric scalar.

        Returns:
            float: The dimensionless ratio when ``other`` is an angle.
            Angle: The scaled angle, same variant, when ``other`` is a scalar.
        """
        converted = self._coerce(other)
        if converted is not None:
            return ieee.divide(self.value, converted.value)
        if isinstance(other, Real):
            return type(self)(ieee.divide(self.value, other))
        return NotImplemented

    def __neg__(self) -> Angle:
        return type(self)(-self.value)

    # -------------------------------- Comparison --------------------------------
    def compare_to(self, other: Angle) -> Ordering:
        """Compare with another angle using the fixed ``EPSILON`` tolerance.

        ``other`` is converted into this angle's unit and the difference of
        the values decides the order; differences smaller than ``EPSILON``
        count as equal.

        Args:
            other: Angle to compare against.

        Returns:
            Ordering: LESS, EQUAL or GREATER.

        Raises:
            TypeError: If ``other`` is not an angle.
        """
        converted = self._coerce(other)
        if converted is None:
            msg = f"cannot compare {type(self).__name__} with {type(other).__name__}"
            raise TypeError(msg)
        diff = self.value - converted.value
        if abs(diff) < EPSILON:
            return Ordering.EQUAL
        if diff > 0:
            return Ordering.GREATER
        return Ordering.LESS

    def __lt__(self, other: Angle) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Angle) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Angle) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Angle) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.compare_to(other) >= 0

    # -------------------------------- Rendering --------------------------------
    def __str__(self) -> str:
        """Render the value in degrees followed by a degree sign (e.g. "90.0°")."""
        return f"{self.degrees}{Degrees.SYMBOL}"

    def __format__(self, format_spec: str) -> str:
        """Format the degree value with ``format_spec`` and append a degree sign."""
        return f"{format(self.degrees, format_spec)}{Degrees.SYMBOL}"


@dataclass(frozen=True)
class Degrees(Angle):
    """Angular unit: Degree (1/360 of a full rotation).

    Attributes:
        PERIOD (float): 360.0, one full turn.
        SYMBOL (str): "°", the standard symbol for degrees.

    Example:
        >>> bearing = Degrees(90)
        >>> print(bearing)  # "90.0°"
        >>> bearing.radians  # 1.5707963267948966
    """

    PERIOD = FULL_TURN_DEGREES
    SYMBOL = "°"

    def to_degrees(self) -> Degrees:
        return self

    def to_radians(self) -> Radians:
        return Radians(self.value * RADIANS_PER_DEGREE)


@dataclass(frozen=True)
class Radians(Angle):
    """Angular unit: Radian (the angle subtended by an arc of one radius).

    Attributes:
        PERIOD (float): 2π, one full turn.
        SYMBOL (str): "rad", the standard symbol for radians.

    Example:
        >>> half_turn = Radians(pi)
        >>> print(half_turn)  # "180.0°"
        >>> half_turn.degrees  # 180.0
    """

    PERIOD = FULL_TURN_RADIANS
    SYMBOL = "rad"

    def to_degrees(self) -> Degrees:
        return Degrees(self.value * DEGREES_PER_RADIAN)

    def to_radians(self) -> Radians:
        return self


ZERO = Angle.from_degrees(0)
Angle.ZERO = ZERO


def compare(a: Angle, b: Angle) -> Ordering:
    """Compare two angles in ``a``'s unit; see ``Angle.compare_to``."""
    return a.compare_to(b)


__all__ = ["Angle", "Degrees", "Radians", "Ordering", "ZERO", "compare"]

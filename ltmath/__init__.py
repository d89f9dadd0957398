"""ltmath: a small, portable planar angle value type.

An ``Angle`` is an immutable value stored either in degrees (``Degrees``) or
in radians (``Radians``). Angles convert safely between the two units, support
arithmetic and tolerance-based ordering, and render in degrees.

Package Components:
    Unit System (ltmath.unit):
        • Angle: Abstract sum type with Degrees and Radians variants
        • Ordering / compare: Epsilon-tolerant comparison
        • Unit: Family bookkeeping shared by all unit types

    Free Functions (ltmath.trig):
        • degrees_of, radians_of, pi_radians_of: Constructors from numbers
        • asin, acos, atan, atan2: Inverse trigonometry returning angles

    Support Modules:
        • ltmath.config: Conversion factors, tolerance and type aliases
        • ltmath.ieee: Numeric kernels that propagate nan/inf instead of raising

Example:
    >>> from ltmath import Degrees, Radians, atan2
    >>> total = Degrees(90) + Radians(3.141592653589793 / 2)
    >>> print(total)  # "180.0°"
    >>> print(atan2(1, 1))  # "45.0°"
"""

import logging as _logging

from .trig import acos, asin, atan, atan2, degrees_of, pi_radians_of, radians_of
from .unit import ZERO, Angle, Degrees, Ordering, Radians, Unit, compare

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Angle",
    "Degrees",
    "Radians",
    "ZERO",
    "Ordering",
    "compare",
    "Unit",
    "degrees_of",
    "radians_of",
    "pi_radians_of",
    "asin",
    "acos",
    "atan",
    "atan2",
]

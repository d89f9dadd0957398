"""Global constants and type definitions for the ltmath angle library.

This module centralizes the numeric constants and type aliases shared by the
angle value type and the trigonometric helpers. Keeping them in one place
guarantees that every conversion, normalization and comparison uses exactly
the same factors and tolerance.

Type Definitions:
    Number: Union type describing the scalar inputs accepted by angle
            constructors and scalar operators. Supports Python native types
            (int, float) and NumPy integer/floating scalars.

Constants:
    EPSILON: Fixed tolerance below which two angle values compare as equal.
    FULL_TURN_DEGREES: One full rotation in degrees.
    FULL_TURN_RADIANS: One full rotation in radians.
    DEGREES_PER_RADIAN: Factor converting radians to degrees.
    RADIANS_PER_DEGREE: Factor converting degrees to radians.

Example:
    >>> from ltmath.config import Number, RADIANS_PER_DEGREE
    >>> import numpy as np
    >>> scalar_int: Number = 42
    >>> scalar_np: Number = np.float64(3.14159)
    >>> 90 * RADIANS_PER_DEGREE
    1.5707963267948966
"""

from math import pi

from numpy import floating, integer

Number = int | float | integer | floating

EPSILON = 1e-10

FULL_TURN_DEGREES = 360.0
FULL_TURN_RADIANS = 2 * pi

DEGREES_PER_RADIAN = 180 / pi
RADIANS_PER_DEGREE = pi / 180

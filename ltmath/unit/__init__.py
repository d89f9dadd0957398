"""Type-safe unit system for planar angles.

Modules:
    - unit_base: Foundation Unit class with family management system
    - unit_angle: Angle value type with its Degrees and Radians variants

Unit Families:
    - Angle Family: Angle (root), Degrees, Radians

Example:
    >>> from ltmath.unit import Degrees, Radians
    >>>
    >>> heading = Degrees(45)
    >>> turn = Radians(0.5)
    >>> print(heading + turn)  # result stays in degrees
    >>> heading.to(Radians)  # 0.7853981633974483
"""

from .unit_angle import ZERO, Angle, Degrees, Ordering, Radians, compare
from .unit_base import Unit

__all__ = [
    # Base classes
    "Unit",
    # Angular units
    "Angle",
    "Degrees",
    "Radians",
    "ZERO",
    # Comparison
    "Ordering",
    "compare",
]

"""Base unit foundation for type-safe quantities.

This module provides the ``Unit`` class that serves as the abstract base for
the unit types in ltmath. It implements the unit family system using
automatic ROOT class assignment, which lets the variants of one quantity
(for example ``Degrees`` and ``Radians``) operate on each other while
operations with units of another family are rejected at runtime.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base class of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO
- NumPy Deferral: NumPy scalars on the left of an operator hand the
  operation back to the unit instead of broadcasting it

Classes:
    Unit: Base class for all unit types with family management.

Example:
    >>> class Angle(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for angle units
    >>> class Degrees(Angle):
    ...     pass  # Automatically gets ROOT = Angle
    >>> class Radians(Angle):
    ...     pass  # Also gets ROOT = Angle
    >>> Degrees.ROOT is Radians.ROOT
    True
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    Concrete unit families declare a root class with ``IS_FAMILY_ROOT = True``;
    every subclass of that root shares it as ``ROOT``.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()
    __array_priority__ = 1000
    __array_ufunc__ = None

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        The ROOT class is the first ancestor with IS_FAMILY_ROOT=True, or the
        class itself if none is found.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]):
        """Check if two unit types belong to the same quantity family.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the units belong to different families.
        """
        if cls.ROOT is not unit_type.ROOT:
            msg = (
                f"cannot combine {unit_type.__name__} ({unit_type.ROOT.__name__} family) "
                f"with {cls.__name__} ({cls.ROOT.__name__} family)"
            )
            raise TypeError(msg)


Unit.ROOT = Unit

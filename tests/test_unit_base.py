"""
Tests for the unit family bookkeeping.
"""

import unittest

from ltmath.unit import Angle, Degrees, Radians, Unit


class TestUnitFamilies(unittest.TestCase):
    """Test automatic ROOT assignment."""

    def test_root_assigned_from_family_root(self):
        class Length(Unit):
            IS_FAMILY_ROOT = True

        class Meter(Length):
            SYMBOL = "m"

        self.assertIs(Length.ROOT, Length)
        self.assertIs(Meter.ROOT, Length)

    def test_class_without_family_root_is_its_own_root(self):
        class Loose(Unit):
            pass

        self.assertIs(Loose.ROOT, Loose)

    def test_same_root_check(self):
        """Test that same-family checks pass and cross-family checks fail."""

        class Length(Unit):
            IS_FAMILY_ROOT = True

        Degrees._check_same_root(Radians)
        Angle._check_same_root(Degrees)
        with self.assertRaises(TypeError) as ctx:
            Degrees._check_same_root(Length)
        self.assertIn("Length", str(ctx.exception))

    def test_base_unit_is_its_own_root(self):
        """Test that the base class carries a ROOT and fails checks with TypeError."""
        self.assertIs(Unit.ROOT, Unit)
        self.assertIs(Unit().ROOT, Unit)
        with self.assertRaises(TypeError):
            Degrees._check_same_root(Unit)
        with self.assertRaises(TypeError):
            Unit._check_same_root(Radians)

    def test_symbols(self):
        self.assertEqual(Degrees.SYMBOL, "°")
        self.assertEqual(Radians.SYMBOL, "rad")


if __name__ == "__main__":
    unittest.main()

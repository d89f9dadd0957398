"""
Tests for free angle constructors and inverse trigonometric functions.
"""

import math
import unittest

import numpy as np

from ltmath import ZERO, Degrees, Ordering, Radians, compare
from ltmath.trig import acos, asin, atan, atan2, degrees_of, pi_radians_of, radians_of


class TestConstructors(unittest.TestCase):
    """Test building angles from plain numbers."""

    def test_degrees_of(self):
        self.assertEqual(degrees_of(90), Degrees(90.0))

    def test_radians_of(self):
        self.assertEqual(radians_of(0.5), Radians(0.5))
        self.assertEqual(radians_of(np.float64(2.0)), Radians(2.0))

    def test_pi_radians_of(self):
        """Test angles expressed as multiples of pi."""
        self.assertEqual(pi_radians_of(1), Radians(math.pi))
        self.assertAlmostEqual(pi_radians_of(0.5).degrees, 90.0)
        self.assertEqual(pi_radians_of(0), Radians(0.0))

    def test_zero_matches_degrees_of(self):
        self.assertEqual(degrees_of(0), ZERO)


class TestInverseTrigonometry(unittest.TestCase):
    """Test inverse trigonometric functions returning angles."""

    def test_asin(self):
        result = asin(1.0)
        self.assertIsInstance(result, Radians)
        self.assertAlmostEqual(result.radians, math.pi / 2)

    def test_acos(self):
        result = acos(0.0)
        self.assertIsInstance(result, Radians)
        self.assertAlmostEqual(result.radians, math.pi / 2)
        self.assertAlmostEqual(acos(-1).radians, math.pi)

    def test_asin_and_acos_agree(self):
        self.assertEqual(compare(asin(1.0), acos(0.0)), Ordering.EQUAL)

    def test_atan(self):
        self.assertAlmostEqual(atan(1).degrees, 45.0)
        self.assertAlmostEqual(atan(math.inf).radians, math.pi / 2)

    def test_atan2(self):
        """Test the two-argument arctangent in every quadrant."""
        self.assertAlmostEqual(atan2(1, 1).radians, math.pi / 4)
        self.assertAlmostEqual(atan2(1, 1).degrees, 45.0)
        self.assertAlmostEqual(atan2(1, -1).degrees, 135.0)
        self.assertAlmostEqual(atan2(-1, -1).degrees, -135.0)
        self.assertAlmostEqual(atan2(0, -1).radians, math.pi)
        self.assertIsInstance(atan2(0, 1), Radians)

    def test_out_of_domain_is_nan(self):
        """Test that inputs outside [-1, 1] produce nan instead of raising."""
        self.assertTrue(math.isnan(asin(1.5).radians))
        self.assertTrue(math.isnan(acos(-2).radians))

    def test_out_of_domain_is_logged(self):
        """Test that out-of-domain inputs are reported at debug level."""
        with self.assertLogs("ltmath.trig", level="DEBUG") as captured:
            asin(1.5)
        self.assertIn("asin(1.5)", captured.output[0])

    def test_round_trip_through_sin(self):
        angle = Degrees(30)
        self.assertAlmostEqual(asin(angle.sin).degrees, 30.0)


if __name__ == "__main__":
    unittest.main()

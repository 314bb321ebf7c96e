import itertools
import unittest

from sympy import igcd, ilcm

from fraction.utils import gcd, lcm


class TestUtils(unittest.TestCase):
    def test_gcd(self):
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1
        assert gcd(7, 0) == 7
        assert gcd(0, 7) == 7
        assert gcd(0, 0) == 0
        for a, b in itertools.product(range(0, 40), repeat=2):
            assert gcd(a, b) == igcd(a, b)

    def test_gcd_negative(self):
        with self.assertRaises(AssertionError):
            gcd(-4, 6)

    def test_lcm(self):
        assert lcm(4, 6) == 12
        assert lcm(-4, 6) == 12
        assert lcm(0, 5) == 0
        assert lcm(0, 0) == 0
        for a, b in itertools.product(range(1, 40), repeat=2):
            assert lcm(a, b) == ilcm(a, b)

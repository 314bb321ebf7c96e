# coding: utf-8


def gcd(a, b):
    """
    Greatest common divisor of two non-negative integers (Euclid's algorithm).

    gcd(a, 0) == a, so gcd(0, n) == n; callers pass magnitudes.
    """
    assert a >= 0 and b >= 0, 'gcd expects non-negative integers'
    while b > 0:
        a, b = b, a % b
    return a


def lcm(a, b):
    """Least common multiple of two integers."""
    g = gcd(abs(a), abs(b))
    if g == 0:
        # both are zero
        return 0
    return abs(a * b) // g

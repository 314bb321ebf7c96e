from .utils import gcd, lcm


class InvalidDenominator(ZeroDivisionError):
    """Zero denominator given to a fraction, or division by a zero fraction."""


def normalize(n, d):
    """
    Canonical (numerator, denominator) pair.

    The denominator is positive, the pair is in lowest terms,
    and zero is always (0, 1).
    """
    if d == 0:
        raise InvalidDenominator("Denominator cannot be zero.")
    elif d < 0:
        n = -n
        d = -d
    g = gcd(abs(n), abs(d))
    return n // g, d // g


def format_fraction(n, d):
    return '{}/{}'.format(n, d)


class Fraction:
    """
    A fraction, represented in numerator/denominator form.

    Always normalized: sign lives in the numerator, lowest terms.
    Arithmetic returns new instances; only set_value changes a fraction in place.
    """

    def __init__(self, n=0, d=1):
        self.set_value(n, d)

    @classmethod
    def convert(cls, x):
        if isinstance(x, cls):
            return x
        elif isinstance(x, int):
            return cls(x, 1)
        else:
            raise TypeError("Can't convert {!r} to {}".format(x, cls.__name__))

    @property
    def numerator(self):
        return self.n

    @property
    def denominator(self):
        return self.d

    def set_value(self, n, d):
        """Set the value of this fraction, normalizing it."""
        self.n, self.d = normalize(n, d)

    # operations

    def _add_by_value(self, bn, bd):
        """New fraction self + bn/bd, via the least common denominator."""
        nd = lcm(self.d, bd)
        ax = nd // self.d
        bx = nd // bd
        return type(self)(self.n * ax + bn * bx, nd)

    def add(self, other):
        return self._add_by_value(other.n, other.d)

    def subtract(self, other):
        return self._add_by_value(-other.n, other.d)

    def multiply(self, other):
        return type(self)(self.n * other.n, self.d * other.d)

    def divide(self, other):
        """
        Divide by another fraction, i.e., multiply by its reciprocal.

        Division by a zero fraction gives zero denominator and raises InvalidDenominator.
        """
        return type(self)(self.n * other.d, self.d * other.n)

    # rendering

    def to_string(self):
        return format_fraction(self.n, self.d)

    def to_mixed(self):
        """
        Mixed number form, e.g., '3 1/2', '-3 1/2', '3', '0', '2/5'.

        The integer part is truncated toward zero and carries the sign.
        """
        n, d = self.n, self.d
        if abs(n) >= d:
            whole, rest = divmod(abs(n), d)
            s = str(whole if n > 0 else -whole)
            if rest != 0:
                s += ' ' + format_fraction(rest, d)
            return s
        elif n == 0:
            return '0'
        else:
            return self.to_string()

    def both(self):
        return '{} == {}'.format(self.to_string(), self.to_mixed())

    def print_both(self, file=None):
        print(self.both(), file=file)

    # python protocol

    def _coerce(self, other):
        if isinstance(other, (Fraction, int)):
            return type(self).convert(other)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __neg__(self):
        return type(self)(-self.n, self.d)

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return (self.n, self.d) == (other.n, other.d)

    # mutable via set_value
    __hash__ = None

    def __float__(self):
        return self.n / self.d

    def __int__(self):
        whole = abs(self.n) // self.d
        return whole if self.n >= 0 else -whole

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return 'Fraction({}, {})'.format(self.n, self.d)

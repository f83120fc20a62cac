# SPDX-FileCopyrightText: 2025 rationals contributors
# SPDX-License-Identifier: Apache-2.0

import logging
import math
import numbers
from public import public

log = logging.getLogger(__name__)

@public
class RationalError(ArithmeticError):
    pass

@public
class InvalidArgument(RationalError, ValueError):
    """Raised when a zero denominator would be created."""
    pass

@public
class DivisionByZero(RationalError, ZeroDivisionError):
    """Raised when dividing by a rational number whose numerator is zero."""
    pass

def _check_integral(value, name):
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)

@public
class Rational:
    """
    Exact rational number numerator/denominator.

    The denominator is always positive: a negative denominator passed to the
    constructor is normalized by negating both numerator and denominator.
    Construction does not reduce, i.e. Rational(4, 8) keeps the pair (4, 8).
    Call :meth:`reduce` to bring a value into lowest terms.

    The compound operators (+=, -=, \\*=, /=) modify the value in place and
    always reduce their result. The binary operators (+, -, \\*, /) work on a
    copy of the left operand via the compound operators, so their results are
    reduced as well and neither operand is changed.

    Plain integers are accepted wherever a Rational operand is expected.
    """

    __slots__ = ('_num', '_den')

    def __init__(self, numerator=0, denominator=None):
        if isinstance(numerator, Rational) and denominator is None:
            self._num = numerator._num
            self._den = numerator._den
            return
        if denominator is None:
            denominator = 1
        numerator = _check_integral(numerator, "numerator")
        denominator = _check_integral(denominator, "denominator")

        if denominator == 0:
            log.debug("Rejected zero denominator (numerator=%s).", numerator)
            raise InvalidArgument("Denominator cannot be 0.")

        if denominator < 0:
            numerator = -numerator
            denominator = -denominator

        self._num = numerator
        self._den = denominator

    @property
    def numerator(self) -> int:
        """Numerator, carries the sign."""
        return self._num

    @property
    def denominator(self) -> int:
        """Denominator, always positive."""
        return self._den

    def num(self) -> int:
        return self._num

    def denom(self) -> int:
        return self._den

    def as_tuple(self) -> tuple[int, int]:
        """Returns (numerator, denominator) as stored, without reduction."""
        return self._num, self._den

    def copy(self) -> 'Rational':
        return type(self)(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def reciprocal(self) -> 'Rational':
        """
        Returns a new Rational with numerator and denominator swapped.
        The value itself is left unchanged and the result is not reduced.

        Raises :class:`InvalidArgument` if the numerator is 0.
        """
        return type(self)(self._den, self._num)

    def reduce(self) -> 'Rational':
        """
        Reduces the value in place, so that the gcd of numerator and
        denominator is 1. Zero becomes 0/1. Returns self.
        """
        if self._num == 0 and self._den != 1:
            self._den = 1
        else:
            gcd = math.gcd(self._num, self._den)
            self._num //= gcd
            self._den //= gcd
        return self

    def reduced(self) -> 'Rational':
        """Returns a reduced copy."""
        return self.copy().reduce()

    @classmethod
    def _coerce(cls, other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, numbers.Integral):
            return cls(int(other), 1)
        return None

    def _assign(self, numerator, denominator):
        # Constructor renormalizes the sign of the denominator.
        x = type(self)(numerator, denominator)
        x.reduce()
        self._num = x._num
        self._den = x._den
        return self

    # Compound operators: modify self, always reduce.

    def __iadd__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._assign(self._num * v._den + v._num * self._den,
            self._den * v._den)

    def __isub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._assign(self._num * v._den - v._num * self._den,
            self._den * v._den)

    def __imul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._assign(self._num * v._num, self._den * v._den)

    def __itruediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        if v._num == 0:
            log.debug("Rejected division of %s by zero.", self)
            raise DivisionByZero("Cannot divide by zero.")
        return self._assign(self._num * v._den, self._den * v._num)

    # Binary operators: copy left operand, then apply compound operator.

    def __add__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        x = self.copy()
        x += other
        return x

    def __sub__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        x = self.copy()
        x -= other
        return x

    def __mul__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        x = self.copy()
        x *= other
        return x

    def __truediv__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        x = self.copy()
        x /= other
        return x

    def __radd__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __rsub__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __rmul__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __rtruediv__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self):
        return type(self)(-self._num, self._den)

    def __pos__(self):
        return self.copy()

    def __abs__(self):
        return type(self)(abs(self._num), self._den)

    def __bool__(self):
        return self._num != 0

    def __eq__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._num * v._den == v._num * self._den

    # Mutable through the compound operators.
    __hash__ = None

    def __str__(self):
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    def __repr__(self):
        return f"R('{self}')"

    def __format__(self, spec):
        if spec in ('s', ''):
            return str(self)
        else:
            return format(str(self), spec)

    def write_to(self, stream):
        """Writes str(self) to a text stream and returns the stream."""
        stream.write(str(self))
        return stream

public(R = Rational) # alias

#  Copyright 2025 Google LLC
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      https://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

r"""The field $\mathbb{Q}$ of exact rationals over arbitrary-precision integers."""

import fractions
import math
from typing import Union

import attrs

import smallroots._typing as rst


class DivisionByZeroError(ZeroDivisionError):
    """Raised when a rational is built with a zero denominator or divided by zero."""


@attrs.frozen(init=False)
class Rational:
    r"""An exact fraction $n/d$.

    Values are always held in lowest terms with a positive denominator, so two
    equal rationals have identical fields. All operations return new values.

    Attributes:
        numerator: the (signed) numerator.
        denominator: the denominator, always positive.
    """

    numerator: int
    denominator: int

    def __init__(self, numerator: rst.Integral = 0, denominator: rst.Integral = 1):
        if not (rst.is_int(numerator) and rst.is_int(denominator)):
            raise TypeError(
                f"Rational expects integers, got {type(numerator)} and {type(denominator)}"
            )
        numerator, denominator = int(numerator), int(denominator)
        if denominator == 0:
            raise DivisionByZeroError(f"Rational with zero denominator: {numerator}/0")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = math.gcd(numerator, denominator)
        self.__attrs_init__(numerator // g, denominator // g)

    @staticmethod
    def of(x: Union["Rational", rst.Integral, fractions.Fraction]) -> "Rational":
        """Converts an integer, a `fractions.Fraction` or a Rational to a Rational.

        Floating-point values are rejected since they can't represent the large
        magnitudes involved here exactly.
        """
        if isinstance(x, Rational):
            return x
        if rst.is_int(x):
            return Rational(x)
        if isinstance(x, fractions.Fraction):
            return Rational(x.numerator, x.denominator)
        raise TypeError(f"Cannot convert {type(x)} to Rational")

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __bool__(self) -> bool:
        return self.numerator != 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    def __add__(self, other) -> "Rational":
        if rst.is_int(other):
            other = Rational(other)
        if isinstance(other, Rational):
            return Rational(
                self.numerator * other.denominator + other.numerator * self.denominator,
                self.denominator * other.denominator,
            )
        return NotImplemented

    def __radd__(self, other) -> "Rational":
        if rst.is_int(other):
            return self + other
        return NotImplemented

    def __sub__(self, other) -> "Rational":
        if rst.is_int(other):
            other = Rational(other)
        if isinstance(other, Rational):
            return Rational(
                self.numerator * other.denominator - other.numerator * self.denominator,
                self.denominator * other.denominator,
            )
        return NotImplemented

    def __rsub__(self, other) -> "Rational":
        if rst.is_int(other):
            return Rational(other) - self
        return NotImplemented

    def __mul__(self, other) -> "Rational":
        if rst.is_int(other):
            return Rational(self.numerator * int(other), self.denominator)
        if isinstance(other, Rational):
            return Rational(
                self.numerator * other.numerator, self.denominator * other.denominator
            )
        return NotImplemented

    def __rmul__(self, other) -> "Rational":
        if rst.is_int(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other) -> "Rational":
        if rst.is_int(other):
            other = Rational(other)
        if isinstance(other, Rational):
            if not other:
                raise DivisionByZeroError(f"Division of {self} by zero")
            return Rational(
                self.numerator * other.denominator, self.denominator * other.numerator
            )
        return NotImplemented

    def __rtruediv__(self, other) -> "Rational":
        if rst.is_int(other):
            return Rational(other) / self
        return NotImplemented

    def __neg__(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    def __abs__(self) -> "Rational":
        return Rational(abs(self.numerator), self.denominator)

    def __pow__(self, other) -> "Rational":
        if not rst.is_int(other):
            raise TypeError(f"Rational only supports integer exponents, got {type(other)}")
        p = int(other)
        if p >= 0:
            return Rational(self.numerator**p, self.denominator**p)
        if not self:
            raise DivisionByZeroError(f"Zero raised to the negative power {p}")
        return Rational(self.denominator ** (-p), self.numerator ** (-p))

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return self.numerator == other.numerator and self.denominator == other.denominator
        if rst.is_int(other):
            return self.denominator == 1 and self.numerator == other
        if isinstance(other, fractions.Fraction):
            return self.numerator == other.numerator and self.denominator == other.denominator
        return NotImplemented

    def __hash__(self) -> int:
        # Agrees with the hash of equal ints and Fractions.
        return hash(fractions.Fraction(self.numerator, self.denominator))

    def _cmp_key(self, other) -> tuple[int, int]:
        # Denominators are positive so cross multiplication preserves the order.
        if rst.is_int(other):
            other = Rational(other)
        if not isinstance(other, Rational):
            raise TypeError(f"Cannot compare Rational with {type(other)}")
        return self.numerator * other.denominator, other.numerator * self.denominator

    def __lt__(self, other) -> bool:
        lhs, rhs = self._cmp_key(other)
        return lhs < rhs

    def __le__(self, other) -> bool:
        lhs, rhs = self._cmp_key(other)
        return lhs <= rhs

    def __gt__(self, other) -> bool:
        lhs, rhs = self._cmp_key(other)
        return lhs > rhs

    def __ge__(self, other) -> bool:
        lhs, rhs = self._cmp_key(other)
        return lhs >= rhs

    def floor(self) -> int:
        return self.numerator // self.denominator

    def ceil(self) -> int:
        return -(-self.numerator // self.denominator)

    def round(self) -> int:
        """Returns the nearest integer, rounding ties away from zero."""
        return round_to_nearest_integer(self)

    def __round__(self, ndigits=None) -> int:
        if ndigits is not None:
            raise TypeError("Rational only supports rounding to an integer")
        return self.round()


def round_to_nearest_integer(r: Rational) -> int:
    r"""Returns the integer nearest to $r$, rounding ties away from zero.

    The computation only uses integer operations on the numerator and denominator,
    e.g. $\lfloor (2n + d) / 2d \rfloor$ for non-negative $n$, so it stays exact
    far beyond the range where a float conversion would lose precision.

    Examples: 5/2 -> 3, -5/2 -> -3, 7/3 -> 2, 8/3 -> 3.
    """
    n, d = r.numerator, r.denominator
    if n >= 0:
        return (2 * n + d) // (2 * d)
    return -((-2 * n + d) // (2 * d))


Zero = Rational(0)
One = Rational(1)
Half = Rational(1, 2)

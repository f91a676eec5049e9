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

import fractions
import itertools
import math

import numpy as np
import pytest

from smallroots import rings

_PAIRS = [(p, q) for p, q in itertools.product(range(-6, 7), repeat=2) if q != 0]


@pytest.mark.parametrize("p, q", _PAIRS)
def test_lowest_terms(p: int, q: int):
    r = rings.Rational(p, q)
    assert r.denominator > 0
    assert math.gcd(r.numerator, r.denominator) == 1
    assert fractions.Fraction(r.numerator, r.denominator) == fractions.Fraction(p, q)


def test_canonical_sign():
    assert rings.Rational(3, -6) == rings.Rational(-1, 2)
    assert rings.Rational(-3, -6) == rings.Rational(1, 2)
    assert rings.Rational(0, -5).denominator == 1


def test_zero_denominator():
    with pytest.raises(rings.DivisionByZeroError):
        rings.Rational(1, 0)
    with pytest.raises(ZeroDivisionError):
        rings.Rational(0, 0)


def test_divide_by_zero():
    with pytest.raises(rings.DivisionByZeroError):
        _ = rings.Rational(1, 3) / rings.Zero
    with pytest.raises(rings.DivisionByZeroError):
        _ = rings.One / 0
    with pytest.raises(rings.DivisionByZeroError):
        _ = rings.Zero**-1


@pytest.mark.parametrize("x", [rings.Rational(*p) for p in _PAIRS[::5]])
@pytest.mark.parametrize("y", [rings.Rational(*p) for p in _PAIRS[::7]])
def test_arithmetic(x: rings.Rational, y: rings.Rational):
    fx = fractions.Fraction(x.numerator, x.denominator)
    fy = fractions.Fraction(y.numerator, y.denominator)
    assert x + y == rings.Rational.of(fx + fy)
    assert x - y == rings.Rational.of(fx - fy)
    assert x * y == rings.Rational.of(fx * fy)
    if y:
        assert x / y == rings.Rational.of(fx / fy)
    assert (x < y) == (fx < fy)
    assert (x <= y) == (fx <= fy)
    assert (x > y) == (fx > fy)
    assert (x >= y) == (fx >= fy)


def test_mixed_integer_arithmetic():
    half = rings.Half
    assert half + 1 == rings.Rational(3, 2)
    assert 1 + half == rings.Rational(3, 2)
    assert 1 - half == half
    assert 3 * half == rings.Rational(3, 2)
    assert half * np.int64(4) == 2
    assert 1 / half == 2
    assert half**2 == rings.Rational(1, 4)
    assert half**-2 == 4
    assert -half == rings.Rational(-1, 2)
    assert abs(-half) == half


def test_equality_and_hash():
    assert rings.Rational(4, 2) == 2
    assert rings.Rational(1, 2) != 1
    assert hash(rings.Rational(4, 2)) == hash(2)
    assert hash(rings.Rational(1, 2)) == hash(fractions.Fraction(1, 2))
    assert len({rings.Rational(2, 4), rings.Rational(1, 2), rings.Half}) == 1


def test_equality_with_fractions():
    assert rings.Rational(1, 2) == fractions.Fraction(1, 2)
    assert fractions.Fraction(-3, 6) == rings.Rational(-1, 2)
    assert rings.Rational(1, 2) != fractions.Fraction(1, 3)
    assert len({rings.Half, fractions.Fraction(1, 2)}) == 1


def test_non_integer_exponent():
    with pytest.raises(TypeError):
        _ = rings.Half**0.5
    with pytest.raises(TypeError):
        _ = rings.Half ** rings.Rational(1, 2)


def test_round_builtin():
    assert round(rings.Rational(5, 2)) == 3
    assert round(rings.Rational(-5, 2)) == -3
    with pytest.raises(TypeError):
        round(rings.Half, 2)


def test_large_magnitudes():
    big = 2**4096 + 1
    r = rings.Rational(big, 2)
    assert (r * 2) == big
    assert r.round() == 2**4095 + 1
    assert r.floor() == 2**4095
    assert r.ceil() == 2**4095 + 1


@pytest.mark.parametrize(
    "p, q, expected",
    [(5, 2, 3), (-5, 2, -3), (1, 2, 1), (-1, 2, -1), (7, 3, 2), (8, 3, 3), (-7, 3, -2), (0, 9, 0)],
)
def test_round_to_nearest_integer(p: int, q: int, expected: int):
    assert rings.round_to_nearest_integer(rings.Rational(p, q)) == expected
    assert round(rings.Rational(p, q)) == expected


@pytest.mark.parametrize("p, q", _PAIRS)
def test_round_is_nearest(p: int, q: int):
    r = rings.Rational(p, q)
    n = r.round()
    assert abs(r - n) <= rings.Half
    assert r.floor() <= r <= r.ceil()


def test_of():
    assert rings.Rational.of(3) == rings.Rational(3)
    assert rings.Rational.of(fractions.Fraction(-6, 4)) == rings.Rational(-3, 2)
    half = rings.Rational(1, 2)
    assert rings.Rational.of(half) is half
    with pytest.raises(TypeError):
        rings.Rational.of(0.5)
    with pytest.raises(TypeError):
        rings.Rational(1.5, 2)


def test_str():
    assert str(rings.Rational(-3, 6)) == "-1/2"
    assert str(rings.Rational(10, 5)) == "2"
    assert float(rings.Rational(1, 4)) == 0.25

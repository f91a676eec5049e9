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

r"""Recovering a factor $p$ of $n$ from an approximation $p_0$ with $|p - p_0| \leq X$.

The polynomials $(x + p_0)^2$, $n x$ and $n$ all vanish modulo $p$ at $x_0 = p - p_0$.
A short vector of the lattice they span, weighted by $\mathrm{diag}(X^2, X, 1)$, is a
polynomial $f$ with $|f(x_0)| < p$, so $x_0$ is a root of $f$ over the integers.
"""

import logging
import math
from typing import Union

from smallroots import lattice
from smallroots.coppersmith import _record, _rsa
from smallroots.rings import Rational

logger = logging.getLogger(__name__)


class FactorNotFoundError(ArithmeticError):
    """Raised when none of the roots of the short polynomial yields a factor of n."""


def coppersmith_basis(n: int, p0: int) -> list[list[int]]:
    r"""Returns the coefficients of $(x + p_0)^2$, $n x$ and $n$, highest degree first."""
    return [[1, 2 * p0, p0 * p0], [0, n, 0], [0, 0, n]]


def integer_roots(a: int, b: int, c: int) -> tuple[int, ...]:
    """Returns the distinct integer roots of $a x^2 + b x + c$.

    A zero polynomial has no roots reported.
    """
    if a == 0:
        if b == 0:
            return ()
        return (-c // b,) if c % b == 0 else ()
    disc = b * b - 4 * a * c
    if disc < 0:
        return ()
    s = math.isqrt(disc)
    if s * s != disc:
        return ()
    roots: list[int] = []
    for num in (-b + s, -b - s):
        if num % (2 * a) == 0 and num // (2 * a) not in roots:
            roots.append(num // (2 * a))
    return tuple(roots)


def recover_factor(
    record: _record.AttackRecord, delta: Union[Rational, int] = lattice.DEFAULT_DELTA
) -> _rsa.RSAKey:
    """Factors the modulus of `record` and returns the corresponding key.

    Args:
        record: The public attack data.
        delta: The LLL reduction parameter.

    Raises:
        ConfigurationError: If the modulus or the bound is out of range.
        InvalidScalingError: If the short vector doesn't unscale to integer coefficients.
        FactorNotFoundError: If no root of the short polynomial gives a factor.
    """
    if record.n <= 1:
        raise _record.ConfigurationError(f"The modulus must be greater than 1, got {record.n}")
    if record.bound <= 0:
        raise _record.ConfigurationError(f"The bound must be positive, got {record.bound}")
    basis = coppersmith_basis(record.n, record.p0)
    a, b, c = lattice.lll_scaled(basis, record.bound, delta)
    roots = integer_roots(a, b, c)
    logger.info("Short polynomial %d*x^2 + %d*x + %d has integer roots %s", a, b, c, roots)
    for x in roots:
        p = record.p0 + x
        if 1 < p < record.n and record.n % p == 0:
            logger.info("Found p = p0 + %d", x)
            return _rsa.RSAKey(n=record.n, p=p, q=record.n // p, d=record.d)
    raise FactorNotFoundError(
        f"None of the roots {roots} of {a}*x^2 + {b}*x + {c} gives a factor of n"
    )

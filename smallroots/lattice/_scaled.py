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

"""LLL on a rank 3 lattice weighted by a root bound, as used by Coppersmith's method."""

import logging
from typing import Sequence, Union

import smallroots._typing as rst
from smallroots.lattice import _lll
from smallroots.rings import One, Rational

logger = logging.getLogger(__name__)


class InvalidScalingError(ArithmeticError):
    """Raised when a reduced vector doesn't map back to integer coefficients."""


def lll_scaled(
    integer_basis: Sequence[Sequence],
    bound: rst.Integral,
    delta: Union[Rational, int] = _lll.DEFAULT_DELTA,
) -> list[int]:
    r"""Finds a short vector of the lattice weighted by $\mathrm{diag}(X^2, X, 1)$.

    Row $i$ of the basis holds the coefficients $(a_i, b_i, c_i)$ of the polynomial
    $a_i x^2 + b_i x + c_i$. The rows are scaled to $(X^2 a_i, X b_i, c_i)$ so that a
    short vector of the scaled lattice is a polynomial that stays small on $|x| \leq X$.
    The first row of the reduced basis is unscaled and returned.

    Args:
        integer_basis: A 3x3 basis whose rows are polynomial coefficients, highest degree first.
        bound: The root bound $X$, a positive integer.
        delta: The LLL reduction parameter.

    Returns:
        The integer coefficients $[a, b, c]$ of the short polynomial.

    Raises:
        InvalidScalingError: If an unscaled coefficient is not an integer.
    """
    if len(integer_basis) != 3 or any(len(row) != 3 for row in integer_basis):
        raise ValueError("lll_scaled expects a 3x3 basis")
    if not rst.is_int(bound) or bound <= 0:
        raise ValueError(f"The bound must be a positive integer, got {bound}")
    x = Rational(bound)
    weights = (x * x, x, One)
    scaled = [[w * Rational.of(c) for w, c in zip(weights, row)] for row in integer_basis]
    reduced = _lll.lll_reduce(scaled, delta)
    coefficients = [c / w for c, w in zip(reduced[0], weights)]
    for i, c in enumerate(coefficients):
        if not c.is_integer():
            raise InvalidScalingError(
                f"Coefficient {i} of the short vector is {c} after unscaling by X={bound}"
            )
    logger.info("Short polynomial coefficients: %s", [str(c) for c in coefficients])
    return [c.numerator for c in coefficients]

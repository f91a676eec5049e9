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

from typing import Optional, Sequence

import numpy as np
import sympy

from smallroots.lattice import _vectors as vec


def to_sympy(basis: Sequence[Sequence]) -> sympy.Matrix:
    """Returns the basis as an exact sympy matrix (one row per basis vector)."""
    return sympy.Matrix(
        [[sympy.Rational(x.numerator, x.denominator) for x in row] for row in vec.to_basis(basis)]
    )


def make_integer_basis(rng: np.random.Generator, rank: int, magnitude: int = 100) -> list[list[int]]:
    """Returns a random full rank integer basis with entries in [-magnitude, magnitude)."""
    while True:
        a = rng.integers(-magnitude, magnitude, size=(rank, rank))
        rows = [[int(x) for x in row] for row in a]
        if sympy.Matrix(rows).det() != 0:
            return rows


def make_bases(
    n: int, rank: int = 3, magnitude: int = 100, seed: Optional[int] = 0
) -> list[list[list[int]]]:
    """Returns `n` random full rank integer bases."""
    rng = np.random.default_rng(seed)
    return [make_integer_basis(rng, rank, magnitude) for _ in range(n)]


def change_of_basis(original: Sequence[Sequence], reduced: Sequence[Sequence]) -> sympy.Matrix:
    """Returns the matrix T such that `reduced = T @ original`."""
    return to_sympy(reduced) * to_sympy(original).inv()


def is_unimodular(t: sympy.Matrix) -> bool:
    """Returns whether the matrix has integer entries and determinant +-1."""
    return all(x.is_integer for x in t) and abs(t.det()) == 1

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

"""Exact Gram-Schmidt orthogonalization."""

from typing import Iterator, Sequence

import attrs

from smallroots.lattice import _vectors as vec
from smallroots.rings import Rational, Zero


class LinearlyDependentInputError(ValueError):
    """Raised when the rows handed to Gram-Schmidt don't form a basis."""


@attrs.frozen
class GramSchmidtResult:
    r"""The Gram-Schmidt data of a basis $B$.

    Attributes:
        mu: The projection coefficients $\mu_{i,j} = \langle B_i, B^*_j \rangle / \|B^*_j\|^2$.
            Only the entries with $j < i$ are meaningful, the rest are zero.
        orthogonal_basis: The orthogonal vectors $B^*$.
        norms: The squared norms $\|B^*_i\|^2$.
    """

    mu: tuple[vec.Vector, ...]
    orthogonal_basis: vec.Basis
    norms: vec.Vector

    def __iter__(self) -> Iterator:
        # Allows `mu, bstar, norms = gram_schmidt(basis)`.
        yield self.mu
        yield self.orthogonal_basis
        yield self.norms


def gram_schmidt(basis: Sequence[Sequence]) -> GramSchmidtResult:
    r"""Orthogonalizes the given basis without normalizing it.

    For each row $i$ in order, $B^*_i = B_i - \sum_{j<i} \mu_{i,j} B^*_j$. All arithmetic
    is exact, there are no tolerances.

    Args:
        basis: A non-empty sequence of equal-length vectors.

    Returns:
        The GramSchmidtResult of the basis.

    Raises:
        LinearlyDependentInputError: If any $\|B^*_i\|^2$ is zero.
    """
    rows = vec.to_basis(basis)
    if not rows:
        raise ValueError("Gram-Schmidt needs at least one vector")
    n = len(rows)
    mu = [[Zero] * n for _ in range(n)]
    bstar: list[vec.Vector] = []
    norms: list[Rational] = []
    for i, row in enumerate(rows):
        v = row
        for j in range(i):
            mu[i][j] = vec.dot(row, bstar[j]) / norms[j]
            v = vec.subtract(v, vec.scale(mu[i][j], bstar[j]))
        norm = vec.dot(v, v)
        if not norm:
            raise LinearlyDependentInputError(
                f"Row {i} is a linear combination of the previous rows: {[str(x) for x in row]}"
            )
        bstar.append(v)
        norms.append(norm)
    return GramSchmidtResult(tuple(tuple(r) for r in mu), tuple(bstar), tuple(norms))

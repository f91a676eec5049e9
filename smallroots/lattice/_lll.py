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

"""LLL basis reduction over exact rationals.

The reduction is expressed as a state machine over (basis, k). Gram-Schmidt data is
recomputed from scratch after every change of the basis rather than updated
incrementally, which is cheap for the small ranks this package works with.
"""

import logging
from typing import Sequence, Union

import attrs

from smallroots.lattice import _gram_schmidt as gs
from smallroots.lattice import _vectors as vec
from smallroots.rings import Half, Rational, round_to_nearest_integer

logger = logging.getLogger(__name__)

DEFAULT_DELTA = Rational(9999, 10000)
DEFAULT_MAX_ITERATIONS = 1_000_000

_QUARTER = Rational(1, 4)


class NonTerminationError(RuntimeError):
    """Raised when LLL doesn't converge within the allowed number of iterations."""


def _check_delta(delta) -> Rational:
    delta = Rational.of(delta)
    if not _QUARTER < delta <= 1:
        raise ValueError(f"delta must be in (1/4, 1], got {delta}")
    return delta


def lovasz_condition(data: gs.GramSchmidtResult, k: int, delta: Rational) -> bool:
    r"""Returns whether $\|B^*_k\|^2 \geq (\delta - \mu_{k,k-1}^2) \|B^*_{k-1}\|^2$."""
    return data.norms[k] >= (delta - data.mu[k][k - 1] ** 2) * data.norms[k - 1]


@attrs.frozen
class LLLState:
    """A state of the LLL reduction loop.

    Attributes:
        basis: The current basis.
        k: The index of the row being worked on. The state is terminal once `k`
            reaches the rank of the basis.
    """

    basis: vec.Basis = attrs.field(converter=vec.to_basis)
    k: int = 1

    def is_terminal(self) -> bool:
        return self.k >= len(self.basis)

    def size_reduce(self) -> "LLLState":
        r"""Subtracts integer multiples of the previous rows from row $k$.

        Row $j$ is handled for $j = k-1, \dots, 0$. After subtracting $q B_j$ the
        coefficients $\mu_{k,i}$ for $i \leq j$ are updated exactly so that the next
        rounding uses the current values. Afterwards $|\mu_{k,j}| \leq 1/2$ for all $j < k$.
        """
        k = self.k
        mu = gs.gram_schmidt(self.basis).mu
        mu_k = list(mu[k])
        row = self.basis[k]
        for j in reversed(range(k)):
            q = round_to_nearest_integer(mu_k[j])
            if q == 0:
                continue
            row = vec.subtract(row, vec.scale(Rational(q), self.basis[j]))
            for i in range(j):
                mu_k[i] = mu_k[i] - q * mu[j][i]
            mu_k[j] = mu_k[j] - q
        return attrs.evolve(self, basis=self.basis[:k] + (row,) + self.basis[k + 1 :])

    def step(self, delta: Rational) -> "LLLState":
        """Performs one transition of the reduction loop.

        Row k is size reduced, then the Lovász condition decides whether to advance
        to the next row or to swap rows k-1 and k and step back (never below 1).
        """
        assert not self.is_terminal()
        reduced = self.size_reduce()
        k = reduced.k
        if lovasz_condition(gs.gram_schmidt(reduced.basis), k, delta):
            return attrs.evolve(reduced, k=k + 1)
        rows = list(reduced.basis)
        rows[k - 1], rows[k] = rows[k], rows[k - 1]
        return LLLState(tuple(rows), max(k - 1, 1))


def lll_reduce(
    basis: Sequence[Sequence],
    delta: Union[Rational, int] = DEFAULT_DELTA,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> vec.Basis:
    r"""LLL-reduces the given basis.

    Args:
        basis: The rows of the lattice basis. Entries may be ints, Fractions or Rationals.
            The rows must be linearly independent. The input is not modified.
        delta: The reduction parameter in $(1/4, 1]$. Values close to 1 give a stronger
            reduction at the cost of more iterations.
        max_iterations: The maximum number of loop transitions before giving up.

    Returns:
        The reduced basis, spanning the same lattice as the input.

    Raises:
        LinearlyDependentInputError: If the rows are not linearly independent.
        NonTerminationError: If the loop doesn't finish within `max_iterations` transitions.
    """
    delta = _check_delta(delta)
    state = LLLState(basis)
    # Rejects dependent input before doing any work.
    gs.gram_schmidt(state.basis)
    iterations = 0
    while not state.is_terminal():
        if iterations >= max_iterations:
            raise NonTerminationError(
                f"LLL did not terminate after {max_iterations} iterations (k={state.k})"
            )
        new_state = state.step(delta)
        iterations += 1
        if new_state.k <= state.k:
            logger.debug("Iteration %d: swapped rows %d and %d", iterations, state.k - 1, state.k)
        state = new_state
    logger.info("LLL reduced a rank %d basis in %d iterations", len(state.basis), iterations)
    return state.basis


def is_lll_reduced(basis: Sequence[Sequence], delta: Union[Rational, int] = DEFAULT_DELTA) -> bool:
    r"""Returns whether the basis is size reduced and satisfies the Lovász condition.

    That is $|\mu_{i,j}| \leq 1/2$ for all $j < i$ and the Lovász condition holds for
    every pair of adjacent rows.
    """
    delta = _check_delta(delta)
    data = gs.gram_schmidt(basis)
    n = len(data.norms)
    for i in range(n):
        if any(abs(data.mu[i][j]) > Half for j in range(i)):
            return False
    return all(lovasz_condition(data, k, delta) for k in range(1, n))

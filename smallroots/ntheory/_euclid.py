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

import logging
from typing import Iterable, Optional

import attrs
import sympy
from sympy.ntheory import modular

logger = logging.getLogger(__name__)


class NotInvertibleError(ValueError):
    """Raised when a modular inverse doesn't exist."""


def extended_euclidean(a: int, b: int) -> tuple[int, int, int]:
    r"""Returns $(x, y, g)$ such that $a x + b y = g = \gcd(a, b)$."""
    x0, x1, y0, y1 = 1, 0, 0, 1
    while b:
        q, r = divmod(a, b)
        a, b = b, r
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    if a < 0:
        return -x0, -y0, -a
    return x0, y0, a


def mod_inverse(a: int, m: int) -> int:
    """Returns the inverse of `a` modulo `m` as an integer in [0, m).

    Raises:
        ValueError: If `m` is not positive.
        NotInvertibleError: If `a` and `m` are not coprime.
    """
    if m <= 0:
        raise ValueError(f"The modulus must be positive, got {m}")
    if m == 1:
        # Every integer is 0 modulo 1.
        return 0
    try:
        return int(sympy.mod_inverse(a, m))
    except ValueError as e:
        raise NotInvertibleError(f"{a} is not invertible modulo {m}") from e


def solve_congruence(pairs: Iterable[tuple[int, int]]) -> Optional[tuple[int, int]]:
    r"""Solves a system of congruences $x \equiv r_i \pmod{m_i}$.

    The moduli need not be pairwise coprime.

    Args:
        pairs: The (remainder, modulus) pairs.

    Returns:
        `(x, M)` where `M` is the lcm of the moduli and `0 <= x < M` is the unique
        solution modulo `M`, or None if the system is inconsistent. The empty system
        gives `(0, 1)`.
    """
    pairs = [(int(r), int(m)) for r, m in pairs]
    if not pairs:
        return 0, 1
    for _, m in pairs:
        if m <= 0:
            raise ValueError(f"Moduli must be positive, got {m}")
    res = modular.solve_congruence(*pairs)
    if res is None:
        return None
    x, m = res
    return int(x), int(m)


def euclidean_steps(a: int, b: int) -> int:
    """Returns the number of division steps the Euclidean algorithm takes on `(a, b)`.

    Each step replaces `(a, b)` by `(b, a mod b)` until `b` is zero.
    """
    if a < 0 or b < 0:
        raise ValueError(f"Expected non-negative integers, got {a} and {b}")
    steps = 0
    while b:
        a, b = b, a % b
        steps += 1
    return steps


def nearest_remainder_steps(a: int, b: int) -> int:
    r"""Returns the number of steps of the nearest-remainder Euclidean algorithm on `(a, b)`.

    With $r = a \bmod b$, a step replaces `(a, b)` by `(b, r)` when $r < \lfloor b/2 \rfloor$
    and by `(b, b - r)` otherwise. A zero remainder ends the algorithm and counts as a step.
    """
    if a < 0 or b < 0:
        raise ValueError(f"Expected non-negative integers, got {a} and {b}")
    steps = 0
    while b:
        r = a % b
        steps += 1
        if r == 0:
            break
        a, b = b, (r if r < b // 2 else b - r)
    return steps


@attrs.frozen
class StepCountComparison:
    """Total step counts of both Euclidean variants over all pairs in a range.

    Attributes:
        standard_steps: The total steps of `euclidean_steps`.
        nearest_remainder_steps: The total steps of `nearest_remainder_steps`.
        nearest_remainder_wins: The number of pairs where the nearest-remainder variant
            takes strictly fewer steps.
    """

    standard_steps: int
    nearest_remainder_steps: int
    nearest_remainder_wins: int


def compare_step_counts(n: int) -> StepCountComparison:
    """Compares both Euclidean variants over all pairs `(a, b)` with `1 <= a, b <= n`."""
    if n < 1:
        raise ValueError(f"Expected a positive range bound, got {n}")
    standard = nearest = wins = 0
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            s = euclidean_steps(a, b)
            t = nearest_remainder_steps(a, b)
            standard += s
            nearest += t
            if t < s:
                wins += 1
    logger.info(
        "Over %d pairs: %d standard steps, %d nearest-remainder steps, %d wins",
        n * n,
        standard,
        nearest,
        wins,
    )
    return StepCountComparison(standard, nearest, wins)

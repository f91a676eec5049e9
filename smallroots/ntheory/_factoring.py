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
import math

from sympy import ntheory

logger = logging.getLogger(__name__)


def power_gcd_factor(n: int, max_k: int = 50) -> int:
    r"""Looks for a factor of $n$ in $\gcd(n, 2^{k!} - 1)$ for $k = 1, \dots, \mathrm{max\_k}$.

    This finds a prime $p | n$ whenever $p - 1$ divides $k!$, i.e. when $p - 1$ is
    smooth. The power is built iteratively as $M_k = M_{k-1}^k \bmod n$.

    Returns:
        A proper factor of `n`, or `n` itself if none was found.
    """
    if n < 2:
        raise ValueError(f"Expected an integer greater than 1, got {n}")
    r = 2 % n
    for k in range(1, max_k + 1):
        r = pow(r, k, n)
        g = math.gcd(n, (r - 1) % n)
        if 1 < g < n:
            logger.debug("Found factor %d of %d at k=%d", g, n, k)
            return g
    return n


def find_prime_factor(n: int, max_k: int = 50) -> int:
    """Returns a prime factor of `n`, or `n` itself if `n` couldn't be split."""
    if ntheory.isprime(n):
        return n
    f = power_gcd_factor(n, max_k)
    if f == n:
        return n
    return find_prime_factor(f, max_k)


def factorize(n: int, max_k: int = 50) -> dict[int, int]:
    """Returns the factorization of `n` as a mapping from factor to multiplicity.

    Factors of 2 are removed first since $2^{k!} - 1$ is always odd. A cofactor that
    can't be split is recorded as is, so its key may be composite.
    """
    if n < 1:
        raise ValueError(f"Expected a positive integer, got {n}")
    factors: dict[int, int] = {}
    while n % 2 == 0:
        factors[2] = factors.get(2, 0) + 1
        n //= 2
    while n > 1:
        p = find_prime_factor(n, max_k)
        if p == n and not ntheory.isprime(n):
            logger.warning("Could not split %d", n)
        while n % p == 0:
            factors[p] = factors.get(p, 0) + 1
            n //= p
    return factors

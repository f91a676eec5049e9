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

"""Fixed-length vectors over exact rationals."""

from typing import Iterable, Sequence

from smallroots.rings import Rational, Zero

Vector = tuple[Rational, ...]
Basis = tuple[Vector, ...]


def to_vector(entries: Iterable) -> Vector:
    """Converts integers, Fractions or Rationals to a Vector."""
    return tuple(Rational.of(x) for x in entries)


def to_basis(rows: Iterable[Iterable]) -> Basis:
    """Converts a nested sequence to a Basis, checking that all rows have the same length."""
    basis = tuple(to_vector(row) for row in rows)
    if len({len(row) for row in basis}) > 1:
        raise ValueError(f"Basis rows must have the same length, got {[len(r) for r in basis]}")
    return basis


def _check_same_length(u: Sequence, v: Sequence):
    if len(u) != len(v):
        raise ValueError(f"Vectors must have the same length, got {len(u)} and {len(v)}")


def dot(u: Vector, v: Vector) -> Rational:
    _check_same_length(u, v)
    res = Zero
    for x, y in zip(u, v):
        res = res + x * y
    return res


def scale(c: Rational, v: Vector) -> Vector:
    return tuple(c * x for x in v)


def subtract(u: Vector, v: Vector) -> Vector:
    _check_same_length(u, v)
    return tuple(x - y for x, y in zip(u, v))


def add(u: Vector, v: Vector) -> Vector:
    _check_same_length(u, v)
    return tuple(x + y for x, y in zip(u, v))

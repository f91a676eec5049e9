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

"""Reading the inputs of a partial key exposure attack."""

import logging
import os
import re
from typing import Union

import attrs

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class ConfigurationError(ValueError):
    """Raised when the attack inputs are missing or malformed."""


@attrs.frozen
class AttackRecord:
    r"""The public data of an attack on an RSA modulus with a partially known factor.

    Attributes:
        n: The RSA modulus.
        d: The public exponent.
        p0: An approximation of a secret factor $p$ of $n$.
        bound: The bound $X$ on $|p - p_0|$.
    """

    n: int
    d: int
    p0: int
    bound: int


def parse_record(text: str) -> AttackRecord:
    """Parses the first line of `text` as `n, d, p0, X`.

    Tokens are separated by commas and surrounded by optional whitespace. Empty
    tokens are ignored.

    Raises:
        ConfigurationError: If the line doesn't hold exactly four decimal integers.
    """
    lines = text.splitlines()
    line = lines[0] if lines else ""
    tokens = [t.strip() for t in line.split(",")]
    tokens = [t for t in tokens if t]
    if len(tokens) != 4:
        raise ConfigurationError(f"Expected 4 numbers in the record, found {len(tokens)}")
    for name, token in zip(("n", "d", "p0", "X"), tokens):
        if not _INTEGER.fullmatch(token):
            raise ConfigurationError(f"Failed to parse {name}: {token[:50]!r} is not an integer")
        logger.info("%s: %d digits", name, len(token.lstrip("+-")))
    n, d, p0, bound = (int(t) for t in tokens)
    return AttackRecord(n=n, d=d, p0=p0, bound=bound)


def read_record(path: Union[str, os.PathLike]) -> AttackRecord:
    """Reads an `AttackRecord` from a file."""
    try:
        with open(path) as f:
            text = f.read()
    except OSError as e:
        raise ConfigurationError(f"Could not open file: {path}") from e
    return parse_record(text)

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

"""Recovers an RSA key from a partially known factor and optionally decrypts a message.

Usage:
    python -m smallroots.coppersmith RECORD [--ciphertext C] [--delta 9999/10000] [-v]
"""

import argparse
import fractions
import logging
import sys
from typing import Optional, Sequence

from smallroots import coppersmith, lattice
from smallroots.rings import Rational

logger = logging.getLogger(__name__)


def _parse_delta(s: str) -> Rational:
    try:
        delta = Rational.of(fractions.Fraction(s))
    except (ValueError, ZeroDivisionError) as e:
        raise argparse.ArgumentTypeError(f"invalid delta {s!r}: {e}") from e
    if not Rational(1, 4) < delta <= 1:
        raise argparse.ArgumentTypeError(f"delta must be in (1/4, 1], got {delta}")
    return delta


def _parse_int(s: str) -> int:
    try:
        return int(s.strip())
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer {s[:50]!r}") from e


def _read_ciphertext(path: str) -> int:
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise coppersmith.ConfigurationError(f"Could not read file: {path}") from e
    digits = "".join(text.split())
    if not (digits.isascii() and digits.isdecimal()):
        raise coppersmith.ConfigurationError(f"{path} doesn't hold a decimal integer")
    return int(digits)


def _make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="python -m smallroots.coppersmith", description=__doc__)
    p.add_argument("record", help="file whose first line is 'n, d, p0, X'")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--ciphertext", type=_parse_int, help="ciphertext to decrypt")
    group.add_argument("--ciphertext-file", help="file holding the ciphertext in decimal")
    p.add_argument(
        "--delta",
        type=_parse_delta,
        default=lattice.DEFAULT_DELTA,
        help="LLL reduction parameter as a fraction (default: %(default)s)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="log progress")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _make_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        record = coppersmith.read_record(args.record)
        ciphertext = args.ciphertext
        if args.ciphertext_file is not None:
            ciphertext = _read_ciphertext(args.ciphertext_file)
        key = coppersmith.recover_factor(record, args.delta)
        e = key.e
        message = None if ciphertext is None else coppersmith.decrypt(ciphertext, key)
    except coppersmith.ConfigurationError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 2
    except (ArithmeticError, RuntimeError, ValueError) as ex:
        logger.debug("Attack failed", exc_info=True)
        print(f"attack failed: {ex}", file=sys.stderr)
        return 1

    print(f"p = {key.p}")
    print(f"q = {key.q}")
    print(f"p * q == n: {key.p * key.q == record.n}")
    print(f"e = {e}")
    if message is not None:
        print(f"message (int) = {message}")
        print(f"message = {coppersmith.int_to_text(message)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

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

import attrs

from smallroots import ntheory


@attrs.frozen
class RSAKey:
    r"""An RSA modulus $n = p q$ together with its factors and the supplied exponent $d$.

    The other exponent $e = d^{-1} \bmod \varphi(n)$ is derived, so that
    $(m^d)^e \equiv m \pmod n$.
    """

    n: int
    p: int
    q: int
    d: int

    def __attrs_post_init__(self):
        if self.p * self.q != self.n:
            raise ValueError(f"p * q != n for {self.p=}, {self.q=}")

    @property
    def phi(self) -> int:
        return (self.p - 1) * (self.q - 1)

    @property
    def e(self) -> int:
        return ntheory.mod_inverse(self.d, self.phi)


def decrypt(ciphertext: int, key: RSAKey) -> int:
    r"""Returns $c^e \bmod n$."""
    return pow(ciphertext, key.e, key.n)


def int_to_text(m: int) -> str:
    """Decodes a message encoded as a big-endian base 256 integer."""
    if m < 0:
        raise ValueError(f"Can't decode a negative integer {m}")
    return m.to_bytes((m.bit_length() + 7) // 8, "big").decode("latin-1")

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

from smallroots.coppersmith import _record

# A Mersenne prime, large enough that a factor 3 * P leaves room for a 10**6 bound.
P = 2**89 - 1
Q = 3
D = 65537


def make_record(
    p: int = P, q: int = Q, offset: int = 123456, bound: int = 10**6, d: int = D
) -> _record.AttackRecord:
    """Returns a record whose approximation is `p - offset`."""
    return _record.AttackRecord(n=p * q, d=d, p0=p - offset, bound=bound)


def record_text(record: _record.AttackRecord) -> str:
    return f"{record.n}, {record.d}, {record.p0}, {record.bound}\n"

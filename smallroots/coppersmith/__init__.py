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

from smallroots.coppersmith._attack import (
    coppersmith_basis,
    FactorNotFoundError,
    integer_roots,
    recover_factor,
)
from smallroots.coppersmith._record import (
    AttackRecord,
    ConfigurationError,
    parse_record,
    read_record,
)
from smallroots.coppersmith._rsa import decrypt, int_to_text, RSAKey

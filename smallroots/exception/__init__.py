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

"""Exceptions that may be raised by smallroots."""

from smallroots.coppersmith._attack import FactorNotFoundError
from smallroots.coppersmith._record import ConfigurationError
from smallroots.lattice._gram_schmidt import LinearlyDependentInputError
from smallroots.lattice._lll import NonTerminationError
from smallroots.lattice._scaled import InvalidScalingError
from smallroots.ntheory._euclid import NotInvertibleError
from smallroots.rings._rational import DivisionByZeroError

__all__ = [
    'ConfigurationError',
    'DivisionByZeroError',
    'FactorNotFoundError',
    'InvalidScalingError',
    'LinearlyDependentInputError',
    'NonTerminationError',
    'NotInvertibleError',
]

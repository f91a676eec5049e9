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

"""A package that provides exact lattice basis reduction."""

from smallroots.lattice._gram_schmidt import (
    gram_schmidt,
    GramSchmidtResult,
    LinearlyDependentInputError,
)
from smallroots.lattice._lll import (
    DEFAULT_DELTA,
    DEFAULT_MAX_ITERATIONS,
    is_lll_reduced,
    lll_reduce,
    LLLState,
    lovasz_condition,
    NonTerminationError,
)
from smallroots.lattice._scaled import InvalidScalingError, lll_scaled
from smallroots.lattice._vectors import add, Basis, dot, scale, subtract, to_basis, to_vector, Vector

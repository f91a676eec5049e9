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

from typing import Union

import numpy as np
from typing_extensions import TypeIs

# numpy integers show up when bases are built with numpy, so accept them alongside int.
Integral = Union[int, np.integer]


def is_int(x) -> TypeIs[Integral]:
    return isinstance(x, (int, np.integer))

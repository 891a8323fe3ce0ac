from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import numpy as np

# typing only
FnValue: TypeAlias = "float | np.floating"
ScalarFn: TypeAlias = "Callable[[float], FnValue]"

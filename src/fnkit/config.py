"""Environment-driven settings, read once at import time."""

from __future__ import annotations

import os
from typing import Final

CLASS_CACHE_MAX: Final[int] = max(1, int(os.environ.get("FNKIT_CLASS_CACHE_MAX", "256")))

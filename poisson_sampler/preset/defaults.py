# ========================
# file: poisson_sampler/preset/defaults.py
# ========================
from __future__ import annotations
import os
from typing import Any, Dict

from ..core.constants import MAX_ATTEMPTS

# Базовый пресет: всё, чего нет в JSON, берётся отсюда
DEFAULT_PRESET: Dict[str, Any] = {
    "id": "default",
    "radius": 1.0,
    "extent": {
        "bottom_left": [0.0, 0.0],
        "top_right": [10.0, 10.0],
    },
    "max_attempts": MAX_ATTEMPTS,
    # None -> случайный сид от ОС
    "seed": None,
}

# Папка со встроенными JSON-пресетами
BUILTIN_PRESETS_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data", "presets"
)

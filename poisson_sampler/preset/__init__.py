# ========================
# file: poisson_sampler/preset/__init__.py
# ========================
from .model import SamplingPreset
from .loader import load_preset, deep_merge
from .defaults import DEFAULT_PRESET
from .errors import PresetError, ValidationError, NotFoundError
from .registry import list_preset_ids

__all__ = [
    "SamplingPreset",
    "load_preset",
    "deep_merge",
    "list_preset_ids",
    "DEFAULT_PRESET",
    "PresetError",
    "ValidationError",
    "NotFoundError",
]

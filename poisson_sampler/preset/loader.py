# ========================
# file: poisson_sampler/preset/loader.py
# ========================
from __future__ import annotations
import os
import json
import copy
from typing import Any, Dict, Union, Mapping

from .defaults import DEFAULT_PRESET
from .model import SamplingPreset
from .registry import resolve_preset_path
from .validators import validate_dict


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_preset(
    source: Union[str, Dict[str, Any]], overrides: Mapping[str, Any] | None = None
) -> SamplingPreset:
    """Load a preset from id/path/dict, merge with defaults and apply overrides.

    Args:
        source: preset id (e.g., 'dense'), or file path to JSON, or raw dict
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        SamplingPreset (immutable dataclass) ready for use
    """
    if isinstance(source, str):
        if os.path.isfile(source):
            data = _load_json_file(source)
        else:
            # treat as id
            path = resolve_preset_path(source)
            data = _load_json_file(path)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path/id or dict")

    merged = deep_merge(DEFAULT_PRESET, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)

    ext = merged["extent"]
    bl = ext["bottom_left"]
    tr = ext["top_right"]
    return SamplingPreset(
        id=merged["id"],
        radius=float(merged["radius"]),
        extent=((float(bl[0]), float(bl[1])), (float(tr[0]), float(tr[1]))),
        max_attempts=int(merged["max_attempts"]),
        seed=merged.get("seed"),
    )

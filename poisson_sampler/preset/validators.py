# ========================
# file: poisson_sampler/preset/validators.py
# ========================
from __future__ import annotations
import math
from typing import Any, Dict
from .errors import ValidationError


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def _as_pair(value: Any, name: str):
    _require(
        isinstance(value, (list, tuple)) and len(value) == 2,
        f"{name} must be a pair [x, y]",
    )
    try:
        x, y = float(value[0]), float(value[1])
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must contain numbers") from None
    _require(math.isfinite(x) and math.isfinite(y), f"{name} must be finite")
    return x, y


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validate a merged preset dict.

    Raises ValidationError on the first failing check.
    """
    _require(
        isinstance(cfg.get("id"), str) and cfg["id"],
        "Preset.id must be non-empty string",
    )

    try:
        radius = float(cfg.get("radius", 0.0))
    except (TypeError, ValueError):
        raise ValidationError("Preset.radius must be a number") from None
    _require(math.isfinite(radius) and radius > 0.0, "Preset.radius must be finite and > 0")

    ext = cfg.get("extent")
    _require(isinstance(ext, dict), "Preset.extent must be an object")
    bx, by = _as_pair(ext.get("bottom_left"), "extent.bottom_left")
    tx, ty = _as_pair(ext.get("top_right"), "extent.top_right")
    _require(bx < tx and by < ty, "extent.bottom_left must be < extent.top_right on both axes")

    attempts = cfg.get("max_attempts")
    _require(
        isinstance(attempts, int) and not isinstance(attempts, bool) and attempts >= 1,
        "Preset.max_attempts must be an int >= 1",
    )

    seed = cfg.get("seed")
    if seed is not None:
        _require(
            isinstance(seed, int) and not isinstance(seed, bool) and seed >= 0,
            "Preset.seed must be null or a non-negative int",
        )

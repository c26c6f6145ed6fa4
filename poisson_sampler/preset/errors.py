# ========================
# file: poisson_sampler/preset/errors.py
# ========================
class PresetError(Exception):
    """Base error for preset system."""


class ValidationError(PresetError):
    """Raised when a preset fails validation."""


class NotFoundError(PresetError):
    """Raised when a preset id or path cannot be resolved."""

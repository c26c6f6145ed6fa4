# ==============================================================================
# Файл: poisson_sampler/core/errors.py
# Назначение: Исключения сэмплера.
# ==============================================================================


class SamplingError(Exception):
    """Base error for the sampling pipeline."""


class SeedPlacementError(SamplingError):
    """Raised when the seed point cannot be placed strictly inside the domain."""


class GridInconsistencyError(SamplingError):
    """Raised when an active-set entry points to an empty grid cell."""

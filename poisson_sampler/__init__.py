# ==============================================================================
# Файл: poisson_sampler/__init__.py
# Назначение: Публичное API сэмплера Poisson-disk (blue noise) в 2D.
# ==============================================================================
from .core.errors import GridInconsistencyError, SamplingError, SeedPlacementError
from .core.types import Extent, Point, PoissonDiskAlgorithm
from .numerics.distributions import AnnulusDistribution
from .algorithms.grid import Grid
from .algorithms.bridson import RobertBridson
from .sampler import PoissonDisk, sample_from_preset, sample_points
from .preset import PresetError, SamplingPreset, ValidationError, NotFoundError, load_preset
from .utils.metrics import compute_metrics

__all__ = [
    "AnnulusDistribution",
    "Grid",
    "RobertBridson",
    "PoissonDiskAlgorithm",
    "PoissonDisk",
    "sample_points",
    "sample_from_preset",
    "SamplingPreset",
    "load_preset",
    "compute_metrics",
    "Point",
    "Extent",
    "SamplingError",
    "SeedPlacementError",
    "GridInconsistencyError",
    "PresetError",
    "ValidationError",
    "NotFoundError",
]

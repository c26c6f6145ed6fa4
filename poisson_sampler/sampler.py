# ==============================================================================
# Файл: poisson_sampler/sampler.py
# Назначение: Ленивая последовательность точек поверх PoissonDiskAlgorithm.
# ==============================================================================
from __future__ import annotations
import logging
import time
from typing import TYPE_CHECKING, Generic, Iterator, Optional, TypeVar

import numpy as np

from .algorithms.bridson import RobertBridson
from .core import constants as const
from .core.types import Extent, Point, PoissonDiskAlgorithm

if TYPE_CHECKING:
    from .preset.model import SamplingPreset

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=PoissonDiskAlgorithm)


class PoissonDisk(Generic[A]):
    """
    Однопроходный итератор точек.

    Первый шаг вызывает algorithm.init(), все последующие - algorithm.next().
    После первого None итератор навсегда исчерпан; перезапуска нет.
    """

    def __init__(self, rng: np.random.Generator, algorithm: A):
        self.rng = rng
        self.algorithm = algorithm
        self._initialized = False
        self._finished = False

    def pull(self) -> Optional[Point]:
        """Один шаг: точка или None (конец последовательности)."""
        if self._finished:
            return None
        if not self._initialized:
            # если init() упал, следующий шаг снова пробует init()
            point = self.algorithm.init(self.rng)
            self._initialized = True
        else:
            point = self.algorithm.next(self.rng)
        if point is None:
            self._finished = True
        return point

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        point = self.pull()
        if point is None:
            raise StopIteration
        return point


def sample_points(
        radius: float,
        extent: Extent,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        max_attempts: int = const.MAX_ATTEMPTS,
) -> np.ndarray:
    """Полная сессия выборки; возвращает массив (N, 2) в порядке генерации.

    Передаётся либо seed, либо готовый rng, но не оба сразу.
    """
    if rng is not None and seed is not None:
        raise ValueError("pass either seed or rng, not both")
    if rng is None:
        rng = np.random.default_rng(seed)

    t_start = time.perf_counter()
    algo = RobertBridson(radius, extent, max_attempts=max_attempts)
    points = list(PoissonDisk(rng, algo))

    logger.info(
        f"Poisson-disk: {len(points)} точек (r={radius}) за "
        f"{(time.perf_counter() - t_start) * 1000:.1f} мс."
    )
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(points, dtype=np.float64)


def sample_from_preset(preset: "SamplingPreset", seed: Optional[int] = None) -> np.ndarray:
    """Запускает выборку по параметрам пресета (seed из аргумента важнее пресета)."""
    return sample_points(
        preset.radius,
        preset.extent,
        seed=preset.seed if seed is None else seed,
        max_attempts=preset.max_attempts,
    )

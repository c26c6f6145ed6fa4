# ======================================================================
# Файл: poisson_sampler/algorithms/bridson.py
# Назначение: Алгоритм Бридсона (dart-throwing с активным списком).
# См. https://www.cs.ubc.ca/~rbridson/docs/bridson-siggraph07-poissondisk.pdf
# ======================================================================
from __future__ import annotations
import logging
import math
from typing import List, Optional

import numpy as np

from ..core import constants as const
from ..core.errors import GridInconsistencyError, SamplingError, SeedPlacementError
from ..core.types import Extent, Point, as_extent, vec_add
from ..numerics.distributions import AnnulusDistribution, uniform_in_box
from .grid import Grid

logger = logging.getLogger(__name__)


class RobertBridson:
    """
    Реализация PoissonDiskAlgorithm.

    Активный список хранит только индексы клеток сетки; сами координаты
    живут в Grid. Удаление из списка - swap-with-last, порядок не важен.
    """

    def __init__(self, radius: float, extent: Extent, max_attempts: int = const.MAX_ATTEMPTS):
        radius = float(radius)
        (bx, by), (tx, ty) = as_extent(extent)
        if not (math.isfinite(radius) and radius > 0.0):
            raise ValueError(f"radius must be finite and > 0, got {radius}")
        if not all(math.isfinite(v) for v in (bx, by, tx, ty)):
            raise ValueError(f"extent must be finite, got {((bx, by), (tx, ty))}")
        if not (bx < tx and by < ty):
            raise ValueError(
                f"extent must satisfy bottom_left < top_right, got {((bx, by), (tx, ty))}"
            )
        if int(max_attempts) < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

        self.radius = radius
        self.bottom_left: Point = (bx, by)
        self.top_right: Point = (tx, ty)
        self.max_attempts = int(max_attempts)

        self.grid = Grid(radius, (self.bottom_left, self.top_right))
        self.indices: List[int] = []
        self.annulus_distr = AnnulusDistribution(radius, 2.0 * radius)

        self._started = False
        # счётчики для логов
        self.accepted = 0
        self.rejected = 0

    @property
    def state(self) -> str:
        if not self._started:
            return const.STATE_NOT_STARTED
        return const.STATE_ACTIVE if self.indices else const.STATE_EXHAUSTED

    @property
    def active_count(self) -> int:
        return len(self.indices)

    def init(self, rng: np.random.Generator) -> Optional[Point]:
        """Ставит стартовую точку. Вызывается ровно один раз."""
        if self._started:
            raise SamplingError("init() must be called only once per session")

        # rng.uniform полуоткрыт: bottom_left достижим, а сетка требует строгой вложенности
        for _ in range(const.SEED_RESAMPLE_LIMIT):
            x0 = uniform_in_box(rng, self.bottom_left, self.top_right)
            index = self.grid.insert(x0)
            if index is not None:
                break
        else:
            raise SeedPlacementError(
                f"could not place a seed strictly inside {self.bottom_left}-{self.top_right} "
                f"after {const.SEED_RESAMPLE_LIMIT} draws"
            )

        self._started = True
        self.indices.append(index)
        self.accepted += 1
        logger.debug("Seed point %s placed in cell %d", x0, index)
        return x0

    def next(self, rng: np.random.Generator) -> Optional[Point]:
        """Следующая принятая точка или None, когда активный список пуст."""
        if not self._started:
            raise SamplingError("next() called before init()")

        while self.indices:
            slot = int(rng.integers(0, len(self.indices)))
            xi = self.grid.get(self.indices[slot])
            if xi is None:
                raise GridInconsistencyError(
                    f"active slot {slot} references empty grid cell {self.indices[slot]}"
                )

            for _ in range(self.max_attempts):
                x = vec_add(xi, self.annulus_distr.sample(rng))
                if self.grid.can_insert(x):
                    self.indices.append(self.grid.insert(x))
                    self.accepted += 1
                    return x

            # все попытки провалились - точка больше не активна
            self.indices[slot] = self.indices[-1]
            self.indices.pop()
            self.rejected += 1
            logger.debug("Active point %s exhausted, %d left", xi, len(self.indices))

        return None

# ======================================================================
# Файл: poisson_sampler/numerics/distributions.py
# Назначение: Распределения для выборки кандидатов (кольцо, прямоугольник).
# ======================================================================
from __future__ import annotations
import math

import numpy as np

from ..core.constants import TAU
from ..core.types import Point


class AnnulusDistribution:
    """
    Равномерное по площади распределение смещений в кольце [low, high].

    Радиус берётся через квадрат: r = sqrt(U(low^2, high^2)), плотность
    точек на единицу площади одинакова по всему кольцу.
    """

    def __init__(self, low: float, high: float):
        self.low = float(low)
        self.high = float(high)
        self._r2_low = self.low * self.low
        self._r2_high = self.high * self.high

    def sample(self, rng: np.random.Generator) -> Point:
        r = math.sqrt(rng.uniform(self._r2_low, self._r2_high))
        angle = rng.uniform(0.0, TAU)
        return r * math.cos(angle), r * math.sin(angle)

    def sample_many(self, rng: np.random.Generator, n: int) -> np.ndarray:
        """Векторная версия sample(): массив смещений формы (n, 2)."""
        r = np.sqrt(rng.uniform(self._r2_low, self._r2_high, size=n))
        angle = rng.uniform(0.0, TAU, size=n)
        return np.stack((r * np.cos(angle), r * np.sin(angle)), axis=1)

    def __repr__(self) -> str:
        return f"AnnulusDistribution(low={self.low}, high={self.high})"


def uniform_in_box(rng: np.random.Generator, bottom_left: Point, top_right: Point) -> Point:
    """Равномерная точка в прямоугольнике [bottom_left, top_right)."""
    x, y = rng.uniform(bottom_left, top_right)
    return float(x), float(y)

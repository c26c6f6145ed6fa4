# poisson_sampler/core/types.py
from __future__ import annotations
from typing import Optional, Protocol, Tuple

import numpy as np

# Точка - обычный кортеж (x, y) из float
Point = Tuple[float, float]
# Область выборки: (bottom_left, top_right)
Extent = Tuple[Point, Point]


def as_point(v) -> Point:
    """Приводит tuple/list/np.ndarray к кортежу (x, y) из python float."""
    return float(v[0]), float(v[1])


def as_extent(extent) -> Extent:
    bottom_left, top_right = extent
    return as_point(bottom_left), as_point(top_right)


def vec_add(a: Point, b: Point) -> Point:
    return a[0] + b[0], a[1] + b[1]


def vec_sub(a: Point, b: Point) -> Point:
    return a[0] - b[0], a[1] - b[1]


def length_squared(v: Point) -> float:
    return v[0] * v[0] + v[1] * v[1]


class PoissonDiskAlgorithm(Protocol):
    """Интерфейс, который должен реализовывать любой алгоритм Poisson-disk.

    init() вызывается ровно один раз, затем next() - пока не вернёт None.
    """

    def init(self, rng: np.random.Generator) -> Optional[Point]: ...
    def next(self, rng: np.random.Generator) -> Optional[Point]: ...

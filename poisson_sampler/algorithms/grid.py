# ======================================================================
# Файл: poisson_sampler/algorithms/grid.py
# Назначение: Равномерная сетка-ускоритель для проверки минимального расстояния.
# ======================================================================
from __future__ import annotations
import math
from typing import Optional, Tuple

import numpy as np

from ..core.constants import CELL_SIZE_FACTOR, NEIGHBOUR_CELLS
from ..core.types import Extent, Point, as_extent
from ..numerics.grid_kernels import has_close_neighbour


class Grid:
    """
    Плоский массив клеток размера width * height, в каждой не больше одной точки.

    Клетки адресуются индексом col + row * width. Клетки никогда не очищаются,
    поэтому индексы, выданные insert(), остаются валидными всю сессию.
    """

    def __init__(self, radius: float, extent: Extent):
        (bx, by), (tx, ty) = as_extent(extent)
        self.radius = float(radius)
        self.cell_size = self.radius * CELL_SIZE_FACTOR
        self.bottom_left: Point = (bx, by)
        self.top_right: Point = (tx, ty)

        self.width = int(math.ceil((tx - bx) / self.cell_size))
        self.height = int(math.ceil((ty - by) / self.cell_size))

        n = self.width * self.height
        self.xs = np.zeros(n, dtype=np.float64)
        self.ys = np.zeros(n, dtype=np.float64)
        self.occupied = np.zeros(n, dtype=np.bool_)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.width, self.height

    def __len__(self) -> int:
        return int(np.count_nonzero(self.occupied))

    def get_cell(self, pos: Point) -> Optional[Tuple[int, int]]:
        """(col, row) клетки или None, если точка на границе или снаружи."""
        x, y = pos
        bx, by = self.bottom_left
        tx, ty = self.top_right
        if x >= tx or x <= bx or y >= ty or y <= by:
            return None

        col = int(math.floor((x - bx) / self.cell_size))
        row = int(math.floor((y - by) / self.cell_size))
        # x < tx, но деление может округлиться ровно до width
        return min(col, self.width - 1), min(row, self.height - 1)

    def get_index(self, pos: Point) -> Optional[int]:
        cell = self.get_cell(pos)
        if cell is None:
            return None
        col, row = cell
        return col + row * self.width

    def insert(self, pos: Point) -> Optional[int]:
        """Записывает точку в её клетку (старый жилец перезаписывается)."""
        index = self.get_index(pos)
        if index is None:
            return None
        self.xs[index] = pos[0]
        self.ys[index] = pos[1]
        self.occupied[index] = True
        return index

    def get(self, index: int) -> Optional[Point]:
        if index < 0 or index >= self.occupied.size or not self.occupied[index]:
            return None
        return float(self.xs[index]), float(self.ys[index])

    def can_insert(self, pos: Point) -> bool:
        cell = self.get_cell(pos)
        if cell is None:
            return False
        col, row = cell
        return not has_close_neighbour(
            self.xs, self.ys, self.occupied,
            self.width, self.height,
            col, row, NEIGHBOUR_CELLS,
            float(pos[0]), float(pos[1]), self.radius * self.radius,
        )

    def points(self) -> np.ndarray:
        """Все занятые клетки в порядке индексов, массив (N, 2)."""
        mask = self.occupied
        return np.stack((self.xs[mask], self.ys[mask]), axis=1)

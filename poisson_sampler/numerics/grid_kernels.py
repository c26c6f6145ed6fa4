# ======================================================================
# Файл: poisson_sampler/numerics/grid_kernels.py
# Назначение: Быстрые Numba-ядра для запросов к равномерной сетке.
# ======================================================================
from __future__ import annotations
import numpy as np
from numba import njit


@njit(cache=True)
def has_close_neighbour(
        xs: np.ndarray, ys: np.ndarray, occupied: np.ndarray,
        width: int, height: int,
        col: int, row: int, reach: int,
        px: float, py: float, r2: float,
) -> bool:
    """True, если в окрестности (col, row) +- reach есть точка ближе sqrt(r2)."""
    c0 = col - reach
    if c0 < 0: c0 = 0
    c1 = col + reach
    if c1 > width - 1: c1 = width - 1
    r0 = row - reach
    if r0 < 0: r0 = 0
    r1 = row + reach
    if r1 > height - 1: r1 = height - 1

    for j in range(r0, r1 + 1):
        base = j * width
        for i in range(c0, c1 + 1):
            idx = base + i
            if occupied[idx]:
                dx = xs[idx] - px
                dy = ys[idx] - py
                # граница включительно: точка ровно на расстоянии r тоже мешает
                if dx * dx + dy * dy <= r2:
                    return True
    return False

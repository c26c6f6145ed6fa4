# ==============================================================================
# Файл: tests/test_grid.py
# Назначение: Юнит-тесты равномерной сетки (адресация, вставка, запросы близости).
# ==============================================================================
import unittest
import math
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from poisson_sampler.algorithms.grid import Grid


class TestGrid(unittest.TestCase):
    """Сетка r = 1 на области 10 x 10: клетка 1/sqrt(2), 15 x 15 клеток."""

    def setUp(self):
        self.grid = Grid(1.0, ((0.0, 0.0), (10.0, 10.0)))

    def test_dimensions(self):
        self.assertAlmostEqual(self.grid.cell_size, 1.0 / math.sqrt(2.0))
        self.assertEqual(self.grid.shape, (15, 15))
        self.assertEqual(self.grid.occupied.size, 15 * 15)
        self.assertEqual(len(self.grid), 0)

    def test_get_cell_rejects_boundaries(self):
        print("\n[TEST] Running test_get_cell_rejects_boundaries...")
        for pos in [(0.0, 5.0), (10.0, 5.0), (5.0, 0.0), (5.0, 10.0),
                    (-1.0, 5.0), (5.0, 11.0), (0.0, 0.0), (10.0, 10.0)]:
            self.assertIsNone(self.grid.get_cell(pos), f"{pos} must be out of bounds")
            self.assertIsNone(self.grid.insert(pos))
            self.assertFalse(self.grid.can_insert(pos))
        print("[TEST] test_get_cell_rejects_boundaries: OK")

    def test_get_cell_inside(self):
        self.assertEqual(self.grid.get_cell((0.5, 0.5)), (0, 0))
        self.assertEqual(self.grid.get_cell((5.0, 5.0)), (7, 7))
        self.assertEqual(self.grid.get_cell((9.999, 0.001)), (14, 0))

    def test_insert_and_get(self):
        index = self.grid.insert((5.0, 5.0))
        self.assertEqual(index, 7 + 7 * 15)
        self.assertEqual(self.grid.get(index), (5.0, 5.0))
        self.assertEqual(len(self.grid), 1)

    def test_get_empty_or_out_of_range(self):
        self.assertIsNone(self.grid.get(0))
        self.assertIsNone(self.grid.get(-1))
        self.assertIsNone(self.grid.get(15 * 15))

    def test_insert_overwrites_same_cell(self):
        first = self.grid.insert((5.0, 5.0))
        second = self.grid.insert((5.1, 5.1))
        self.assertEqual(first, second)
        self.assertEqual(self.grid.get(first), (5.1, 5.1))
        self.assertEqual(len(self.grid), 1)

    def test_can_insert_respects_radius(self):
        print("\n[TEST] Running test_can_insert_respects_radius...")
        self.grid.insert((5.0, 5.0))

        # ближе радиуса - в той же и в соседних клетках
        self.assertFalse(self.grid.can_insert((5.2, 5.0)))
        self.assertFalse(self.grid.can_insert((5.9, 5.0)))
        self.assertFalse(self.grid.can_insert((4.4, 4.4)))
        # ровно на расстоянии r - тоже нельзя
        self.assertFalse(self.grid.can_insert((6.0, 5.0)))
        # чуть дальше r - можно
        self.assertTrue(self.grid.can_insert((6.01, 5.0)))
        self.assertTrue(self.grid.can_insert((5.0, 3.95)))
        # далеко - можно
        self.assertTrue(self.grid.can_insert((8.0, 8.0)))
        print("[TEST] test_can_insert_respects_radius: OK")

    def test_can_insert_finds_any_neighbour_closer_than_radius(self):
        """Перебор направлений: любой q ближе r к p отвергается."""
        p = (5.0, 5.0)
        self.grid.insert(p)
        for k in range(36):
            angle = 2.0 * math.pi * k / 36
            for d in (0.3, 0.7, 0.99):
                q = (p[0] + d * math.cos(angle), p[1] + d * math.sin(angle))
                self.assertFalse(self.grid.can_insert(q), f"{q} is {d} from {p}")
            q = (p[0] + 1.05 * math.cos(angle), p[1] + 1.05 * math.sin(angle))
            self.assertTrue(self.grid.can_insert(q))

    def test_can_insert_near_domain_corner(self):
        self.grid.insert((9.6, 9.6))
        self.assertFalse(self.grid.can_insert((9.99, 9.99)))
        self.grid.insert((0.2, 0.2))
        self.assertFalse(self.grid.can_insert((0.01, 0.9)))
        self.assertTrue(self.grid.can_insert((0.01, 1.5)))

    def test_points_array(self):
        self.grid.insert((1.0, 1.0))
        self.grid.insert((8.0, 2.0))
        pts = self.grid.points()
        self.assertEqual(pts.shape, (2, 2))
        self.assertTrue(np.allclose(sorted(map(tuple, pts)), [(1.0, 1.0), (8.0, 2.0)]))

    def test_offset_domain(self):
        grid = Grid(2.0, ((-10.0, 5.0), (-4.0, 9.0)))
        self.assertIsNone(grid.get_cell((-10.0, 6.0)))
        self.assertEqual(grid.get_cell((-9.9, 5.1)), (0, 0))
        index = grid.insert((-7.0, 7.0))
        self.assertIsNotNone(index)
        self.assertFalse(grid.can_insert((-7.0, 8.5)))
        self.assertTrue(grid.can_insert((-4.5, 5.5)))


if __name__ == '__main__':
    unittest.main()

"""
Unit tests for the randomized backtracking carver
"""

import unittest
from unittest import mock
import numpy as np
from labyrinth import carver
from labyrinth.carver import carve, make_rng, neighbors_4, prune_contacts
from labyrinth.errors import OutOfBounds, UnreachableTarget
from tests.helpers import check_simple_path


def blank(H, W):
    return np.zeros((H, W), dtype=np.uint8)


class TestNeighbors(unittest.TestCase):
    """Axis-aligned neighbour generation"""

    def test_corner_has_two(self):
        self.assertEqual(sorted(neighbors_4((0, 0), 3, 3)), [(0, 1), (1, 0)])

    def test_interior_has_four(self):
        self.assertEqual(len(list(neighbors_4((1, 1), 3, 3))), 4)

    def test_single_cell_grid(self):
        self.assertEqual(list(neighbors_4((0, 0), 1, 1)), [])


class TestPruneContacts(unittest.TestCase):
    """Shortcutting walks that touch themselves"""

    def test_u_turn_is_shortcut(self):
        walk = [(0, 0), (0, 1), (1, 1), (1, 0), (2, 0)]
        self.assertEqual(prune_contacts(walk), [(0, 0), (1, 0), (2, 0)])

    def test_straight_walk_unchanged(self):
        walk = [(0, c) for c in range(6)]
        self.assertEqual(prune_contacts(walk), walk)

    def test_short_walks_unchanged(self):
        self.assertEqual(prune_contacts([(0, 0)]), [(0, 0)])
        self.assertEqual(prune_contacts([(0, 0), (0, 1)]), [(0, 0), (0, 1)])


class TestCarveCorrectness(unittest.TestCase):
    """Carved cells form one simple path"""

    def test_corner_to_corner(self):
        grid = blank(100, 100)
        path = carve(grid, (0, 0), (99, 99), make_rng(7))
        cells = check_simple_path(self, grid, (0, 0), (99, 99))
        self.assertEqual(len(cells), len(path))
        self.assertGreaterEqual(len(path), 199)
        self.assertLessEqual(len(path), 100 * 100)

    def test_returned_path_is_ordered(self):
        grid = blank(15, 20)
        path = carve(grid, (3, 4), (11, 17), make_rng(3))
        self.assertEqual(path[0], (3, 4))
        self.assertEqual(path[-1], (11, 17))
        for (r0, c0), (r1, c1) in zip(path, path[1:]):
            self.assertEqual(abs(r0 - r1) + abs(c0 - c1), 1)
        self.assertEqual(len(set(path)), len(path))

    def test_many_seeds_many_shapes(self):
        for seed in range(25):
            grid = blank(12, 9)
            carve(grid, (6, 0), (0, 8), make_rng(seed))
            check_simple_path(self, grid, (6, 0), (0, 8))

    def test_adjacent_start_end(self):
        grid = blank(5, 5)
        carve(grid, (2, 2), (2, 3), make_rng(1))
        check_simple_path(self, grid, (2, 2), (2, 3))

    def test_single_row_grid(self):
        grid = blank(1, 10)
        path = carve(grid, (0, 0), (0, 9), make_rng())
        self.assertEqual(path, [(0, c) for c in range(10)])
        self.assertTrue(grid.all())

    def test_start_equals_end(self):
        grid = blank(6, 6)
        path = carve(grid, (2, 3), (2, 3), make_rng(0))
        self.assertEqual(path, [(2, 3)])
        self.assertEqual(int(grid.sum()), 1)
        self.assertEqual(grid[2, 3], 1)

    def test_one_by_one(self):
        grid = blank(1, 1)
        carve(grid, (0, 0), (0, 0), make_rng(0))
        self.assertEqual(grid.tolist(), [[1]])

    def test_accepts_numpy_int_cells(self):
        grid = blank(4, 4)
        start = tuple(np.array([0, 0]))
        path = carve(grid, start, (3, 3), make_rng(2))
        self.assertIsInstance(path[0][0], int)


class TestCarveDeterminism(unittest.TestCase):
    """Seeded generators replay the same maze"""

    def test_same_seed_same_grid(self):
        a, b = blank(40, 30), blank(40, 30)
        pa = carve(a, (0, 0), (39, 29), make_rng(1234))
        pb = carve(b, (0, 0), (39, 29), make_rng(1234))
        self.assertTrue(np.array_equal(a, b))
        self.assertEqual(pa, pb)

    def test_unseeded_runs_differ(self):
        a, b = blank(30, 30), blank(30, 30)
        carve(a, (0, 0), (29, 29), make_rng())
        carve(b, (0, 0), (29, 29), make_rng())
        self.assertFalse(np.array_equal(a, b))


class TestCarveFailures(unittest.TestCase):
    """Rejected and exhausted carves"""

    def test_start_out_of_bounds_leaves_grid_untouched(self):
        grid = blank(5, 5)
        with self.assertRaises(OutOfBounds):
            carve(grid, (5, 0), (4, 4), make_rng(0))
        self.assertFalse(grid.any())

    def test_end_out_of_bounds(self):
        grid = blank(5, 5)
        with self.assertRaises(OutOfBounds):
            carve(grid, (0, 0), (0, -1), make_rng(0))
        self.assertFalse(grid.any())

    def test_dirty_grid_rejected(self):
        grid = blank(5, 5)
        grid[1, 1] = 1
        with self.assertRaises(ValueError):
            carve(grid, (0, 0), (4, 4), make_rng(0))

    def test_exhausted_stack_raises(self):
        grid = blank(4, 4)
        with mock.patch("labyrinth.carver.open_neighbors", return_value=[]):
            with self.assertRaises(UnreachableTarget):
                carve(grid, (0, 0), (3, 3), make_rng(0))
        self.assertEqual(grid[0, 0], 1)

    def test_exhausted_stack_keeps_partial_carve(self):
        real = carver.open_neighbors

        def avoid_end(u, H, W, visited):
            return [v for v in real(u, H, W, visited) if v != (3, 3)]

        grid = blank(4, 4)
        with mock.patch("labyrinth.carver.open_neighbors", side_effect=avoid_end):
            with self.assertRaises(UnreachableTarget):
                carve(grid, (0, 0), (3, 3), make_rng(5))
        self.assertEqual(int(grid.sum()), 15)
        self.assertEqual(grid[3, 3], 0)


if __name__ == '__main__':
    unittest.main()

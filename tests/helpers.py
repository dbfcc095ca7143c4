"""
Shared fixtures for maze tests
"""

import numpy as np
from labyrinth.models import Coordinate

# ~100 m x ~100 m box
SW = Coordinate(38.0, -77.0)
NE = Coordinate(38.0009, -76.9991)


def square_walk(lat0=38.0, lon0=-77.0, side_deg=0.0002):
    return [
        Coordinate(lat0, lon0),
        Coordinate(lat0, lon0 + side_deg),
        Coordinate(lat0 + side_deg, lon0 + side_deg),
        Coordinate(lat0 + side_deg, lon0),
    ]


def passable_neighbors(grid, cell):
    H, W = grid.shape
    r, c = cell
    n = 0
    for rr, cc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
        if 0 <= rr < H and 0 <= cc < W and grid[rr, cc] == 1:
            n += 1
    return n


def check_simple_path(testcase, grid, start, end):
    """Passable cells form one chordless 4-connected path from start to end."""
    cells = {tuple(int(v) for v in rc) for rc in np.argwhere(grid == 1)}
    testcase.assertTrue(set(np.unique(grid)).issubset({0, 1}))
    testcase.assertIn(start, cells)
    testcase.assertIn(end, cells)
    for cell in cells:
        deg = passable_neighbors(grid, cell)
        if cell in (start, end):
            testcase.assertEqual(deg, 1, f"endpoint {cell} has {deg} passable neighbours")
        else:
            testcase.assertEqual(deg, 2, f"cell {cell} has {deg} passable neighbours")

    # connected: walk from start reaches every passable cell
    seen = {start}
    frontier = [start]
    while frontier:
        r, c = frontier.pop()
        for v in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if v in cells and v not in seen:
                seen.add(v)
                frontier.append(v)
    testcase.assertEqual(seen, cells)
    return cells

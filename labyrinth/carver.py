# region Imports and Typing
from enum import Enum
import logging
from typing import Iterator, List, Optional, Sequence, Set
import numpy as np
from labyrinth.config import BLOCKED, PASSABLE
from labyrinth.errors import OutOfBounds, UnreachableTarget
from labyrinth.grid import in_bounds
from labyrinth.models import Cell
# endregion

logger = logging.getLogger(__name__)


class CarveState(Enum):
    EXPLORING = "exploring"
    BACKTRACKING = "backtracking"
    DONE = "done"


# region Neighbor Generation
def neighbors_4(u: Cell, H: int, W: int) -> Iterator[Cell]:
    r, c = u
    for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        rr, cc = r + dr, c + dc
        if 0 <= rr < H and 0 <= cc < W:
            yield (rr, cc)


def open_neighbors(u: Cell, H: int, W: int, visited: Set[Cell]) -> List[Cell]:
    return [v for v in neighbors_4(u, H, W) if v not in visited]
# endregion


# region Random Source
def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """One generator per carve call; seeded generators replay the same maze."""
    return np.random.default_rng(seed)
# endregion


# region Contact Pruning
def prune_contacts(path: Sequence[Cell]) -> List[Cell]:
    """Shortcut the walk wherever two non-consecutive cells touch side by side.

    From each kept cell jump to the furthest later cell adjacent to it, so no
    kept cell touches any kept cell other than its predecessor and successor.
    """
    if len(path) < 3:
        return list(path)
    index = {cell: i for i, cell in enumerate(path)}
    kept = [path[0]]
    i, last = 0, len(path) - 1
    while i < last:
        r, c = path[i]
        i = max(index.get(v, -1) for v in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
        kept.append(path[i])
    return kept
# endregion


# region Carving
def carve(
    grid: np.ndarray,
    start: Cell,
    end: Cell,
    rng: np.random.Generator,
) -> List[Cell]:
    """Carve one simple 4-connected path from start to end into a zero-filled grid.

    Randomized depth-first walk with an explicit stack: step to a random
    unvisited neighbour, pop back on dead ends. The grid is mutated in place
    and the carved cells are returned in order from start to end. If the end
    is never reached the visited cells are left marked and UnreachableTarget
    is raised.
    """
    H, W = grid.shape
    start = (int(start[0]), int(start[1]))
    end = (int(end[0]), int(end[1]))
    for name, cell in (("start", start), ("end", end)):
        if not in_bounds(cell, H, W):
            raise OutOfBounds(f"{name} cell {cell} outside {H}x{W} grid")
    if grid.any():
        raise ValueError("carve needs a freshly zero-filled grid")

    if start == end:
        grid[start] = PASSABLE
        return [start]

    stack: List[Cell] = [start]
    visited: Set[Cell] = set()
    state = CarveState.EXPLORING
    pushes = pops = 0

    while state is not CarveState.DONE:
        # region Exploring
        if state is CarveState.EXPLORING:
            u = stack[-1]
            grid[u] = PASSABLE
            visited.add(u)
            if u == end:
                state = CarveState.DONE
                continue
            nbrs = open_neighbors(u, H, W, visited)
            if nbrs:
                stack.append(nbrs[int(rng.integers(len(nbrs)))])
                pushes += 1
            else:
                state = CarveState.BACKTRACKING
        # endregion

        # region Backtracking
        else:
            stack.pop()
            pops += 1
            if not stack:
                logger.warning("carve exhausted %dx%d grid without reaching %s", H, W, end)
                raise UnreachableTarget(f"no path from {start} to {end} on {H}x{W} grid")
            if open_neighbors(stack[-1], H, W, visited):
                state = CarveState.EXPLORING
        # endregion

    # only the pruned walk stays carved; dead ends and shortcuts go back to blocked
    path = prune_contacts(stack)
    for cell in visited.difference(path):
        grid[cell] = BLOCKED

    logger.debug(
        "carved %d cells on %dx%d grid (%d pushes, %d pops, %d cleared)",
        len(path), H, W, pushes, pops, len(visited) - len(path),
    )
    return path
# endregion

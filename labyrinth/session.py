# region Imports
import logging
from typing import Iterable, Optional
import numpy as np
from labyrinth.carver import carve, make_rng
from labyrinth.config import DEFAULT_RESOLUTION_M
from labyrinth.errors import GridTooLarge
from labyrinth.geometry import as_coordinate
from labyrinth.grid import locate_factory, new_grid, rasterize
from labyrinth.models import MazeSession
# endregion

logger = logging.getLogger(__name__)


# region Session Builder
def generate_maze(
    path: Iterable,
    entry,
    exit,
    *,
    resolution_m: float = DEFAULT_RESOLUTION_M,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    max_cells: Optional[int] = None,
) -> MazeSession:
    """Rasterize a recorded path and carve a maze between entry and exit.

    All validation (path length, grid size, entry/exit bounds) happens before
    the grid is allocated. Every call returns a brand new session.
    """
    pts = tuple(as_coordinate(p) for p in path)
    entry = as_coordinate(entry)
    exit = as_coordinate(exit)

    bbox, spec, _ = rasterize(pts, resolution_m)
    if max_cells is not None and spec.n_cells > max_cells:
        raise GridTooLarge(
            f"{spec.rows}x{spec.cols} grid exceeds {max_cells} cells; "
            f"use a coarser resolution than {spec.resolution_m} m"
        )

    locate = locate_factory(bbox, spec)
    start = locate(entry)
    end = locate(exit)

    if rng is None:
        rng = make_rng(seed)
    grid = new_grid(spec)
    cells = carve(grid, start, end, rng)
    grid.setflags(write=False)

    logger.info(
        "maze %dx%d @ %.2f m/cell: %s -> %s, %d cells",
        spec.rows, spec.cols, spec.resolution_m, start, end, len(cells),
    )
    return MazeSession(
        path=pts,
        entry=entry,
        exit=exit,
        bbox=bbox,
        spec=spec,
        grid=grid,
        cells=tuple(cells),
        seed=seed,
    )
# endregion

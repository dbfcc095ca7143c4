# region Imports
import math
from typing import Callable, Sequence, Tuple
import numpy as np
from labyrinth.config import BLOCKED, DEFAULT_RESOLUTION_M, METERS_PER_DEGREE, MIN_PATH_POINTS
from labyrinth.errors import InsufficientData, OutOfBounds
from labyrinth.geometry import bounding_box, cells_along, m2deg
from labyrinth.models import Cell, Coordinate, GeoBoundingBox, GridSpec
# endregion


# region Grid Spec
def grid_spec(bbox: GeoBoundingBox, resolution_m: float = DEFAULT_RESOLUTION_M) -> GridSpec:
    if not (resolution_m > 0 and math.isfinite(resolution_m)):
        raise ValueError(f"resolution_m must be a positive finite number, got {resolution_m}")
    return GridSpec(
        rows=cells_along(bbox.lat_span, resolution_m),
        cols=cells_along(bbox.lon_span, resolution_m),
        resolution_m=float(resolution_m),
    )


def new_grid(spec: GridSpec) -> np.ndarray:
    return np.full(spec.shape, BLOCKED, dtype=np.uint8)


def in_bounds(cell: Cell, H: int, W: int) -> bool:
    r, c = cell
    return 0 <= r < H and 0 <= c < W
# endregion


# region Projection Factories
def project_factory(bbox: GeoBoundingBox, spec: GridSpec) -> Callable[[Coordinate], Cell]:
    scale = METERS_PER_DEGREE / spec.resolution_m

    def project(coord: Coordinate) -> Cell:
        r = int(math.floor((coord.lat - bbox.min_lat) * scale))
        c = int(math.floor((coord.lon - bbox.min_lon) * scale))
        r = max(0, min(spec.rows - 1, r))
        c = max(0, min(spec.cols - 1, c))
        return (r, c)

    return project


def locate_factory(bbox: GeoBoundingBox, spec: GridSpec) -> Callable[[Coordinate], Cell]:
    """Like the projection, but coordinates outside the bbox raise OutOfBounds."""
    project = project_factory(bbox, spec)

    def locate(coord: Coordinate) -> Cell:
        if not bbox.contains(coord):
            raise OutOfBounds(
                f"({coord.lat:.7f}, {coord.lon:.7f}) lies outside the recorded path bounds "
                f"lat [{bbox.min_lat:.7f}, {bbox.max_lat:.7f}] "
                f"lon [{bbox.min_lon:.7f}, {bbox.max_lon:.7f}]"
            )
        return project(coord)

    return locate


def cell_center_factory(bbox: GeoBoundingBox, spec: GridSpec) -> Callable[[int, int], Coordinate]:
    step = m2deg(spec.resolution_m)

    def f(r: int, c: int) -> Coordinate:
        lat = min(bbox.max_lat, bbox.min_lat + (r + 0.5) * step)
        lon = min(bbox.max_lon, bbox.min_lon + (c + 0.5) * step)
        return Coordinate(lat, lon)

    return f
# endregion


# region Rasterization
def rasterize(
    path: Sequence[Coordinate],
    resolution_m: float = DEFAULT_RESOLUTION_M,
) -> Tuple[GeoBoundingBox, GridSpec, Callable[[Coordinate], Cell]]:
    """Bounding box, grid spec and clamped projection for a recorded path.

    Zero-span boxes (all fixes identical, or a straight N-S / E-W walk) are not
    an error; the degenerate axis floors to a single cell.
    """
    if len(path) < MIN_PATH_POINTS:
        raise InsufficientData(
            f"need at least {MIN_PATH_POINTS} recorded fixes, got {len(path)}"
        )
    bbox = bounding_box(path)
    spec = grid_spec(bbox, resolution_m)
    return bbox, spec, project_factory(bbox, spec)
# endregion

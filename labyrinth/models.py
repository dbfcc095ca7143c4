# region Imports
from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np
# endregion

Cell = Tuple[int, int]


# region Geographic Types
@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float


@dataclass
class GeoBoundingBox:
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lon_span(self) -> float:
        return self.max_lon - self.min_lon

    def contains(self, coord: Coordinate) -> bool:
        return (self.min_lat <= coord.lat <= self.max_lat
                and self.min_lon <= coord.lon <= self.max_lon)
# endregion


# region Grid Types
@dataclass
class GridSpec:
    rows: int
    cols: int
    resolution_m: float

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def n_cells(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class MazeSession:
    """One carve request: inputs, derived grid spec and the carved grid.

    Built once per request and never patched; a new request builds a new one.
    """
    path: Tuple[Coordinate, ...]
    entry: Coordinate
    exit: Coordinate
    bbox: GeoBoundingBox
    spec: GridSpec
    grid: np.ndarray          # (rows, cols) uint8, read-only
    cells: Tuple[Cell, ...]   # entry cell -> exit cell
    seed: Optional[int] = None

    @property
    def entry_cell(self) -> Cell:
        return self.cells[0]

    @property
    def exit_cell(self) -> Cell:
        return self.cells[-1]

    @property
    def length(self) -> int:
        return len(self.cells)
# endregion

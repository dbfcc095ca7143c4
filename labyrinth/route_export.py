# region Imports
from __future__ import annotations
import json
import logging
from typing import Dict, List
from labyrinth.grid import cell_center_factory
from labyrinth.models import MazeSession
# endregion

logger = logging.getLogger(__name__)


# region Cell Path -> Lat/Lon
def session_positions(session: MazeSession) -> List[Dict[str, float]]:
    """Centre coordinate of every carved cell, entry first."""
    center = cell_center_factory(session.bbox, session.spec)
    positions = []
    for r, c in session.cells:
        p = center(int(r), int(c))
        positions.append({"lat": float(p.lat), "lon": float(p.lon)})
    return positions


def write_route_latlon(session: MazeSession, out_path: str = "route_latlon.json") -> str:
    positions = session_positions(session)
    with open(out_path, "w") as f:
        json.dump({"positions": positions}, f, indent=2)
    logger.info("Wrote %d points to %s", len(positions), out_path)
    return out_path
# endregion


# region Recorded Path Input
def read_positions(in_path: str) -> List[Dict[str, float]]:
    """Read {"positions": [...]} (or a bare list) written by a recorder or by write_route_latlon."""
    with open(in_path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("positions")
    if not isinstance(data, list):
        raise ValueError(f"{in_path}: expected a list of positions")
    return data
# endregion

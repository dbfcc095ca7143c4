# region Imports
import math
from typing import Iterable
from labyrinth.config import METERS_PER_DEGREE
from labyrinth.models import Coordinate, GeoBoundingBox
# endregion

# region Degree <-> Meter Conversions
# Flat-earth: one constant for both axes. Longitude spans are overstated away
# from the equator; acceptable only for short walked routes.
def deg2m(deg: float) -> float:
    return deg * METERS_PER_DEGREE


def m2deg(m: float) -> float:
    return m / METERS_PER_DEGREE
# endregion

# region Bounding Box
def bounding_box(points: Iterable[Coordinate]) -> GeoBoundingBox:
    pts = list(points)
    if not pts:
        raise ValueError("bounding_box needs at least one coordinate")
    lats = [p.lat for p in pts]
    lons = [p.lon for p in pts]
    return GeoBoundingBox(min(lats), max(lats), min(lons), max(lons))


def cells_along(span_deg: float, resolution_m: float) -> int:
    """Number of cells covering a span; never below 1."""
    cells = deg2m(span_deg) / resolution_m
    if not math.isfinite(cells):
        raise ValueError(f"span of {span_deg} deg at {resolution_m} m/cell is not a finite grid size")
    return max(1, int(math.ceil(cells)))
# endregion

# region Input Coercion
def as_coordinate(obj) -> Coordinate:
    """Accept a Coordinate, a {lat, lon} / {latitude, longitude} mapping or a (lat, lon) pair."""
    if isinstance(obj, Coordinate):
        lat, lon = obj.lat, obj.lon
    elif isinstance(obj, dict):
        lat = obj.get("lat", obj.get("latitude"))
        lon = obj.get("lon", obj.get("longitude"))
        if lat is None or lon is None:
            raise ValueError(f"coordinate needs lat/lon: {obj!r}")
    else:
        try:
            lat, lon = obj
        except (TypeError, ValueError):
            raise ValueError(f"coordinate must be a (lat, lon) pair: {obj!r}")
    lat, lon = float(lat), float(lon)
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValueError(f"coordinate must be finite: ({lat}, {lon})")
    if isinstance(obj, Coordinate):
        return obj
    return Coordinate(lat, lon)
# endregion

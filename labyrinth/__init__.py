"""
Walked-route maze generator: rasterize a recorded GPS path and carve a maze over it
"""

from labyrinth.errors import (
    MazeError, InsufficientData, OutOfBounds, UnreachableTarget,
    SelectionUnavailable, GridTooLarge,
)
from labyrinth.models import Coordinate, GeoBoundingBox, GridSpec, MazeSession
from labyrinth.grid import rasterize
from labyrinth.carver import carve, make_rng
from labyrinth.session import generate_maze
from labyrinth.recorder import PathRecorder

__all__ = [
    'MazeError',
    'InsufficientData',
    'OutOfBounds',
    'UnreachableTarget',
    'SelectionUnavailable',
    'GridTooLarge',
    'Coordinate',
    'GeoBoundingBox',
    'GridSpec',
    'MazeSession',
    'rasterize',
    'carve',
    'make_rng',
    'generate_maze',
    'PathRecorder',
]

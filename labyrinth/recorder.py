# region Imports
import logging
from typing import List, Optional
from labyrinth.config import DEFAULT_RESOLUTION_M
from labyrinth.errors import InsufficientData, SelectionUnavailable
from labyrinth.models import Coordinate, MazeSession
from labyrinth.session import generate_maze
# endregion

logger = logging.getLogger(__name__)


# region Path Recorder
class PathRecorder:
    """Walk-session state: recorded fixes plus the entry/exit picked afterwards.

    Location sensing lives outside; the caller feeds fixes through add_fix().
    """

    def __init__(self, resolution_m: float = DEFAULT_RESOLUTION_M):
        self.resolution_m = resolution_m
        self.path: List[Coordinate] = []
        self.tracking = False
        self.selecting = False
        self.entry: Optional[Coordinate] = None
        self.exit: Optional[Coordinate] = None
        self.session: Optional[MazeSession] = None

    # region Tracking
    def start(self, location: Optional[Coordinate] = None) -> None:
        self.path = [location] if location is not None else []
        self.tracking = True
        self.selecting = False
        self.entry = None
        self.exit = None
        self.session = None

    def add_fix(self, coord: Coordinate) -> bool:
        if not self.tracking:
            return False
        self.path.append(coord)
        return True

    def stop(self) -> None:
        # close the walked loop back to its first fix
        if len(self.path) > 1 and self.path[0] != self.path[-1]:
            self.path.append(self.path[0])
        self.tracking = False
        logger.info("tracking stopped with %d fixes", len(self.path))
    # endregion

    # region Entry / Exit Selection
    @property
    def can_select(self) -> bool:
        return not self.tracking and len(self.path) > 2

    def begin_selection(self) -> None:
        if not self.can_select:
            raise SelectionUnavailable("stop tracking and record a longer path first")
        self.selecting = True
        self.entry = None
        self.exit = None

    def select(self, coord: Coordinate) -> Optional[str]:
        """Feed a map tap. Returns "entry" or "exit" for the point it set."""
        if not self.selecting:
            return None
        if self.entry is None:
            self.entry = coord
            return "entry"
        self.exit = coord
        self.selecting = False
        return "exit"

    @property
    def ready(self) -> bool:
        return self.entry is not None and self.exit is not None and len(self.path) >= 2
    # endregion

    def generate(self, seed: Optional[int] = None) -> MazeSession:
        """Build a fresh session, replacing any previous one only on success."""
        if not self.ready:
            raise InsufficientData("missing data to generate maze")
        session = generate_maze(
            self.path, self.entry, self.exit,
            resolution_m=self.resolution_m, seed=seed,
        )
        self.session = session
        return session
# endregion

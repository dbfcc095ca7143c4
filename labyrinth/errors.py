# errors.py
class MazeError(Exception):
    """Base class for failures of a single maze request."""


class InsufficientData(MazeError):
    pass


class OutOfBounds(MazeError):
    pass


class UnreachableTarget(MazeError):
    pass


class SelectionUnavailable(MazeError):
    pass


class GridTooLarge(MazeError):
    pass

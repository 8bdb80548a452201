class LifeError(Exception):
    """Base class for errors raised by the simulation."""

    pass


class InvalidSizeError(LifeError, ValueError):
    """Raised when a board is requested with a non-positive dimension."""

    def __init__(self, size):
        self.size = size
        super().__init__(f"Board size must be positive, got {size}")


class CellOutOfRangeError(LifeError, IndexError):
    """Raised when a cell coordinate falls outside the board."""

    def __init__(self, row, col, size):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(
            f"Cell ({row}, {col}) is outside the {size}x{size} board"
        )

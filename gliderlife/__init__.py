"""
Conway's Game of Life on a bounded square board
"""

from .model import GameOfLife, Snapshot, neighbors, next_state, min_board_size
from .errors import LifeError, InvalidSizeError, CellOutOfRangeError
from .driver import Driver, RunResult
from .printer import format_board, print_board
from .logconfig import configure_logging
from .constants import *

__version__ = "0.1.0"

import logging
from typing import NamedTuple

import numpy as np
import torch

from .constants import DEFAULT_SIZE, DEFAULT_DEVICE, GLIDER
from .errors import InvalidSizeError, CellOutOfRangeError

logger = logging.getLogger(__name__)

NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    ( 0, -1),          ( 0, 1),
    ( 1, -1), ( 1, 0), ( 1, 1),
)


def neighbors(row, col, size):
    """Yield the in-bounds neighbour coordinates of (row, col). Edges do not wrap."""
    for d_row, d_col in NEIGHBOR_OFFSETS:
        n_row = row + d_row
        n_col = col + d_col
        if 0 <= n_row < size and 0 <= n_col < size:
            yield n_row, n_col


def next_state(alive, live_neighbors):
    """Standard B3/S23 rule for a single cell."""
    if not 0 <= live_neighbors <= 8:
        raise ValueError(f"live_neighbors must be between 0 and 8, got {live_neighbors}")
    if alive:
        return live_neighbors == 2 or live_neighbors == 3
    return live_neighbors == 3


def min_board_size(pattern):
    """Smallest board dimension that holds every cell of a seed pattern."""
    return max((max(row, col) + 1 for row, col in pattern), default=1)


class Snapshot(NamedTuple):
    grid: np.ndarray
    size: int
    generation: int


class GameOfLife:
    """
    Bounded Game of Life on a square board.

    Two equally sized boolean buffers are kept: ``grid`` holds the current
    generation and ``next_grid`` is scratch space written during ``step``.
    The buffers swap roles whenever a step produces a new generation.
    """

    def __init__(self, size=DEFAULT_SIZE, pattern=GLIDER, device=DEFAULT_DEVICE):
        if size <= 0:
            raise InvalidSizeError(size)
        self._size = size
        self.device = device if torch.cuda.is_available() and device == 'cuda' else 'cpu'

        # Both buffers start all dead
        self.grid = torch.zeros((size, size), dtype=torch.bool, device=self.device)
        self.next_grid = torch.zeros_like(self.grid)

        self._generation = 1
        self._converged = False

        # Convolution kernel for counting neighbors
        self.kernel = torch.tensor([
            [1, 1, 1],
            [1, 0, 1],
            [1, 1, 1]
        ], dtype=torch.float32, device=self.device).view(1, 1, 3, 3)

        self._seed(pattern)

    def _seed(self, pattern):
        for row, col in pattern:
            self._check_cell(row, col)
            self.grid[row, col] = True

    def _check_cell(self, row, col):
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise CellOutOfRangeError(row, col, self._size)

    @property
    def size(self):
        return self._size

    @property
    def generation(self):
        return self._generation

    @property
    def converged(self):
        return self._converged

    def step(self):
        """
        Advance the board by one generation.

        Returns True when the freshly computed generation is identical to the
        current one. In that case the board is left untouched and every later
        call returns True as well.
        """
        if self._converged:
            return True

        # Zero padding keeps the edges bounded
        neighbor_counts = torch.nn.functional.conv2d(
            self.grid.float().view(1, 1, self._size, self._size),
            self.kernel,
            padding=1
        ).view(self._size, self._size)

        survives = self.grid & ((neighbor_counts == 2) | (neighbor_counts == 3))
        births = ~self.grid & (neighbor_counts == 3)
        torch.logical_or(survives, births, out=self.next_grid)

        if torch.equal(self.next_grid, self.grid):
            self._converged = True
            logger.info("Game over! Board stable at generation %d", self._generation)
            return True

        self.grid, self.next_grid = self.next_grid, self.grid
        self._generation += 1
        logger.debug("Advanced to generation %d", self._generation)
        return False

    def count_live_neighbors(self, row, col):
        self._check_cell(row, col)
        return sum(1 for n_row, n_col in neighbors(row, col, self._size) if self.grid[n_row, n_col])

    def get_grid(self):
        return self.grid.cpu().numpy().copy()

    def snapshot(self):
        """Read-only copy of the current board for renderers."""
        grid = self.get_grid()
        grid.setflags(write=False)
        return Snapshot(grid=grid, size=self._size, generation=self._generation)

    def live_cells(self):
        return [tuple(cell) for cell in torch.nonzero(self.grid).tolist()]

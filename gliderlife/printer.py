import logging
import os

from .constants import ALIVE_GLYPH, DEAD_GLYPH

logger = logging.getLogger(__name__)


def format_board(grid):
    """Render a boolean grid as one line of glyphs per row."""
    lines = [os.linesep]
    for row in grid:
        lines.append("".join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row))
        lines.append(os.linesep)
    return "".join(lines)


def print_board(snapshot):
    logger.info(format_board(snapshot.grid))

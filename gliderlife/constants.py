# Default simulation parameters
DEFAULT_SIZE = 10
DEFAULT_INTERVAL = 200  # milliseconds between generations
DEFAULT_MAX_GENERATIONS = 100
DEFAULT_DEVICE = 'cpu'

# Console rendering
ALIVE_GLYPH = "🟨 "
DEAD_GLYPH = "⬛ "

# Seed patterns as (row, col) coordinates
GLIDER = ((1, 2), (2, 3), (3, 1), (3, 2), (3, 3))
BLOCK = ((1, 1), (1, 2), (2, 1), (2, 2))
BLINKER = ((1, 0), (1, 1), (1, 2))

PATTERNS = {
    'glider': GLIDER,
    'block': BLOCK,
    'blinker': BLINKER,
    'empty': (),
}
DEFAULT_PATTERN = 'glider'

# Visualization settings
WINDOW_SIZE = (800, 800)
MARKER_SIZE = 12
ALIVE_COLOR = (1.0, 0.85, 0.1, 1.0)     # Yellow
BACKGROUND_COLOR = (0.05, 0.05, 0.05, 1.0)

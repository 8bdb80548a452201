import logging

import numpy as np
import vispy
import vispy.scene
from vispy.scene import visuals
import vispy.app

from .constants import (DEFAULT_INTERVAL, DEFAULT_MAX_GENERATIONS, WINDOW_SIZE,
                        MARKER_SIZE, ALIVE_COLOR, BACKGROUND_COLOR)

logger = logging.getLogger(__name__)


def live_cell_positions(grid):
    """Marker positions (x=col, y=row) for every live cell of a boolean grid."""
    rows, cols = np.nonzero(grid)
    return np.column_stack((cols, rows)).astype(np.float32)


def animate_game(game, interval=DEFAULT_INTERVAL, max_generations=DEFAULT_MAX_GENERATIONS):
    """
    Show a GameOfLife in a vispy window, stepping it on a timer.

    Args:
        game: A GameOfLife instance
        interval: Update interval in milliseconds
        max_generations: Stop after this many generations
    """
    if interval <= 0:
        raise ValueError("interval must be positive")
    if max_generations < 1:
        raise ValueError("max_generations must be at least 1")

    size = game.size

    # Create a canvas and view
    canvas = vispy.scene.SceneCanvas(keys='interactive', size=WINDOW_SIZE, resizable=True,
                                     show=True, bgcolor=BACKGROUND_COLOR)
    view = canvas.central_widget.add_view()
    view.camera = vispy.scene.PanZoomCamera(aspect=1)
    # Row 0 is drawn at the top, as in the console printer
    view.camera.flip = (False, True, False)
    view.camera.set_range(x=(-1, size), y=(-1, size))

    # Create text display for generation counter and status
    text = visuals.Text('Generation: 1\nLive Cells: 0\nPress SPACE to start', pos=(100, 50),
                        color='white', font_size=12, parent=canvas.scene)
    text.order = 1  # Ensure text is drawn on top

    scatter = visuals.Markers()
    view.add(scatter)

    def draw():
        grid = game.get_grid()
        pos = live_cell_positions(grid)
        if len(pos) == 0:
            # Markers needs at least one point
            scatter.set_data(np.zeros((1, 2)), edge_color=None, face_color=(0, 0, 0, 0), size=MARKER_SIZE)
        else:
            scatter.set_data(pos, edge_color=None, face_color=ALIVE_COLOR, size=MARKER_SIZE,
                             symbol='square')
        return len(pos)

    live_cells = draw()
    text.text = f'Generation: {game.generation}\nLive Cells: {live_cells}\nPress SPACE to start'

    running = False
    steps = 0

    def update(ev):
        nonlocal running, steps
        if not running:
            return

        if game.step():
            running = False
            timer.stop()
            text.text = f'GAME OVER AFTER {game.generation} GENERATIONS\nLive Cells: {draw()}'
            return

        steps += 1
        live_cells = draw()
        if steps >= max_generations:
            running = False
            timer.stop()
            text.text = f'Generation: {game.generation}\nLive Cells: {live_cells}\nGeneration limit reached'
            logger.info("Generation limit of %d reached", max_generations)
        else:
            text.text = f'Generation: {game.generation}\nLive Cells: {live_cells}'

        canvas.update()

    def on_key_press(event):
        nonlocal running
        if event.key == ' ' and not game.converged and steps < max_generations:
            running = not running
            live_cells = len(game.live_cells())
            if running:
                text.text = f'Generation: {game.generation}\nLive Cells: {live_cells}'
            else:
                text.text = f'Generation: {game.generation}\nLive Cells: {live_cells}\nPress SPACE to start'

    canvas.events.key_press.connect(on_key_press)

    timer = vispy.app.Timer(interval=interval/1000.0)  # Convert ms to seconds
    timer.connect(update)
    timer.start()

    vispy.app.run()

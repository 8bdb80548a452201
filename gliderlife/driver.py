import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple

from .constants import DEFAULT_INTERVAL, DEFAULT_MAX_GENERATIONS
from .printer import print_board

logger = logging.getLogger(__name__)


class RunResult(NamedTuple):
    generation: int
    converged: bool
    stopped: bool


class Driver:
    """
    Owns the generation loop for a single GameOfLife.

    Args:
        game: The GameOfLife to advance
        max_generations: Upper bound on generations to run
        interval: Delay between generations in milliseconds, 0 disables pacing
        renderer: Callable receiving a board snapshot every generation
    """

    def __init__(self, game, max_generations=DEFAULT_MAX_GENERATIONS, interval=DEFAULT_INTERVAL,
                 renderer=print_board):
        if max_generations < 1:
            raise ValueError("max_generations must be at least 1")
        if interval < 0:
            raise ValueError("interval must not be negative")

        self.game = game
        self.max_generations = max_generations
        self.interval = interval
        self.renderer = renderer
        self._stop_event = threading.Event()
        self._executor = None

    def run(self):
        """Run the loop on the calling thread. A stop requested before the call still applies."""
        converged = False
        stopped = False
        try:
            for _ in range(self.max_generations):
                if self._stop_event.is_set():
                    logger.error("Run interrupted at generation %d", self.game.generation)
                    stopped = True
                    break

                logger.info("Generation %d:", self.game.generation)
                self.renderer(self.game.snapshot())

                if self.game.step():
                    converged = True
                    break

                # wait() returns early once stop() is called
                if self.interval and self._stop_event.wait(self.interval / 1000.0):
                    logger.error("Run interrupted at generation %d", self.game.generation)
                    stopped = True
                    break
        finally:
            # Allow the driver to be run again after a stop
            self._stop_event.clear()

        return RunResult(generation=self.game.generation, converged=converged, stopped=stopped)

    def start(self):
        """Run the loop on a single background worker and return its future."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="life-driver")
        return self._executor.submit(self.run)

    def stop(self):
        self._stop_event.set()

    def shutdown(self):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

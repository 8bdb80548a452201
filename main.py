import argparse
import logging

import torch

from gliderlife.model import GameOfLife
from gliderlife.errors import LifeError
from gliderlife.driver import Driver
from gliderlife.logconfig import configure_logging
from gliderlife.constants import (DEFAULT_SIZE, DEFAULT_INTERVAL, DEFAULT_MAX_GENERATIONS,
                                  DEFAULT_DEVICE, DEFAULT_PATTERN, PATTERNS)

logger = logging.getLogger("gliderlife")


def log_device_info():
    """Log information about the torch device configuration."""
    logger.debug("PyTorch version: %s", torch.__version__)
    logger.debug("CUDA available: %s", torch.cuda.is_available())
    if torch.cuda.is_available():
        logger.debug("GPU device name: %s", torch.cuda.get_device_name(0))


def build_parser():
    parser = argparse.ArgumentParser(description="Conway's Game of Life on a bounded board")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Board size (width and height)")
    parser.add_argument("--interval", type=int, default=DEFAULT_INTERVAL,
                        help="Delay between generations in milliseconds (0 disables pacing)")
    parser.add_argument("--generations", type=int, default=DEFAULT_MAX_GENERATIONS,
                        help="Maximum number of generations to run")
    parser.add_argument("--pattern", type=str, default=DEFAULT_PATTERN, choices=sorted(PATTERNS),
                        help="Seed pattern")
    parser.add_argument("--device", type=str, default=DEFAULT_DEVICE, choices=['cuda', 'cpu'],
                        help="Computation device ('cuda' or 'cpu')")
    parser.add_argument("--log_level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--gui", action='store_true',
                        help="Choose settings in a dialog and show the board in a VisPy window")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)


def run_console(size, pattern, device, interval, generations):
    game = GameOfLife(size=size, pattern=PATTERNS[pattern], device=device)
    driver = Driver(game, max_generations=generations, interval=interval)
    future = driver.start()
    try:
        result = future.result()
    except KeyboardInterrupt:
        driver.stop()
        result = future.result()
    finally:
        driver.shutdown()
    return result


def run_gui(args):
    # Qt and VisPy are only needed for the windowed view
    from PyQt5.QtWidgets import QApplication, QDialog, QMessageBox
    from gliderlife.settings import SettingsDialog
    from gliderlife.view import animate_game

    app = QApplication([])

    settings = SettingsDialog()
    # Pattern first, it raises the minimum board size
    settings.pattern_combo.setCurrentIndex(settings.pattern_combo.findData(args.pattern))
    settings.size_spin.setValue(args.size)
    settings.interval_spin.setValue(max(args.interval, settings.interval_spin.minimum()))
    settings.generations_spin.setValue(args.generations)
    if args.device == 'cuda' and torch.cuda.is_available():
        settings.device_combo.setCurrentIndex(settings.device_combo.findData('cuda'))

    if settings.exec_() != QDialog.Accepted:
        return

    try:
        game = GameOfLife(
            size=settings.size_spin.value(),
            pattern=PATTERNS[settings.pattern_combo.currentData()],
            device=settings.device_combo.currentData(),
        )
    except LifeError as exc:
        QMessageBox.critical(None, "Game of Life", str(exc))
        return
    animate_game(
        game=game,
        interval=settings.interval_spin.value(),
        max_generations=settings.generations_spin.value(),
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(logging, args.log_level))
    log_device_info()

    if args.device == 'cuda' and not torch.cuda.is_available():
        logger.warning("CUDA requested but not available, falling back to CPU.")

    if args.gui:
        run_gui(args)
        return

    try:
        result = run_console(args.size, args.pattern, args.device, args.interval, args.generations)
    except (LifeError, ValueError) as exc:
        parser.error(str(exc))
    if not result.converged:
        logger.info("Stopped at generation %d without converging", result.generation)


if __name__ == "__main__":
    main()

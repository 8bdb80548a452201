import logging

import numpy as np
import pytest


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def random_pattern():
    """Build a reproducible random seed pattern for a given board size."""
    def build(size, density=0.4, seed=0):
        rng = np.random.default_rng(seed)
        alive = rng.random((size, size)) < density
        return [(int(r), int(c)) for r, c in zip(*np.nonzero(alive))]
    return build

import numpy as np
import pytest

from gliderlife.constants import GLIDER, BLOCK, PATTERNS
from gliderlife.errors import InvalidSizeError, CellOutOfRangeError, LifeError
from gliderlife.model import GameOfLife, NEIGHBOR_OFFSETS, neighbors, next_state, min_board_size


def reference_step(grid):
    """Cell-by-cell next generation built from the per-cell helpers."""
    size = grid.shape[0]
    result = np.zeros_like(grid)
    for row in range(size):
        for col in range(size):
            count = sum(1 for r, c in neighbors(row, col, size) if grid[r, c])
            result[row, col] = next_state(bool(grid[row, col]), count)
    return result


def test_construct_seeds_glider():
    game = GameOfLife(10)
    assert game.size == 10
    assert game.generation == 1
    assert not game.converged
    assert game.live_cells() == sorted(GLIDER)

    grid = game.get_grid()
    assert grid.shape == (10, 10)
    assert grid.dtype == np.bool_
    assert grid.sum() == 5


def test_buffers_have_same_shape():
    game = GameOfLife(7)
    assert game.grid.shape == game.next_grid.shape == (7, 7)
    game.step()
    assert game.grid.shape == game.next_grid.shape == (7, 7)


@pytest.mark.parametrize("size", [0, -1, -10])
def test_non_positive_size_rejected(size):
    with pytest.raises(InvalidSizeError) as exc_info:
        GameOfLife(size)
    assert isinstance(exc_info.value, ValueError)
    assert isinstance(exc_info.value, LifeError)
    assert exc_info.value.size == size


@pytest.mark.parametrize("cell", [(4, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_range_seed_fails_fast(cell):
    with pytest.raises(CellOutOfRangeError) as exc_info:
        GameOfLife(4, pattern=[cell])
    assert isinstance(exc_info.value, IndexError)


def test_default_glider_needs_room():
    # The glider touches row and column 3
    with pytest.raises(CellOutOfRangeError):
        GameOfLife(3)


def test_unavailable_cuda_falls_back_to_cpu(monkeypatch):
    monkeypatch.setattr("torch.cuda.is_available", lambda: False)
    game = GameOfLife(5, device='cuda')
    assert game.device == 'cpu'


@pytest.mark.parametrize("live_neighbors,expected", [
    (0, False), (1, False), (2, True), (3, True),
    (4, False), (5, False), (6, False), (7, False), (8, False),
])
def test_rule_table_live_cell(live_neighbors, expected):
    assert next_state(True, live_neighbors) is expected


@pytest.mark.parametrize("live_neighbors,expected", [
    (0, False), (1, False), (2, False), (3, True),
    (4, False), (5, False), (6, False), (7, False), (8, False),
])
def test_rule_table_dead_cell(live_neighbors, expected):
    assert next_state(False, live_neighbors) is expected


@pytest.mark.parametrize("live_neighbors", [-1, 9])
def test_rule_rejects_impossible_counts(live_neighbors):
    with pytest.raises(ValueError):
        next_state(True, live_neighbors)


def test_corner_has_three_candidate_neighbors():
    for size in range(2, 12):
        assert sorted(neighbors(0, 0, size)) == [(0, 1), (1, 0), (1, 1)]


def test_corner_count_on_full_board():
    size = 6
    game = GameOfLife(size, pattern=[(r, c) for r in range(size) for c in range(size)])
    assert game.count_live_neighbors(0, 0) == 3
    assert game.count_live_neighbors(0, 3) == 5
    assert game.count_live_neighbors(3, 3) == 8
    assert game.count_live_neighbors(size - 1, size - 1) == 3


def test_single_cell_board_has_no_neighbors():
    game = GameOfLife(1, pattern=[(0, 0)])
    assert list(neighbors(0, 0, 1)) == []
    assert game.count_live_neighbors(0, 0) == 0


def test_neighbor_enumeration_stays_in_bounds():
    for size in range(1, 51):
        for row in range(size):
            for col in range(size):
                cells = list(neighbors(row, col, size))
                assert len(cells) <= len(NEIGHBOR_OFFSETS)
                assert len(set(cells)) == len(cells)
                for r, c in cells:
                    assert 0 <= r < size and 0 <= c < size
                    assert (r, c) != (row, col)


def test_count_live_neighbors_rejects_outside_cell():
    game = GameOfLife(5)
    with pytest.raises(CellOutOfRangeError):
        game.count_live_neighbors(5, 0)


def test_glider_translates_after_four_steps():
    game = GameOfLife(10)
    for _ in range(4):
        assert game.step() is False

    expected = np.zeros((10, 10), dtype=bool)
    for row, col in GLIDER:
        expected[row + 1, col + 1] = True
    assert np.array_equal(game.get_grid(), expected)
    assert game.live_cells() == [(2, 3), (3, 4), (4, 2), (4, 3), (4, 4)]
    assert game.generation == 5


def test_glider_second_generation():
    game = GameOfLife(10)
    game.step()
    assert game.live_cells() == [(2, 1), (2, 3), (3, 2), (3, 3), (4, 2)]


@pytest.mark.parametrize("size", [1, 2, 3, 5, 12, 50])
def test_step_matches_cell_by_cell_rule(size, random_pattern):
    game = GameOfLife(size, pattern=random_pattern(size, seed=size))
    for _ in range(3):
        before = game.get_grid()
        game.step()
        assert np.array_equal(game.get_grid(), reference_step(before))


def test_step_is_deterministic(random_pattern):
    pattern = random_pattern(16, seed=42)
    results = []
    for _ in range(3):
        game = GameOfLife(16, pattern=pattern)
        game.step()
        results.append(game.get_grid())
    assert all(np.array_equal(results[0], grid) for grid in results[1:])


def test_edges_do_not_wrap():
    # A wrapped board would see three neighbours for (0, 0) here
    game = GameOfLife(5, pattern=[(4, 0), (4, 1), (0, 4)])
    game.step()
    assert not game.get_grid()[0, 0]


def test_empty_board_converges():
    game = GameOfLife(8, pattern=PATTERNS['empty'])
    assert game.step() is True
    assert game.converged
    assert game.generation == 1
    assert not game.get_grid().any()


def test_block_converges_unchanged():
    game = GameOfLife(5, pattern=BLOCK)
    before = game.get_grid()
    assert game.step() is True
    assert np.array_equal(game.get_grid(), before)
    assert game.generation == 1


def test_converged_board_stays_converged():
    game = GameOfLife(6, pattern=BLOCK)
    assert game.step() is True
    before = game.get_grid()
    for _ in range(5):
        assert game.step() is True
        assert np.array_equal(game.get_grid(), before)
        assert game.generation == 1


def test_blinker_never_converges():
    game = GameOfLife(5, pattern=[(2, 1), (2, 2), (2, 3)])
    for _ in range(10):
        assert game.step() is False
    assert game.generation == 11
    assert game.live_cells() == [(2, 1), (2, 2), (2, 3)]


def test_snapshot_is_read_only_copy():
    game = GameOfLife(10)
    snapshot = game.snapshot()
    assert snapshot.size == 10
    assert snapshot.generation == 1
    with pytest.raises(ValueError):
        snapshot.grid[0, 0] = True

    game.step()
    assert snapshot.generation == 1
    assert [tuple(map(int, cell)) for cell in np.argwhere(snapshot.grid)] == sorted(GLIDER)
    assert not np.array_equal(snapshot.grid, game.get_grid())


def test_snapshot_has_no_side_effects():
    game = GameOfLife(10)
    first = game.snapshot()
    second = game.snapshot()
    assert np.array_equal(first.grid, second.grid)
    assert game.generation == 1
    assert not game.converged


@pytest.mark.parametrize("name,expected", [('glider', 4), ('block', 3), ('blinker', 3), ('empty', 1)])
def test_min_board_size(name, expected):
    assert min_board_size(PATTERNS[name]) == expected
    GameOfLife(expected, pattern=PATTERNS[name])
    if expected > 1:
        with pytest.raises(CellOutOfRangeError):
            GameOfLife(expected - 1, pattern=PATTERNS[name])


def test_count_live_neighbors_leaves_board_untouched():
    game = GameOfLife(10)
    before = game.get_grid()
    assert game.count_live_neighbors(2, 2) == 5
    assert game.count_live_neighbors(0, 0) == 0
    assert np.array_equal(game.get_grid(), before)
    assert game.generation == 1

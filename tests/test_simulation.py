import pytest

from algodrills.simulation import (
    max_block_after_five_moves,
    min_blind_spots,
    min_chicken_distance,
    paste_stickers,
)


def test_2048_example():
    board = [[2, 2, 2], [4, 4, 4], [8, 8, 8]]
    assert max_block_after_five_moves(board) == 16


def test_2048_single_tile_stays():
    assert max_block_after_five_moves([[0, 0], [0, 8]]) == 8


def test_2048_empty_board_stays_empty():
    board = [[0] * 3 for _ in range(3)]
    assert max_block_after_five_moves(board) == max(max(row) for row in board)


@pytest.mark.parametrize(
    "board",
    [
        [[2, 4], [8, 16]],
        [[2, 2, 4], [0, 4, 8], [16, 2, 2]],
        [[4, 0, 0, 4], [0, 2, 2, 0], [8, 0, 0, 8], [2, 4, 8, 16]],
    ],
)
def test_2048_result_bounds(board):
    result = max_block_after_five_moves(board)
    values = [v for row in board for v in row]
    assert max(values) <= result <= sum(values)
    assert result & (result - 1) == 0


def test_2048_rejects_non_square():
    with pytest.raises(ValueError):
        max_block_after_five_moves([[2, 2, 2], [2, 2, 2]])


def test_blind_spots_example():
    office = [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 1, 0, 6, 0],
        [0, 0, 0, 0, 0, 0],
    ]
    assert min_blind_spots(office) == 20


def test_blind_spots_without_cameras_counts_empty_cells():
    office = [[0, 6, 0], [0, 0, 6]]
    assert min_blind_spots(office) == sum(row.count(0) for row in office)


def test_wall_blocks_camera():
    assert min_blind_spots([[5, 6, 0]]) == min_blind_spots([[6, 0]])


def test_camera_reduces_blind_spots():
    assert min_blind_spots([[0, 0, 5, 0, 0]]) < min_blind_spots([[0, 0, 6, 0, 0]])


def test_blind_spots_rejects_unknown_cell():
    with pytest.raises(ValueError):
        min_blind_spots([[0, 9]])


CITY = [
    [0, 0, 1, 0, 0],
    [0, 0, 2, 0, 1],
    [0, 1, 2, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 0, 0, 2],
]


def test_chicken_example():
    assert min_chicken_distance(CITY, 3) == 5


def test_chicken_distance_shrinks_with_more_shops():
    distances = [min_chicken_distance(CITY, keep) for keep in (1, 2, 3)]
    assert distances == sorted(distances, reverse=True)


@pytest.mark.parametrize("keep", [0, 4])
def test_chicken_rejects_bad_keep(keep):
    with pytest.raises(ValueError):
        min_chicken_distance(CITY, keep)


FULL = [[1, 1], [1, 1]]


def test_full_sticker_covers_notebook():
    rows, cols = 2, 2
    assert paste_stickers(rows, cols, [FULL]) == rows * cols


def test_tall_sticker_is_rotated_to_fit():
    rows, cols = 1, 3
    assert paste_stickers(rows, cols, [[[1], [1], [1]]]) == rows * cols


def test_sticker_that_never_fits_is_dropped():
    assert paste_stickers(2, 2, [[[1, 1, 1]]]) == paste_stickers(2, 2, [])


def test_overlapping_sticker_is_skipped():
    assert paste_stickers(2, 2, [FULL, FULL]) == paste_stickers(2, 2, [FULL])


def test_second_shape_has_no_room():
    l_shape = [[1, 0], [1, 1]]
    assert paste_stickers(2, 2, [l_shape, l_shape]) == sum(map(sum, l_shape))


def test_sticker_coverage_bounded():
    stickers = [[[1, 1, 0], [0, 1, 1]], [[1], [1]], FULL, [[1, 1, 1, 1]]]
    rows, cols = 3, 4
    assert paste_stickers(rows, cols, stickers) <= rows * cols


def test_empty_sticker_rejected():
    with pytest.raises(ValueError):
        paste_stickers(2, 2, [[]])
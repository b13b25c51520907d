"""Brute-force board simulations: 2048 moves, camera coverage, shop closures and stickers."""

from collections.abc import Iterable, Iterator, Sequence
from itertools import combinations, product

__all__ = [
    "max_block_after_five_moves",
    "min_blind_spots",
    "min_chicken_distance",
    "paste_stickers",
]

Grid = list[list[int]]

# Down, right, up, left.
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_WALL = 6
_CAMERA_VIEWS = {
    1: (0,),
    2: (0, 2),
    3: (0, 1),
    4: (0, 1, 2),
    5: (0, 1, 2, 3),
}
_HOUSE = 1
_SHOP = 2


def _copy(grid: Iterable[Iterable[int]]) -> Grid:
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _rotated(grid: Grid) -> Grid:
    """Return ``grid`` turned 90 degrees clockwise."""
    return [list(row) for row in zip(*grid[::-1])]


def _slide_left(row: list[int]) -> list[int]:
    merged: list[int] = []
    can_merge = False
    for value in row:
        if value == 0:
            continue
        if can_merge and merged[-1] == value:
            merged[-1] *= 2
            can_merge = False
        else:
            merged.append(value)
            can_merge = True
    return merged + [0] * (len(row) - len(merged))


def max_block_after_five_moves(board: Sequence[Sequence[int]]) -> int:
    """Return the largest block reachable on a 2048 board within five moves."""
    grid = _copy(board)
    if any(len(row) != len(grid) for row in grid):
        raise ValueError("the 2048 board must be square")
    best = 0
    for turns in product(range(4), repeat=5):
        state = grid
        for turn in turns:
            for _ in range(turn):
                state = _rotated(state)
            state = [_slide_left(row) for row in state]
        best = max(best, max((value for row in state for value in row), default=0))
    return best


def _sight(office: Grid, row: int, col: int, direction: int) -> Iterator[tuple[int, int]]:
    dr, dc = _DIRECTIONS[direction]
    rows, cols = len(office), len(office[0])
    r, c = row + dr, col + dc
    while 0 <= r < rows and 0 <= c < cols and office[r][c] != _WALL:
        if office[r][c] == 0:
            yield r, c
        r, c = r + dr, c + dc


def min_blind_spots(office: Sequence[Sequence[int]]) -> int:
    """Return the fewest unwatched empty cells over every way of turning the cameras.

    Cells hold 0 (empty), 1 to 5 (camera types) or 6 (wall).
    """
    grid = _copy(office)
    cameras: list[tuple[int, int, int]] = []
    empty: set[tuple[int, int]] = set()
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if not 0 <= value <= _WALL:
                raise ValueError(f"unknown office cell {value} at ({r}, {c})")
            if value == 0:
                empty.add((r, c))
            elif value in _CAMERA_VIEWS:
                cameras.append((r, c, value))

    best = len(empty)
    for turns in product(range(4), repeat=len(cameras)):
        watched: set[tuple[int, int]] = set()
        for (r, c, kind), turn in zip(cameras, turns):
            for offset in _CAMERA_VIEWS[kind]:
                watched.update(_sight(grid, r, c, (turn + offset) % 4))
        best = min(best, len(empty - watched))
    return best


def min_chicken_distance(city: Sequence[Sequence[int]], keep: int) -> int:
    """Return the smallest city chicken distance when only ``keep`` shops stay open.

    Cells hold 0 (empty), 1 (house) or 2 (chicken shop); a house's distance is
    the Manhattan distance to its nearest open shop.
    """
    grid = _copy(city)
    houses = [(r, c) for r, row in enumerate(grid) for c, v in enumerate(row) if v == _HOUSE]
    shops = [(r, c) for r, row in enumerate(grid) for c, v in enumerate(row) if v == _SHOP]
    if not 1 <= keep <= len(shops):
        raise ValueError(f"cannot keep {keep} of {len(shops)} shops")
    return min(
        sum(min(abs(hr - sr) + abs(hc - sc) for sr, sc in chosen) for hr, hc in houses)
        for chosen in combinations(shops, keep)
    )


def _try_paste(note: list[list[bool]], cols: int, shape: Grid) -> bool:
    height, width = len(shape), len(shape[0])
    cells = [(i, j) for i, row in enumerate(shape) for j, v in enumerate(row) if v == 1]
    for x in range(len(note) - height + 1):
        for y in range(cols - width + 1):
            if all(not note[x + i][y + j] for i, j in cells):
                for i, j in cells:
                    note[x + i][y + j] = True
                return True
    return False


def paste_stickers(
    rows: int, cols: int, stickers: Iterable[Sequence[Sequence[int]]]
) -> int:
    """Paste each sticker at its first free place, rotating it clockwise when
    it does not fit, and return how many notebook cells end up covered."""
    if rows < 0 or cols < 0:
        raise ValueError(f"notebook size must not be negative, got {rows}x{cols}")
    note = [[False] * cols for _ in range(rows)]
    for sticker in stickers:
        shape = _copy(sticker)
        if not shape or not shape[0]:
            raise ValueError("a sticker must have at least one cell")
        for _ in range(4):
            if _try_paste(note, cols, shape):
                break
            shape = _rotated(shape)
    return sum(map(sum, note))
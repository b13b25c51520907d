"""Breadth- and depth-first searches over grids and a number line."""

from collections import deque
from collections.abc import Iterator, Sequence

__all__ = [
    "bfs_order",
    "dfs_order",
    "count_pictures",
    "shortest_maze_path",
    "days_to_ripen",
    "fire_escape_time",
    "hide_and_seek",
]

Cell = tuple[int, int]

# Down, right, up, left.
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_LINE_LIMIT = 100_000


def _size(grid: Sequence[Sequence]) -> tuple[int, int]:
    return len(grid), (len(grid[0]) if grid else 0)


def _neighbours(cell: Cell, rows: int, cols: int) -> Iterator[Cell]:
    row, col = cell
    for dr, dc in _DIRECTIONS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _check_start(start: Cell, rows: int, cols: int) -> None:
    row, col = start
    if not (0 <= row < rows and 0 <= col < cols):
        raise ValueError(f"start {start} lies outside a {rows}x{cols} board")


def bfs_order(board: Sequence[Sequence[int]], start: Cell) -> list[Cell]:
    """Return the cells of value 1 reached from ``start`` in breadth-first order."""
    rows, cols = _size(board)
    _check_start(start, rows, cols)
    visited = {start}
    queue = deque([start])
    order: list[Cell] = []
    while queue:
        cell = queue.popleft()
        order.append(cell)
        for nr, nc in _neighbours(cell, rows, cols):
            if (nr, nc) in visited or board[nr][nc] != 1:
                continue
            visited.add((nr, nc))
            queue.append((nr, nc))
    return order


def dfs_order(board: Sequence[Sequence[int]], start: Cell) -> list[Cell]:
    """Return the cells of value 1 reached from ``start`` in stack-based depth-first order."""
    rows, cols = _size(board)
    _check_start(start, rows, cols)
    visited = {start}
    stack = [start]
    order: list[Cell] = []
    while stack:
        cell = stack.pop()
        order.append(cell)
        for nr, nc in _neighbours(cell, rows, cols):
            if (nr, nc) in visited or board[nr][nc] != 1:
                continue
            visited.add((nr, nc))
            stack.append((nr, nc))
    return order


def count_pictures(board: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return the number of connected regions of 1s and the largest region's area."""
    rows, cols = _size(board)
    visited: set[Cell] = set()
    count = largest = 0
    for r in range(rows):
        for c in range(cols):
            if board[r][c] == 0 or (r, c) in visited:
                continue
            count += 1
            visited.add((r, c))
            queue = deque([(r, c)])
            area = 0
            while queue:
                cell = queue.popleft()
                area += 1
                for nr, nc in _neighbours(cell, rows, cols):
                    if (nr, nc) in visited or board[nr][nc] != 1:
                        continue
                    visited.add((nr, nc))
                    queue.append((nr, nc))
            largest = max(largest, area)
    return count, largest


def shortest_maze_path(maze: Sequence[str]) -> int | None:
    """Return how many cells the shortest path from the top-left to the
    bottom-right corner passes through, moving only on ``'1'`` cells.

    Returns None when the bottom-right corner cannot be reached.
    """
    rows, cols = _size(maze)
    if rows == 0 or cols == 0:
        raise ValueError("maze must not be empty")
    dist = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        for nr, nc in _neighbours(cell, rows, cols):
            if (nr, nc) in dist or maze[nr][nc] != "1":
                continue
            dist[(nr, nc)] = dist[cell] + 1
            queue.append((nr, nc))
    steps = dist.get((rows - 1, cols - 1))
    return None if steps is None else steps + 1


def days_to_ripen(board: Sequence[Sequence[int]]) -> int:
    """Return the days until every tomato ripens, or -1 if some never will.

    Cells hold 1 (ripe), 0 (unripe) or -1 (empty); ripeness spreads to the
    four neighbouring cells each day.
    """
    rows, cols = _size(board)
    days = [[-1 if value == 0 else 0 for value in row] for row in board]
    queue = deque(
        (r, c) for r in range(rows) for c in range(cols) if board[r][c] == 1
    )
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours((r, c), rows, cols):
            if days[nr][nc] >= 0:
                continue
            days[nr][nc] = days[r][c] + 1
            queue.append((nr, nc))
    flat = [value for row in days for value in row]
    if -1 in flat:
        return -1
    return max(flat, default=0)


def fire_escape_time(maze: Sequence[str]) -> int | None:
    """Return the earliest time J can leave the maze ahead of the fire.

    ``'#'`` is a wall, ``'.'`` open floor, ``'J'`` the runner's start and
    ``'F'`` a fire. Returns None when escape is impossible.
    """
    rows, cols = _size(maze)
    fire: dict[Cell, int] = {}
    runner: dict[Cell, int] = {}
    for r in range(rows):
        for c in range(cols):
            if maze[r][c] == "F":
                fire[(r, c)] = 0
            if maze[r][c] == "J":
                runner[(r, c)] = 0

    queue = deque(fire)
    while queue:
        cell = queue.popleft()
        for nr, nc in _neighbours(cell, rows, cols):
            if (nr, nc) in fire or maze[nr][nc] == "#":
                continue
            fire[(nr, nc)] = fire[cell] + 1
            queue.append((nr, nc))

    queue = deque(runner)
    while queue:
        r, c = queue.popleft()
        step = runner[(r, c)] + 1
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                return step
            if (nr, nc) in runner or maze[nr][nc] == "#":
                continue
            burn = fire.get((nr, nc))
            if burn is not None and burn <= step:
                continue
            runner[(nr, nc)] = step
            queue.append((nr, nc))
    return None


def hide_and_seek(start: int, target: int) -> int:
    """Return the fewest seconds to get from ``start`` to ``target`` on 0..100000,
    moving each second by -1, +1 or to twice the position."""
    for name, value in (("start", start), ("target", target)):
        if not 0 <= value <= _LINE_LIMIT:
            raise ValueError(f"{name} {value} outside 0..{_LINE_LIMIT}")
    dist = [-1] * (_LINE_LIMIT + 1)
    dist[start] = 0
    queue = deque([start])
    while dist[target] == -1:
        cur = queue.popleft()
        for nxt in (cur - 1, cur + 1, 2 * cur):
            if not 0 <= nxt <= _LINE_LIMIT or dist[nxt] != -1:
                continue
            dist[nxt] = dist[cur] + 1
            queue.append(nxt)
    return dist[target]
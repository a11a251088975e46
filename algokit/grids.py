"""Grid problems: islands, rotting oranges, gate distances, maze exits, knights, sudoku."""

from __future__ import annotations

from collections import deque
from typing import MutableSequence, Sequence

WALL = -1
GATE = 0
EMPTY = 2**31 - 1

LAND = "1"
ORANGE_FRESH = 1
ORANGE_ROTTEN = 2
MAZE_WALL = "+"
SUDOKU_BLANK = "."
SUDOKU_DIGITS = "123456789"

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_KNIGHT_MOVES = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, 2),
    (1, -2),
    (2, 1),
    (2, -1),
)


def _neighbours(row: int, col: int):
    for d_row, d_col in _STEPS:
        yield row + d_row, col + d_col


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the groups of ``"1"`` cells joined up, down, left or right."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == LAND
    }
    count = 0
    while land:
        count += 1
        queue = deque([land.pop()])
        while queue:
            row, col = queue.popleft()
            for cell in _neighbours(row, col):
                if cell in land:
                    land.remove(cell)
                    queue.append(cell)
    return count


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    Each minute every rotten orange rots its fresh neighbours up, down, left
    and right. The grid is left untouched.
    """
    fresh = set()
    frontier = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == ORANGE_FRESH:
                fresh.add((r, c))
            elif cell == ORANGE_ROTTEN:
                frontier.append((r, c))
    minutes = 0
    while frontier and fresh:
        rotted = []
        for row, col in frontier:
            for cell in _neighbours(row, col):
                if cell in fresh:
                    fresh.remove(cell)
                    rotted.append(cell)
        if rotted:
            minutes += 1
        frontier = rotted
    return -1 if fresh else minutes


def walls_and_gates(grid: MutableSequence[MutableSequence[int]]) -> None:
    """Fill each open cell, in place, with its step distance to the nearest gate.

    Walls are -1, gates 0 and unreached cells keep their value (``EMPTY``
    for open ones). A cell is only ever lowered, never raised.
    """
    queue = deque(
        (r, c, 0)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == GATE
    )
    while queue:
        row, col, distance = queue.popleft()
        step = distance + 1
        for n_row, n_col in _neighbours(row, col):
            if not (0 <= n_row < len(grid) and 0 <= n_col < len(grid[n_row])):
                continue
            value = grid[n_row][n_col]
            if value in (WALL, GATE) or step >= value:
                continue
            grid[n_row][n_col] = step
            queue.append((n_row, n_col, step))


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int:
    """Return the fewest steps from ``entrance`` to an open border cell, or -1.

    ``"+"`` marks a wall. The entrance itself does not count as an exit, and
    the maze is left untouched.
    """
    if not maze or not maze[0]:
        raise ValueError("maze must not be empty")
    last_row, last_col = len(maze) - 1, len(maze[0]) - 1
    start = (entrance[0], entrance[1])
    visited = {start}
    queue = deque([(start, 0)])
    while queue:
        (row, col), steps = queue.popleft()
        for cell in _neighbours(row, col):
            n_row, n_col = cell
            if not (0 <= n_row <= last_row and 0 <= n_col <= last_col):
                continue
            if maze[n_row][n_col] == MAZE_WALL or cell in visited:
                continue
            if n_row in (0, last_row) or n_col in (0, last_col):
                return steps + 1
            visited.add(cell)
            queue.append((cell, steps + 1))
    return -1


def knight_probability(n: int, k: int, row: int, column: int) -> float:
    """Return the chance that a knight making ``k`` random moves stays on an n-by-n board."""
    if not (0 <= row < n and 0 <= column < n):
        return 0.0
    if k < 0:
        raise ValueError("k must not be negative")

    remaining = [[1.0] * n for _ in range(n)]

    def stay(r: int, c: int) -> float:
        return remaining[r][c] if 0 <= r < n and 0 <= c < n else 0.0

    for _ in range(k):
        remaining = [
            [sum(stay(r + dr, c + dc) / 8 for dr, dc in _KNIGHT_MOVES) for c in range(n)]
            for r in range(n)
        ]
    return remaining[row][column]


def _box(row: int, col: int) -> int:
    return row // 3 * 3 + col // 3


def solve_sudoku(board: MutableSequence[MutableSequence[str]]) -> None:
    """Fill the ``"."`` cells of a 9-by-9 board in place by backtracking.

    Raises ``ValueError`` when the board is not 9 by 9 or has no solution;
    the board is then left as it was.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("sudoku board must be 9 by 9")
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    blanks = []
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == SUDOKU_BLANK:
                blanks.append((r, c))
            else:
                rows[r].add(cell)
                cols[c].add(cell)
                boxes[_box(r, c)].add(cell)

    def place(index: int) -> bool:
        if index == len(blanks):
            return True
        r, c = blanks[index]
        b = _box(r, c)
        for digit in SUDOKU_DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in boxes[b]:
                continue
            board[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[b].add(digit)
            if place(index + 1):
                return True
            rows[r].discard(digit)
            cols[c].discard(digit)
            boxes[b].discard(digit)
            board[r][c] = SUDOKU_BLANK
        return False

    if not place(0):
        raise ValueError("sudoku has no solution")
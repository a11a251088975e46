import copy

import pytest

from algokit.grids import (
    EMPTY,
    GATE,
    WALL,
    knight_probability,
    nearest_exit,
    num_islands,
    oranges_rotting,
    solve_sudoku,
    walls_and_gates,
)


def _rows(*lines):
    return [list(line) for line in lines]


def test_num_islands_empty_and_water():
    assert num_islands([]) == 0
    assert num_islands(_rows("000", "000")) == 0


def test_num_islands_one_big_island():
    grid = _rows("11110", "11010", "11000", "00000")
    assert num_islands(grid) == 1


def test_num_islands_diagonals_do_not_join():
    assert num_islands(_rows("10", "01")) == 2


def test_num_islands_leaves_grid_alone():
    grid = _rows("11000", "11000", "00100", "00011")
    before = copy.deepcopy(grid)
    num_islands(grid)
    assert grid == before


def test_num_islands_all_land_is_one():
    grid = _rows(*["1" * 20] * 20)
    assert num_islands(grid) == 1


def test_oranges_no_fresh_takes_no_time():
    assert oranges_rotting([[0, 2]]) == 0
    assert oranges_rotting([]) == 0


def test_oranges_unreachable_is_minus_one():
    assert oranges_rotting([[2, 1, 1], [0, 1, 1], [1, 0, 1]]) == -1


def test_oranges_classic_example():
    assert oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]]) == 4


def test_oranges_leaves_grid_alone():
    grid = [[0, 2], [0, 1], [0, 1], [1, 1], [1, 1], [1, 1]]
    before = copy.deepcopy(grid)
    result = oranges_rotting(grid)
    assert grid == before
    assert result >= 0


def test_walls_and_gates_source_example():
    grid = [
        [EMPTY, WALL, GATE, EMPTY],
        [EMPTY, EMPTY, EMPTY, GATE],
        [EMPTY, WALL, EMPTY, WALL],
        [GATE, WALL, EMPTY, EMPTY],
    ]
    walls_and_gates(grid)
    assert grid == [
        [3, -1, 0, 1],
        [2, 2, 1, 0],
        [1, -1, 2, -1],
        [0, -1, 3, 4],
    ]


def test_walls_and_gates_without_gates_changes_nothing():
    grid = [[EMPTY, WALL], [EMPTY, EMPTY]]
    walls_and_gates(grid)
    assert grid == [[EMPTY, WALL], [EMPTY, EMPTY]]


def test_walls_and_gates_unreachable_cell_stays_empty():
    grid = [[GATE, WALL, EMPTY]]
    walls_and_gates(grid)
    assert grid == [[GATE, WALL, EMPTY]]


def test_nearest_exit_examples():
    assert nearest_exit(_rows("++.+", "...+", "+++."), [1, 2]) == 1
    assert nearest_exit(_rows("+++", "...", "+++"), [1, 0]) == 2


def test_nearest_exit_entrance_is_not_an_exit():
    assert nearest_exit(_rows(".+"), [0, 0]) == -1


def test_nearest_exit_leaves_maze_alone():
    maze = _rows("+++", "...", "+++")
    before = copy.deepcopy(maze)
    nearest_exit(maze, [1, 0])
    assert maze == before


def test_nearest_exit_empty_maze():
    with pytest.raises(ValueError):
        nearest_exit([], [0, 0])


def test_knight_no_moves_on_and_off_board():
    assert knight_probability(3, 0, 1, 1) == 1.0
    assert knight_probability(3, 5, 3, 0) == 0.0


def test_knight_centre_of_small_board_falls_off():
    assert knight_probability(3, 1, 1, 1) == 0.0


def test_knight_classic_example():
    assert knight_probability(3, 2, 0, 0) == pytest.approx(0.0625)


@pytest.mark.parametrize("n,row,column", [(4, 0, 0), (5, 2, 2), (8, 3, 4)])
def test_knight_probability_falls_with_moves(n, row, column):
    chances = [knight_probability(n, k, row, column) for k in range(6)]
    assert all(0.0 <= chance <= 1.0 for chance in chances)
    assert chances == sorted(chances, reverse=True)


def test_knight_negative_moves():
    with pytest.raises(ValueError):
        knight_probability(3, -1, 0, 0)


SOURCE_BOARD = [
    "..9748...",
    "7........",
    ".2.1.9...",
    "..7...24.",
    ".64.1.59.",
    ".98...3..",
    "...8.3.2.",
    "........6",
    "...2759..",
]

CLASSIC_BOARD = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]


def _assert_solved(board, clues):
    digits = set("123456789")
    for r in range(9):
        assert set(board[r]) == digits
        assert {board[i][r] for i in range(9)} == digits
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {board[br + i][bc + j] for i in range(3) for j in range(3)}
            assert box == digits
    for r, line in enumerate(clues):
        for c, cell in enumerate(line):
            if cell != ".":
                assert board[r][c] == cell


@pytest.mark.parametrize("clues", [SOURCE_BOARD, CLASSIC_BOARD])
def test_solve_sudoku_fills_a_valid_grid(clues):
    board = _rows(*clues)
    solve_sudoku(board)
    _assert_solved(board, clues)


def test_solve_sudoku_classic_first_row():
    board = _rows(*CLASSIC_BOARD)
    solve_sudoku(board)
    assert "".join(board[0]) == "534678912"


def test_solve_sudoku_unsolvable_leaves_board():
    clues = ["12345678.", "........9"] + ["........."] * 7
    board = _rows(*clues)
    with pytest.raises(ValueError):
        solve_sudoku(board)
    assert board == _rows(*clues)


def test_solve_sudoku_wrong_shape():
    with pytest.raises(ValueError):
        solve_sudoku(_rows("...", "...", "..."))
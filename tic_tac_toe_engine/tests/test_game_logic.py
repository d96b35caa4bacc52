import pytest

from tictac.errors import IllegalMove, InvalidBoard, OutOfRange
from tictac.game_logic import (
    DRAW, IN_PROGRESS, O, WIN, WIN_LINES, X, apply_move, check_winner,
    current_turn, empty_board, evaluate, legal_moves, validate_board,
)

_ = None


def board_of(text):
    """'XX.|.O.|..O' style helper; '|' separators are optional."""
    cells = [c for c in text if c != "|"]
    return tuple(None if c == "." else c for c in cells)


@pytest.mark.parametrize("line", WIN_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_evaluate_reports_every_line(line, mark):
    board = tuple(mark if i in line else None for i in range(9))
    result = evaluate(board)
    assert result.status == WIN
    assert result.winner == mark
    assert result.line == line


def test_evaluate_scan_order_rows_before_columns():
    # Row 0 and column 0 are both complete; the row comes first.
    board = board_of("XXX|XOO|XOO")
    assert evaluate(board).line == (0, 1, 2)


def test_evaluate_draw_on_full_board_without_line():
    board = board_of("XOX|XOO|OXX")
    result = evaluate(board)
    assert result.status == DRAW
    assert result.winner is None
    assert result.line is None
    assert result.is_over


def test_evaluate_in_progress():
    assert evaluate(empty_board()).status == IN_PROGRESS
    board = board_of("XO.|...|...")
    assert evaluate(board).status == IN_PROGRESS
    assert not evaluate(board).is_over


def test_evaluate_is_idempotent():
    board = board_of("XX.|OO.|...")
    assert evaluate(board) == evaluate(board)


def test_full_board_with_line_is_a_win_not_a_draw():
    board = board_of("XXX|OOX|XOO")
    assert evaluate(board).status == WIN
    assert check_winner(board) == X


def test_apply_move_returns_new_board():
    board = empty_board()
    new_board = apply_move(board, 4, X)
    assert board == (None,) * 9
    assert new_board[4] == X
    assert sum(cell is not None for cell in new_board) == 1


def test_apply_move_rejects_occupied_cell():
    board = apply_move(empty_board(), 0, X)
    with pytest.raises(IllegalMove):
        apply_move(board, 0, O)
    assert board[0] == X


def test_apply_move_rejects_finished_game():
    won = board_of("XXX|OO.|...")
    with pytest.raises(IllegalMove):
        apply_move(won, 5, O)
    drawn = board_of("XOX|XOO|OXX")
    with pytest.raises(IllegalMove):
        apply_move(drawn, 0, X)


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_apply_move_out_of_range(index):
    with pytest.raises(OutOfRange):
        apply_move(empty_board(), index, X)


def test_apply_move_rejects_unknown_mark():
    with pytest.raises(IllegalMove):
        apply_move(empty_board(), 0, "Z")


def test_legal_moves_is_complement_in_ascending_order():
    board = board_of("X.O|.X.|O..")
    assert legal_moves(board) == [1, 3, 5, 7, 8]
    assert legal_moves(empty_board()) == list(range(9))
    assert legal_moves(board_of("XOX|XOO|OXX")) == []


def test_current_turn_follows_parity():
    board = empty_board()
    assert current_turn(board) == X
    board = apply_move(board, 0, X)
    assert current_turn(board) == O
    board = apply_move(board, 1, O)
    assert current_turn(board) == X


def test_last_move_completes_the_board():
    board = (X, O, X, X, O, O, O, _, X)
    assert current_turn(board) == X
    result = evaluate(apply_move(board, 7, X))
    # X ends on 0, 2, 3, 7, 8: no row, column or diagonal is complete.
    assert result.status == DRAW
    assert result.line is None


def test_last_move_wins_with_exact_line():
    board = (X, O, _, O, X, _, X, O, _)
    result = evaluate(apply_move(board, 8, X))
    assert result.status == WIN
    assert result.winner == X
    assert result.line == (0, 4, 8)


def test_validate_board_accepts_blank_strings():
    assert validate_board(["X", "", None, "", "O", "", "", "", ""]) == board_of("X...O....")


@pytest.mark.parametrize("cells", [
    [None] * 8,
    ["X", "Q"] + [None] * 7,
    ["O"] + [None] * 8,
    ["X", "X", "X", None, None, None, None, None, None],
    ["X", "X", "X", "O", "O", "O", None, None, None],
])
def test_validate_board_rejects_impossible_boards(cells):
    with pytest.raises(InvalidBoard):
        validate_board(cells)


@pytest.mark.parametrize("cells", [
    # X completed row 0, then O played again.
    ["X", "X", "X", "O", "O", None, "O", None, None],
    # O completed row 1, then X played again.
    ["X", "X", None, "O", "O", "O", "X", "X", None],
])
def test_validate_board_rejects_play_after_a_win(cells):
    with pytest.raises(InvalidBoard):
        validate_board(cells)


def test_validate_board_accepts_finished_games():
    assert evaluate(validate_board(["X", "X", "X", "O", "O", None, None, None, None])).winner == X
    assert evaluate(validate_board(["X", "X", None, "O", "O", "O", "X", None, None])).winner == O


def test_apply_move_accepts_list_board():
    board = [X, None, None, None, O, None, None, None, None]
    new_board = apply_move(board, 8, X)
    assert isinstance(new_board, tuple)
    assert new_board[8] == X
    assert board[8] is None

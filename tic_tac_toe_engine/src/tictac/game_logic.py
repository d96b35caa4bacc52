from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import IllegalMove, InvalidBoard, OutOfRange

X = "X"
O = "O"
MARKS = (X, O)

IN_PROGRESS = "in_progress"
WIN = "win"
DRAW = "draw"

Cell = Optional[str]
Board = Tuple[Cell, ...]
Line = Tuple[int, int, int]

# Scan order matters: rows, then columns, then diagonals.
WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


@dataclass(frozen=True)
class GameResult:
    """Outcome of a board: in progress, a win along `line`, or a draw."""
    status: str
    winner: Optional[str] = None
    line: Optional[Line] = None

    @classmethod
    def win(cls, mark: str, line: Line) -> "GameResult":
        return cls(WIN, mark, line)

    @property
    def is_over(self) -> bool:
        return self.status != IN_PROGRESS


IN_PROGRESS_RESULT = GameResult(IN_PROGRESS)
DRAW_RESULT = GameResult(DRAW)


# PUBLIC_INTERFACE
def empty_board() -> Board:
    """Create and return an empty 3x3 board (9 cells, row-major)."""
    return (None,) * 9


# PUBLIC_INTERFACE
def evaluate(board: Board) -> GameResult:
    """Return the result of the board: first complete line wins, full board draws."""
    for a, b, c in WIN_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return GameResult.win(board[a], (a, b, c))
    if is_board_full(board):
        return DRAW_RESULT
    return IN_PROGRESS_RESULT


# PUBLIC_INTERFACE
def check_winner(board: Board) -> Optional[str]:
    """Return 'X', 'O', or None if no winner yet."""
    return evaluate(board).winner


# PUBLIC_INTERFACE
def is_board_full(board: Board) -> bool:
    """True if no empty cells on the board."""
    return all(cell is not None for cell in board)


# PUBLIC_INTERFACE
def legal_moves(board: Board) -> List[int]:
    """Indices of empty cells in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


# PUBLIC_INTERFACE
def other_mark(mark: str) -> str:
    """Get the opposing mark."""
    return O if mark == X else X


# PUBLIC_INTERFACE
def current_turn(board: Board) -> str:
    """Mark to move next; X moves on an even number of filled cells."""
    filled = sum(1 for cell in board if cell is not None)
    return X if filled % 2 == 0 else O


# PUBLIC_INTERFACE
def apply_move(board: Board, index: int, mark: str) -> Board:
    """Return a new board with `mark` placed at `index`; the input is left untouched.

    Lists are accepted and converted; the result is always a tuple.
    """
    board = tuple(board)
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < 9:
        raise OutOfRange(f"Cell index {index!r} is outside 0..8")
    if mark not in MARKS:
        raise IllegalMove(f"Unknown mark {mark!r}")
    if evaluate(board).is_over:
        raise IllegalMove("Game is already over")
    if board[index] is not None:
        raise IllegalMove(f"Cell {index} is already taken")
    return board[:index] + (mark,) + board[index + 1:]


# PUBLIC_INTERFACE
def validate_board(cells: Iterable[Cell]) -> Board:
    """Turn an untrusted sequence of cells into a Board.

    Accepts 'X', 'O', None and '' (treated as empty). The mark counts must
    match strictly alternating play with X first, at most one mark may own
    a complete line, and no move may have followed the winning one.
    """
    board: Board = tuple(cell if cell else None for cell in cells)
    if len(board) != 9:
        raise InvalidBoard(f"Board must have 9 cells, got {len(board)}")
    for cell in board:
        if cell is not None and cell not in MARKS:
            raise InvalidBoard(f"Unknown cell value {cell!r}")
    x_count = board.count(X)
    o_count = board.count(O)
    if x_count - o_count not in (0, 1):
        raise InvalidBoard(f"Impossible mark counts: {x_count} X, {o_count} O")
    winners = {board[a] for a, b, c in WIN_LINES
               if board[a] is not None and board[a] == board[b] == board[c]}
    if len(winners) > 1:
        raise InvalidBoard("Both marks cannot have a complete line")
    if X in winners and x_count != o_count + 1:
        raise InvalidBoard("Play continued after X completed a line")
    if O in winners and x_count != o_count:
        raise InvalidBoard("Play continued after O completed a line")
    return board


def render_board(board: Sequence[Cell]) -> str:
    """Plain-text grid, used in log messages."""
    rows = []
    for r in range(3):
        rows.append(" ".join(cell or "." for cell in board[r * 3:(r + 1) * 3]))
    return " / ".join(rows)

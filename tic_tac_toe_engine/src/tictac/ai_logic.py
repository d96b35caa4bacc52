import logging
import random
from enum import Enum
from functools import lru_cache
from typing import Optional

from .errors import NoLegalMove
from .game_logic import (
    DRAW, O, X, Board, apply_move, check_winner, current_turn, evaluate,
    legal_moves, other_mark, render_board,
)

logger = logging.getLogger(__name__)

# Fixed per-mark scores: positive is good for O, negative is good for X.
WIN_SCORES = {O: 10, X: -10}
DRAW_SCORE = 0


# PUBLIC_INTERFACE
class Difficulty(str, Enum):
    """Computer opponent tiers, named the way the setup screen shows them."""
    RANDOM = "easy"
    HEURISTIC = "medium"
    OPTIMAL = "hard"


def _moves_or_raise(board: Board):
    moves = legal_moves(board)
    if not moves or evaluate(board).is_over:
        raise NoLegalMove("No moves left")
    return moves


def _find_winning_move(board: Board, mark: str) -> Optional[int]:
    for index in legal_moves(board):
        if check_winner(apply_move(board, index, mark)) == mark:
            return index
    return None


# PUBLIC_INTERFACE
def random_move(board: Board, rng: Optional[random.Random] = None) -> int:
    """Pick any empty cell uniformly at random."""
    moves = _moves_or_raise(board)
    rng = rng or random.Random()
    return rng.choice(moves)


# PUBLIC_INTERFACE
def heuristic_move(board: Board, ai_mark: str, rng: Optional[random.Random] = None) -> int:
    """Simple AI: win if possible, block if must, else random empty."""
    _moves_or_raise(board)
    move = _find_winning_move(board, ai_mark)
    if move is None:
        move = _find_winning_move(board, other_mark(ai_mark))
    if move is None:
        move = random_move(board, rng)
    return move


# PUBLIC_INTERFACE
def minimax_score(board: Board, to_move: str) -> int:
    """Score of `board` with `to_move` about to play, under perfect play by both sides.

    O maximises and X minimises; the scores never depend on which side
    the computer is playing. Lists are accepted and converted to tuples.
    """
    return _minimax_score(tuple(board), to_move)


@lru_cache(maxsize=None)
def _minimax_score(board: Board, to_move: str) -> int:
    result = evaluate(board)
    if result.winner is not None:
        return WIN_SCORES[result.winner]
    if result.status == DRAW:
        return DRAW_SCORE

    scores = [_minimax_score(apply_move(board, i, to_move), other_mark(to_move))
              for i in legal_moves(board)]
    return max(scores) if to_move == O else min(scores)


# PUBLIC_INTERFACE
def minimax_move(board: Board, ai_mark: str) -> int:
    """
    Exhaustive minimax. Returns the first move, in ascending index order,
    reaching the best score for `ai_mark`.

    A move that wins on the spot is played before searching: a deeper
    forced win can score the same +/-10 at a lower index and would
    otherwise postpone the game.
    """
    moves = _moves_or_raise(board)
    immediate = _find_winning_move(board, ai_mark)
    if immediate is not None:
        return immediate

    sign = 1 if ai_mark == O else -1
    best_move = moves[0]
    best_score = None
    for index in moves:
        score = sign * minimax_score(apply_move(board, index, ai_mark), other_mark(ai_mark))
        if best_score is None or score > best_score:
            best_score = score
            best_move = index
    logger.debug("minimax %s on %s -> %d (score %d)",
                 ai_mark, render_board(board), best_move, sign * best_score)
    return best_move


# PUBLIC_INTERFACE
def choose_move(
    board: Board,
    ai_mark: str,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
) -> int:
    """Pick the computer's move for the given difficulty tier."""
    difficulty = Difficulty(difficulty)
    if difficulty is Difficulty.RANDOM:
        move = random_move(board, rng)
    elif difficulty is Difficulty.HEURISTIC:
        move = heuristic_move(board, ai_mark, rng)
    else:
        move = minimax_move(board, ai_mark)
    logger.debug("%s (%s) plays %d", ai_mark, difficulty.value, move)
    return move


# PUBLIC_INTERFACE
def best_move_hint(board: Board) -> int:
    """Optimal move for whoever is to move next."""
    return minimax_move(board, current_turn(board))

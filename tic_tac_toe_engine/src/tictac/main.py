import logging
import random
from typing import Optional, Tuple

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .ai_logic import best_move_hint, choose_move
from .config import load_settings
from .errors import IllegalMove, InvalidBoard, OutOfRange
from .game_logic import (
    X, Board, apply_move, current_turn, empty_board, evaluate, other_mark,
    render_board, validate_board,
)
from .logging_setup import setup_logging
from .models import GameSettings, GameState, HintRequest, HintResponse, MoveRequest

settings = load_settings()
setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "game",
        "description": "Tic Tac Toe play: human vs human and human vs computer"
    },
]

app = FastAPI(
    title="Tic Tac Toe API",
    description="Stateless Tic Tac Toe engine. The client sends the board with every request; "
                "the server applies moves, detects wins and draws, and plays the computer's turns.",
    version="1.0.0",
    openapi_tags=tags_metadata
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_rng = random.Random(settings.rng_seed)


# PUBLIC_INTERFACE
def get_rng() -> random.Random:
    """Randomness source for the easy and medium tiers (overridable in tests)."""
    return _rng


def _computer_mark(game: GameSettings) -> Optional[str]:
    if game.mode != "computer":
        return None
    return other_mark(game.human_symbol)


def _player_name(game: GameSettings, mark: str) -> str:
    if game.mode == "pvp":
        return game.player1 if mark == X else game.player2
    return game.player1 if mark == game.human_symbol else game.player2


def _play_computer(board: Board, game: GameSettings, rng: random.Random) -> Tuple[Board, Optional[int]]:
    """Let the computer move if it is its turn; same path on move zero."""
    mark = _computer_mark(game)
    if mark is None or evaluate(board).is_over or current_turn(board) != mark:
        return board, None
    index = choose_move(board, mark, game.difficulty, rng)
    return apply_move(board, index, mark), index


def _to_state(board: Board, game: GameSettings, computer_move: Optional[int] = None) -> GameState:
    result = evaluate(board)
    if result.is_over:
        logger.info("Game over (%s): %s winner=%s", game.mode, render_board(board), result.winner or "draw")
    turn = None if result.is_over else current_turn(board)
    return GameState(
        board=list(board),
        status=result.status,
        current_turn=turn,
        winner=result.winner,
        winning_line=list(result.line) if result.line else None,
        winner_name=_player_name(game, result.winner) if result.winner else None,
        next_player_name=_player_name(game, turn) if turn else None,
        computer_move=computer_move,
    )


def _parse_board(cells) -> Board:
    try:
        return validate_board(cells)
    except InvalidBoard as exc:
        logger.info("Rejected board: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))

#---------- Game APIs (Core Play) ----------

# PUBLIC_INTERFACE
@app.post("/game/start", response_model=GameState, tags=["game"], summary="Start a new game")
def start_game(game: GameSettings, rng: random.Random = Depends(get_rng)):
    """
    Start a new game from an empty board. If the computer holds X it moves first.
    """
    board, computer_move = _play_computer(empty_board(), game, rng)
    logger.info("New %s game: %s vs %s", game.mode, game.player1, game.player2)
    return _to_state(board, game, computer_move)

# PUBLIC_INTERFACE
@app.post("/game/move", response_model=GameState, tags=["game"], summary="Make a move (PvP or vs computer)")
def make_move(req: MoveRequest, rng: random.Random = Depends(get_rng)):
    """
    Apply the human move for whoever is to move, then the computer's reply when it is due.
    Returns updated board, turn, winner, etc.
    """
    game = req.settings
    board = _parse_board(req.board)
    if evaluate(board).is_over:
        raise HTTPException(status_code=409, detail="Game is already over")
    turn = current_turn(board)
    if turn == _computer_mark(game):
        raise HTTPException(status_code=409, detail="Not your turn")
    try:
        board = apply_move(board, req.index, turn)
    except OutOfRange as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except IllegalMove as exc:
        logger.info("Rejected move %s at %d: %s", turn, req.index, exc)
        raise HTTPException(status_code=409, detail=str(exc))
    board, computer_move = _play_computer(board, game, rng)
    return _to_state(board, game, computer_move)

# PUBLIC_INTERFACE
@app.post("/game/hint", response_model=HintResponse, tags=["game"], summary="Best move for the player to move")
def hint(req: HintRequest):
    """Suggest the optimal move for whoever is to move."""
    board = _parse_board(req.board)
    if evaluate(board).is_over:
        raise HTTPException(status_code=409, detail="Game is already over")
    return HintResponse(index=best_move_hint(board), mark=current_turn(board))

#---------- Health ----------

@app.get("/", tags=["default"])
def health_check():
    """Health check endpoint."""
    return {"message": "Healthy"}


def serve() -> None:
    """Run the API with uvicorn using HOST/PORT from the environment."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    serve()

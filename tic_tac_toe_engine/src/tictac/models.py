from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .ai_logic import Difficulty

Symbol = Literal["X", "O"]
CellValue = Optional[Literal["X", "O", ""]]
COMPUTER_NAME = "Computer"

# --- Game setup ---

# PUBLIC_INTERFACE
class GameSettings(BaseModel):
    """Chosen once at game start and sent unchanged with every request."""
    model_config = ConfigDict(str_strip_whitespace=True)

    mode: Literal["pvp", "computer"] = Field(..., description="'pvp' for human vs human, 'computer' for human vs AI")
    player1: str = Field(..., min_length=1, description="Player 1 name (plays X in pvp, human_symbol vs computer)")
    player2: Optional[str] = Field(None, min_length=1, description="Player 2 name (plays O in pvp, the computer otherwise)")
    human_symbol: Symbol = Field("X", description="Mark the human controls in computer mode")
    difficulty: Difficulty = Field(Difficulty.RANDOM, description="Computer tier: easy, medium or hard")

    @model_validator(mode="after")
    def _fill_player2(self) -> "GameSettings":
        if self.player2 is None:
            if self.mode == "pvp":
                raise ValueError("Please fill in all required fields: player2 is required for pvp")
            self.player2 = COMPUTER_NAME
        return self

# --- Requests ---

# PUBLIC_INTERFACE
class MoveRequest(BaseModel):
    """A human move on the given board."""
    settings: GameSettings
    board: List[CellValue] = Field(..., min_length=9, max_length=9, description="9 cells, row-major: 'X', 'O' or null")
    index: int = Field(..., description="Cell index (0..8)")

# PUBLIC_INTERFACE
class HintRequest(BaseModel):
    """Ask for the best move for whoever is to move."""
    board: List[CellValue] = Field(..., min_length=9, max_length=9, description="9 cells, row-major: 'X', 'O' or null")

# --- Responses ---

# PUBLIC_INTERFACE
class GameState(BaseModel):
    """Represents the current state of the board, ready for rendering."""
    board: List[Optional[Symbol]] = Field(..., description="9 cells, row-major: 'X', 'O' or None")
    status: Literal["in_progress", "win", "draw"]
    current_turn: Optional[Symbol] = Field(None, description="Mark to move, None once the game is over")
    winner: Optional[Symbol] = Field(None, description="Winner symbol, or None if draw/ongoing")
    winning_line: Optional[List[int]] = Field(None, description="The three cells to highlight on a win")
    winner_name: Optional[str] = None
    next_player_name: Optional[str] = None
    computer_move: Optional[int] = Field(None, description="Cell the computer played during this request")

# PUBLIC_INTERFACE
class HintResponse(BaseModel):
    index: int
    mark: Symbol

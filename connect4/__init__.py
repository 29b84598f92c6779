"""
connect4 - Connect Four rules engine with minimax AI

Gravity-based move application, win/draw detection and a tiered AI
(rule-based heuristic or alpha-beta minimax) for a 7x6 board.
"""

from .ai import AIMove, Difficulty, SearchEngine
from .core import (
    Board,
    ColumnFullError,
    GameAlreadyOverError,
    GameState,
    GameStatus,
    InvalidColumnError,
    MoveError,
    NoValidMovesError,
    Player,
    Position,
)
from .game import apply_move, check_win, create_initial_state, get_valid_moves, is_valid_move
from .game.engine import GameEngine


__version__ = "0.1.0"

__all__ = [
    "AIMove",
    "Board",
    "ColumnFullError",
    "Difficulty",
    "GameAlreadyOverError",
    "GameEngine",
    "GameState",
    "GameStatus",
    "InvalidColumnError",
    "MoveError",
    "NoValidMovesError",
    "Player",
    "Position",
    "SearchEngine",
    "apply_move",
    "check_win",
    "create_initial_state",
    "get_valid_moves",
    "is_valid_move",
]

"""Core types and infrastructure for the Connect4 engine."""

from .bus import EventBus
from .config import AISettings, LogSettings, Settings, get_settings, reset_settings
from .errors import (
    AIError,
    ColumnFullError,
    Connect4Error,
    GameAlreadyOverError,
    GameNotStartedError,
    InvalidColumnError,
    MoveError,
    NoValidMovesError,
    NotPlayersTurnError,
)
from .events import Event, EventType
from .types import COLS, ROWS, WIN_LENGTH, Board, GameState, GameStatus, Player, Position


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "AISettings",
    "LogSettings",
    # Types
    "ROWS",
    "COLS",
    "WIN_LENGTH",
    "Player",
    "GameStatus",
    "Position",
    "Board",
    "GameState",
    # Errors
    "Connect4Error",
    "MoveError",
    "InvalidColumnError",
    "ColumnFullError",
    "GameAlreadyOverError",
    "NotPlayersTurnError",
    "GameNotStartedError",
    "AIError",
    "NoValidMovesError",
    # Events
    "Event",
    "EventType",
    "EventBus",
]

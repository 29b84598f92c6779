"""Game logic module for Connect4.

`GameEngine` lives in `connect4.game.engine`; it depends on the AI
package, which itself builds on the rules exported here.
"""

from .rules import (
    Connect4Rules,
    WinCheck,
    apply_move,
    check_win,
    create_initial_state,
    get_valid_moves,
    is_valid_move,
)
from .validation import ValidationResult, validate_state


__all__ = [
    "Connect4Rules",
    "WinCheck",
    "apply_move",
    "check_win",
    "create_initial_state",
    "get_valid_moves",
    "is_valid_move",
    "ValidationResult",
    "validate_state",
]

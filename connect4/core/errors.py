"""
Error types raised by the Connect4 engine.

All of them are local validation failures: nothing is mutated when one
is raised, and retrying the same call gives the same result.
"""

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from .types import Player


class Connect4Error(Exception):
    """Base class for engine errors."""


class MoveError(Connect4Error, ValueError):
    """A move could not be applied."""

    def __init__(self, message: str, column: int | None = None) -> None:
        super().__init__(message)
        self.column = column


class InvalidColumnError(MoveError):
    """Column index outside the board."""

    def __init__(self, column: int, cols: int = 7) -> None:
        super().__init__(f"Invalid column {column}: expected 0-{cols - 1}", column)


class ColumnFullError(MoveError):
    """No empty slot left in the chosen column."""

    def __init__(self, column: int) -> None:
        super().__init__(f"Column {column} is full", column)


class GameAlreadyOverError(MoveError):
    """Move attempted on a finished game."""

    def __init__(self, column: int | None = None) -> None:
        super().__init__("Game is already over", column)


class NotPlayersTurnError(MoveError):
    """The acting player is not the side to move."""

    def __init__(self, player: "Player", expected: "Player") -> None:
        super().__init__(f"Not {player}'s turn (expected {expected})")
        self.player = player
        self.expected = expected


class GameNotStartedError(Connect4Error, RuntimeError):
    """Session used before a game was created."""


class AIError(Connect4Error, ValueError):
    """The AI could not produce a move."""


class NoValidMovesError(AIError):
    """AI invoked on a board with no playable column."""

    def __init__(self) -> None:
        super().__init__("No valid moves available")

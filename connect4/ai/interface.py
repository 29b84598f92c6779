"""Abstract interface for AI players."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from ..core.types import GameState


class Difficulty(str, Enum):
    """AI strength tier."""

    EASY = "easy"  # Rule-based heuristic
    MEDIUM = "medium"  # Shallow minimax
    HARD = "hard"  # Deeper minimax


@dataclass
class AIMove:
    """A move decision with a human-readable rationale."""

    column: int
    confidence: float
    rationale: str
    score: float | None = None  # Raw search value, minimax only


class AIInterface(ABC):
    """Abstract interface for AI players.

    Implementations pick a column for the side to move in `state`.
    """

    @abstractmethod
    def choose_move(self, state: GameState) -> AIMove:
        """Compute the best move.

        Args:
            state: Current game state

        Returns:
            AIMove for `state.current_player`

        Raises:
            NoValidMovesError: If the board is full
        """

    @abstractmethod
    def get_name(self) -> str:
        """Get AI name for display."""

"""Difficulty-tiered move selection."""

import logging

from ..core.config import Settings
from ..core.types import GameState
from ..game.rules import Connect4Rules
from .heuristic import HeuristicAI
from .interface import AIInterface, AIMove, Difficulty
from .minimax import MinimaxAI


logger = logging.getLogger(__name__)


class SearchEngine:
    """Chooses a column for the side to move at a given difficulty.

    Owns one strategy per tier. Holds no per-game state, so a single
    instance can serve any number of independent games.
    """

    def __init__(
        self,
        rules: Connect4Rules | None = None,
        medium_depth: int = 3,
        hard_depth: int = 5,
    ):
        self.rules = rules or Connect4Rules()
        self.strategies: dict[Difficulty, AIInterface] = {
            Difficulty.EASY: HeuristicAI(self.rules),
            Difficulty.MEDIUM: MinimaxAI(depth=medium_depth, rules=self.rules),
            Difficulty.HARD: MinimaxAI(depth=hard_depth, rules=self.rules),
        }

    @classmethod
    def from_settings(cls, settings: Settings, rules: Connect4Rules | None = None) -> "SearchEngine":
        """Build an engine using the configured search depths."""
        return cls(
            rules=rules,
            medium_depth=settings.ai.medium_depth,
            hard_depth=settings.ai.hard_depth,
        )

    def choose_move(self, state: GameState, difficulty: Difficulty | str = Difficulty.MEDIUM) -> AIMove:
        """Pick a move for `state.current_player`.

        Args:
            state: Current game state
            difficulty: Tier (enum or its string value)

        Returns:
            AIMove with column, confidence and rationale

        Raises:
            NoValidMovesError: If the board is full
        """
        strategy = self.strategies[Difficulty(difficulty)]
        move = strategy.choose_move(state)
        logger.debug(
            "%s picked column %d for %s: %s",
            strategy.get_name(), move.column, state.current_player, move.rationale,
        )
        return move

"""Rule-based AI for the easy tier."""

import dataclasses
import logging

from ..core.errors import GameAlreadyOverError, NoValidMovesError
from ..core.types import GameState, Player
from ..game.rules import Connect4Rules
from .interface import AIInterface, AIMove


logger = logging.getLogger(__name__)


def center_order(cols: int) -> list[int]:
    """Columns from the center outwards, left before right: 3,2,4,1,5,0,6."""
    center = cols // 2
    return sorted(range(cols), key=lambda col: (abs(col - center), col))


def wins_if_played(rules: Connect4Rules, state: GameState, column: int, player: Player) -> bool:
    """Would `player` win by dropping into `column` right now?"""
    as_player = dataclasses.replace(state, current_player=player)
    new_state, _ = rules.apply_move(as_player, column)
    return new_state.winner == player


def playable_moves(rules: Connect4Rules, state: GameState) -> list[int]:
    """Valid columns for an AI turn.

    Raises:
        NoValidMovesError: If the board is full
        GameAlreadyOverError: If the game was already won
    """
    valid_moves = rules.get_valid_moves(state.board)
    if not valid_moves:
        raise NoValidMovesError()
    if state.is_game_over:
        raise GameAlreadyOverError()
    return valid_moves


class HeuristicAI(AIInterface):
    """Ordered rule cascade; the first matching rule decides.

    1. Win now.
    2. Block a column where the opponent would win.
    3. Center-outward preference.
    4. First valid column.
    """

    def __init__(self, rules: Connect4Rules | None = None):
        self.rules = rules or Connect4Rules()

    def choose_move(self, state: GameState) -> AIMove:
        valid_moves = playable_moves(self.rules, state)
        player = state.current_player

        for col in valid_moves:
            if wins_if_played(self.rules, state, col, player):
                logger.debug("Easy AI: winning move at column %d", col)
                return AIMove(column=col, confidence=1.0, rationale="Winning move")

        for col in valid_moves:
            if wins_if_played(self.rules, state, col, player.opponent):
                logger.debug("Easy AI: blocking at column %d", col)
                return AIMove(column=col, confidence=0.9, rationale="Blocking opponent win")

        for col in center_order(self.rules.cols):
            if col in valid_moves:
                return AIMove(column=col, confidence=0.5, rationale="Center column preference")

        return AIMove(column=valid_moves[0], confidence=0.3, rationale="First valid move")

    def get_name(self) -> str:
        return "Heuristic AI"

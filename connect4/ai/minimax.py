"""Minimax AI with alpha-beta pruning."""

import logging
from dataclasses import dataclass

from ..core.types import GameState, Player
from ..game.rules import Connect4Rules
from .evaluator import count_open_threes, evaluate_board
from .heuristic import playable_moves, wins_if_played
from .interface import AIInterface, AIMove


logger = logging.getLogger(__name__)

WIN_SCORE = 1000
# Finite search window; must exceed WIN_SCORE + any search depth.
SCORE_BOUND = 1_000_000


@dataclass
class SearchResult:
    """Outcome of a root search."""

    column: int
    score: float
    nodes_evaluated: int = 0


@dataclass
class _SearchStats:
    nodes: int = 0


class MinimaxAI(AIInterface):
    """Minimax AI with alpha-beta pruning.

    The side to move is the maximizing player. Moves are tried in
    ascending column order and the first maximal root value wins ties.
    """

    def __init__(self, depth: int = 3, rules: Connect4Rules | None = None):
        """Initialize Minimax AI.

        Args:
            depth: Search depth in plies (higher = stronger but slower)
            rules: Game rules (uses defaults if None)
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.depth = depth
        self.rules = rules or Connect4Rules()

    def choose_move(self, state: GameState) -> AIMove:
        """Find best move and explain it."""
        result = self.search(state)
        return AIMove(
            column=result.column,
            confidence=result.score / 100,
            rationale=self._explain(state, result),
            score=result.score,
        )

    def search(self, state: GameState, depth: int | None = None) -> SearchResult:
        """Run the root search for `state.current_player`.

        Args:
            state: Position to search (must not be finished)
            depth: Override the configured depth

        Returns:
            SearchResult with the chosen column and its minimax value
        """
        depth = self.depth if depth is None else depth
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        valid_moves = playable_moves(self.rules, state)
        player = state.current_player
        stats = _SearchStats()

        best_col = valid_moves[0]
        best_score = -SCORE_BOUND
        alpha = -SCORE_BOUND

        for col in valid_moves:
            child, _ = self.rules.apply_move(state, col)
            score = self._minimax(child, depth - 1, alpha, SCORE_BOUND, False, player, stats)

            if score > best_score:
                best_score = score
                best_col = col

            alpha = max(alpha, score)

        logger.debug(
            "Minimax depth=%d chose column %d (score=%s, nodes=%d)",
            depth, best_col, best_score, stats.nodes,
        )
        return SearchResult(column=best_col, score=best_score, nodes_evaluated=stats.nodes)

    def _minimax(
        self,
        state: GameState,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        player: Player,
        stats: _SearchStats,
    ) -> float:
        """Minimax with alpha-beta pruning.

        Returns:
            Score of `state` from `player`'s point of view
        """
        stats.nodes += 1

        if state.winner == player:
            return WIN_SCORE + depth  # Prefer faster wins
        if state.winner == player.opponent:
            return -WIN_SCORE - depth  # Delay losses
        if state.is_draw or depth == 0:
            return evaluate_board(state.board, player)

        valid_moves = self.rules.get_valid_moves(state.board)

        if maximizing:
            max_eval = -SCORE_BOUND

            for col in valid_moves:
                child, _ = self.rules.apply_move(state, col)
                eval_score = self._minimax(child, depth - 1, alpha, beta, False, player, stats)
                max_eval = max(max_eval, eval_score)
                alpha = max(alpha, eval_score)
                if alpha >= beta:
                    break  # Beta cutoff

            return max_eval

        min_eval = SCORE_BOUND

        for col in valid_moves:
            child, _ = self.rules.apply_move(state, col)
            eval_score = self._minimax(child, depth - 1, alpha, beta, True, player, stats)
            min_eval = min(min_eval, eval_score)
            beta = min(beta, eval_score)
            if alpha >= beta:
                break  # Alpha cutoff

        return min_eval

    def _explain(self, state: GameState, result: SearchResult) -> str:
        """Generate explanation for a move."""
        player = state.current_player
        col = result.column

        if wins_if_played(self.rules, state, col, player):
            return "Winning move"
        if wins_if_played(self.rules, state, col, player.opponent):
            return "Blocking opponent win"

        child, _ = self.rules.apply_move(state, col)
        if count_open_threes(child.board, player) >= 2:
            return "Creates multiple winning threats"

        if result.score > 50:
            return "Strong strategic move"
        if result.score > 0:
            return "Good positional move"
        return "Developing move"

    def get_name(self) -> str:
        return f"Minimax (depth={self.depth})"

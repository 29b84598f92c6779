"""AI module for Connect4."""

from .evaluator import count_open_threes, evaluate_board, score_window
from .heuristic import HeuristicAI
from .interface import AIInterface, AIMove, Difficulty
from .minimax import MinimaxAI, SearchResult
from .search import SearchEngine


__all__ = [
    "AIInterface",
    "AIMove",
    "Difficulty",
    "HeuristicAI",
    "MinimaxAI",
    "SearchResult",
    "SearchEngine",
    "evaluate_board",
    "score_window",
    "count_open_threes",
]

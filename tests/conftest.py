"""Shared fixtures and board builders for the test suite."""

import pytest

from connect4.ai.search import SearchEngine
from connect4.core.bus import EventBus
from connect4.core.types import Board, GameState, GameStatus, Player
from connect4.game.rules import Connect4Rules


# Full board with no four in a row anywhere (21 red, 21 yellow).
DRAW_ROWS = [
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
]


def play(rules: Connect4Rules, moves: list[int]) -> GameState:
    """Apply a sequence of columns from the initial state."""
    state = rules.create_initial_state()
    for col in moves:
        state, _ = rules.apply_move(state, col)
    return state


def state_from_rows(rows: list[str]) -> GameState:
    """Mid-game state from a board picture ('X' red, 'O' yellow, '.' empty)."""
    board = Board.from_rows(rows)
    red, yellow = board.count(Player.RED), board.count(Player.YELLOW)
    return GameState(
        board=board,
        current_player=Player.RED if red == yellow else Player.YELLOW,
        move_count=red + yellow,
        status=GameStatus.PLAYING if red + yellow else GameStatus.WAITING,
    )


@pytest.fixture
def rules() -> Connect4Rules:
    return Connect4Rules()


@pytest.fixture
def search(rules) -> SearchEngine:
    return SearchEngine(rules=rules)


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def nearly_drawn_state() -> GameState:
    """DRAW_ROWS minus the yellow piece at the top of column 0."""
    rows = DRAW_ROWS.copy()
    rows[0] = "." + rows[0][1:]
    return state_from_rows(rows)


@pytest.fixture
def yellow_three_red_to_move() -> GameState:
    """Yellow holds row 5 columns 0-2; red must block at column 3."""
    return state_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "XXX....",
        "OOO....",
    ])


@pytest.fixture
def yellow_three_yellow_to_move() -> GameState:
    """Yellow holds row 5 columns 0-2 and can complete it at column 3."""
    return state_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "XX....X",
        "OOO...X",
    ])

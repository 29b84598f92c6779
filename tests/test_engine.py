"""Tests for the GameEngine session facade."""

import pytest

from connect4.core.errors import (
    ColumnFullError,
    GameAlreadyOverError,
    GameNotStartedError,
    NotPlayersTurnError,
)
from connect4.core.events import EventType
from connect4.core.types import GameStatus, Player
from connect4.game.engine import GameEngine


@pytest.fixture
def engine(rules, search, bus):
    return GameEngine(rules=rules, search=search, bus=bus)


@pytest.fixture
def events(bus):
    received = []
    for event_type in EventType:
        bus.subscribe(event_type, received.append)
    return received


def types_of(events):
    return [event.type for event in events]


def test_move_before_new_game(engine):
    with pytest.raises(GameNotStartedError):
        engine.make_move(3, Player.RED)


def test_new_game(engine, events):
    state = engine.new_game()

    assert state.status == GameStatus.WAITING
    assert engine.state is state
    assert types_of(events) == [EventType.GAME_STARTED]
    assert events[0].data == {"first_player": "red"}


def test_make_move_publishes_turn_change(engine, events):
    engine.new_game()

    state = engine.make_move(3, Player.RED)

    assert state.current_player == Player.YELLOW
    assert types_of(events)[1:] == [EventType.MOVE_MADE, EventType.TURN_CHANGED]


def test_wrong_player_rejected(engine, events):
    state = engine.new_game()

    with pytest.raises(NotPlayersTurnError) as excinfo:
        engine.make_move(3, Player.YELLOW)

    assert excinfo.value.player == Player.YELLOW
    assert excinfo.value.expected == Player.RED
    assert engine.state is state
    assert events[-1].type == EventType.INVALID_MOVE


def test_column_full_leaves_state(engine):
    engine.new_game()
    for _ in range(6):
        engine.make_move(3, engine.state.current_player)
    state = engine.state

    with pytest.raises(ColumnFullError):
        engine.make_move(3, Player.RED)

    assert engine.state is state


def test_vertical_win(engine, events):
    engine.new_game()
    for col in [0, 1, 0, 1, 0, 1, 0]:
        engine.make_move(col, engine.state.current_player)

    assert engine.is_game_over
    assert engine.state.winner == Player.RED
    assert events[-1].type == EventType.GAME_WON
    assert events[-1].data["winner"] == "red"

    with pytest.raises(GameAlreadyOverError):
        engine.make_move(4, Player.YELLOW)


def test_request_ai_move_does_not_play(engine, events):
    engine.new_game()

    move = engine.request_ai_move("easy")

    assert move.column == 3
    assert engine.state.move_count == 0
    assert events[-1].type == EventType.AI_MOVE_CHOSEN
    assert events[-1].data["difficulty"] == "easy"


def test_play_ai_move(engine):
    engine.new_game()
    engine.make_move(0, Player.RED)

    move, state = engine.play_ai_move("medium")

    assert state.move_count == 2
    assert state.board[5][move.column] == Player.YELLOW or state.board[4][move.column] == Player.YELLOW
    assert state.current_player == Player.RED


def test_ai_vs_ai_game_finishes(engine):
    engine.new_game()

    while not engine.is_game_over:
        engine.play_ai_move("easy")

    assert engine.state.winner is not None or engine.state.is_draw


def test_reset(engine, events):
    engine.new_game()
    engine.reset()

    assert engine.state is None
    assert events[-1].type == EventType.GAME_RESET


def test_engines_do_not_share_state(rules, search):
    first, second = GameEngine(rules=rules, search=search), GameEngine(rules=rules, search=search)
    first.new_game()
    second.new_game()

    first.make_move(3, Player.RED)

    assert second.state.move_count == 0

"""Tests for the in-process event bus."""

import logging

from connect4.core.bus import EventBus
from connect4.core.events import Event, EventType


def test_publish_reaches_subscribers(bus):
    received = []
    bus.subscribe(EventType.MOVE_MADE, received.append)

    bus.publish(Event(type=EventType.MOVE_MADE, data={"column": 3}))
    bus.publish(Event(type=EventType.GAME_WON))

    assert [event.data for event in received] == [{"column": 3}]


def test_subscribe_is_idempotent(bus):
    received = []
    bus.subscribe(EventType.GAME_DRAW, received.append)
    bus.subscribe(EventType.GAME_DRAW, received.append)

    bus.publish(Event(type=EventType.GAME_DRAW))

    assert len(received) == 1


def test_unsubscribe(bus):
    received = []
    bus.subscribe(EventType.GAME_RESET, received.append)
    bus.unsubscribe(EventType.GAME_RESET, received.append)

    bus.publish(Event(type=EventType.GAME_RESET))

    assert received == []


def test_failing_handler_does_not_block_others(bus, caplog):
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.MOVE_MADE, broken)
    bus.subscribe(EventType.MOVE_MADE, received.append)

    with caplog.at_level(logging.ERROR, logger="connect4.core.bus"):
        bus.publish(Event(type=EventType.MOVE_MADE))

    assert len(received) == 1
    assert "Handler error for MOVE_MADE" in caplog.text


def test_event_log_is_bounded():
    bus = EventBus(max_log_size=3)
    for col in range(5):
        bus.publish(Event(type=EventType.MOVE_MADE, data=col))

    assert [event.data for event in bus.get_event_log()] == [2, 3, 4]

    bus.clear_log()
    assert bus.get_event_log() == []


def test_event_str():
    event = Event(type=EventType.GAME_WON, data="red", source="game_engine")

    assert str(event) == "[game_engine] GAME_WON: red"

"""Tests for the event emitter."""

from blackjack.game.events import EventEmitter, EventType


def test_typed_and_catch_all_handlers():
    emitter = EventEmitter()
    typed, everything = [], []
    emitter.subscribe(typed.append, EventType.PLAYER_HIT)
    emitter.subscribe(everything.append)

    emitter.emit(EventType.PLAYER_HIT, hand_value=15)
    emitter.emit(EventType.PLAYER_STAND, hand_value=15)

    assert [e.event_type for e in typed] == [EventType.PLAYER_HIT]
    assert [e.event_type for e in everything] == [EventType.PLAYER_HIT, EventType.PLAYER_STAND]
    assert typed[0].data == {"hand_value": 15}


def test_unsubscribe():
    emitter = EventEmitter()
    seen = []
    emitter.subscribe(seen.append)
    emitter.unsubscribe(seen.append)
    emitter.unsubscribe(seen.append)  # unknown handler is ignored
    emitter.emit(EventType.ROUND_STARTED)
    assert seen == []


def test_history_is_a_copy():
    emitter = EventEmitter()
    emitter.emit(EventType.ROUND_STARTED)
    history = emitter.history
    history.clear()
    assert len(emitter.history) == 1
    assert len(emitter.of_type(EventType.ROUND_STARTED)) == 1
    assert emitter.of_type(EventType.DEALER_HITS) == []

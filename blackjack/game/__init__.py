"""Round engine and state management."""

from blackjack.game.events import GameEvent, EventEmitter, EventType
from blackjack.game.state import RoundPhase, RoundTrigger, next_phase
from blackjack.game.outcome import Outcome, settle
from blackjack.game.engine import (
    HandView,
    Round,
    RoundSnapshot,
    current_state,
    outcome,
    start_round,
    submit_action,
)

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "RoundPhase",
    "RoundTrigger",
    "next_phase",
    "Outcome",
    "settle",
    "HandView",
    "Round",
    "RoundSnapshot",
    "current_state",
    "outcome",
    "start_round",
    "submit_action",
]

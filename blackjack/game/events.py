"""Round events for display collaborators."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of round events."""

    # Round flow events
    ROUND_STARTED = auto()
    PHASE_CHANGED = auto()
    ROUND_SETTLED = auto()
    ROUND_ABORTED = auto()

    # Card events
    CARD_DEALT = auto()

    # Player events
    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_BUSTS = auto()
    PLAYER_BLACKJACK = auto()

    # Dealer events
    DEALER_BLACKJACK = auto()
    DEALER_REVEALS = auto()
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable round event.

    Events only describe what already happened; the engine never reads
    them back.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """Fan-out of round events to subscribers, with a replayable history."""

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event_type: EventType, **data: Any) -> GameEvent:
        """
        Record a new event and hand it to subscribers.

        Type-specific handlers run before catch-all handlers.

        Returns:
            The created event
        """
        event = GameEvent(event_type=event_type, data=data)
        self._event_history.append(event)

        for handler in self._handlers.get(event_type, []):
            handler(event)
        for handler in self._handlers.get(None, []):
            handler(event)

        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return a copy of the event history."""
        return self._event_history.copy()

    def of_type(self, event_type: EventType) -> list[GameEvent]:
        """Return past events of one type, oldest first."""
        return [e for e in self._event_history if e.event_type == event_type]

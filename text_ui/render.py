"""Plain-text rendering of round snapshots."""

from blackjack.game import EventType, GameEvent, HandView, Outcome, RoundSnapshot

HIDDEN_CARD = "??"

DEALER_TURN_EVENTS = (
    EventType.PLAYER_STAND,
    EventType.DEALER_REVEALS,
    EventType.DEALER_HITS,
    EventType.DEALER_STANDS,
    EventType.DEALER_BUSTS,
)

_OUTCOME_MESSAGES = {
    Outcome.PLAYER_BLACKJACK: "Blackjack! You win.",
    Outcome.PLAYER_WIN: "You win!",
    Outcome.DEALER_WIN: "You lose...",
    Outcome.PUSH: "Stand-off.",
    Outcome.PLAYER_BUST: "Bust! House wins.",
    Outcome.DEALER_BUST: "Dealer goes bust! You win.",
}


def render_hand(name: str, view: HandView) -> str:
    """Format one hand, e.g. ``Dealer's Cards: K♠, ??     (value: 10)``."""
    cards = ", ".join(str(c) if c is not None else HIDDEN_CARD for c in view.cards)
    value = f"soft {view.value}" if view.is_soft else str(view.value)
    return f"{name}'s Cards: {cards}     (value: {value})"


def render_round(snapshot: RoundSnapshot, player_name: str = "Player") -> str:
    """Format both hands, dealer first."""
    return "\n".join(
        [
            render_hand("Dealer", snapshot.dealer),
            render_hand(player_name, snapshot.player),
        ]
    )


def render_outcome(outcome: Outcome) -> str:
    return _OUTCOME_MESSAGES[outcome]


def render_dealer_event(event: GameEvent) -> str:
    """Format a dealer-turn event, e.g. ``Hit! NEW CARD: 5♠     (value: 21)``."""
    data = event.data
    if event.event_type == EventType.PLAYER_STAND:
        return "---Dealer's turn!---"
    if event.event_type == EventType.DEALER_REVEALS:
        return f"Dealer reveals {data['card']}     (value: {data['hand_value']})"
    if event.event_type == EventType.DEALER_HITS:
        return f"Hit! NEW CARD: {data['card']}     (value: {data['hand_value']})"
    if event.event_type == EventType.DEALER_STANDS:
        return f"Dealer stands on {data['hand_value']}."
    if event.event_type == EventType.DEALER_BUSTS:
        return "Dealer goes bust!"
    raise ValueError(f"Not a dealer-turn event: {event.event_type.name}")

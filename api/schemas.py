"""Pydantic schemas for API requests and responses."""

from typing import Literal

from pydantic import BaseModel, Field

from blackjack.cards import Card
from blackjack.game import HandView, RoundSnapshot


class NewRoundRequest(BaseModel):
    """Request to deal a new round."""

    seed: int | None = Field(default=None, description="Shuffle seed for a reproducible deal")


class ActionRequest(BaseModel):
    """Request for player action."""

    action: Literal["hit", "stand"]


class CardResponse(BaseModel):
    """Card representation."""

    rank: str
    suit: str
    value: int

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(rank=str(card.rank), suit=card.suit.name.lower(), value=card.value)


class HandResponse(BaseModel):
    """Hand representation. Face-down cards are null."""

    cards: list[CardResponse | None]
    value: int
    is_soft: bool
    is_blackjack: bool
    is_busted: bool

    @classmethod
    def from_view(cls, view: HandView) -> "HandResponse":
        return cls(
            cards=[CardResponse.from_card(c) if c is not None else None for c in view.cards],
            value=view.value,
            is_soft=view.is_soft,
            is_blackjack=view.is_natural,
            is_busted=view.is_busted,
        )


class RoundStateResponse(BaseModel):
    """Current round state."""

    phase: str
    player_hand: HandResponse
    dealer_hand: HandResponse
    pending_actions: list[str]
    outcome: str | None
    cards_remaining: int

    @classmethod
    def from_snapshot(cls, snapshot: RoundSnapshot) -> "RoundStateResponse":
        return cls(
            phase=snapshot.phase.name,
            player_hand=HandResponse.from_view(snapshot.player),
            dealer_hand=HandResponse.from_view(snapshot.dealer),
            pending_actions=[str(a) for a in snapshot.pending_actions],
            outcome=snapshot.outcome.name if snapshot.outcome else None,
            cards_remaining=snapshot.cards_remaining,
        )


class NewRoundResponse(BaseModel):
    """A freshly dealt round and the session that holds it."""

    session_id: str
    state: RoundStateResponse


class OutcomeResponse(BaseModel):
    """Round result. Both fields are null until the round is settled."""

    outcome: str | None
    payout: float | None

"""Single-player blackjack engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.errors import (
    EmptyDeckError,
    EngineError,
    InvalidActionError,
    RoundAlreadyDoneError,
)
from blackjack.hand import Hand, HandValue, hand_value
from blackjack.participants import Action, AutoPlayer, Dealer, Player
from blackjack.rules import RuleSet

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "EmptyDeckError",
    "EngineError",
    "InvalidActionError",
    "RoundAlreadyDoneError",
    "Hand",
    "HandValue",
    "hand_value",
    "Action",
    "AutoPlayer",
    "Dealer",
    "Player",
    "RuleSet",
]

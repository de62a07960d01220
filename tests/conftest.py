"""Pytest fixtures for blackjack engine tests."""

from random import Random

import pytest

from blackjack.cards import Card, Deck
from blackjack.game import Round
from blackjack.hand import Hand
from blackjack.rules import RuleSet


def _make_hand(*cards: str) -> Hand:
    """Build a hand from short card strings like 'AS', '10H'."""
    return Hand([Card.from_string(c) for c in cards])


def _stacked_deck(*cards: str) -> Deck:
    """A deck that deals ``cards`` in the order given."""
    return Deck.from_cards(Card.from_string(c) for c in cards)


def _dealt_round(
    *cards: str,
    rules: RuleSet | None = None,
    auto_dealer: bool = True,
) -> Round:
    """
    Start a round on a stacked deck.

    Opening deal order is player, dealer, player, dealer; anything after
    that feeds hits.
    """
    round_ = Round(rules=rules, deck=_stacked_deck(*cards), auto_dealer=auto_dealer)
    round_.start()
    return round_


@pytest.fixture
def make_hand():
    """Factory: hand from card strings."""
    return _make_hand


@pytest.fixture
def stacked_deck():
    """Factory: deck dealing the given cards in order."""
    return _stacked_deck


@pytest.fixture
def dealt_round():
    """Factory: round started on a stacked deck."""
    return _dealt_round


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return _make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return _make_hand("AS", "6H")


@pytest.fixture
def hard_17_hand():
    """A hard 17 hand (10-7)."""
    return _make_hand("10S", "7H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return _make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return _make_hand("10S", "6H", "KC")


@pytest.fixture
def rules():
    """Default ruleset (dealer hits soft 17)."""
    return RuleSet()


@pytest.fixture
def s17_rules():
    """Dealer stands on soft 17."""
    return RuleSet.vegas_strip()


"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

from blackjack.errors import EmptyDeckError


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, ordered Two through Ace."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the point value with the Ace counted high (11)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE


_RANK_TOKENS = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

_SUIT_TOKENS = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card. Identity is rank and suit only."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the point value with the Ace counted high."""
        return self.rank.blackjack_value

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10d'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_TOKENS:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_TOKENS:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_TOKENS[rank_str], _SUIT_TOKENS[suit_str])


def standard_cards() -> list[Card]:
    """Return the 52 standard cards in canonical order (suit-major, rank-minor)."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    A single 52-card draw pile.

    The top of the pile is the end of the internal list, so ``draw`` pops
    from there.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a deck in canonical order.

        Args:
            rng: Random number generator used by ``shuffle`` when none is
                passed to it directly
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Build a stacked deck. The first card given is the first one drawn.

        No uniqueness check is made; this is meant for replays and tests.
        """
        deck = cls(rng=rng)
        deck._cards = list(reversed(list(cards)))
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in canonical order."""
        self._cards = standard_cards()

    def shuffle(self, rng: Random | None = None) -> None:
        """
        Shuffle the remaining cards in place.

        Args:
            rng: Generator to use for this shuffle, defaults to the deck's own
        """
        (rng or self._rng).shuffle(self._cards)

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise EmptyDeckError("Cannot draw from empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

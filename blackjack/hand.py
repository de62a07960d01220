"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple

from blackjack.cards import Card, Rank

BLACKJACK_TOTAL = 21
ACE_DEMOTION = 10  # An Ace drops from 11 to 1


class HandValue(NamedTuple):
    """Best total of a hand and whether an Ace is still counted as 11."""

    total: int
    is_soft: bool


def hand_value(ranks: Iterable[Rank]) -> HandValue:
    """
    Calculate the best total for a sequence of ranks.

    Every Ace starts at 11. While the total is over 21 and an Ace is still
    counted high, one Ace is demoted to 1. Suits and card order play no part.

    Examples:
        >>> hand_value([Rank.ACE, Rank.ACE, Rank.NINE])
        HandValue(total=21, is_soft=True)
        >>> hand_value([Rank.TEN, Rank.SEVEN])
        HandValue(total=17, is_soft=False)
    """
    total = 0
    high_aces = 0

    for rank in ranks:
        total += rank.blackjack_value
        if rank.is_ace:
            high_aces += 1

    while total > BLACKJACK_TOTAL and high_aces > 0:
        total -= ACE_DEMOTION
        high_aces -= 1

    return HandValue(total, high_aces > 0)


@dataclass
class Hand:
    """An ordered run of cards belonging to one participant."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    def evaluate(self) -> HandValue:
        """Return the best total and softness of the hand."""
        return hand_value(card.rank for card in self.cards)

    @property
    def value(self) -> int:
        """Best total; over 21 only when no Ace is left to demote."""
        return self.evaluate().total

    @property
    def is_soft(self) -> bool:
        """Check if an Ace is still counted as 11."""
        return self.evaluate().is_soft

    @property
    def is_hard(self) -> bool:
        return not self.is_soft

    @property
    def is_natural(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == BLACKJACK_TOTAL

    is_blackjack = is_natural

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK_TOTAL

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        total, soft = self.evaluate()
        value_str = f"({total})"
        if soft:
            value_str = f"(soft {total})"
        if self.is_natural:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"

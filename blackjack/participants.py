"""Round participants: the player seat, the dealer and a simple bot."""

from dataclasses import dataclass, field
from enum import Enum

from blackjack.cards import Card, Rank
from blackjack.hand import Hand
from blackjack.rules import RuleSet

DEALER_STAND_TOTAL = 17


class Action(Enum):
    """Player actions accepted during the player turn."""

    HIT = "hit"
    STAND = "stand"

    def __str__(self) -> str:
        return self.value


@dataclass
class Participant:
    """A seat at the table owning exactly one hand."""

    name: str
    hand: Hand = field(default_factory=Hand)


@dataclass
class Player(Participant):
    """The human seat. Decisions come from outside the engine."""

    name: str = "Player"


@dataclass
class Dealer(Participant):
    """The house. Plays a fixed policy that depends only on its own hand."""

    name: str = "Dealer"

    @property
    def upcard(self) -> Card | None:
        """The face-up card (first card dealt to the dealer)."""
        return self.hand.cards[0] if self.hand.cards else None

    @property
    def hole_card(self) -> Card | None:
        return self.hand.cards[1] if len(self.hand.cards) > 1 else None

    def should_hit(self, rules: RuleSet) -> bool:
        """
        Decide whether the dealer draws another card.

        Hits below 17, and on soft 17 when the rules say so.
        """
        total, soft = self.hand.evaluate()
        if total < DEALER_STAND_TOTAL:
            return True
        if total == DEALER_STAND_TOTAL and soft and rules.dealer_hits_soft_17:
            return True
        return False


# Hard total the bot stands on, keyed by dealer upcard.
_STAND_ON_HARD: dict[Rank, int] = {
    Rank.TWO: 13,
    Rank.THREE: 13,
    Rank.FOUR: 12,
    Rank.FIVE: 12,
    Rank.SIX: 12,
}
_STAND_ON_HARD_DEFAULT = 17
_STAND_ON_SOFT = 18


class AutoPlayer:
    """
    A bot that plays a simplified basic strategy without counting cards.

    Soft hands hit until 18. Hard hands stand on 12+ against a weak
    upcard (4-6), 13+ against 2-3, and 17+ against everything else.
    """

    def decide(self, hand: Hand, dealer_upcard: Card | None) -> Action:
        """Pick an action for ``hand`` given the dealer's visible card."""
        total, soft = hand.evaluate()

        if soft:
            return Action.STAND if total >= _STAND_ON_SOFT else Action.HIT

        stop_at = _STAND_ON_HARD_DEFAULT
        if dealer_upcard is not None:
            stop_at = _STAND_ON_HARD.get(dealer_upcard.rank, _STAND_ON_HARD_DEFAULT)

        return Action.STAND if total >= stop_at else Action.HIT

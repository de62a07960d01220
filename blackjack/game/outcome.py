"""Round outcomes and settlement."""

from decimal import Decimal
from enum import Enum, auto

from blackjack.hand import Hand
from blackjack.rules import RuleSet


class Outcome(Enum):
    """Final result of a round, from the player's point of view."""

    PLAYER_BLACKJACK = auto()
    PLAYER_WIN = auto()
    DEALER_WIN = auto()
    PUSH = auto()
    PLAYER_BUST = auto()
    DEALER_BUST = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def player_wins(self) -> bool:
        return self in (Outcome.PLAYER_BLACKJACK, Outcome.PLAYER_WIN, Outcome.DEALER_BUST)

    @property
    def is_push(self) -> bool:
        return self == Outcome.PUSH

    def payout(self, rules: RuleSet | None = None) -> Decimal:
        """
        Stake multiplier for this outcome.

        A natural pays the table's blackjack payout (3:2 by default),
        other wins pay even money, a push returns the stake and losses
        forfeit it.
        """
        if self == Outcome.PLAYER_BLACKJACK:
            return Decimal(str((rules or RuleSet()).blackjack_payout))
        if self.player_wins:
            return Decimal("1")
        if self.is_push:
            return Decimal("0")
        return Decimal("-1")


def settle(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare final hands.

    Pure over the two hands, so settling the same hands twice gives the
    same result. A player bust loses even if the dealer would have busted.
    """
    if player_hand.is_busted:
        return Outcome.PLAYER_BUST

    player_bj = player_hand.is_natural
    dealer_bj = dealer_hand.is_natural

    if player_bj and dealer_bj:
        return Outcome.PUSH
    if player_bj:
        return Outcome.PLAYER_BLACKJACK
    if dealer_bj:
        return Outcome.DEALER_WIN

    if dealer_hand.is_busted:
        return Outcome.DEALER_BUST

    player_value = player_hand.value
    dealer_value = dealer_hand.value
    if player_value > dealer_value:
        return Outcome.PLAYER_WIN
    if dealer_value > player_value:
        return Outcome.DEALER_WIN
    return Outcome.PUSH

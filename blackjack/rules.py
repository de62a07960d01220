"""Blackjack house rules."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RuleSet:
    """
    Table rules a round is played under.

    Only the rules that change engine behaviour live here: the dealer's
    soft 17 policy and the blackjack payout signal.
    """

    # Dealer rules
    dealer_hits_soft_17: bool = True  # H17 vs S17

    # Blackjack payout (3:2 = 1.5, 6:5 = 1.2)
    blackjack_payout: Decimal = Decimal("1.5")

    def __post_init__(self) -> None:
        """Validate rule values."""
        if Decimal(str(self.blackjack_payout)) < 1:
            raise ValueError("blackjack_payout must be at least 1.0")

    @classmethod
    def vegas_strip(cls) -> "RuleSet":
        """Vegas Strip rules (dealer stands on soft 17)."""
        return cls(dealer_hits_soft_17=False, blackjack_payout=Decimal("1.5"))

    @classmethod
    def downtown_vegas(cls) -> "RuleSet":
        """Downtown Las Vegas rules (dealer hits soft 17)."""
        return cls(dealer_hits_soft_17=True, blackjack_payout=Decimal("1.5"))

    @property
    def name(self) -> str:
        """Short label for the dealer policy, e.g. 'H17'."""
        return "H17" if self.dealer_hits_soft_17 else "S17"

"""Tests for settlement."""

from decimal import Decimal

import pytest

from blackjack.game.outcome import Outcome, settle
from blackjack.rules import RuleSet


class TestSettle:
    def test_player_wins_higher_value(self, make_hand):
        assert settle(make_hand("10S", "9H"), make_hand("10C", "8D")) == Outcome.PLAYER_WIN

    def test_dealer_wins_higher_value(self, make_hand):
        assert settle(make_hand("10S", "7H"), make_hand("10C", "9D")) == Outcome.DEALER_WIN

    def test_push(self, make_hand):
        assert settle(make_hand("10S", "8H"), make_hand("10C", "8D")) == Outcome.PUSH

    def test_player_bust(self, make_hand):
        assert settle(make_hand("10S", "6H", "KC"), make_hand("10D", "7S")) == Outcome.PLAYER_BUST

    def test_dealer_bust(self, make_hand):
        assert settle(make_hand("10S", "7H"), make_hand("10C", "6D", "KS")) == Outcome.DEALER_BUST

    def test_player_bust_beats_dealer_bust(self, make_hand):
        """Both busting still goes to the house."""
        player = make_hand("10S", "6H", "KC")
        dealer = make_hand("10D", "6C", "QS")
        assert settle(player, dealer) == Outcome.PLAYER_BUST

    def test_player_blackjack_vs_dealer_21(self, make_hand):
        dealer = make_hand("7C", "7D", "7S")
        assert settle(make_hand("AS", "KH"), dealer) == Outcome.PLAYER_BLACKJACK

    def test_dealer_blackjack_vs_player_21(self, make_hand):
        assert settle(make_hand("7C", "7D", "7S"), make_hand("AS", "KH")) == Outcome.DEALER_WIN

    def test_both_blackjack_push(self, make_hand):
        assert settle(make_hand("AS", "KH"), make_hand("AC", "QD")) == Outcome.PUSH

    def test_idempotent(self, make_hand):
        player = make_hand("10S", "9H")
        dealer = make_hand("10C", "6D", "5S")
        assert settle(player, dealer) == settle(player, dealer) == Outcome.DEALER_WIN


class TestPayout:
    @pytest.mark.parametrize(
        "outcome,expected",
        [
            (Outcome.PLAYER_BLACKJACK, Decimal("1.5")),
            (Outcome.PLAYER_WIN, Decimal("1")),
            (Outcome.DEALER_BUST, Decimal("1")),
            (Outcome.PUSH, Decimal("0")),
            (Outcome.DEALER_WIN, Decimal("-1")),
            (Outcome.PLAYER_BUST, Decimal("-1")),
        ],
    )
    def test_default_payouts(self, outcome, expected):
        assert outcome.payout() == expected

    def test_six_to_five_table(self):
        rules = RuleSet(blackjack_payout=Decimal("1.2"))
        assert Outcome.PLAYER_BLACKJACK.payout(rules) == Decimal("1.2")

    def test_player_wins_flag(self):
        winners = {o for o in Outcome if o.player_wins}
        assert winners == {Outcome.PLAYER_BLACKJACK, Outcome.PLAYER_WIN, Outcome.DEALER_BUST}

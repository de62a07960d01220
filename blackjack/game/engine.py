"""Round engine: one deal from the first card to settlement."""

from dataclasses import dataclass
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.errors import EmptyDeckError, InvalidActionError, RoundAlreadyDoneError
from blackjack.hand import Hand, hand_value
from blackjack.participants import Action, Dealer, Participant, Player
from blackjack.rules import RuleSet
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.outcome import Outcome, settle
from blackjack.game.state import (
    RoundPhase,
    RoundTrigger,
    machine_transitions,
    next_phase,
    trigger_name,
)

RngSource = int | Random | None

# Phases in which the dealer's second card is still face down.
_HOLE_CARD_HIDDEN = frozenset(
    {RoundPhase.DEALING, RoundPhase.CHECK_NATURALS, RoundPhase.PLAYER_TURN}
)


def _resolve_rng(source: RngSource) -> Random:
    """Accept a seed, a generator, or nothing."""
    if isinstance(source, Random):
        return source
    return Random(source)


@dataclass(frozen=True)
class HandView:
    """Read-only view of a hand as a display would show it."""

    cards: tuple[Card | None, ...]
    value: int
    is_soft: bool
    is_natural: bool
    is_busted: bool

    @classmethod
    def of(cls, hand: Hand, hide_hole_card: bool = False) -> "HandView":
        """
        Build a view of ``hand``.

        With ``hide_hole_card`` every card after the first is reported as
        None and the value covers the first card only.
        """
        if hide_hole_card and len(hand) > 1:
            shown = hand.cards[0]
            total, soft = hand_value([shown.rank])
            return cls(
                cards=(shown,) + (None,) * (len(hand) - 1),
                value=total,
                is_soft=soft,
                is_natural=False,
                is_busted=False,
            )

        total, soft = hand.evaluate()
        return cls(
            cards=tuple(hand.cards),
            value=total,
            is_soft=soft,
            is_natural=hand.is_natural,
            is_busted=hand.is_busted,
        )


@dataclass(frozen=True)
class RoundSnapshot:
    """Everything a front-end needs to render the round at one instant."""

    phase: RoundPhase
    player: HandView
    dealer: HandView
    pending_actions: tuple[Action, ...]
    outcome: Outcome | None
    cards_remaining: int


class Round:
    """
    One round of single-player blackjack using a state machine.

    The round owns its deck and both hands. It is UI-agnostic: the
    caller supplies player actions and reads snapshots or events back.
    Errors are raised, never logged.
    """

    STATES = [phase.name.lower() for phase in RoundPhase]

    def __init__(
        self,
        rules: RuleSet | None = None,
        rng: RngSource = None,
        deck: Deck | None = None,
        auto_dealer: bool = True,
    ) -> None:
        """
        Set up a round ready to deal.

        Args:
            rules: Table rules (H17 with 3:2 blackjacks if not provided)
            rng: Seed or generator for the shuffle
            deck: Pre-arranged deck to use as-is instead of a fresh shuffled one
            auto_dealer: Play the dealer's turn as soon as the player stands.
                When False the round waits in DEALER_TURN for ``play_dealer``.
        """
        self.rules = rules or RuleSet()
        self.auto_dealer = auto_dealer

        if deck is None:
            deck = Deck(rng=_resolve_rng(rng))
            deck.shuffle()
        self.deck = deck

        self.player = Player()
        self.dealer = Dealer()
        self.events = EventEmitter()
        self._dealt = False
        self._outcome: Outcome | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=machine_transitions(),
            initial=RoundPhase.DEALING.name.lower(),
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def phase(self) -> RoundPhase:
        """Get current phase as enum."""
        return RoundPhase[self._machine_state.upper()]  # type: ignore[attr-defined]

    @property
    def outcome(self) -> Outcome | None:
        """Outcome once the round is settled, else None."""
        return self._outcome

    @property
    def pending_actions(self) -> tuple[Action, ...]:
        if self.phase == RoundPhase.PLAYER_TURN:
            return (Action.HIT, Action.STAND)
        return ()

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    def start(self) -> RoundSnapshot:
        """
        Deal the opening cards and check for naturals.

        Deal order is player, dealer, player, dealer (the last face down).
        If either side holds a natural the round settles immediately.

        Raises:
            EmptyDeckError: The deck ran out; the round is aborted
        """
        self._ensure_live()
        if self._dealt:
            raise InvalidActionError("Cards have already been dealt")

        self.events.emit(
            EventType.ROUND_STARTED,
            rules=self.rules.name,
            cards_remaining=len(self.deck),
        )

        self._deal_card(self.player)
        self._deal_card(self.dealer)
        self._deal_card(self.player)
        self._deal_card(self.dealer, face_up=False)
        self._dealt = True

        self._advance(RoundTrigger.DEALT)
        self._check_naturals()
        return self.snapshot()

    def submit(self, action: Action) -> RoundSnapshot:
        """
        Apply a player action.

        Raises:
            InvalidActionError: Not the player's turn, or not an Action.
                Nothing is changed.
            RoundAlreadyDoneError: The round is finished or aborted
            EmptyDeckError: The deck ran out on a hit; the round is aborted
        """
        self._ensure_live()
        if not isinstance(action, Action):
            raise InvalidActionError(f"Unknown action: {action!r}")
        if self.phase != RoundPhase.PLAYER_TURN:
            raise InvalidActionError(f"Cannot {action} during {self.phase}")

        if action is Action.HIT:
            self._player_hit()
        else:
            self._player_stand()
        return self.snapshot()

    def play_dealer(self) -> RoundSnapshot:
        """
        Run the dealer's turn to completion and settle.

        Only needed when the round was created with ``auto_dealer=False``.
        """
        self._ensure_live()
        if self.phase != RoundPhase.DEALER_TURN:
            raise InvalidActionError(f"Dealer cannot play during {self.phase}")
        self._play_dealer()
        return self.snapshot()

    def settle(self) -> Outcome:
        """
        Return the settled outcome.

        Safe to call any number of times once the round is done.
        """
        if self.phase == RoundPhase.ABORTED:
            raise RoundAlreadyDoneError("Round was aborted and has no outcome")
        if self._outcome is None:
            raise InvalidActionError(f"Round is not settled yet ({self.phase})")
        return self._outcome

    def snapshot(self) -> RoundSnapshot:
        """Read-only picture of the round. Does not mutate anything."""
        phase = self.phase
        return RoundSnapshot(
            phase=phase,
            player=HandView.of(self.player.hand),
            dealer=HandView.of(
                self.dealer.hand,
                hide_hole_card=phase in _HOLE_CARD_HIDDEN,
            ),
            pending_actions=self.pending_actions,
            outcome=self._outcome,
            cards_remaining=len(self.deck),
        )

    def _ensure_live(self) -> None:
        if self.phase.is_terminal:
            raise RoundAlreadyDoneError(f"Round is already {self.phase}")

    def _advance(self, trigger: RoundTrigger) -> None:
        """Fire ``trigger`` on the machine after checking the table."""
        before = self.phase
        after = next_phase(before, trigger)
        getattr(self, trigger_name(trigger))()
        if after != before:
            self.events.emit(
                EventType.PHASE_CHANGED,
                source=before.name,
                dest=after.name,
            )

    def _deal_card(self, seat: Participant, face_up: bool = True) -> Card:
        """Move the top card of the deck into ``seat``'s hand."""
        try:
            card = self.deck.draw()
        except EmptyDeckError:
            self._abort()
            raise

        seat.hand.add_card(card)
        self.events.emit(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand=seat.name.lower(),
            hand_value=seat.hand.value if face_up else None,
        )
        return card

    def _abort(self) -> None:
        self._advance(RoundTrigger.DECK_EXHAUSTED)
        self.events.emit(
            EventType.ROUND_ABORTED,
            reason="deck exhausted",
            player_cards=len(self.player.hand),
            dealer_cards=len(self.dealer.hand),
        )

    def _check_naturals(self) -> None:
        player_bj = self.player.hand.is_natural
        dealer_bj = self.dealer.hand.is_natural

        if not (player_bj or dealer_bj):
            self._advance(RoundTrigger.NO_NATURALS)
            return

        self._reveal_hole_card()
        if player_bj:
            self.events.emit(EventType.PLAYER_BLACKJACK)
        if dealer_bj:
            self.events.emit(EventType.DEALER_BLACKJACK)

        self._advance(RoundTrigger.NATURAL_FOUND)
        self._settle()

    def _player_hit(self) -> None:
        card = self._deal_card(self.player)
        hand = self.player.hand
        self.events.emit(EventType.PLAYER_HIT, card=str(card), hand_value=hand.value)

        if hand.is_busted:
            self.events.emit(EventType.PLAYER_BUSTS, hand_value=hand.value)
            self._advance(RoundTrigger.PLAYER_BUSTED)
            self._settle()
            return

        self._advance(RoundTrigger.HIT)

    def _player_stand(self) -> None:
        self.events.emit(EventType.PLAYER_STAND, hand_value=self.player.hand.value)
        self._advance(RoundTrigger.STAND)
        self._reveal_hole_card()
        if self.auto_dealer:
            self._play_dealer()

    def _reveal_hole_card(self) -> None:
        hole = self.dealer.hole_card
        if hole is not None:
            self.events.emit(
                EventType.DEALER_REVEALS,
                card=str(hole),
                hand_value=self.dealer.hand.value,
            )

    def _play_dealer(self) -> None:
        """Dealer draws under the fixed policy, then the round settles."""
        while self.dealer.should_hit(self.rules):
            card = self._deal_card(self.dealer)
            self.events.emit(
                EventType.DEALER_HITS,
                card=str(card),
                hand_value=self.dealer.hand.value,
            )

        if self.dealer.hand.is_busted:
            self.events.emit(EventType.DEALER_BUSTS, hand_value=self.dealer.hand.value)
        else:
            self.events.emit(EventType.DEALER_STANDS, hand_value=self.dealer.hand.value)

        self._advance(RoundTrigger.DEALER_DONE)
        self._settle()

    def _settle(self) -> None:
        self._outcome = settle(self.player.hand, self.dealer.hand)
        self.events.emit(
            EventType.ROUND_SETTLED,
            outcome=self._outcome.name,
            payout=str(self._outcome.payout(self.rules)),
            player_value=self.player.hand.value,
            dealer_value=self.dealer.hand.value,
        )
        self._advance(RoundTrigger.SETTLED)


def start_round(
    rng: RngSource = None,
    rules: RuleSet | None = None,
    auto_dealer: bool = True,
) -> Round:
    """Create a round from a seed or generator and deal it."""
    round_ = Round(rules=rules, rng=rng, auto_dealer=auto_dealer)
    round_.start()
    return round_


def current_state(round_: Round) -> RoundSnapshot:
    """Read-only snapshot for rendering."""
    return round_.snapshot()


def submit_action(round_: Round, action: Action) -> RoundSnapshot:
    """Apply a player action and return the new snapshot."""
    return round_.submit(action)


def outcome(round_: Round) -> Outcome | None:
    """Outcome once settlement has been reached, else None."""
    return round_.outcome

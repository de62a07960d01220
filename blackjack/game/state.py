"""Round phase enumeration and transition table."""

from enum import Enum, auto

from blackjack.errors import InvalidActionError


class RoundPhase(Enum):
    """
    Round state machine phases.

    Flow: DEALING → CHECK_NATURALS → PLAYER_TURN → DEALER_TURN → SETTLEMENT → DONE
    """

    # Initial cards being dealt
    DEALING = auto()

    # Looking for two-card 21s
    CHECK_NATURALS = auto()

    # Player decides hit or stand
    PLAYER_TURN = auto()

    # Dealer plays its fixed policy
    DEALER_TURN = auto()

    # Comparing hands
    SETTLEMENT = auto()

    # Round finished
    DONE = auto()

    # Deck ran out mid-round; no outcome
    ABORTED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def is_terminal(self) -> bool:
        return self in (RoundPhase.DONE, RoundPhase.ABORTED)


class RoundTrigger(Enum):
    """Events that move a round between phases."""

    DEALT = auto()
    NO_NATURALS = auto()
    NATURAL_FOUND = auto()
    HIT = auto()
    PLAYER_BUSTED = auto()
    STAND = auto()
    DEALER_DONE = auto()
    SETTLED = auto()
    DECK_EXHAUSTED = auto()


_LIVE_PHASES = [
    RoundPhase.DEALING,
    RoundPhase.CHECK_NATURALS,
    RoundPhase.PLAYER_TURN,
    RoundPhase.DEALER_TURN,
    RoundPhase.SETTLEMENT,
]

# (trigger, sources, dest)
TRANSITIONS: list[tuple[RoundTrigger, list[RoundPhase], RoundPhase]] = [
    (RoundTrigger.DEALT, [RoundPhase.DEALING], RoundPhase.CHECK_NATURALS),
    (RoundTrigger.NO_NATURALS, [RoundPhase.CHECK_NATURALS], RoundPhase.PLAYER_TURN),
    (RoundTrigger.NATURAL_FOUND, [RoundPhase.CHECK_NATURALS], RoundPhase.SETTLEMENT),
    (RoundTrigger.HIT, [RoundPhase.PLAYER_TURN], RoundPhase.PLAYER_TURN),
    (RoundTrigger.PLAYER_BUSTED, [RoundPhase.PLAYER_TURN], RoundPhase.SETTLEMENT),
    (RoundTrigger.STAND, [RoundPhase.PLAYER_TURN], RoundPhase.DEALER_TURN),
    (RoundTrigger.DEALER_DONE, [RoundPhase.DEALER_TURN], RoundPhase.SETTLEMENT),
    (RoundTrigger.SETTLED, [RoundPhase.SETTLEMENT], RoundPhase.DONE),
    (RoundTrigger.DECK_EXHAUSTED, _LIVE_PHASES, RoundPhase.ABORTED),
]

_TABLE: dict[tuple[RoundPhase, RoundTrigger], RoundPhase] = {
    (source, trigger): dest
    for trigger, sources, dest in TRANSITIONS
    for source in sources
}


def next_phase(phase: RoundPhase, trigger: RoundTrigger) -> RoundPhase:
    """
    Return the phase reached by applying ``trigger`` in ``phase``.

    Args:
        phase: Current phase
        trigger: Event being applied

    Raises:
        InvalidActionError: If the pair is not in the transition table
    """
    try:
        return _TABLE[(phase, trigger)]
    except KeyError:
        raise InvalidActionError(
            f"{trigger.name.lower()} is not allowed during {phase}"
        ) from None


def is_valid_transition(phase: RoundPhase, trigger: RoundTrigger) -> bool:
    """Check if ``trigger`` may fire in ``phase``."""
    return (phase, trigger) in _TABLE


def trigger_name(trigger: RoundTrigger) -> str:
    """Name of the method `transitions` binds on the model for ``trigger``."""
    return f"fire_{trigger.name.lower()}"


def machine_transitions() -> list[dict[str, object]]:
    """Render the table in the form ``transitions.Machine`` expects."""
    return [
        {
            "trigger": trigger_name(trigger),
            "source": [source.name.lower() for source in sources],
            "dest": dest.name.lower(),
        }
        for trigger, sources, dest in TRANSITIONS
    ]

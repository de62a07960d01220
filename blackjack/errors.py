"""Errors raised by the round engine."""


class EngineError(Exception):
    """Base class for all engine errors."""


class InvalidActionError(EngineError, ValueError):
    """An action is not valid for the round's current phase.

    Recoverable: the round is left untouched and the caller may re-prompt.
    """


class EmptyDeckError(EngineError, IndexError):
    """A draw was attempted on a deck with no cards left."""


class RoundAlreadyDoneError(InvalidActionError):
    """An operation was attempted on a finished or aborted round.

    A special case of an invalid action: the caller has to start a new round.
    """

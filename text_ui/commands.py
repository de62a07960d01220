"""Mapping of typed commands to engine actions."""

from blackjack.participants import Action

ACTION_PROMPT = "Hit (h) or Stand (s)?"

_TOKENS = {
    "hit": Action.HIT,
    "h": Action.HIT,
    "stand": Action.STAND,
    "s": Action.STAND,
}


def parse_action(token: str) -> Action | None:
    """Return the action for a typed token, or None if it is not recognized."""
    return _TOKENS.get(token.strip().lower())

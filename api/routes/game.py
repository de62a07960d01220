"""Game API endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Header

from api.schemas import (
    ActionRequest,
    NewRoundRequest,
    NewRoundResponse,
    OutcomeResponse,
    RoundStateResponse,
)
from api.session import get_session_store
from blackjack.game import Round, current_state, outcome, submit_action
from blackjack.participants import Action
from config import config

router = APIRouter()


def _get_round(session_id: str) -> Round:
    """Look up the session's round or fail with 404."""
    round_ = get_session_store().get(session_id)
    if round_ is None:
        raise HTTPException(status_code=404, detail="Unknown or expired session")
    return round_


@router.post("/new")
async def new_round(request: NewRoundRequest | None = None) -> NewRoundResponse:
    """Shuffle a fresh deck, deal a round and open a session for it."""
    seed = request.seed if request and request.seed is not None else config.game.seed
    round_ = Round(rules=config.game.to_rules(), rng=seed)
    session_id = get_session_store().create(round_)

    # Dealing can only fail on an exhausted deck; the handler reports it.
    round_.start()

    return NewRoundResponse(
        session_id=session_id,
        state=RoundStateResponse.from_snapshot(current_state(round_)),
    )


@router.get("/state")
async def get_state(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> RoundStateResponse:
    """Get current round state."""
    round_ = _get_round(session_id)
    return RoundStateResponse.from_snapshot(current_state(round_))


@router.post("/action")
async def player_action(
    request: ActionRequest,
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> RoundStateResponse:
    """Apply hit or stand to the session's round."""
    round_ = _get_round(session_id)
    snapshot = submit_action(round_, Action(request.action))
    return RoundStateResponse.from_snapshot(snapshot)


@router.get("/outcome")
async def get_outcome(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> OutcomeResponse:
    """Get the round outcome and its payout multiplier, once settled."""
    round_ = _get_round(session_id)
    result = outcome(round_)
    if result is None:
        return OutcomeResponse(outcome=None, payout=None)
    return OutcomeResponse(outcome=result.name, payout=float(result.payout(round_.rules)))

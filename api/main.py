"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import game
from blackjack.errors import EmptyDeckError, InvalidActionError, RoundAlreadyDoneError
from config import config

logger = logging.getLogger(__name__)


async def _invalid_action_handler(request: Request, exc: InvalidActionError) -> JSONResponse:
    """Reject an action the round cannot take right now."""
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _round_done_handler(request: Request, exc: RoundAlreadyDoneError) -> JSONResponse:
    """Reject any action on a finished round."""
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def _empty_deck_handler(request: Request, exc: EmptyDeckError) -> JSONResponse:
    """Report a round aborted by an exhausted deck."""
    logger.warning("Round aborted: %s", exc)
    return JSONResponse(status_code=500, content={"detail": f"Round aborted: {exc}"})


app = FastAPI(
    title="Blackjack",
    description="Single-player blackjack against an automated dealer",
    version="0.1.0",
    debug=config.debug,
)

# Handlers resolve by exception MRO, so finished rounds get 409 rather than 400
app.add_exception_handler(RoundAlreadyDoneError, _round_done_handler)
app.add_exception_handler(InvalidActionError, _invalid_action_handler)
app.add_exception_handler(EmptyDeckError, _empty_deck_handler)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(game.router, prefix="/api/game", tags=["game"])

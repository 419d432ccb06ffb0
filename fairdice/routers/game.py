"""Game session router for fairdice."""

from fastapi import APIRouter, HTTPException

from fairdice.config import settings
from fairdice.errors import InvalidInputError
from fairdice.models.fairness import DiceSet
from fairdice.models.game import GameSession, sessions, sessions_lock
from fairdice.models.requests import ChooseDiceRequest, StartGameRequest
from fairdice.models.responses import (
    GameAbortResponse,
    GamePlayResponse,
    GameStartResponse,
    GameStatusResponse,
)

router = APIRouter(prefix="/game", tags=["game"])


def _get_session(session_id: str) -> GameSession:
    game = sessions.get(session_id)
    if not game:
        raise HTTPException(status_code=404, detail="session not found")
    return game


@router.post("/start", response_model=GameStartResponse)
async def game_start(body: StartGameRequest):
    """Start a game against the computer.

    Draws the first mover immediately; the response carries the commit proof
    and the reveal key for that draw.
    """
    if len(body.dice) < settings.min_dice_sets:
        raise InvalidInputError(f"provide at least {settings.min_dice_sets} dice sets")

    game = GameSession([DiceSet(tuple(faces)) for faces in body.dice])
    game.decide_first_mover()

    async with sessions_lock:
        sessions[game.session_id] = game
        while len(sessions) > settings.max_active_sessions:
            sessions.popitem(last=False)

    return {
        "session_id": game.session_id,
        "status": game.status,
        "dice": [list(d.faces) for d in game.dice_sets],
        "first_mover": game.first_mover.to_dict(),
    }


@router.post("/{session_id}/choose", response_model=GamePlayResponse)
async def game_choose(session_id: str, body: ChooseDiceRequest):
    """Pick a dice set, roll both dice and declare the winner."""
    async with sessions_lock:
        game = _get_session(session_id)
        result = game.play(body.index)

    return {
        "session_id": game.session_id,
        "status": game.status,
        "user_dice_index": body.index,
        "computer_dice_index": game.opponent_dice_index(),
        "result": result.to_dict(),
    }


@router.post("/{session_id}/abort", response_model=GameAbortResponse)
async def game_abort(session_id: str):
    """End a session without a verdict."""
    async with sessions_lock:
        game = _get_session(session_id)
        game.abort()
    return {"ok": True, "status": game.status}


@router.get("/{session_id}", response_model=GameStatusResponse)
async def game_status(session_id: str):
    """Return the public state of a session."""
    async with sessions_lock:
        game = _get_session(session_id)
        return game.snapshot()

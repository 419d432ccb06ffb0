"""Pydantic response models for fairdice API."""

from typing import List, Optional, Union

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    env: str
    version: str


class CommitmentResponse(BaseModel):
    """A commitment as shown to the player: proof first, then key."""
    value: Union[int, str]
    proof: str
    key: str


class FirstMoverResponse(BaseModel):
    """First-mover draw and its commitment."""
    mover: str
    commitment: CommitmentResponse


class GameStartResponse(BaseModel):
    """Response after starting a game."""
    session_id: str
    status: str
    dice: List[List[int]]
    first_mover: FirstMoverResponse


class GameResultResponse(BaseModel):
    """Both rolls, the first-mover draw and the verdict."""
    first_mover: CommitmentResponse
    user_roll: CommitmentResponse
    computer_roll: CommitmentResponse
    verdict: str


class GamePlayResponse(BaseModel):
    """Response after the player picks a dice set."""
    session_id: str
    status: str
    user_dice_index: int
    computer_dice_index: int
    result: GameResultResponse


class GameStatusResponse(BaseModel):
    """Public state of a session."""
    session_id: str
    status: str
    dice: List[List[int]]
    first_mover: Optional[FirstMoverResponse] = None
    result: Optional[GameResultResponse] = None


class GameAbortResponse(BaseModel):
    """Response after aborting a session."""
    ok: bool
    status: str


class VerifyResponse(BaseModel):
    """Whether a revealed commitment matches its proof."""
    valid: bool

"""Pydantic request models for fairdice API."""

from typing import List, Union

from pydantic import BaseModel, Field, field_validator


class StartGameRequest(BaseModel):
    """Request to start a game with the given dice sets."""
    dice: List[List[int]] = Field(..., min_length=1)

    @field_validator("dice")
    @classmethod
    def _no_empty_dice(cls, v: List[List[int]]) -> List[List[int]]:
        for i, faces in enumerate(v):
            if not faces:
                raise ValueError(f"dice {i + 1} has no faces")
        return v


class ChooseDiceRequest(BaseModel):
    """Request to play a session with the dice set at ``index``."""
    index: int


class VerifyRequest(BaseModel):
    """Request to check a revealed commitment."""
    value: Union[int, str]
    proof: str
    key: str

"""Commitment verification router for fairdice."""

from fastapi import APIRouter

from fairdice.models.requests import VerifyRequest
from fairdice.models.responses import VerifyResponse
from fairdice.utils.commit_reveal import verify_commitment

router = APIRouter(tags=["verify"])


@router.post("/verify", response_model=VerifyResponse)
async def verify(body: VerifyRequest):
    """Check a revealed value and key against the published proof.

    Anyone can call this; it holds no session state.
    """
    return {"valid": verify_commitment(body.value, body.proof, body.key)}

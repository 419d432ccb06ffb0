"""Health check router for fairdice."""

from fastapi import APIRouter

from fairdice.config import settings
from fairdice.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return {"status": "ok", "env": settings.app_env, "version": settings.app_version}

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fairdice.config import settings
from fairdice.errors import EntropySourceError, InvalidInputError, SessionStateError

# Import routers
from fairdice.routers import game, health, verify

# ------------------------------------------------------------------------------
# FastAPI
# ------------------------------------------------------------------------------
app = FastAPI(title="fairdice", version=settings.app_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ------------------------------------------------------------------------------
# Error mapping
# ------------------------------------------------------------------------------
@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(SessionStateError)
async def session_state_handler(request: Request, exc: SessionStateError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(EntropySourceError)
async def entropy_handler(request: Request, exc: EntropySourceError):
    print(f"Secure random source failure: {exc}")
    return JSONResponse(status_code=503, content={"detail": "secure random source unavailable"})


# ------------------------------------------------------------------------------
# Include routers
# ------------------------------------------------------------------------------
app.include_router(health.router)
app.include_router(game.router)
app.include_router(verify.router)

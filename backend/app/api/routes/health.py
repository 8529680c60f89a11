"""Health & Root — liveness probe and welcome text.

Invariants:
    - GET /api/health always returns 200 if the process is up (liveness only);
      database and media connectors are never consulted
    - GET / returns a static plain-text welcome
"""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

WELCOME_TEXT = "Storefront API is running"


@router.get("/api/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "OK", "message": "Server running fine 🚀"}


@router.get("/", response_class=PlainTextResponse)
async def root():
    return WELCOME_TEXT

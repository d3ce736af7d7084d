"""Liveness endpoint."""

from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: str


@router.get("", response_model=HealthResponse)
async def health():
    """Basic health check."""
    return HealthResponse(timestamp=datetime.now(UTC).isoformat())

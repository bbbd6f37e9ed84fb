"""Liveness probe, served outside the versioned API prefix."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/healthz", response_class=PlainTextResponse)
@router.get("/healthz/", response_class=PlainTextResponse, include_in_schema=False)
async def healthz() -> str:
    return "ok"

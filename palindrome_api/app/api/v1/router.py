"""
Top‑level router for version 1 of the API.

Aggregates domain routers under a unified prefix.  When new domains
are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import messages

router = APIRouter()

router.include_router(messages.router, prefix="/messages", tags=["messages"])

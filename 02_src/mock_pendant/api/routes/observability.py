"""Observability routes."""

from typing import Any

from fastapi import APIRouter

from ...state import MockPendantService


def create_observability_router(service: MockPendantService) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/state")
    async def get_state() -> dict[str, Any]:
        """Everything the extension has registered, written or shown so far."""
        return service.snapshot()

    return router

"""Control routes: drive the mock pendant from tests or a terminal."""

from typing import Any, Literal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from pendant_demo.models import Event

from ...state import MockPendantService


class InjectEventRequest(BaseModel):
    """Request model for raising an event."""

    source: Literal["pendant", "controller"] = "pendant"
    kind: str
    props: dict[str, Any] = Field(default_factory=dict)


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def create_control_router(service: MockPendantService) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    @router.post("/events", response_model=StatusResponse)
    async def inject_event(request: InjectEventRequest) -> dict:
        """Queue an event for the extension's next poll."""
        try:
            event = Event.from_dict(request.model_dump())
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        service.inject(event)
        return {"status": "ok"}

    @router.post("/shutdown", response_model=StatusResponse)
    async def shutdown() -> dict:
        """Ask the extension to stop after its next poll."""
        service.request_shutdown()
        return {"status": "ok"}

    return router

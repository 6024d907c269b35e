"""Extension-facing routes: registration, event polling and remote calls."""

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from pendant_demo.errors import IllegalArgument
from pendant_demo.logging_config import get_logger

from ...state import MockPendantService

logger = get_logger(__name__)

# Operations callable through /api/rpc/{target}/{method}
RPC_METHODS: dict[str, frozenset[str]] = {
    "pendant": frozenset(
        {
            "current_language",
            "current_locale",
            "subscribe_event_types",
            "register_translation_file",
            "register_image_file",
            "register_html_file",
            "register_yml_file",
            "register_utility_window",
            "register_integration",
            "get_property",
            "set_property",
            "notice",
            "disp_notice",
            "popup_dialog",
            "insert_instruction_at_selected_line",
            "set_chart_config",
            "set_chart_data",
            "append_chart_point",
        }
    ),
    "controller": frozenset(
        {
            "subscribe_event_types",
            "request_permissions",
            "request_network_access",
            "remove_network_access",
        }
    ),
    "extension": frozenset({"subscribe_logging_events", "log"}),
}


class RegisterRequest(BaseModel):
    """Request model for registering an extension."""

    extension_id: str
    version: str
    vendor: str
    languages: list[str] = Field(default_factory=list)


class RegisterResponse(BaseModel):
    """Response model for registration."""

    api_version: str


class RpcRequest(BaseModel):
    """Keyword arguments of one remote call."""

    args: dict[str, Any] = Field(default_factory=dict)


class RpcResponse(BaseModel):
    """Result of one remote call."""

    result: Any = None


class EventsResponse(BaseModel):
    """Events queued since the last poll."""

    events: list[dict[str, Any]]
    shutdown: bool


def _illegal_argument(message: str) -> HTTPException:
    return HTTPException(
        status_code=400, detail={"error": "IllegalArgument", "message": message}
    )


def create_extension_router(service: MockPendantService) -> APIRouter:
    """Create extension router."""
    router = APIRouter(prefix="/api", tags=["extension"])

    targets = {
        "pendant": service.pendant,
        "controller": service.controller,
        "extension": service,
    }

    @router.post("/extensions", response_model=RegisterResponse)
    async def register_extension(request: RegisterRequest) -> dict:
        """Register an extension and report the service API version."""
        api_version = service.register_extension(
            request.extension_id, request.version, request.vendor, request.languages
        )
        return {"api_version": str(api_version)}

    @router.get("/events", response_model=EventsResponse)
    async def poll_events() -> dict:
        """Drain the pending event queue."""
        batch = await service.poll_events()
        return {
            "events": [event.to_dict() for event in batch.events],
            "shutdown": batch.shutdown,
        }

    @router.post("/rpc/{target}/{method}", response_model=RpcResponse)
    async def call(target: str, method: str, request: RpcRequest) -> dict:
        """Invoke one pendant, controller or extension operation."""
        if method not in RPC_METHODS.get(target, frozenset()):
            raise HTTPException(status_code=404, detail=f"Unknown operation {target}.{method}")

        operation = getattr(targets[target], method)
        try:
            result = await operation(**request.args)
        except IllegalArgument as e:
            raise _illegal_argument(e.msg)
        except TypeError as e:
            raise _illegal_argument(f"Bad arguments for {target}.{method}: {e}")
        return {"result": result}

    return router

"""FastAPI application for the mock pendant service."""

from fastapi import FastAPI

from ..state import MockPendantService
from .routes import control, extension, observability


def create_mock_pendant_app(service: MockPendantService | None = None) -> FastAPI:
    """Create the mock pendant app around a service (a fresh one by default)."""
    service = service or MockPendantService()

    fastapi_app = FastAPI(
        title="Mock Pendant Service",
        description="Stand-in pendant/controller service for running the demo extension",
        version="2.1.0",
    )
    fastapi_app.state.service = service

    fastapi_app.include_router(extension.create_extension_router(service))
    fastapi_app.include_router(control.create_control_router(service))
    fastapi_app.include_router(observability.create_observability_router(service))

    return fastapi_app

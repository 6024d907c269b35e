"""Mock pendant service for developing and testing the demo extension."""

from .api import create_mock_pendant_app
from .state import MockController, MockPendant, MockPendantService

__all__ = [
    "MockPendantService",
    "MockPendant",
    "MockController",
    "create_mock_pendant_app",
]

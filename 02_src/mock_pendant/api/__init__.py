"""Mock pendant HTTP API."""

from .app import create_mock_pendant_app

__all__ = ["create_mock_pendant_app"]

"""Mock pendant API routes."""

from . import control, extension, observability

__all__ = ["control", "extension", "observability"]

"""Service module: the pendant/controller boundary."""

from .client import (
    HttpExtensionService,
    IController,
    IExtensionService,
    IPendant,
    RemoteController,
    RemotePendant,
    resource_exists,
)

__all__ = [
    "IPendant",
    "IController",
    "IExtensionService",
    "HttpExtensionService",
    "RemotePendant",
    "RemoteController",
    "resource_exists",
]

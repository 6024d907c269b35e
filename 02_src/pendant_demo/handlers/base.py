"""Common shape of a handler group."""

from typing import Protocol

from ..context import ExtensionContext
from ..dispatcher import IEventDispatcher


class IHandlerGroup(Protocol):
    """Handlers for one tab or panel of the extension UI."""

    def register(self, dispatcher: IEventDispatcher) -> None:
        """Bind this group's handlers to their (item, kind) keys."""
        ...


class HandlerGroup:
    """Holds the application context for a group; see IHandlerGroup for the contract."""

    def __init__(self, ctx: ExtensionContext):
        self._ctx = ctx

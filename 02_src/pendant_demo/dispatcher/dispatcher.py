"""EventDispatcher implementation: routes service events to registered handlers."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol

from ..logging_config import get_logger
from ..models import Event, EventHandler, EventKind, ItemId, Registration, item_key

logger = get_logger(__name__)


class IEventDispatcher(Protocol):
    """Maps (identifier, kind) to one handler."""

    def register(
        self, identifier: ItemId | str | None, kind: EventKind, handler: EventHandler
    ) -> None:
        """Bind a handler. A later registration for the same key replaces it."""
        ...

    async def dispatch(self, event: Event) -> int:
        """Run the handlers matching the event; return how many ran."""
        ...


class EventDispatcher:
    """In-memory dispatch table.

    Filled during setup and read-only afterwards, so no locking is needed.
    Handlers run one after another in the caller's task.
    """

    def __init__(self):
        self._registrations: dict[tuple[str | None, EventKind], Registration] = {}

    def register(
        self, identifier: ItemId | str | None, kind: EventKind, handler: EventHandler
    ) -> None:
        """Bind a handler to events of `kind` raised by `identifier`."""
        registration = Registration(item_key(identifier), kind, handler)
        previous = self._registrations.get(registration.key)
        if previous is not None:
            logger.debug(
                "Replacing handler for %s/%s", registration.identifier, kind.value
            )
        self._registrations[registration.key] = registration

    def register_kind(self, kind: EventKind, handler: EventHandler) -> None:
        """Bind a handler to every event of `kind`, whatever raised it."""
        self.register(None, kind, handler)

    @property
    def registrations(self) -> Mapping[tuple[str | None, EventKind], Registration]:
        return MappingProxyType(self._registrations)

    def matching(self, event: Event) -> list[Registration]:
        """Registrations an event would be delivered to, item-specific first."""
        matches = []
        if event.identifier is not None:
            specific = self._registrations.get((event.identifier, event.kind))
            if specific is not None:
                matches.append(specific)
        wildcard = self._registrations.get((None, event.kind))
        if wildcard is not None:
            matches.append(wildcard)
        return matches

    async def dispatch(self, event: Event) -> int:
        """Deliver an event. Unmatched events are dropped; handler errors are logged."""
        invoked = 0
        for registration in self.matching(event):
            invoked += 1
            try:
                await registration.handler(event)
            except Exception:
                logger.exception(
                    "Error in handler for %s/%s",
                    registration.identifier or "*",
                    event.kind.value,
                    extra={"context": {"event": str(event)}},
                )
        return invoked

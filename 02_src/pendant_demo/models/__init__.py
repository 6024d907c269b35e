"""Data models for the demo extension."""

from .events import (
    ControllerEventType,
    Event,
    EventBatch,
    EventHandler,
    EventKind,
    PendantEventType,
    PropValue,
    Registration,
    parse_event_kind,
)
from .items import JOG_PANEL_BUTTONS, ItemId, item_key
from .pendant import DataPoint, Disposition, IntegrationPoint, LoggingLevel, Series, Version

__all__ = [
    # Events
    "ControllerEventType",
    "PendantEventType",
    "EventKind",
    "Event",
    "EventBatch",
    "EventHandler",
    "PropValue",
    "Registration",
    "parse_event_kind",
    # Items
    "ItemId",
    "JOG_PANEL_BUTTONS",
    "item_key",
    # Pendant
    "Version",
    "Disposition",
    "IntegrationPoint",
    "LoggingLevel",
    "Series",
    "DataPoint",
]

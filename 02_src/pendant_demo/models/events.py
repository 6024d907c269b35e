"""Event-related data models."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Union


class PendantEventType(str, Enum):
    """Events raised by the pendant UI."""

    SWITCHED_SCREEN = "SwitchedScreen"
    UTILITY_OPENED = "UtilityOpened"
    UTILITY_CLOSED = "UtilityClosed"
    PANEL_OPENED = "PanelOpened"
    PANEL_CLOSED = "PanelClosed"
    POPUP_OPENED = "PopupOpened"
    POPUP_CLOSED = "PopupClosed"
    CLICKED = "Clicked"
    PRESSED = "Pressed"
    RELEASED = "Released"
    TEXT_EDITED = "TextEdited"
    EDITING_FINISHED = "EditingFinished"
    ACTIVATED = "Activated"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class ControllerEventType(str, Enum):
    """Events raised by the robot controller."""

    PERMISSION_GRANTED = "PermissionGranted"
    PERMISSION_REVOKED = "PermissionRevoked"
    OPERATION_MODE = "OperationMode"
    SERVO_STATE = "ServoState"
    ACTIVE_TOOL = "ActiveTool"
    PLAYBACK_STATE = "PlaybackState"
    REMOTE_MODE = "RemoteMode"
    IO_VALUE_CHANGED = "IOValueChanged"


EventKind = Union[PendantEventType, ControllerEventType]
PropValue = Union[str, int, float, bool]


def parse_event_kind(source: str, value: str) -> EventKind:
    """Map a wire-level (source, kind) pair onto the matching enum member."""
    if source == "controller":
        return ControllerEventType(value)
    return PendantEventType(value)


@dataclass(frozen=True)
class Event:
    """A single event delivered by the service. Immutable once built."""

    kind: EventKind
    props: Mapping[str, PropValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))

    @property
    def source(self) -> str:
        return "controller" if isinstance(self.kind, ControllerEventType) else "pendant"

    @property
    def identifier(self) -> str | None:
        """UI item (or integration point) that raised the event, if any."""
        for key in ("item", "identifier"):
            value = self.props.get(key)
            if value is not None:
                return str(value)
        return None

    def prop(self, name: str, default: PropValue | None = None) -> PropValue | None:
        return self.props.get(name, default)

    def to_dict(self) -> dict:
        return {"source": self.source, "kind": self.kind.value, "props": dict(self.props)}

    @classmethod
    def from_dict(cls, raw: dict) -> "Event":
        return cls(
            kind=parse_event_kind(raw.get("source", "pendant"), raw["kind"]),
            props=raw.get("props") or {},
        )

    def __str__(self) -> str:
        props = ", ".join(f"{k}: {v}" for k, v in self.props.items())
        return f"{self.source.capitalize()}Event({self.kind.value} {{{props}}})"


EventHandler = Callable[[Event], Awaitable[None]]


@dataclass(frozen=True)
class Registration:
    """A handler bound to (identifier, kind). identifier None matches any source."""

    identifier: str | None
    kind: EventKind
    handler: EventHandler

    @property
    def key(self) -> tuple[str | None, EventKind]:
        return (self.identifier, self.kind)


@dataclass
class EventBatch:
    """Result of one poll of the service."""

    events: list[Event] = field(default_factory=list)
    shutdown: bool = False

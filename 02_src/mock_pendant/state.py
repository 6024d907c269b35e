"""In-memory stand-in for the pendant/controller service."""

import itertools
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pendant_demo.errors import IllegalArgument
from pendant_demo.logging_config import get_logger
from pendant_demo.models import (
    DataPoint,
    Event,
    EventBatch,
    LoggingLevel,
    PropValue,
    Series,
    Version,
)

logger = get_logger(__name__)

DEFAULT_PROPERTIES: dict[tuple[str, str], PropValue] = {
    ("layoutcontent", "itemspacing"): 8,
    ("eventtext1", "text"): "",
    ("networkData", "text"): "hello",
    ("networkIPAddress", "text"): "127.0.0.1",
    ("networkPort", "text"): "7",
    ("networkResponse", "text"): "",
    ("networkError", "text"): "",
    ("instructionText", "text"): "",
    ("instructionInsertResult", "text"): "",
}


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _series_dict(series: Series | dict) -> dict:
    data = series.to_dict() if isinstance(series, Series) else dict(series)
    data["x"] = list(data.get("x", []))
    data["y"] = list(data.get("y", []))
    return data


@dataclass
class Notice:
    title: str
    message: str
    log: str = ""
    disposition: str | None = None


@dataclass
class Popup:
    identifier: str
    title: str
    message: str
    positive_option: str
    negative_option: str


@dataclass
class Chart:
    config: dict = field(default_factory=dict)
    left: dict[str, dict] = field(default_factory=dict)
    right: dict[str, dict] = field(default_factory=dict)


class MockPendant:
    """Pendant side: UI files, properties, notices, charts and the job editor."""

    def __init__(self, language: str = "en", locale: str = "en"):
        self.language = language
        self.locale = locale
        self.properties: dict[tuple[str, str], PropValue] = dict(DEFAULT_PROPERTIES)
        self.subscriptions: set[str] = set()
        self.files: dict[str, dict[str, Any]] = {}
        self.translation_files: dict[str, str] = {}
        self.utility_windows: dict[str, dict[str, str]] = {}
        self.integrations: dict[str, dict[str, str]] = {}
        self.notices: list[Notice] = []
        self.popups: list[Popup] = []
        self.charts: dict[str, Chart] = {}
        self.job_lines: list[str] = []

    async def current_language(self) -> str:
        return self.language

    async def current_locale(self) -> str:
        return self.locale

    async def subscribe_event_types(self, kinds: Iterable[Any]) -> None:
        self.subscriptions.update(_plain(k) for k in kinds)

    async def register_translation_file(
        self, language: str, filename: str, content: str | None = None
    ) -> None:
        self.translation_files[language] = filename
        self.files[filename] = {"kind": "translation", "content": content}

    async def register_image_file(self, filename: str, content: str | None = None) -> None:
        self.files[filename] = {"kind": "image", "content": content}

    async def register_html_file(self, filename: str, content: str | None = None) -> None:
        self.files[filename] = {"kind": "html", "content": content}

    async def register_yml_file(self, filename: str, content: str | None = None) -> None:
        self.files[filename] = {"kind": "yml", "content": content}

    async def register_utility_window(
        self, identifier: str, item_type: str, menu_name: str, window_title: str
    ) -> None:
        self.utility_windows[identifier] = {
            "item_type": item_type,
            "menu_name": menu_name,
            "window_title": window_title,
        }

    async def register_integration(
        self,
        identifier: str,
        point: Any,
        item_type: str,
        button_label: str,
        button_image: str,
    ) -> None:
        if identifier in self.integrations:
            raise IllegalArgument(f"Integration {identifier} already registered")
        self.integrations[identifier] = {
            "point": _plain(point),
            "item_type": item_type,
            "button_label": button_label,
            "button_image": button_image,
        }

    async def get_property(self, item: str, name: str) -> PropValue:
        try:
            return self.properties[(item, name)]
        except KeyError:
            raise IllegalArgument(f"Unknown property {item}.{name}") from None

    async def set_property(self, item: str, name: str, value: PropValue) -> None:
        self.properties[(item, name)] = value

    async def notice(self, title: str, message: str, log: str = "") -> None:
        self.notices.append(Notice(title, message, log))

    async def disp_notice(self, disposition: Any, title: str, message: str) -> None:
        self.notices.append(Notice(title, message, disposition=_plain(disposition)))

    async def popup_dialog(
        self,
        identifier: str,
        title: str,
        message: str,
        positive_option: str,
        negative_option: str,
    ) -> None:
        self.popups.append(Popup(identifier, title, message, positive_option, negative_option))

    async def insert_instruction_at_selected_line(self, instruction: str) -> str:
        if not instruction.strip():
            raise IllegalArgument("Instruction text is empty")
        self.job_lines.append(instruction)
        return "OK"

    async def set_chart_config(self, chart_id: str, config: dict) -> None:
        self.charts.setdefault(chart_id, Chart()).config = dict(config)

    async def set_chart_data(
        self, chart_id: str, data: dict[str, Series | dict], right: bool = False
    ) -> None:
        chart = self.charts.setdefault(chart_id, Chart())
        scale = chart.right if right else chart.left
        scale.update({name: _series_dict(series) for name, series in data.items()})

    async def append_chart_point(
        self, chart_id: str, series: str, point: DataPoint | dict, right: bool = False
    ) -> None:
        chart = self.charts.get(chart_id)
        scale = None if chart is None else (chart.right if right else chart.left)
        if scale is None or series not in scale:
            raise IllegalArgument(f"Unknown chart series {chart_id}/{series}")

        x, y = (point.x, point.y) if isinstance(point, DataPoint) else (point["x"], point["y"])
        target = scale[series]
        target["x"].append(x)
        target["y"].append(y)
        max_pts = target.get("max_pts")
        if max_pts and len(target["x"]) > max_pts:
            del target["x"][:-max_pts]
            del target["y"][:-max_pts]


class MockController:
    """Controller side: event subscriptions, permissions and network access."""

    def __init__(self):
        self.subscriptions: set[str] = set()
        self.permissions: set[str] = set()
        self.network_access: dict[int, dict[str, Any]] = {}
        self.released_handles: list[int] = []
        self._handles = itertools.count(1)

    async def subscribe_event_types(self, kinds: Iterable[Any]) -> None:
        self.subscriptions.update(_plain(k) for k in kinds)

    async def request_permissions(self, permissions: Iterable[str]) -> None:
        self.permissions.update(permissions)

    async def request_network_access(self, interface: str, port: int, protocol: str) -> int:
        if "networking" not in self.permissions:
            raise IllegalArgument("networking permission not granted")
        handle = next(self._handles)
        self.network_access[handle] = {"interface": interface, "port": port, "protocol": protocol}
        return handle

    async def remove_network_access(self, handle: int) -> None:
        if self.network_access.pop(handle, None) is None:
            raise IllegalArgument(f"Unknown network access handle {handle}")
        self.released_handles.append(handle)


class MockPendantService:
    """Pendant service for one extension; usable in-process or behind the HTTP app."""

    def __init__(
        self,
        language: str = "en",
        locale: str = "en",
        api_version: Version = Version(2, 1, 0),
    ):
        self.pendant = MockPendant(language, locale)
        self.controller = MockController()
        self.api_version = api_version
        self.extension: dict[str, Any] | None = None
        self.logging_subscribed = False
        self.log_lines: list[tuple[str, str]] = []
        self.closed = False
        self._pending: list[Event] = []
        self._shutdown = False

    def register_extension(
        self, extension_id: str, version: str, vendor: str, languages: Iterable[str]
    ) -> Version:
        self.extension = {
            "extension_id": extension_id,
            "version": version,
            "vendor": vendor,
            "languages": sorted(languages),
        }
        logger.info("Extension %s %s registered", extension_id, version)
        return self.api_version

    def inject(self, event: Event) -> None:
        """Queue an event as if the operator or controller had raised it."""
        self._pending.append(event)

    def request_shutdown(self) -> None:
        self._shutdown = True

    async def subscribe_logging_events(self) -> None:
        self.logging_subscribed = True

    async def log(self, level: LoggingLevel | str, message: str) -> None:
        self.log_lines.append((_plain(level), message))

    async def poll_events(self) -> EventBatch:
        events, self._pending = self._pending, []
        return EventBatch(events=events, shutdown=self._shutdown)

    async def close(self) -> None:
        self.closed = True

    def snapshot(self) -> dict[str, Any]:
        """JSON-friendly view of everything the extension has done."""
        pendant = self.pendant
        return {
            "extension": self.extension,
            "api_version": str(self.api_version),
            "properties": {f"{item}.{name}": v for (item, name), v in pendant.properties.items()},
            "files": sorted(pendant.files),
            "integrations": pendant.integrations,
            "utility_windows": pendant.utility_windows,
            "notices": [vars(n) for n in pendant.notices],
            "popups": [vars(p) for p in pendant.popups],
            "charts": {cid: vars(c) for cid, c in pendant.charts.items()},
            "job_lines": pendant.job_lines,
            "permissions": sorted(self.controller.permissions),
            "network_access": {str(h): a for h, a in self.controller.network_access.items()},
            "log_lines": [list(line) for line in self.log_lines],
            "pending_events": len(self._pending),
        }

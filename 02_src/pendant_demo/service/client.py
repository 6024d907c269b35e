"""Client for the remote pendant/controller service over its JSON bridge."""

import base64
from collections.abc import Iterable
from typing import Any, Protocol

import httpx

from ..config import RESOURCES_DIR
from ..errors import ExtensionStartupError, IllegalArgument, exception_message
from ..logging_config import get_logger
from ..models import (
    ControllerEventType,
    DataPoint,
    Disposition,
    Event,
    EventBatch,
    IntegrationPoint,
    LoggingLevel,
    PendantEventType,
    PropValue,
    Series,
    Version,
)

logger = get_logger(__name__)


class IPendant(Protocol):
    """Pendant UI operations."""

    async def current_language(self) -> str: ...

    async def current_locale(self) -> str: ...

    async def subscribe_event_types(self, kinds: Iterable[PendantEventType]) -> None: ...

    async def register_translation_file(self, language: str, filename: str) -> None: ...

    async def register_image_file(self, filename: str) -> None: ...

    async def register_html_file(self, filename: str) -> None: ...

    async def register_yml_file(self, filename: str) -> None: ...

    async def register_utility_window(
        self, identifier: str, item_type: str, menu_name: str, window_title: str
    ) -> None: ...

    async def register_integration(
        self,
        identifier: str,
        point: IntegrationPoint,
        item_type: str,
        button_label: str,
        button_image: str,
    ) -> None: ...

    async def get_property(self, item: str, name: str) -> PropValue:
        """Read a named property of a UI item."""
        ...

    async def set_property(self, item: str, name: str, value: PropValue) -> None:
        """Write a named property of a UI item."""
        ...

    async def notice(self, title: str, message: str, log: str = "") -> None: ...

    async def disp_notice(
        self, disposition: Disposition, title: str, message: str
    ) -> None:
        """Notice with a disposition (service API >= 2.1)."""
        ...

    async def popup_dialog(
        self,
        identifier: str,
        title: str,
        message: str,
        positive_option: str,
        negative_option: str,
    ) -> None: ...

    async def insert_instruction_at_selected_line(self, instruction: str) -> str: ...

    async def set_chart_config(self, chart_id: str, config: dict) -> None: ...

    async def set_chart_data(
        self, chart_id: str, data: dict[str, Series], right: bool = False
    ) -> None: ...

    async def append_chart_point(
        self, chart_id: str, series: str, point: DataPoint, right: bool = False
    ) -> None: ...


class IController(Protocol):
    """Robot controller operations."""

    async def subscribe_event_types(self, kinds: Iterable[ControllerEventType]) -> None: ...

    async def request_permissions(self, permissions: Iterable[str]) -> None: ...

    async def request_network_access(self, interface: str, port: int, protocol: str) -> int:
        """Open an outbound route; returns the access handle."""
        ...

    async def remove_network_access(self, handle: int) -> None: ...


class IExtensionService(Protocol):
    """Connection of one extension to the pendant service."""

    @property
    def pendant(self) -> IPendant: ...

    @property
    def controller(self) -> IController: ...

    @property
    def api_version(self) -> Version: ...

    async def subscribe_logging_events(self) -> None: ...

    async def log(self, level: LoggingLevel, message: str) -> None:
        """Write a line into the pendant log."""
        ...

    async def poll_events(self) -> EventBatch:
        """Fetch events queued since the last poll."""
        ...

    async def close(self) -> None: ...


def _resource_text(filename: str) -> str:
    return (RESOURCES_DIR / filename).read_text(encoding="utf-8")


def _resource_base64(filename: str) -> str:
    return base64.b64encode((RESOURCES_DIR / filename).read_bytes()).decode("ascii")


class HttpExtensionService:
    """IExtensionService over httpx."""

    def __init__(self, client: httpx.AsyncClient, extension_id: str, api_version: Version):
        self._client = client
        self._extension_id = extension_id
        self._api_version = api_version
        self._pendant = RemotePendant(self)
        self._controller = RemoteController(self)

    @classmethod
    async def connect(
        cls,
        base_url: str,
        extension_id: str,
        version: Version,
        vendor: str,
        languages: Iterable[str],
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> "HttpExtensionService":
        """Register the extension with the service and return a connected client."""
        client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        try:
            response = await client.post(
                "/api/extensions",
                json={
                    "extension_id": extension_id,
                    "version": str(version),
                    "vendor": vendor,
                    "languages": sorted(languages),
                },
            )
            response.raise_for_status()
            api_version = Version.parse(response.json()["api_version"])
        except Exception as e:
            await client.aclose()
            raise ExtensionStartupError(
                f"Unable to register {extension_id} with {base_url}: {exception_message(e)}"
            ) from e

        logger.info("Registered %s, service API version %s", extension_id, api_version)
        return cls(client, extension_id, api_version)

    @property
    def pendant(self) -> "RemotePendant":
        return self._pendant

    @property
    def controller(self) -> "RemoteController":
        return self._controller

    @property
    def api_version(self) -> Version:
        return self._api_version

    async def call(self, target: str, method: str, **args: Any) -> Any:
        """Invoke one remote operation and return its result."""
        response = await self._client.post(
            f"/api/rpc/{target}/{method}",
            json={"args": args},
            headers={"X-Extension-Id": self._extension_id},
        )
        if response.status_code == 400:
            try:
                detail = response.json().get("detail", {})
            except ValueError:
                raise IllegalArgument(response.text) from None
            if isinstance(detail, dict):
                raise IllegalArgument(detail.get("message", ""))
            raise IllegalArgument(str(detail))
        response.raise_for_status()
        return response.json().get("result")

    async def subscribe_logging_events(self) -> None:
        await self.call("extension", "subscribe_logging_events")

    async def log(self, level: LoggingLevel, message: str) -> None:
        await self.call("extension", "log", level=level.value, message=message)

    async def poll_events(self) -> EventBatch:
        response = await self._client.get(
            "/api/events", headers={"X-Extension-Id": self._extension_id}
        )
        response.raise_for_status()
        data = response.json()

        events = []
        for raw in data.get("events", []):
            # An unknown kind is skipped; the rest of the batch is still delivered
            try:
                events.append(Event.from_dict(raw))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning(
                    "Skipping unreadable event %s: %s",
                    raw,
                    exception_message(e),
                    extra={"context": {"event": raw}},
                )
        return EventBatch(
            events=events,
            shutdown=bool(data.get("shutdown", False)),
        )

    async def close(self) -> None:
        await self._client.aclose()


class RemotePendant:
    """IPendant backed by HttpExtensionService.call()."""

    def __init__(self, service: HttpExtensionService):
        self._service = service

    async def _call(self, method: str, **args: Any) -> Any:
        return await self._service.call("pendant", method, **args)

    async def current_language(self) -> str:
        return await self._call("current_language")

    async def current_locale(self) -> str:
        return await self._call("current_locale")

    async def subscribe_event_types(self, kinds: Iterable[PendantEventType]) -> None:
        await self._call("subscribe_event_types", kinds=[k.value for k in kinds])

    async def register_translation_file(self, language: str, filename: str) -> None:
        await self._call(
            "register_translation_file",
            language=language,
            filename=filename,
            content=_resource_text(filename),
        )

    async def register_image_file(self, filename: str) -> None:
        await self._call(
            "register_image_file", filename=filename, content=_resource_base64(filename)
        )

    async def register_html_file(self, filename: str) -> None:
        await self._call(
            "register_html_file", filename=filename, content=_resource_text(filename)
        )

    async def register_yml_file(self, filename: str) -> None:
        await self._call(
            "register_yml_file", filename=filename, content=_resource_text(filename)
        )

    async def register_utility_window(
        self, identifier: str, item_type: str, menu_name: str, window_title: str
    ) -> None:
        await self._call(
            "register_utility_window",
            identifier=identifier,
            item_type=item_type,
            menu_name=menu_name,
            window_title=window_title,
        )

    async def register_integration(
        self,
        identifier: str,
        point: IntegrationPoint,
        item_type: str,
        button_label: str,
        button_image: str,
    ) -> None:
        await self._call(
            "register_integration",
            identifier=identifier,
            point=point.value,
            item_type=item_type,
            button_label=button_label,
            button_image=button_image,
        )

    async def get_property(self, item: str, name: str) -> PropValue:
        return await self._call("get_property", item=item, name=name)

    async def set_property(self, item: str, name: str, value: PropValue) -> None:
        await self._call("set_property", item=item, name=name, value=value)

    async def notice(self, title: str, message: str, log: str = "") -> None:
        await self._call("notice", title=title, message=message, log=log)

    async def disp_notice(
        self, disposition: Disposition, title: str, message: str
    ) -> None:
        await self._call(
            "disp_notice", disposition=disposition.value, title=title, message=message
        )

    async def popup_dialog(
        self,
        identifier: str,
        title: str,
        message: str,
        positive_option: str,
        negative_option: str,
    ) -> None:
        await self._call(
            "popup_dialog",
            identifier=identifier,
            title=title,
            message=message,
            positive_option=positive_option,
            negative_option=negative_option,
        )

    async def insert_instruction_at_selected_line(self, instruction: str) -> str:
        return await self._call(
            "insert_instruction_at_selected_line", instruction=instruction
        )

    async def set_chart_config(self, chart_id: str, config: dict) -> None:
        await self._call("set_chart_config", chart_id=chart_id, config=config)

    async def set_chart_data(
        self, chart_id: str, data: dict[str, Series], right: bool = False
    ) -> None:
        await self._call(
            "set_chart_data",
            chart_id=chart_id,
            data={name: series.to_dict() for name, series in data.items()},
            right=right,
        )

    async def append_chart_point(
        self, chart_id: str, series: str, point: DataPoint, right: bool = False
    ) -> None:
        await self._call(
            "append_chart_point",
            chart_id=chart_id,
            series=series,
            point={"x": point.x, "y": point.y},
            right=right,
        )


class RemoteController:
    """IController backed by HttpExtensionService.call()."""

    def __init__(self, service: HttpExtensionService):
        self._service = service

    async def subscribe_event_types(self, kinds: Iterable[ControllerEventType]) -> None:
        await self._service.call(
            "controller", "subscribe_event_types", kinds=[k.value for k in kinds]
        )

    async def request_permissions(self, permissions: Iterable[str]) -> None:
        await self._service.call(
            "controller", "request_permissions", permissions=sorted(permissions)
        )

    async def request_network_access(self, interface: str, port: int, protocol: str) -> int:
        return int(
            await self._service.call(
                "controller",
                "request_network_access",
                interface=interface,
                port=port,
                protocol=protocol,
            )
        )

    async def remove_network_access(self, handle: int) -> None:
        await self._service.call("controller", "remove_network_access", handle=handle)


def resource_exists(filename: str) -> bool:
    """True when a registrable file is shipped with the extension."""
    path = RESOURCES_DIR / filename
    return path.exists() and not path.is_dir()

"""Extension bootstrap: registration with the pendant, handler wiring, event loop."""

import asyncio
from typing import Protocol

import httpx

from .charts import ChartProducer
from .config import (
    EXTENSION_ID,
    EXTENSION_VENDOR,
    TRANSLATED_LOCALES,
    ExtensionSettings,
)
from .context import ExtensionContext
from .dispatcher import EventDispatcher
from .errors import exception_message
from .handlers import (
    CHART_ID,
    STREAM_SERIES,
    ChartHandlers,
    ControlsHandlers,
    EventsTabHandlers,
    IHandlerGroup,
    InstructionHandlers,
    LayoutHandlers,
    NetworkHandlers,
)
from .i18n import Translations, bundle_filename
from .logging_config import get_logger
from .models import (
    ControllerEventType,
    IntegrationPoint,
    ItemId,
    PendantEventType,
    Version,
)
from .service import HttpExtensionService, IExtensionService, resource_exists

logger = get_logger(__name__)

EXTENSION_VERSION = Version(2, 1, 0)

CONTROLLER_EVENTS = (
    ControllerEventType.PERMISSION_GRANTED,
    ControllerEventType.PERMISSION_REVOKED,
    ControllerEventType.OPERATION_MODE,
    ControllerEventType.SERVO_STATE,
    ControllerEventType.ACTIVE_TOOL,
    ControllerEventType.PLAYBACK_STATE,
    ControllerEventType.REMOTE_MODE,
    ControllerEventType.IO_VALUE_CHANGED,
)

PENDANT_EVENTS = (
    PendantEventType.SWITCHED_SCREEN,
    PendantEventType.UTILITY_OPENED,
    PendantEventType.UTILITY_CLOSED,
    PendantEventType.PANEL_OPENED,
    PendantEventType.PANEL_CLOSED,
    PendantEventType.POPUP_OPENED,
    PendantEventType.POPUP_CLOSED,
)

PERMISSIONS = ("networking",)

IMAGE_FILES = (
    "images/MotoMINI_InHand.png",
    "images/fast-forward-icon.png",
    "images/d-icon-256.png",
    "images/d-icon-lt-256.png",
)

# Registered in order; UtilWindow and NavPanel use the tabs declared before them
YML_FILES = (
    "ControlsTab.yml",
    "ChartsTab.yml",
    "LayoutTab.yml",
    "AccessTab.yml",
    "NavTab.yml",
    "NetworkTab.yml",
    "EventsTab.yml",
    "LocalizationTab.yml",
    "UtilWindow.yml",
    "NavPanel.yml",
)

JOG_ICON_LIGHT = "images/d-icon-lt-256.png"
JOG_ICON_DARK = "images/d-icon-256.png"

# (identifier, where, YML item type, button label, button icon)
INTEGRATIONS = (
    (ItemId.NAV_PANEL, IntegrationPoint.NAVIGATION_PANEL, "NavPanel", "Demo", JOG_ICON_DARK),
    (ItemId.JOG_TOP_LEFT, IntegrationPoint.SMART_FRAME_JOG_PANEL_TOP_LEFT, "", "TPL", JOG_ICON_LIGHT),
    (ItemId.JOG_TOP_RIGHT, IntegrationPoint.SMART_FRAME_JOG_PANEL_TOP_RIGHT, "", "TPR", JOG_ICON_LIGHT),
    (ItemId.JOG_BOTTOM_LEFT, IntegrationPoint.SMART_FRAME_JOG_PANEL_BOTTOM_LEFT, "", "BTL", JOG_ICON_DARK),
    (ItemId.JOG_BOTTOM_CENTER, IntegrationPoint.SMART_FRAME_JOG_PANEL_BOTTOM_CENTER, "", "BTCTR", JOG_ICON_DARK),
    (ItemId.JOG_BOTTOM_RIGHT, IntegrationPoint.SMART_FRAME_JOG_PANEL_BOTTOM_RIGHT, "", "BTR", JOG_ICON_DARK),
    # Shown for every jogging mode, not only smart frame
    (ItemId.JOG_TOP_CENTER, IntegrationPoint.JOG_PANEL_TOP_CENTER, "", "TOP", JOG_ICON_LIGHT),
    (ItemId.JOG_BOTTOM_ANY, IntegrationPoint.SMART_FRAME_JOG_PANEL_BOTTOM_ANY, "", "ANY", JOG_ICON_LIGHT),
)


def help_file_for(language: str) -> str:
    """Help page in the pendant language, English if there is none."""
    help_file = f"help/{language}/something-help.html"
    if not resource_exists(help_file):
        help_file = "help/en/something-help.html"
    return help_file


class IExtensionApp(Protocol):
    """Bootstrap and lifecycle."""

    async def setup(self) -> None:
        """Subscribe, register UI files and wire handlers."""
        ...

    async def run(self, stop_event: asyncio.Event | None = None) -> None:
        """Dispatch service events until shutdown."""
        ...

    async def close(self) -> None:
        """Stop background work and disconnect."""
        ...


class DemoExtension:
    """The demo extension process."""

    def __init__(self, service: IExtensionService, settings: ExtensionSettings | None = None):
        self._service = service
        self._settings = settings or ExtensionSettings()
        self._dispatcher = EventDispatcher()

        # Built in setup()
        self._ctx: ExtensionContext | None = None
        self._producer: ChartProducer | None = None
        self._groups: list[IHandlerGroup] = []

    @classmethod
    async def connect(
        cls,
        settings: ExtensionSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "DemoExtension":
        """Register with the pendant service named in settings."""
        service = await HttpExtensionService.connect(
            settings.pendant_url,
            EXTENSION_ID,
            EXTENSION_VERSION,
            EXTENSION_VENDOR,
            TRANSLATED_LOCALES,
            transport=transport,
        )
        return cls(service, settings)

    async def setup(self) -> None:
        """Subscribe to events, register UI resources and wire handlers."""
        service = self._service
        pendant = service.pendant
        controller = service.controller
        logger.info("Setting up extension, service API version %s", service.api_version)

        await service.subscribe_logging_events()

        # 1. Locale
        language = await pendant.current_language()
        locale_name = await pendant.current_locale()
        translations = Translations.load(locale_name)
        logger.info(translations.tr("lang_bundle_loaded", translations.locale_name))
        self._ctx = ExtensionContext(service, self._settings, translations, language)

        # 2. Event subscriptions and permissions
        await controller.subscribe_event_types(CONTROLLER_EVENTS)
        await controller.request_permissions(PERMISSIONS)
        await pendant.subscribe_event_types(PENDANT_EVENTS)

        # 3. UI resources (only the current language's bundle is needed)
        if locale_name in TRANSLATED_LOCALES:
            await pendant.register_translation_file(language, bundle_filename(locale_name))
        else:
            await pendant.register_translation_file("en", bundle_filename("en"))

        for image in IMAGE_FILES:
            await pendant.register_image_file(image)
        await pendant.register_html_file(help_file_for(language))
        for yml_file in YML_FILES:
            await pendant.register_yml_file(yml_file)

        # 4. Windows, panels and jog panel buttons
        await pendant.register_utility_window(
            ItemId.DEMO_WINDOW.value, "UtilWindow", "Demo Extension", "Demo Utility"
        )
        for identifier, point, item_type, label, icon in INTEGRATIONS:
            await pendant.register_integration(identifier.value, point, item_type, label, icon)

        # 5. Handlers
        self._producer = ChartProducer(pendant, CHART_ID, STREAM_SERIES)
        self._groups = [
            ControlsHandlers(self._ctx),
            EventsTabHandlers(self._ctx),
            LayoutHandlers(self._ctx),
            NetworkHandlers(self._ctx),
            InstructionHandlers(self._ctx),
            ChartHandlers(self._ctx, self._producer),
        ]
        for group in self._groups:
            group.register(self._dispatcher)

        logger.info(
            "Setup complete: %s handler registrations", len(self._dispatcher.registrations)
        )

    async def run(self, stop_event: asyncio.Event | None = None) -> None:
        """Poll the service and dispatch events one at a time.

        Returns when the service signals shutdown, when stop_event is set,
        or when the service can no longer be polled.
        """
        if self._ctx is None:
            raise RuntimeError("Extension not set up")

        logger.info("Extension running")
        while stop_event is None or not stop_event.is_set():
            try:
                batch = await self._service.poll_events()
            except Exception as e:
                logger.error("Lost connection to the pendant service: %s", exception_message(e))
                return

            for event in batch.events:
                if self._settings.output_events:
                    logger.info("Event received: %s", event)
                await self._dispatcher.dispatch(event)

            if batch.shutdown:
                logger.info("Pendant service requested shutdown")
                return
            if not batch.events:
                await asyncio.sleep(self._settings.poll_interval)

    async def close(self) -> None:
        """Stop the chart producer and disconnect."""
        if self._producer:
            await self._producer.stop()
        await self._service.close()
        logger.info("Extension closed")

    @property
    def dispatcher(self) -> EventDispatcher:
        return self._dispatcher

    @property
    def context(self) -> ExtensionContext:
        """Application context (available after setup)."""
        if not self._ctx:
            raise RuntimeError("Extension not set up")
        return self._ctx

    @property
    def producer(self) -> ChartProducer:
        """Chart producer (available after setup)."""
        if not self._producer:
            raise RuntimeError("Extension not set up")
        return self._producer


async def run_extension(
    settings: ExtensionSettings,
    transport: httpx.AsyncBaseTransport | None = None,
    stop_event: asyncio.Event | None = None,
) -> int:
    """Connect, set up and run the extension. Returns a process exit code."""
    try:
        extension = await DemoExtension.connect(settings, transport=transport)
    except Exception as e:
        logger.error("Extension failed to start, aborting: %s", exception_message(e))
        return 1

    try:
        try:
            await extension.setup()
        except Exception as e:
            logger.exception("Extension failed in setup, aborting: %s", exception_message(e))
            return 1

        try:
            await extension.run(stop_event)
        except Exception as e:
            logger.exception("Exception occurred: %s", exception_message(e))
            return 1
        return 0
    finally:
        await extension.close()

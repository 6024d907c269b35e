"""Controls tab buttons and jog panel integration buttons."""

from ..dispatcher import IEventDispatcher
from ..errors import exception_message
from ..logging_config import get_logger
from ..models import JOG_PANEL_BUTTONS, Disposition, Event, ItemId, PendantEventType, Version
from .base import HandlerGroup

logger = get_logger(__name__)

# disp_notice() first appeared in service API 2.1
DISP_NOTICE_MIN_VERSION = Version(2, 1, 0)


class ControlsHandlers(HandlerGroup):
    """Notices raised from the Controls tab and the jog panel."""

    def register(self, dispatcher: IEventDispatcher) -> None:
        for item in (ItemId.SUCCESS_BUTTON, ItemId.NOTICE_BUTTON):
            dispatcher.register(item, PendantEventType.CLICKED, self.on_controls_item_clicked)
        for item in JOG_PANEL_BUTTONS:
            dispatcher.register(item, PendantEventType.CLICKED, self.on_jog_panel_button_clicked)

    async def on_controls_item_clicked(self, event: Event) -> None:
        try:
            item = event.prop("item")
            if item == ItemId.SUCCESS_BUTTON.value:
                if self._ctx.api_version >= DISP_NOTICE_MIN_VERSION:
                    await self._ctx.pendant.disp_notice(
                        Disposition.POSITIVE, "Success", "It worked!"
                    )
                else:
                    await self._ctx.pendant.notice("Success", "It worked!")
            elif item == ItemId.NOTICE_BUTTON.value:
                await self._ctx.pendant.notice("A Notice", "For your information.")
        except Exception as e:
            logger.error("Unable to process Clicked event: %s", exception_message(e))

    async def on_jog_panel_button_clicked(self, event: Event) -> None:
        try:
            identifier = event.props["identifier"]
            await self._ctx.pendant.notice(
                self._ctx.tr("jog_panel_button_clicked"),
                self._ctx.tr("the_id_button_was_clicked", identifier),
            )
        except Exception as e:
            logger.error(
                "Unable to process Jog Panel button click: %s", exception_message(e)
            )

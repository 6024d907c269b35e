"""Events tab: echo every event into a label, open a popup on request."""

from ..dispatcher import IEventDispatcher
from ..errors import exception_message
from ..logging_config import get_logger
from ..models import Event, ItemId, PendantEventType
from .base import HandlerGroup

logger = get_logger(__name__)


class EventsTabHandlers(HandlerGroup):
    def register(self, dispatcher: IEventDispatcher) -> None:
        dispatcher.register(ItemId.EVENT_BUTTON, PendantEventType.CLICKED, self.on_event)
        dispatcher.register(
            ItemId.EVENT_TEXT_FIELD, PendantEventType.TEXT_EDITED, self.on_event
        )
        dispatcher.register(
            ItemId.EVENT_TEXT_FIELD, PendantEventType.EDITING_FINISHED, self.on_event
        )
        dispatcher.register(ItemId.EVENT_COMBO, PendantEventType.ACTIVATED, self.on_event)
        dispatcher.register(ItemId.POPUP_QUESTION, PendantEventType.CLICKED, self.on_event)
        # Closing any popup, ours or not
        dispatcher.register_kind(PendantEventType.POPUP_CLOSED, self.on_event)

    async def on_event(self, event: Event) -> None:
        pendant = self._ctx.pendant
        try:
            await pendant.set_property(ItemId.EVENT_TEXT.value, "text", str(event))

            if event.prop("item") == ItemId.POPUP_QUESTION.value:
                await pendant.popup_dialog(
                    ItemId.EVENT_POPUP.value,
                    self._ctx.tr("a_popup_dialog"),
                    self._ctx.tr("popup_question"),
                    self._ctx.tr("popup_q_positive"),
                    self._ctx.tr("popup_q_negative"),
                )
        except Exception as e:
            logger.error(
                "Unable to process %s event: %s", event.kind.value, exception_message(e)
            )

"""Layout tab: adjust the item spacing of a row."""

from ..dispatcher import IEventDispatcher
from ..errors import exception_message
from ..logging_config import get_logger
from ..models import Event, ItemId, PendantEventType
from .base import HandlerGroup

logger = get_logger(__name__)

SPACING_STEP = 4


class LayoutHandlers(HandlerGroup):
    def register(self, dispatcher: IEventDispatcher) -> None:
        dispatcher.register(ItemId.ROW1_SPACING_UP, PendantEventType.CLICKED, self.on_layout_item_clicked)
        dispatcher.register(ItemId.ROW1_SPACING_DOWN, PendantEventType.CLICKED, self.on_layout_item_clicked)

    async def on_layout_item_clicked(self, event: Event) -> None:
        try:
            item = event.props["item"]
            if item == ItemId.ROW1_SPACING_UP.value:
                delta = SPACING_STEP
            elif item == ItemId.ROW1_SPACING_DOWN.value:
                delta = -SPACING_STEP
            else:
                return

            content = ItemId.LAYOUT_CONTENT.value
            spacing = int(await self._ctx.pendant.get_property(content, "itemspacing"))
            await self._ctx.pendant.set_property(content, "itemspacing", spacing + delta)
        except Exception as e:
            logger.error("Unable to process Layout tab event: %s", exception_message(e))

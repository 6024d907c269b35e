"""Navigation panel: pick a preset instruction and insert it into the open job."""

from ..dispatcher import IEventDispatcher
from ..errors import describe_error, log_and_continue
from ..logging_config import get_logger
from ..models import Event, ItemId, PendantEventType
from .base import HandlerGroup

logger = get_logger(__name__)

# Presets offered by the instructionSelect combo box, by index
INSTRUCTION_PRESETS = (
    'CALL JOB:OR_RG_MOVE (1, 0, 40, "WIDTH")',
    "GETS B000 $B000",
)


class InstructionHandlers(HandlerGroup):
    def register(self, dispatcher: IEventDispatcher) -> None:
        dispatcher.register(
            ItemId.INSTRUCTION_SELECT, PendantEventType.ACTIVATED, self.on_insert_instruction_controls
        )
        dispatcher.register(
            ItemId.INSTRUCTION_TEXT, PendantEventType.EDITING_FINISHED, self.on_insert_instruction_controls
        )
        dispatcher.register(
            ItemId.INSERT_INSTRUCTION, PendantEventType.CLICKED, self.on_insert_instruction_controls
        )

    async def on_insert_instruction_controls(self, event: Event) -> None:
        pendant = self._ctx.pendant
        try:
            item = event.props["item"]

            if item == ItemId.INSTRUCTION_SELECT.value:
                index = int(event.props["index"])
                if 0 <= index < len(INSTRUCTION_PRESETS):
                    await pendant.set_property(
                        ItemId.INSTRUCTION_TEXT.value, "text", INSTRUCTION_PRESETS[index]
                    )

            elif item == ItemId.INSERT_INSTRUCTION.value:
                instruction = str(
                    await pendant.get_property(ItemId.INSTRUCTION_TEXT.value, "text")
                )
                output = await pendant.insert_instruction_at_selected_line(instruction)
                logger.info("Command insertion result: %s", output)
                await pendant.set_property(
                    ItemId.INSTRUCTION_INSERT_RESULT.value, "text", f"Result:{output}"
                )

        except Exception as e:
            error = describe_error(e)
            with log_and_continue("writing the instruction insertion error"):
                await pendant.set_property(ItemId.INSTRUCTION_INSERT_RESULT.value, "text", error)
            logger.error("Unable to handle instruction insertion: %s", error)

"""Tests for the navigation panel instruction insertion."""

import pytest

from pendant_demo.handlers import INSTRUCTION_PRESETS, InstructionHandlers
from pendant_demo.models import PendantEventType


@pytest.fixture
def instructions(ctx, dispatcher):
    handlers = InstructionHandlers(ctx)
    handlers.register(dispatcher)
    return handlers


class TestInstructionHandlers:
    """Tests for InstructionHandlers."""

    def test_registrations(self, instructions, dispatcher):
        """Test the three wired controls."""
        assert set(dispatcher.registrations) == {
            ("instructionSelect", PendantEventType.ACTIVATED),
            ("instructionText", PendantEventType.EDITING_FINISHED),
            ("insertInstruction", PendantEventType.CLICKED),
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("index", [0, 1])
    async def test_select_preset(self, instructions, dispatcher, service, make_event, index):
        """Test that choosing a preset fills the instruction text."""
        await dispatcher.dispatch(make_event("Activated", item="instructionSelect", index=index))

        assert service.pendant.properties[("instructionText", "text")] == INSTRUCTION_PRESETS[index]

    @pytest.mark.asyncio
    async def test_select_out_of_range(self, instructions, dispatcher, service, make_event):
        """Test that an unknown preset index leaves the text alone."""
        await dispatcher.dispatch(make_event("Activated", item="instructionSelect", index=5))

        assert service.pendant.properties[("instructionText", "text")] == ""

    @pytest.mark.asyncio
    async def test_editing_finished_is_ignored(self, instructions, dispatcher, service, make_event):
        """Test that finishing an edit changes nothing."""
        await dispatcher.dispatch(make_event("EditingFinished", item="instructionText", text="NOP"))

        assert service.pendant.job_lines == []
        assert service.pendant.properties[("instructionInsertResult", "text")] == ""

    @pytest.mark.asyncio
    async def test_insert(self, instructions, dispatcher, service, make_event):
        """Test inserting the selected preset into the job."""
        await dispatcher.dispatch(make_event("Activated", item="instructionSelect", index=1))
        await dispatcher.dispatch(make_event("Clicked", item="insertInstruction"))

        assert service.pendant.job_lines == ["GETS B000 $B000"]
        assert service.pendant.properties[("instructionInsertResult", "text")] == "Result:OK"

    @pytest.mark.asyncio
    async def test_insert_rejected(self, instructions, dispatcher, service, make_event, caplog):
        """Test that a rejected insertion shows the error."""
        with caplog.at_level("ERROR"):
            await dispatcher.dispatch(make_event("Clicked", item="insertInstruction"))

        assert (
            service.pendant.properties[("instructionInsertResult", "text")]
            == "IllegalArgument - Instruction text is empty"
        )
        assert service.pendant.job_lines == []
        assert "Unable to handle instruction insertion" in caplog.text

"""Tests for EventDispatcher."""

import pytest

from pendant_demo.models import ControllerEventType, Event, ItemId, PendantEventType


class TestDispatcherRegister:
    """Tests for EventDispatcher.register()."""

    def test_register_single_handler(self, dispatcher):
        """Test registering a handler stores it under (identifier, kind)."""

        async def handler(event: Event):
            pass

        dispatcher.register("successbutton", PendantEventType.CLICKED, handler)

        key = ("successbutton", PendantEventType.CLICKED)
        assert key in dispatcher.registrations
        assert dispatcher.registrations[key].handler is handler

    def test_register_item_id_uses_wire_value(self, dispatcher):
        """Test that an ItemId is stored under its string value."""

        async def handler(event: Event):
            pass

        dispatcher.register(ItemId.NETWORK_SEND, PendantEventType.CLICKED, handler)

        assert ("networkSend", PendantEventType.CLICKED) in dispatcher.registrations

    def test_register_same_key_replaces(self, dispatcher):
        """Test that the last registration for a key wins."""

        async def first(event: Event):
            pass

        async def second(event: Event):
            pass

        dispatcher.register("eventbutton1", PendantEventType.CLICKED, first)
        dispatcher.register(ItemId.EVENT_BUTTON, PendantEventType.CLICKED, second)

        assert len(dispatcher.registrations) == 1
        registration = dispatcher.registrations[("eventbutton1", PendantEventType.CLICKED)]
        assert registration.handler is second

    def test_register_kind(self, dispatcher):
        """Test that register_kind() registers a wildcard identifier."""

        async def handler(event: Event):
            pass

        dispatcher.register_kind(PendantEventType.POPUP_CLOSED, handler)

        assert (None, PendantEventType.POPUP_CLOSED) in dispatcher.registrations

    def test_registrations_view_is_read_only(self, dispatcher):
        """Test that the registrations view cannot be modified."""
        with pytest.raises(TypeError):
            dispatcher.registrations[("x", PendantEventType.CLICKED)] = None


class TestDispatcherDispatch:
    """Tests for EventDispatcher.dispatch()."""

    @pytest.mark.asyncio
    async def test_dispatch_invokes_matching_handler(self, dispatcher, make_event):
        """Test that a matching event reaches exactly the registered handler."""
        calls = []

        async def success(event: Event):
            calls.append(("success", event))

        async def notice(event: Event):
            calls.append(("notice", event))

        dispatcher.register(ItemId.SUCCESS_BUTTON, PendantEventType.CLICKED, success)
        dispatcher.register(ItemId.NOTICE_BUTTON, PendantEventType.CLICKED, notice)

        event = make_event("Clicked", item="successbutton")
        invoked = await dispatcher.dispatch(event)

        assert invoked == 1
        assert calls == [("success", event)]

    @pytest.mark.asyncio
    async def test_dispatch_checks_kind(self, dispatcher, make_event):
        """Test that the same item with a different kind does not match."""
        calls = []

        async def handler(event: Event):
            calls.append(event)

        dispatcher.register(ItemId.EVENT_TEXT_FIELD, PendantEventType.TEXT_EDITED, handler)

        await dispatcher.dispatch(make_event("EditingFinished", item="eventtextfield1"))

        assert calls == []

    @pytest.mark.asyncio
    async def test_dispatch_unmatched_event_is_dropped(self, dispatcher, make_event):
        """Test that an event with no registration runs nothing and raises nothing."""
        calls = []

        async def handler(event: Event):
            calls.append(event)

        dispatcher.register(ItemId.SUCCESS_BUTTON, PendantEventType.CLICKED, handler)

        invoked = await dispatcher.dispatch(make_event("Clicked", item="unknownbutton"))

        assert invoked == 0
        assert calls == []

    @pytest.mark.asyncio
    async def test_dispatch_matches_integration_identifier(self, dispatcher, make_event):
        """Test that jog panel events are matched on their identifier prop."""
        calls = []

        async def handler(event: Event):
            calls.append(event)

        dispatcher.register(ItemId.JOG_TOP_LEFT, PendantEventType.CLICKED, handler)

        await dispatcher.dispatch(make_event("Clicked", identifier="jogTopLeft"))

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_dispatch_kind_wide_handler(self, dispatcher, make_event):
        """Test that a kind-wide handler receives events from any source."""
        calls = []

        async def handler(event: Event):
            calls.append(event.prop("identifier"))

        dispatcher.register_kind(PendantEventType.POPUP_CLOSED, handler)

        await dispatcher.dispatch(make_event("PopupClosed", identifier="myeventpopup1"))
        await dispatcher.dispatch(make_event("PopupClosed"))

        assert calls == ["myeventpopup1", None]

    @pytest.mark.asyncio
    async def test_dispatch_specific_then_kind_wide(self, dispatcher, make_event):
        """Test that an event matching both registrations runs each once, specific first."""
        calls = []

        async def specific(event: Event):
            calls.append("specific")

        async def wildcard(event: Event):
            calls.append("wildcard")

        dispatcher.register_kind(PendantEventType.CLICKED, wildcard)
        dispatcher.register(ItemId.POPUP_QUESTION, PendantEventType.CLICKED, specific)

        invoked = await dispatcher.dispatch(make_event("Clicked", item="popupquestion"))

        assert invoked == 2
        assert calls == ["specific", "wildcard"]

    @pytest.mark.asyncio
    async def test_dispatch_controller_events(self, dispatcher):
        """Test that controller events are dispatched by kind."""
        calls = []

        async def handler(event: Event):
            calls.append(event.prop("mode"))

        dispatcher.register_kind(ControllerEventType.OPERATION_MODE, handler)

        await dispatcher.dispatch(Event(ControllerEventType.OPERATION_MODE, {"mode": "Teach"}))
        await dispatcher.dispatch(Event(ControllerEventType.SERVO_STATE, {"on": True}))

        assert calls == ["Teach"]

    @pytest.mark.asyncio
    async def test_dispatch_error_in_handler(self, dispatcher, make_event):
        """Test that a failing handler does not stop later dispatches."""
        calls = []

        async def failing(event: Event):
            calls.append("failing")
            raise RuntimeError("Test error")

        async def normal(event: Event):
            calls.append("normal")

        dispatcher.register(ItemId.EVENT_BUTTON, PendantEventType.CLICKED, failing)
        dispatcher.register(ItemId.NOTICE_BUTTON, PendantEventType.CLICKED, normal)

        # Should not raise error
        invoked = await dispatcher.dispatch(make_event("Clicked", item="eventbutton1"))
        await dispatcher.dispatch(make_event("Clicked", item="noticebutton"))

        assert invoked == 1
        assert calls == ["failing", "normal"]

    @pytest.mark.asyncio
    async def test_dispatch_error_is_logged(self, dispatcher, make_event, caplog):
        """Test that handler errors are logged with the event kind."""

        async def failing(event: Event):
            raise ValueError("boom")

        dispatcher.register(ItemId.EVENT_BUTTON, PendantEventType.CLICKED, failing)

        with caplog.at_level("ERROR"):
            await dispatcher.dispatch(make_event("Clicked", item="eventbutton1"))

        assert "Error in handler for eventbutton1/Clicked" in caplog.text
        assert "boom" in caplog.text

"""Tests for data models."""

import pytest

from pendant_demo.models import (
    ControllerEventType,
    DataPoint,
    Event,
    ItemId,
    PendantEventType,
    Series,
    Version,
    item_key,
    parse_event_kind,
)


class TestEvent:
    """Tests for Event."""

    def test_identifier_from_item(self):
        """Test that the item prop names the event source."""
        event = Event(PendantEventType.CLICKED, {"item": "successbutton"})
        assert event.identifier == "successbutton"

    def test_identifier_from_integration(self):
        """Test that integration buttons are identified by their identifier prop."""
        event = Event(PendantEventType.CLICKED, {"identifier": "jogTopLeft"})
        assert event.identifier == "jogTopLeft"

    def test_identifier_missing(self):
        """Test events without a source item."""
        event = Event(PendantEventType.UTILITY_OPENED)
        assert event.identifier is None

    def test_props_are_read_only(self):
        """Test that props cannot be changed after delivery."""
        props = {"item": "eventcombo1", "index": 2}
        event = Event(PendantEventType.ACTIVATED, props)

        with pytest.raises(TypeError):
            event.props["index"] = 3

        # Mutating the source dict does not leak into the event
        props["index"] = 5
        assert event.props["index"] == 2

    def test_event_is_frozen(self):
        """Test that event fields cannot be reassigned."""
        event = Event(PendantEventType.CLICKED, {"item": "x"})
        with pytest.raises(AttributeError):
            event.kind = PendantEventType.PRESSED

    def test_source(self):
        """Test pendant and controller sources."""
        assert Event(PendantEventType.CLICKED).source == "pendant"
        assert Event(ControllerEventType.SERVO_STATE).source == "controller"

    def test_str(self):
        """Test the one-line description written to the Events tab."""
        event = Event(PendantEventType.TEXT_EDITED, {"item": "eventtextfield1", "text": "abc"})
        assert str(event) == "PendantEvent(TextEdited {item: eventtextfield1, text: abc})"

    def test_to_dict_from_dict(self):
        """Test the wire form of controller events."""
        event = Event(ControllerEventType.IO_VALUE_CHANGED, {"address": 10, "value": True})
        raw = event.to_dict()

        assert raw == {
            "source": "controller",
            "kind": "IOValueChanged",
            "props": {"address": 10, "value": True},
        }
        restored = Event.from_dict(raw)
        assert restored.kind is ControllerEventType.IO_VALUE_CHANGED
        assert dict(restored.props) == {"address": 10, "value": True}

    def test_parse_event_kind_rejects_unknown(self):
        """Test that unknown kinds raise ValueError."""
        with pytest.raises(ValueError):
            parse_event_kind("pendant", "Exploded")


class TestItemId:
    """Tests for ItemId and item_key()."""

    def test_item_key(self):
        """Test conversion to the wire string."""
        assert item_key(ItemId.JOG_TOP_CENTER) == "JogTopCenter"
        assert item_key("custom") == "custom"
        assert item_key(None) is None

    def test_values_are_unique(self):
        """Test that no two identifiers share a wire value."""
        values = [item.value for item in ItemId]
        assert len(values) == len(set(values))


class TestVersion:
    """Tests for Version."""

    def test_parse(self):
        """Test parsing dotted versions."""
        assert Version.parse("2.1.0") == Version(2, 1, 0)
        assert Version.parse("3") == Version(3, 0, 0)

    def test_ordering(self):
        """Test comparisons used for feature checks."""
        assert Version(2, 0, 3) < Version(2, 1, 0)
        assert Version(2, 1, 0) >= Version(2, 1, 0)
        assert Version(3, 0, 0) > Version(2, 9, 9)

    def test_parse_invalid(self):
        """Test that malformed versions raise ValueError."""
        with pytest.raises(ValueError):
            Version.parse("2.x")
        with pytest.raises(ValueError):
            Version.parse("1.2.3.4")

    def test_str(self):
        """Test rendering."""
        assert str(Version(2, 1, 0)) == "2.1.0"


class TestSeries:
    """Tests for chart Series."""

    def test_to_dict_skips_unset_fields(self):
        """Test that only set options are sent."""
        series = Series(x=[1.0], y=[2.0], color="#00ff00")
        assert series.to_dict() == {"x": [1.0], "y": [2.0], "color": "#00ff00"}

    def test_to_dict_includes_options(self):
        """Test vertex, max_pts and extra options."""
        series = Series(x=[0.0], y=[0.0], vertex="cross", max_pts=60, extra={"width": 2})
        assert series.to_dict() == {
            "x": [0.0],
            "y": [0.0],
            "vertex": "cross",
            "max_pts": 60,
            "width": 2,
        }

    def test_length_mismatch(self):
        """Test that x and y must line up."""
        with pytest.raises(ValueError):
            Series(x=[1.0, 2.0], y=[1.0])

    def test_data_point(self):
        """Test DataPoint fields."""
        point = DataPoint(0.5, 0.25)
        assert (point.x, point.y) == (0.5, 0.25)

"""Identifiers of the UI items and integration points the extension wires up."""

from enum import Enum


class ItemId(str, Enum):
    """Known item identifiers. The string value is what the pendant sends."""

    # Controls tab
    SUCCESS_BUTTON = "successbutton"
    NOTICE_BUTTON = "noticebutton"

    # Jog panel integration points
    JOG_TOP_LEFT = "jogTopLeft"
    JOG_TOP_RIGHT = "jogTopRight"
    JOG_BOTTOM_LEFT = "jogBottomLeft"
    JOG_BOTTOM_CENTER = "jogBottomCenter"
    JOG_BOTTOM_RIGHT = "jogBottomRight"
    JOG_TOP_CENTER = "JogTopCenter"
    JOG_BOTTOM_ANY = "test2"

    # Events tab
    EVENT_BUTTON = "eventbutton1"
    EVENT_TEXT_FIELD = "eventtextfield1"
    EVENT_COMBO = "eventcombo1"
    EVENT_TEXT = "eventtext1"
    POPUP_QUESTION = "popupquestion"
    EVENT_POPUP = "myeventpopup1"

    # Layout tab
    ROW1_SPACING_UP = "row1spacingup"
    ROW1_SPACING_DOWN = "row1spacingdown"
    LAYOUT_CONTENT = "layoutcontent"

    # Network tab
    NETWORK_SEND = "networkSend"
    NETWORK_DATA = "networkData"
    NETWORK_IP_ADDRESS = "networkIPAddress"
    NETWORK_PORT = "networkPort"
    NETWORK_RESPONSE = "networkResponse"
    NETWORK_ERROR = "networkError"

    # Navigation panel
    INSTRUCTION_SELECT = "instructionSelect"
    INSTRUCTION_TEXT = "instructionText"
    INSERT_INSTRUCTION = "insertInstruction"
    INSTRUCTION_INSERT_RESULT = "instructionInsertResult"

    # Windows and panels
    DEMO_WINDOW = "demoWindow"
    NAV_PANEL = "navpanel"


# Jog panel buttons that raise a notice when clicked ("test2" is placed but not wired)
JOG_PANEL_BUTTONS = (
    ItemId.JOG_TOP_LEFT,
    ItemId.JOG_TOP_RIGHT,
    ItemId.JOG_BOTTOM_LEFT,
    ItemId.JOG_BOTTOM_CENTER,
    ItemId.JOG_BOTTOM_RIGHT,
    ItemId.JOG_TOP_CENTER,
)


def item_key(identifier: "ItemId | str | None") -> str | None:
    """Plain string form of an identifier for lookups against wire values."""
    if identifier is None:
        return None
    if isinstance(identifier, ItemId):
        return identifier.value
    return str(identifier)

"""Handler groups, one per tab or panel."""

from .base import HandlerGroup, IHandlerGroup
from .charts import CHART_ID, STREAM_SERIES, ChartHandlers
from .controls import ControlsHandlers
from .events_tab import EventsTabHandlers
from .instructions import INSTRUCTION_PRESETS, InstructionHandlers
from .layout import LayoutHandlers
from .network import READ_TIMEOUT_MESSAGE, NetworkHandlers, RelayResult, network_access, relay

__all__ = [
    "IHandlerGroup",
    "HandlerGroup",
    "ControlsHandlers",
    "EventsTabHandlers",
    "LayoutHandlers",
    "NetworkHandlers",
    "InstructionHandlers",
    "ChartHandlers",
    "CHART_ID",
    "STREAM_SERIES",
    "INSTRUCTION_PRESETS",
    "READ_TIMEOUT_MESSAGE",
    "RelayResult",
    "network_access",
    "relay",
]

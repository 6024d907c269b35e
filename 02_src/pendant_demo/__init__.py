"""Demo extension for the robot pendant service."""

from .app import DemoExtension, IExtensionApp, run_extension
from .charts import ChartProducer, IChartProducer, ProducerState
from .config import ExtensionSettings
from .context import ExtensionContext
from .dispatcher import EventDispatcher, IEventDispatcher
from .errors import IllegalArgument, describe_error, exception_message, log_and_continue
from .i18n import Translations
from .models import (
    ControllerEventType,
    DataPoint,
    Event,
    EventBatch,
    ItemId,
    PendantEventType,
    Registration,
    Series,
    Version,
)
from .service import HttpExtensionService, IController, IExtensionService, IPendant

__all__ = [
    # Application
    "DemoExtension",
    "IExtensionApp",
    "run_extension",
    "ExtensionContext",
    "ExtensionSettings",
    # Models
    "Event",
    "EventBatch",
    "Registration",
    "PendantEventType",
    "ControllerEventType",
    "ItemId",
    "Version",
    "Series",
    "DataPoint",
    # Components
    "IEventDispatcher",
    "EventDispatcher",
    "IChartProducer",
    "ChartProducer",
    "ProducerState",
    "Translations",
    "IPendant",
    "IController",
    "IExtensionService",
    "HttpExtensionService",
    # Errors
    "IllegalArgument",
    "exception_message",
    "describe_error",
    "log_and_continue",
]

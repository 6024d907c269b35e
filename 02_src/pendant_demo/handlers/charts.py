"""Utility window opened: initialise the demo chart and start streaming into it."""

from ..charts import IChartProducer
from ..context import ExtensionContext
from ..dispatcher import IEventDispatcher
from ..errors import exception_message
from ..logging_config import get_logger
from ..models import Event, PendantEventType, Series
from .base import HandlerGroup

logger = get_logger(__name__)

CHART_ID = "exampleLine"
STREAM_SERIES = "Series 3"

CHART_CONFIG = {"title": "Demo Line Chart", "grid": True, "key": True}


def left_scale_data() -> dict[str, Series]:
    return {
        "Series 1": Series(
            x=[1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
            y=[1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
            color="#00ff00",
        ),
    }


def right_scale_data() -> dict[str, Series]:
    return {
        "Series 2": Series(
            x=[1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
            y=[0.0, 0.2, 0.4, 0.8, 0.4, 0.2],
            color="#ff0000",
            vertex="cross",
        ),
        # Filled point by point by the chart producer
        STREAM_SERIES: Series(x=[0.0], y=[0.0], color="#0000ff", max_pts=60),
    }


class ChartHandlers(HandlerGroup):
    """One-time chart set-up the first time the utility window opens."""

    def __init__(self, ctx: ExtensionContext, producer: IChartProducer):
        super().__init__(ctx)
        self._producer = producer
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def register(self, dispatcher: IEventDispatcher) -> None:
        dispatcher.register_kind(PendantEventType.UTILITY_OPENED, self.on_opened)

    async def on_opened(self, event: Event) -> None:
        if self._initialized:
            return

        pendant = self._ctx.pendant
        try:
            await pendant.set_chart_config(CHART_ID, CHART_CONFIG)
            await pendant.set_chart_data(CHART_ID, left_scale_data())
            await pendant.set_chart_data(CHART_ID, right_scale_data(), right=True)
            logger.info("Chart %s configured", CHART_ID)
        except Exception as e:
            logger.error("Unable to initialise chart %s: %s", CHART_ID, exception_message(e))
        self._initialized = True

        self._producer.start()

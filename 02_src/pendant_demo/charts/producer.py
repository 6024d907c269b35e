"""ChartProducer: background task streaming points into a pendant chart."""

import asyncio
import math
from enum import Enum
from typing import Protocol

from ..errors import exception_message
from ..logging_config import get_logger
from ..models import DataPoint
from ..service import IPendant

logger = get_logger(__name__)


class ProducerState(str, Enum):
    """NOT_STARTED -> RUNNING -> IDLE. There is no way back to NOT_STARTED."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    IDLE = "idle"


class IChartProducer(Protocol):
    """A single long-lived data producer."""

    def start(self) -> bool:
        """Start producing. Returns False if already started."""
        ...

    async def stop(self) -> None:
        """Cancel the producer task."""
        ...


class ChartProducer:
    """Appends (t, sin t) to a chart series every `interval` seconds until t >= bound."""

    def __init__(
        self,
        pendant: IPendant,
        chart_id: str,
        series: str,
        interval: float = 0.02,
        step: float = 0.1,
        bound: float = 6.0,
        right: bool = True,
    ):
        self._pendant = pendant
        self._chart_id = chart_id
        self._series = series
        self._interval = interval
        self._step = step
        self._bound = bound
        self._right = right

        self._started = False
        self._task: asyncio.Task | None = None
        self.counter = 0.0
        self.points_sent = 0
        self.failures = 0

    @property
    def state(self) -> ProducerState:
        if not self._started:
            return ProducerState.NOT_STARTED
        if self._task is not None and not self._task.done():
            return ProducerState.RUNNING
        return ProducerState.IDLE

    def start(self) -> bool:
        """Start the producer task; repeated calls are no-ops."""
        if self._started:
            return False

        self._started = True
        self._task = asyncio.create_task(self._run())
        logger.info("Chart producer started for %s/%s", self._chart_id, self._series)
        return True

    async def stop(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            logger.info("Chart producer stopped at t=%.1f", self.counter)

    async def wait(self) -> None:
        """Wait until the producer has reached its bound or been stopped."""
        if self._task is None or self._task.cancelled():
            return
        try:
            await self._task
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise

    async def _run(self) -> None:
        while self.counter < self._bound:
            await asyncio.sleep(self._interval)
            point = DataPoint(self.counter, math.sin(self.counter))
            try:
                await self._pendant.append_chart_point(
                    self._chart_id, self._series, point, self._right
                )
                self.points_sent += 1
            except Exception as e:
                # One attempt per point; the counter still advances
                self.failures += 1
                logger.error(
                    "Unable to append chart point at t=%.1f: %s",
                    self.counter,
                    exception_message(e),
                )
            self.counter = round(self.counter + self._step, 10)

        logger.info(
            "Chart producer idle after %s points (%s failed)",
            self.points_sent,
            self.failures,
        )

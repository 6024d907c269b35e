"""Charts module."""

from .producer import ChartProducer, IChartProducer, ProducerState

__all__ = ["ChartProducer", "IChartProducer", "ProducerState"]

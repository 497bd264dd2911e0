"""Lifecycle events recorded by the execution store."""
from .metric_event import MetricEvent

__all__ = ["MetricEvent"]

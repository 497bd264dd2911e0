"""Domain entities."""

from .agent import Agent
from .execution import Execution
from .heartbeat import Heartbeat
from .step import Step

__all__ = ["Agent", "Execution", "Heartbeat", "Step"]

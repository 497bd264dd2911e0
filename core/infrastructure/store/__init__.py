"""In-memory tracking storage."""
from .execution_store import ExecutionSnapshot, InMemoryExecutionStore

__all__ = ["ExecutionSnapshot", "InMemoryExecutionStore"]

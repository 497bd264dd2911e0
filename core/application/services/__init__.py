"""Application services."""
from .execution_detail_assembler import ExecutionDetailAssembler
from .orchestration_service import OrchestrationService

__all__ = ["ExecutionDetailAssembler", "OrchestrationService"]

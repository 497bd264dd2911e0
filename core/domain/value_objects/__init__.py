"""Domain value objects."""

from .error_detail import ErrorDetail

__all__ = ["ErrorDetail"]

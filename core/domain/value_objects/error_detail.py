"""
Error Detail Value Object.

Code/message pair attached to a failed execution or step.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ErrorDetail:
    """Caller-supplied failure description."""

    code: Optional[str] = None
    message: Optional[str] = None

"""
Agent Entity.

A registered orchestration identity.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List


DEFAULT_AGENT_TYPE = "SUBFLOW_MANAGER"
DEFAULT_OWNER_TEAM = "EAR"
DEFAULT_VERSION = "0.1.0"
DEFAULT_TAGS = ("subflow", "node-red")


@dataclass
class Agent:
    """
    Orchestration agent record.

    The id is supplied by the caller and is the stable key: registering
    the same id again updates the mutable fields but keeps ``created_at``.
    """

    agent_id: str
    agent_name: str
    created_at: datetime
    updated_at: datetime
    agent_type: str = DEFAULT_AGENT_TYPE
    owner_team: str = DEFAULT_OWNER_TEAM
    is_active: bool = True
    version: str = DEFAULT_VERSION
    tags: List[str] = field(default_factory=lambda: list(DEFAULT_TAGS))

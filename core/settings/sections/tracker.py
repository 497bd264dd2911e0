from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class TrackerSettings(BaseSettings):
    """
    Execution tracker settings.
    Describes the agent the service registers for itself on startup.
    """

    service_name: str = Field(default="subflow-tracker", alias="SUBFLOW_SERVICE_NAME")
    register_default_agent: bool = Field(default=True, alias="SUBFLOW_REGISTER_DEFAULT_AGENT")
    default_agent_id: str = Field(default="subflow-manager", alias="SUBFLOW_DEFAULT_AGENT_ID")
    default_agent_name: str = Field(default="Subflow Manager Agent", alias="SUBFLOW_DEFAULT_AGENT_NAME")
    default_agent_type: str = Field(default="ORCHESTRATOR", alias="SUBFLOW_DEFAULT_AGENT_TYPE")
    default_owner_team: str = Field(default="EAR", alias="SUBFLOW_DEFAULT_OWNER_TEAM")
    default_agent_tags: List[str] = Field(
        default_factory=lambda: ["subflow", "node-red", "execution-tracking"],
        alias="SUBFLOW_DEFAULT_AGENT_TAGS",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

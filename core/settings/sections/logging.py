from pydantic import Field
from pydantic_settings import BaseSettings

from core.infrastructure.logging import LOG_FORMAT


class LoggingSettings(BaseSettings):
    """
    Logging settings.
    Loaded from the environment (or .env) by exact variable name.
    """

    level: str = Field(default="INFO", alias="SUBFLOW_LOG_LEVEL")
    format: str = Field(default=LOG_FORMAT, alias="SUBFLOW_LOG_FORMAT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

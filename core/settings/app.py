# core/settings/app.py
from functools import lru_cache

from core.settings.sections.logging import LoggingSettings
from core.settings.sections.tracker import TrackerSettings


class AppSettings:
    """
    Central application settings aggregator.
    Settings are loaded lazily inside __init__
    to prevent eager evaluation at import time.
    """

    def __init__(self):
        self.tracker = TrackerSettings()
        self.logging = LoggingSettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()

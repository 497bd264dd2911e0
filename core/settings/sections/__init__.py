from core.settings.sections.logging import LoggingSettings
from core.settings.sections.tracker import TrackerSettings

__all__ = ["LoggingSettings", "TrackerSettings"]

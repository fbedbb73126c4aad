# Settings modules
from .app_settings import AppSettings, get_app_settings
from .logging_settings import LoggingSettings
from .messaging_settings import MessagingSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "LoggingSettings",
    "MessagingSettings",
]

# Settings package
from core.settings.modules import AppSettings, LoggingSettings, MessagingSettings, get_app_settings

__all__ = ["get_app_settings", "AppSettings", "LoggingSettings", "MessagingSettings"]

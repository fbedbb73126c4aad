from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.infrastructure.database.config import DatabaseSettings
from core.settings.modules.logging_settings import LoggingSettings
from core.settings.modules.messaging_settings import MessagingSettings


class AppSettings(BaseModel):
    """
    Application settings aggregator.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    messaging: MessagingSettings
    database: DatabaseSettings
    logging: LoggingSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        messaging=MessagingSettings(),
        database=DatabaseSettings(),
        logging=LoggingSettings(),
    )

from __future__ import annotations

from pydantic_settings import SettingsConfigDict

from core.settings.base import ShopmeshBaseSettings


class LoggingSettings(ShopmeshBaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"

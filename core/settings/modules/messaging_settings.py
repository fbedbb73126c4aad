from __future__ import annotations

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from core.settings.base import ShopmeshBaseSettings


class MessagingSettings(ShopmeshBaseSettings):
    """
    Settings for the in-process bus and request/response correlation.
    """

    model_config = SettingsConfigDict(env_prefix="MESSAGING_")

    request_timeout_seconds: float = Field(default=10.0, gt=0)

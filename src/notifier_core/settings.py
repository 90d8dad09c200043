from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # WARNING keeps the success path silent on stderr
    log_level: str = Field(default="WARNING", alias="NOTIFIER_LOG_LEVEL")


settings = Settings()  # load at import

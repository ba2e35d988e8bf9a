from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COVENANT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: str = "dev"
    log_level: str = "INFO"
    engine_name: str = "covenant-engine"

    law_db_endpoint: str = "https://api.law.gov/rac/irc"
    necessity_threshold: float = 0.5
    default_governing_state: str = "Delaware"


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()

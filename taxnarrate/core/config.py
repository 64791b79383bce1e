from __future__ import annotations

import os
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "TaxNarrate"
    ENV: str = "dev"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "plain"

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalise_log_format(cls, v):
        """Accept any casing; anything other than json falls back to plain."""
        if v is None:
            return "plain"
        value = str(v).strip().lower()
        return "json" if value == "json" else "plain"


class DevSettings(BaseAppSettings):
    ENV: str = "dev"
    LOG_LEVEL: str = "DEBUG"


class TestSettings(BaseAppSettings):
    ENV: str = "test"


class ProdSettings(BaseAppSettings):
    ENV: str = "prod"
    CORS_ALLOW_ORIGINS: list[str] = [
        "https://taxnarrate.ng",
        "https://www.taxnarrate.ng",
        "http://localhost:5173",  # Vite dev server
        "http://127.0.0.1:5173",
    ]
    LOG_FORMAT: str = "json"


_ENV_TO_SETTINGS: dict[str, type[BaseAppSettings]] = {
    "dev": DevSettings,
    "development": DevSettings,
    "test": TestSettings,
    "testing": TestSettings,
    "prod": ProdSettings,
    "production": ProdSettings,
}


@lru_cache
def get_settings() -> BaseAppSettings:
    env_name = os.getenv("APP_ENV") or os.getenv("ENV") or "dev"
    env = env_name.lower()
    settings_cls = _ENV_TO_SETTINGS.get(env, DevSettings)
    return settings_cls()


settings = get_settings()

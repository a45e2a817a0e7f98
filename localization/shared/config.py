# localization/shared/config.py
from enum import Enum
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "localization-service"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./localization.db"
    DATABASE_ECHO: bool = False

    # --- Auditing ---
    # Recorded as the acting user when a caller does not pass one.
    SYSTEM_USER_ID: int = 0

    # --- HTTP API ---
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()

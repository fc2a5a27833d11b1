import json
from functools import lru_cache
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.core import ENVIRONMENT


class Settings(BaseSettings):
    """
    Application-wide configuration settings.
    Loaded from environment variables or .env files.
    """

    # === General ===
    APP_NAME: str = "Timezone Service API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal[
        "local", "development", "testing", "production", "staging"
    ] = "local"
    APP_HOST: str = "0.0.0.0"  # nosec B104
    APP_PORT: int = 8000
    LOG_LEVEL: str = "info"
    LOG_DIR: str = "logs"
    DESCRIPTION: str = (
        "Timezone catalog and conversion service for appointment booking, "
        "built with FastAPI."
    )

    # === Database ===
    DATABASE_URL: Optional[str] = None
    POSTGRES_DRIVER: str = "asyncpg"
    POSTGRES_SCHEME: str = "postgresql"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "timezones"

    # === CORS ===
    ALLOWED_ORIGINS: str = "http://localhost,http://localhost:3000"

    # === Timezones ===
    TIMEZONE_SEED_ON_STARTUP: bool = True
    # False keeps the legacy "+HH:00" suffix, True renders the exact offset
    TIMEZONE_EXACT_OFFSET_SUFFIX: bool = False

    # === Pydantic config ===
    model_config = SettingsConfigDict(
        env_file=f".env.{ENVIRONMENT}",
        env_file_encoding="utf-8",
        extra="allow",
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"{self.POSTGRES_SCHEME}+{self.POSTGRES_DRIVER}://"
            f"{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def cors_origins(self) -> List[str]:
        try:
            parsed = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(parsed, list):
                return parsed
        except json.JSONDecodeError:
            pass

        return [
            origin.strip()
            for origin in self.ALLOWED_ORIGINS.split(",")
            if origin.strip()
        ]


# === Singleton accessor (ensures one instance only) ===
@lru_cache()
def get_settings() -> Settings:
    return Settings()


# === Load settings ===
settings: Settings = get_settings()

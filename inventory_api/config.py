from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Inventory Management API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "local"
    API_PREFIX: str = "/api"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./inventory.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    REQUEST_LOGGING: bool = True

    # ==============================
    # HTTP
    # ==============================
    FRONTEND_URL: Optional[str] = "http://localhost:3000"
    CORS_ORIGINS: Optional[str] = None
    GZIP_MINIMUM_SIZE: int = 1000

    # ==============================
    # Pagination
    # ==============================
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    def cors_origins(self) -> list[str]:
        origins = []
        if self.FRONTEND_URL:
            origins.append(self.FRONTEND_URL.strip())
        if self.CORS_ORIGINS:
            for value in self.CORS_ORIGINS.split(","):
                value = value.strip()
                if value and value not in origins:
                    origins.append(value)
        return origins


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]

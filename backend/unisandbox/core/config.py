"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the FastAPI backend."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    UNISANDBOX_DB_HOST: str = "localhost"
    UNISANDBOX_DB_PORT: int = 3306
    UNISANDBOX_DB_NAME: str = "unisandbox"
    UNISANDBOX_DB_USER: str = "root"
    UNISANDBOX_DB_PASSWORD: str = ""
    UNISANDBOX_DB_CHARSET: str = "utf8mb4"
    UNISANDBOX_DATABASE_URL: Optional[str] = None

    API_PREFIX: str = "/be"
    CORS_ALLOW_ORIGINS: List[str] = []

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    def sqlalchemy_url(self) -> str:
        """Build a SQLAlchemy URL, defaulting to MySQL using the pymysql driver."""
        if self.UNISANDBOX_DATABASE_URL:
            return self.UNISANDBOX_DATABASE_URL
        return (
            f"mysql+pymysql://{self.UNISANDBOX_DB_USER}:{self.UNISANDBOX_DB_PASSWORD}"
            f"@{self.UNISANDBOX_DB_HOST}:{self.UNISANDBOX_DB_PORT}/{self.UNISANDBOX_DB_NAME}"
            f"?charset={self.UNISANDBOX_DB_CHARSET}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()


settings = get_settings()

"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "HealthTrack athlete and coach API"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["HealthTrack developers"]
    PROJECT_URL: str = "https://github.com/healthtrack/healthtrack-api"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database. DATABASE_URL wins; otherwise assembled from the PostgreSQL parts.
    DATABASE_URL: str = ""
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "healthtrack"

    # Security
    JWT_SECRET: str
    REFRESH_TOKEN_SECRET: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # Shared reports
    ACCESS_CODE_BYTES: int = 12

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode="after")
    def _finalize(self) -> "Settings":
        if not self.DATABASE_URL:
            self.DATABASE_URL = (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                                 f":{self.DATABASE_PORT}/{self.DATABASE_DBNAME}")
        if self.JWT_SECRET == self.REFRESH_TOKEN_SECRET:
            raise ValueError("REFRESH_TOKEN_SECRET must differ from JWT_SECRET")
        return self


# Global settings instance
settings = Settings()

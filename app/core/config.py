"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        host: Interface the CLI `serve` command binds to.
        port: Port the CLI `serve` command listens on.
        database_url: Explicit SQLAlchemy DSN. Overrides the postgres_* values.
        database_echo: Echo SQL statements to the log.

    When no explicit DSN is given, one is built from the postgres_* values
    so that Docker Compose setups only need to set host and credentials.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "User Management API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    host: str = "0.0.0.0"
    port: int = 5000

    database_url: Optional[str] = None
    database_echo: bool = False
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "users"

    def get_database_url(self) -> str:
        """Return the effective DSN for the user store.

        Priority:
        1. Explicit `DATABASE_URL`
        2. DSN built from postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()

"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, including the storage engine:
the database URL is read here and handed to the repository explicitly
by the composition root.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        host: Interface the uvicorn server binds to.
        port: Port the uvicorn server listens on.
        database_url: SQLAlchemy URL of the department store.
        database_echo: Echo emitted SQL to the log.
        storage_backend: "sql" for the database, "memory" for a
            process-local store that is lost on restart.
        validation_mode: "fail_fast" reports the first field violation,
            "collect" reports all of them headlined by the first.
        seed_sample_data: Insert sample departments into an empty table
            on startup.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Department Catalog"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    host: str = "0.0.0.0"
    port: int = 8000

    database_url: str = "sqlite:///./departments.db"
    database_echo: bool = False
    storage_backend: Literal["sql", "memory"] = "sql"
    validation_mode: Literal["fail_fast", "collect"] = "fail_fast"
    seed_sample_data: bool = False

    @property
    def collect_all_violations(self) -> bool:
        """True when field validation should report every violation."""
        return self.validation_mode == "collect"


settings = Settings()

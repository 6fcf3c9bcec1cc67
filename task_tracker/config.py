"""
Application configuration settings.

Values come from environment variables prefixed with TASK_TRACKER_, or from
a local .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        database_path: SQLite file path, or ":memory:" for a throwaway database
        seed_sample_data: Insert sample tasks when the table is first created
        cors_origins: Origins allowed by the CORS middleware
    """

    model_config = SettingsConfigDict(
        env_prefix="TASK_TRACKER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "Task Tracker"
    version: str = "0.1.0"

    database_path: str = ":memory:"
    seed_sample_data: bool = True

    cors_origins: list[str] = ["*"]

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()

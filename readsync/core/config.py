"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "readsync"
    debug: bool = False

    # Database: one SQLite file shared by every request
    database_url: str = "sqlite+aiosqlite:///./koreader-sync.sqlite"
    database_timeout: float = 30.0  # seconds to wait on a locked database

    # Listen address (CLI)
    host: str = "127.0.0.1"
    port: int = 9200

    log_level: str = "INFO"

    # Accounts
    salt_length: int = 8

    # Append every accepted push to progress_history
    record_history: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()

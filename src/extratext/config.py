"""Configuration using pydantic-settings.

Values come from environment variables or a ``.env`` file in the working
directory.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Environment variables:
    - SERVICE_ACCOUNT_PATH: Path to the service account JSON key file
    - LOG_LEVEL: Minimum log level (default INFO)
    - JSON_LOGS: Emit JSON log lines instead of human-readable ones
    - REQUEST_TIMEOUT: HTTP timeout for Docs API calls, in seconds
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars not defined in Settings
    )

    service_account_path: Path = Path("service-account.json")
    log_level: str = "INFO"
    json_logs: bool = False
    request_timeout: int = 60

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        allowed = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        if level not in allowed:
            raise ValueError(f"log_level must be one of: {sorted(allowed)}")
        return level

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the process.
    """
    return Settings()

"""
Credential and connection settings.

Values come from the process environment or a `.env` file. The client
itself never reads configuration; it receives an already resolved key.
"""

from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gmaps_places.errors import ApiKeyLoadingFailure, MissingApiKey


def strip_wrapping_quotes(value: str) -> str:
    """Remove one leading and one trailing double quote if both are present."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Google Maps Places API ---
    GMAPS_API_KEY: str = Field(
        default="",
        description="API key for the Google Maps Places API.",
    )
    GMAPS_BASE_URL: str = Field(
        default="https://maps.googleapis.com",
        description="Base address of the Places API host.",
    )
    GMAPS_REQUEST_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds applied to every outgoing request.",
    )

    @field_validator("GMAPS_API_KEY", mode="after")
    @classmethod
    def _unwrap_api_key(cls, value: str) -> str:
        # naive key=value parsers keep the quotes around the value
        return strip_wrapping_quotes(value)


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build settings from the environment and an optional env file.

    Args:
        env_file: Explicit key-value file to read. When omitted, a `.env`
            in the working directory is used if present.

    Raises:
        ApiKeyLoadingFailure: The explicit file is not readable, or a value
            fails validation.
    """
    if env_file is not None and not Path(env_file).is_file():
        raise ApiKeyLoadingFailure(f"Settings file not found: {env_file}")

    try:
        if env_file is None:
            return Settings()
        return Settings(_env_file=env_file)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load Google Maps settings: {e}")
        raise ApiKeyLoadingFailure() from e


def load_api_key(env_file: str | Path | None = None) -> str:
    """Return the configured API key, unwrapped from any literal quotes."""
    api_key = load_settings(env_file).GMAPS_API_KEY
    if not api_key:
        raise MissingApiKey()
    return api_key

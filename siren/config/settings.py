from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class Settings(BaseSettings):
    """
    Codec settings managed by Pydantic.
    Reads from environment variables and/or .env file.
    """
    # Media type advertised by SirenResponse
    SIREN_MEDIA_TYPE: str = "application/vnd.siren+json"

    # Indentation of encoded JSON; output is always UTF-8
    SIREN_JSON_INDENT: Optional[int] = None

    # Config to read from .env file if available
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
        )

settings = Settings()

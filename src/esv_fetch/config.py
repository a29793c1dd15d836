"""Runtime configuration using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# Constants
# =============================================================================

API_BASE_URL = "https://api.esv.org/v3/passage/text/"
API_KEY_URL = "https://api.esv.org/"
API_KEY_ENV = "ESV_API_KEY"
DEFAULT_TIMEOUT = 30.0


# =============================================================================
# Settings
# =============================================================================

class Settings(BaseSettings):
    """Settings loaded from ``ESV_*`` environment variables or a ``.env`` file."""

    api_key: str = ""
    api_url: str = API_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="ESV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings is an explicit value: built once at process start (load_settings) and
      passed to whatever constructs the API client; there is no module-level singleton
    - api_base_url is used verbatim by the client (no slash normalization)
    - app_name/app_version are display-only; the client never reads them

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box against a local backend
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings from environment variables (API_BASE_URL, LOG_LEVEL, ...)."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True, extra="ignore",
    )

    # App (display only)
    app_name: str = "Ecommerce Platform"
    app_version: str = "1.0.0"

    # API
    api_base_url: str = "http://localhost:3001"

    @field_validator("api_base_url", mode="before")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


def load_settings(**overrides) -> Settings:
    """Build a fresh Settings value; keyword overrides beat env vars and .env."""
    return Settings(**overrides)

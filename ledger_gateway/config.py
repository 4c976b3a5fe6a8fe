"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a working default for a local peer on :7050
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - default_enrollment_id is None by default: requests without identity fail
      unless a deployment opts into a shared demo identity
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Ledger peer
    ledger_url: str = "http://localhost:7050"
    chaincode_name: str = "ledger-gateway"
    ledger_timeout_seconds: float = 30.0

    @field_validator("ledger_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Identity
    identity_header: str = "X-Enrollment-Id"
    default_enrollment_id: str | None = None

    # API
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache), single instance per process
    - Engine settings are read when the engine client is built, not at import

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Empty multi_agent_endpoint is allowed at startup: readiness probe reports it,
      first request needing the engine fails with a clear error
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Multi-agent execution engine
    multi_agent_endpoint: str = ""
    multi_agent_api_key: str = ""
    multi_agent_timeout_seconds: float = 120.0

    @field_validator("multi_agent_endpoint", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are joined as endpoint + '/agents', so drop any trailing '/'."""
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    # Session verification
    session_secret: str = "session-secret-placeholder"
    session_algorithm: str = "HS256"
    session_cookie_name: str = "session_token"
    session_user_claim: str = "sub"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process, read-only after startup
    - An empty api_key rejects every token request
    - An empty jwt_secret disables token issuance and verification

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all non-secret settings: works out-of-the-box locally
    - cors_origins accepts a comma-separated string as well as a JSON list
"""

import json

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from functools import lru_cache
from typing import Annotated


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Auth
    api_key: str = ""
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expires_in_seconds: int = 3600
    token_subject: str = "figma-copy-updater"

    # Anthropic
    anthropic_api_key: str = "sk-ant-placeholder"
    anthropic_timeout_seconds: int = 60

    # Rewriter
    rewrite_model: str = "claude-sonnet-4-5"
    rewrite_max_tokens: int = 1024

    # API
    cors_origins: Annotated[list[str], NoDecode] = ["*"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v):
        """Allow CORS_ORIGINS=http://a,http://b in the environment."""
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [o.strip() for o in v.split(",") if o.strip()]
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

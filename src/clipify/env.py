from __future__ import annotations

import os
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator

DEFAULT_BASE_URL = "https://clip-ify.pockethost.io"


class Settings(BaseModel):
    """Typed client settings built from environment variables."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v:
            return DEFAULT_BASE_URL
        parsed = urlparse(v)
        if parsed.scheme not in {"http", "https"}:
            raise ValueError("Base URL must start with http:// or https://")
        if not parsed.netloc:
            raise ValueError("Base URL must include a host")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    # Empty variables fall back to defaults
    return Settings.model_validate(
        {
            "base_url": os.environ.get("CLIPIFY_BASE_URL", "") or DEFAULT_BASE_URL,
            "timeout": os.environ.get("CLIPIFY_TIMEOUT", "") or 10.0,
        }
    )

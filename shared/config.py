"""
Shared configuration management for Token Guard.
"""

from typing import FrozenSet, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_REQUIRED_CLAIMS = frozenset({"iss", "iat", "exp", "nbf", "sub", "jti"})
DEFAULT_REFRESH_TTL = 20160  # 14 days, in minutes
DEFAULT_STORAGE_TAG = "token_guard.jwt"


class TokenGuardSettings(BaseSettings):
    """Settings read from TOKEN_GUARD_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TOKEN_GUARD_",
        env_file=".env",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Payload validation
    required_claims: FrozenSet[str] = Field(default=DEFAULT_REQUIRED_CLAIMS)
    refresh_ttl: int = Field(default=DEFAULT_REFRESH_TTL)

    # Revocation storage
    storage_backend: str = Field(default="memory")
    redis_url: str = Field(default="redis://localhost:6379/0")
    # None stores keys bare; flush then clears the whole database
    storage_tag: Optional[str] = Field(default=DEFAULT_STORAGE_TAG)


def get_settings(**overrides) -> TokenGuardSettings:
    """Get settings from the environment, with explicit overrides."""
    return TokenGuardSettings(**overrides)

"""
Builders wiring settings into validators and revocation stores.
"""

from typing import Optional

from shared.config import TokenGuardSettings, get_settings
from shared.logging import configure_logging, get_logger
from .storage import MemoryStorage, RedisStorage, RevocationStore
from .validators import PayloadValidator, ValidatorConfig

logger = get_logger("token_guard.factory")


def setup_logging(settings: Optional[TokenGuardSettings] = None) -> None:
    """Configure structlog at the level named in settings."""
    settings = settings or get_settings()
    configure_logging("token_guard", settings.log_level)


def build_validator(settings: Optional[TokenGuardSettings] = None) -> PayloadValidator:
    """Create a payload validator from settings."""
    settings = settings or get_settings()
    config = ValidatorConfig(
        required_claims=settings.required_claims,
        refresh_ttl=settings.refresh_ttl
    )
    return PayloadValidator(config)


def build_storage(settings: Optional[TokenGuardSettings] = None) -> RevocationStore:
    """Create the revocation store selected by settings.storage_backend."""
    settings = settings or get_settings()
    backend = settings.storage_backend.lower()

    if backend == "memory":
        storage: RevocationStore = MemoryStorage()
    elif backend == "redis":
        storage = RedisStorage(settings.redis_url, tag=settings.storage_tag)
    else:
        raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")

    logger.info("Revocation storage configured", backend=backend, env=settings.env)
    return storage

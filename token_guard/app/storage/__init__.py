"""
Revocation storage package.

Provides the RevocationStore contract and its adapters. Pick the adapter
that matches the backend: MemoryStorage for a single process, RedisStorage
for a shared cache. Tag scoping is a property of the adapter, not a
runtime probe.
"""

from .base import RevocationStore
from .memory import MemoryStorage
from .redis_storage import RedisStorage

__all__ = [
    "MemoryStorage",
    "RedisStorage",
    "RevocationStore",
]

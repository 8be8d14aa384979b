"""
Redis-backed revocation store.

Entries are written with SETEX so Redis expires them on its own. When a tag
is configured every key is stored as ``<tag>:<key>`` and flush() only
removes keys under that prefix. Without a tag keys are stored bare and
flush() clears the whole logical database, which also removes keys written
by anything else sharing it.
"""

import json
from typing import Any, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from shared.config import DEFAULT_STORAGE_TAG
from shared.errors import BackendUnavailableError, StoredValueError
from shared.logging import get_logger
from .base import RevocationStore


class RedisStorage(RevocationStore):
    """Revocation store on top of redis.asyncio."""

    SCAN_BATCH_SIZE = 500

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        tag: Optional[str] = DEFAULT_STORAGE_TAG,
        client: Optional[redis.Redis] = None,
    ):
        self.redis_url = redis_url
        self.tag = tag
        self.logger = get_logger("token_guard.storage.redis")
        self._redis: Optional[redis.Redis] = client

    async def _get_redis(self) -> redis.Redis:
        """Get Redis connection."""
        if self._redis is None:
            self._redis = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
                health_check_interval=30
            )
        return self._redis

    def _make_key(self, key: str) -> str:
        if self.tag is None:
            return key
        return f"{self.tag}:{key}"

    def _unavailable(self, operation: str, error: RedisError) -> BackendUnavailableError:
        self.logger.error("Redis storage error", operation=operation, error=str(error))
        return BackendUnavailableError(
            "redis",
            f"{operation} failed: {error}",
            details={"operation": operation}
        )

    async def put(self, key: str, value: Any, minutes: int) -> None:
        if minutes <= 0:
            self.logger.debug("Skipped storing entry with non-positive ttl", key=key, minutes=minutes)
            return

        try:
            redis_client = await self._get_redis()
            await redis_client.setex(self._make_key(key), minutes * 60, json.dumps(value))
        except RedisError as e:
            raise self._unavailable("put", e) from e

        self.logger.debug("Stored entry", key=key, minutes=minutes)

    async def get(self, key: str) -> Optional[Any]:
        try:
            redis_client = await self._get_redis()
            cached_data = await redis_client.get(self._make_key(key))
        except RedisError as e:
            raise self._unavailable("get", e) from e

        if cached_data is None:
            return None
        try:
            if isinstance(cached_data, bytes):
                cached_data = cached_data.decode("utf-8")
            return json.loads(cached_data)
        except ValueError as e:
            self.logger.error("Undecodable stored value", key=key, error=str(e))
            raise StoredValueError(
                "redis",
                f"value under {key!r} is not JSON",
                details={"key": key}
            ) from e

    async def destroy(self, key: str) -> bool:
        try:
            redis_client = await self._get_redis()
            removed = await redis_client.delete(self._make_key(key))
        except RedisError as e:
            raise self._unavailable("destroy", e) from e

        return bool(removed)

    async def flush(self) -> None:
        try:
            redis_client = await self._get_redis()

            if self.tag is None:
                await redis_client.flushdb()
                self.logger.warning("Flushed entire Redis database", redis_url=self.redis_url)
                return

            keys_count = 0
            batch = []
            async for cache_key in redis_client.scan_iter(match=f"{self.tag}:*", count=self.SCAN_BATCH_SIZE):
                batch.append(cache_key)
                if len(batch) >= self.SCAN_BATCH_SIZE:
                    keys_count += await redis_client.delete(*batch)
                    batch = []
            if batch:
                keys_count += await redis_client.delete(*batch)
        except RedisError as e:
            raise self._unavailable("flush", e) from e

        self.logger.info("Flushed tagged entries", tag=self.tag, keys_count=keys_count)

    async def close(self) -> None:
        """Release the connection pool."""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None

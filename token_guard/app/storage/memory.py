"""
In-process revocation store.
"""

import time
from typing import Any, Callable, Dict, Optional, Tuple

from shared.logging import get_logger
from .base import RevocationStore


class MemoryStorage(RevocationStore):
    """Dict-backed store; each instance is its own namespace.

    Expired entries are dropped when read, and swept from the whole store
    at most once per ``sweep_interval`` seconds while writing.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, sweep_interval: float = 60.0):
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}  # key -> (value, expires_at)
        self._sweep_interval = sweep_interval
        self._next_sweep = float("-inf")
        self.logger = get_logger("token_guard.storage.memory")

    async def put(self, key: str, value: Any, minutes: int) -> None:
        now = self._clock()
        if now >= self._next_sweep:
            self._sweep(now)

        if minutes <= 0:
            self.logger.debug("Skipped storing entry with non-positive ttl", key=key, minutes=minutes)
            return

        self._entries[key] = (value, now + minutes * 60)
        self.logger.debug("Stored entry", key=key, minutes=minutes)

    async def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at <= self._clock():
            self._entries.pop(key, None)
            return None

        return value

    async def destroy(self, key: str) -> bool:
        entry = self._entries.pop(key, None)
        return entry is not None and entry[1] > self._clock()

    async def flush(self) -> None:
        count = len(self._entries)
        self._entries.clear()
        self.logger.info("Flushed memory storage", keys_count=count)

    def _sweep(self, now: float) -> None:
        expired = [key for key, (_, expires_at) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]
        self._next_sweep = now + self._sweep_interval

        if expired:
            self.logger.debug("Swept expired entries", keys_count=len(expired))

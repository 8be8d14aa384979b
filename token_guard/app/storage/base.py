"""
Revocation store contract.

Adapters persist revocation records, usually keyed by a token's ``jti``,
for a limited number of minutes. A missing or expired key is a normal
``None`` result; a backend that cannot be reached raises
``BackendUnavailableError`` and is never reported as "not revoked".
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class RevocationStore(ABC):
    """Key/value store with expiry and namespace-wide flush."""

    @abstractmethod
    async def put(self, key: str, value: Any, minutes: int) -> None:
        """Store value under key for the given number of minutes.

        A non-positive duration stores nothing.
        """
        ...

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when absent or expired."""
        ...

    @abstractmethod
    async def destroy(self, key: str) -> bool:
        """Remove key. Returns whether an entry was removed."""
        ...

    @abstractmethod
    async def flush(self) -> None:
        """Remove every entry in the namespace this store manages."""
        ...

    async def add(self, key: str, value: Any, minutes: int) -> None:
        """Alias of put()."""
        await self.put(key, value, minutes)

"""
Typed read-only access to a decoded JWT claim set.
"""

from datetime import datetime
from typing import Any, Iterable, Iterator, List, Mapping, Optional

from shared.errors import InvalidClaimsError
from . import utils


class ClaimSet(Mapping[str, Any]):
    """Read-only view over a claim mapping with timestamp helpers."""

    def __init__(self, claims: Mapping[str, Any]):
        self._claims = claims

    def __getitem__(self, name: str) -> Any:
        return self._claims[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._claims)

    def __len__(self) -> int:
        return len(self._claims)

    def __repr__(self) -> str:
        return f"ClaimSet({dict(self._claims)!r})"

    def has(self, name: str) -> bool:
        """Whether the claim name is present as a key."""
        return name in self._claims

    def missing(self, required: Iterable[str]) -> List[str]:
        """Required claim names that are not keys of this claim set."""
        return sorted(name for name in set(required) if name not in self._claims)

    def timestamp(self, name: str) -> Optional[datetime]:
        """Return a claim as a UTC datetime, or None when absent.

        Raises:
            InvalidClaimsError: if the claim cannot be read as a timestamp.
        """
        if name not in self._claims:
            return None

        try:
            return utils.timestamp(self._claims[name])
        except ValueError as exc:
            raise InvalidClaimsError(
                f"Invalid value provided for claim [{name}]",
                details={"claim": name, "error": str(exc)}
            ) from exc

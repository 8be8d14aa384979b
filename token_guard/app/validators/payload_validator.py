"""
Payload validation for decoded JWT claim sets.

A claim set is checked in one of two modes:

- standard: the required claims must be present, ``nbf`` and ``iat`` must
  not lie in the future and ``exp`` must not lie in the past;
- refresh: the required claims must be present and the token must have been
  issued less than ``refresh_ttl`` minutes ago.

The first failing rule raises; violations are never aggregated.
"""

from datetime import datetime
from typing import Any, Callable, FrozenSet, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.config import DEFAULT_REFRESH_TTL, DEFAULT_REQUIRED_CLAIMS
from shared.errors import InvalidClaimsError, TokenError, TokenExpiredError
from shared.logging import get_logger, token_context
from ..support import utils
from ..support.claims import ClaimSet


class ValidatorConfig(BaseModel):
    """Immutable payload validator configuration."""

    model_config = ConfigDict(frozen=True)

    required_claims: FrozenSet[str] = Field(default=DEFAULT_REQUIRED_CLAIMS)
    refresh_ttl: int = Field(default=DEFAULT_REFRESH_TTL)


class PayloadValidator:
    """Structural and temporal checks over a claim set."""

    def __init__(
        self,
        config: Optional[ValidatorConfig] = None,
        clock: Callable[[], datetime] = utils.now,
    ):
        self._config = config or ValidatorConfig()
        self._clock = clock
        self.logger = get_logger("token_guard.validator")

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    def check(self, claims: Mapping[str, Any], refresh_flow: bool = False) -> None:
        """Run the validations on the claim set.

        Raises:
            InvalidClaimsError: if a required claim is missing or a timestamp
                claim is malformed or lies in the future.
            TokenExpiredError: if the token expired, or in the refresh flow,
                if the refresh window has elapsed.
        """
        # Read the config once so a concurrent setter cannot split a check
        config = self._config
        payload = claims if isinstance(claims, ClaimSet) else ClaimSet(claims)

        with token_context(subject=payload.get("sub"), token_id=payload.get("jti")):
            try:
                self._validate_structure(payload, config)

                if not refresh_flow:
                    self._validate_timestamps(payload)
                else:
                    self._validate_refresh(payload, config)
            except TokenError as e:
                self.logger.info(
                    "Payload validation failed",
                    code=e.code,
                    reason=e.message,
                    refresh_flow=refresh_flow
                )
                raise

    def is_valid(self, claims: Mapping[str, Any], refresh_flow: bool = False) -> bool:
        """Like check(), returning False instead of raising token errors."""
        try:
            self.check(claims, refresh_flow)
        except TokenError:
            return False
        return True

    def set_required_claims(self, claims: Iterable[str]) -> "PayloadValidator":
        """Replace the required claims."""
        self._config = self._replace_config(required_claims=claims)
        return self

    def set_refresh_ttl(self, ttl: int) -> "PayloadValidator":
        """Replace the refresh TTL, in minutes."""
        self._config = self._replace_config(refresh_ttl=ttl)
        return self

    def _replace_config(self, **changes: Any) -> ValidatorConfig:
        """Copy the config with changes, running the model's validation.

        Raises:
            pydantic.ValidationError: e.g. a bare string for the claims or a
                non-integer ttl.
        """
        return ValidatorConfig.model_validate({**self._config.model_dump(), **changes})

    def _validate_structure(self, payload: ClaimSet, config: ValidatorConfig) -> None:
        missing = payload.missing(config.required_claims)
        if missing:
            raise InvalidClaimsError(
                "JWT payload does not contain the required claims",
                details={"missing_claims": missing}
            )

    def _validate_timestamps(self, payload: ClaimSet) -> None:
        current = self._clock()

        if payload.get("nbf") is not None and utils.is_future(payload.timestamp("nbf"), current):
            raise InvalidClaimsError("Not Before (nbf) timestamp cannot be in the future")

        if payload.get("iat") is not None and utils.is_future(payload.timestamp("iat"), current):
            raise InvalidClaimsError("Issued At (iat) timestamp cannot be in the future")

        # exp is only optional when removed from the required claims
        if payload.has("exp") and utils.is_past(payload.timestamp("exp"), current):
            raise TokenExpiredError("Token has expired")

    def _validate_refresh(self, payload: ClaimSet, config: ValidatorConfig) -> None:
        if payload.get("iat") is None:
            return

        elapsed = utils.diff_in_minutes(payload.timestamp("iat"), self._clock())
        if elapsed >= config.refresh_ttl:
            raise TokenExpiredError(
                "Token has expired and can no longer be refreshed",
                details={"elapsed_minutes": elapsed, "refresh_ttl": config.refresh_ttl},
                status_code=400
            )

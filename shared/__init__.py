"""
Shared utilities for Token Guard.

This package aggregates common building blocks consumed by the token_guard
package:

- config: Settings via pydantic-settings
- logging: Structured logging with token correlation
- errors: Canonical error types and responses

Do not import from token_guard into shared/.
"""

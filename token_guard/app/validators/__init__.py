"""
Claim set validators.
"""

from .payload_validator import PayloadValidator, ValidatorConfig

__all__ = [
    "PayloadValidator",
    "ValidatorConfig",
]

"""
Claim and time helpers shared by the validators.
"""

from .claims import ClaimSet

__all__ = [
    "ClaimSet",
]

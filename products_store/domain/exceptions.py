"""
Domain-level errors for products-store.

Store and transport failures are deliberately absent: those surface as the
boto3/botocore exceptions raised by the client.
"""

from __future__ import annotations

from typing import Any


class MalformedIdentifier(ValueError):
    """Raised when a textual serial id is not a canonical UUID string."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Malformed serial id {value!r}: expected a 36-character hyphenated UUID"
        )


__all__ = ["MalformedIdentifier"]

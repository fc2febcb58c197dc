"""
Domain models for products-store.

Defines the product record persisted in the `products` table. The model maps
onto DynamoDB attributes with `serialId` as the table's hash key; prices stay
`Decimal` end to end because boto3 serializes DynamoDB numbers from Decimal
and refuses binary floats.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping
from uuid import UUID

from pydantic import BaseModel, Field, StrictStr, field_validator

from products_store.domain.exceptions import MalformedIdentifier

SERIAL_ID_ATTRIBUTE = "serialId"
NAME_ATTRIBUTE = "name"
PRICE_ATTRIBUTE = "price"

_CANONICAL_UUID_LENGTH = 36


def parse_serial_id(text: Any) -> UUID:
    """
    Parse a canonical hyphenated UUID string.

    Raises
    ------
    MalformedIdentifier
        If `text` is not a string or not in the 8-4-4-4-12 hex form.
    """
    if not isinstance(text, str) or len(text) != _CANONICAL_UUID_LENGTH:
        raise MalformedIdentifier(text)
    try:
        parsed = UUID(text)
    except ValueError as exc:
        raise MalformedIdentifier(text) from exc
    # UUID() also accepts braces and urn prefixes; only the plain form is valid here.
    if str(parsed) != text.lower():
        raise MalformedIdentifier(text)
    return parsed


class Product(BaseModel):
    """
    Representation of a single item in the products table.
    """

    serial_id: UUID = Field(..., strict=True, description="Partition key.")
    name: StrictStr = Field(..., description="Display name.")
    price: Decimal = Field(..., allow_inf_nan=False, description="Exact monetary amount.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("price", mode="before")
    @classmethod
    def _reject_binary_floats(cls, value: Any) -> Any:
        if isinstance(value, float):
            raise ValueError("price must be an exact decimal, not a float")
        return value

    @classmethod
    def from_serial_id_text(cls, serial_id: str, name: str, price: Decimal) -> "Product":
        """
        Build a product from the textual form of its serial id.

        Raises `MalformedIdentifier` before any other field is validated.
        """
        return cls(serial_id=parse_serial_id(serial_id), name=name, price=price)

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "Product":
        """Rebuild a product from an item as returned by the boto3 Table API."""
        return cls.from_serial_id_text(
            item[SERIAL_ID_ATTRIBUTE], item[NAME_ATTRIBUTE], item[PRICE_ATTRIBUTE]
        )

    def to_item(self) -> dict[str, Any]:
        return {
            SERIAL_ID_ATTRIBUTE: str(self.serial_id),
            NAME_ATTRIBUTE: self.name,
            PRICE_ATTRIBUTE: self.price,
        }


__all__ = [
    "NAME_ATTRIBUTE",
    "PRICE_ATTRIBUTE",
    "SERIAL_ID_ATTRIBUTE",
    "Product",
    "parse_serial_id",
]

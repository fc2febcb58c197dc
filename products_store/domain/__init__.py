"""
Domain package for products-store.

Exports the product record and its errors. Keep this package focused on data
definitions and validation; nothing here talks to the store.
"""

from products_store.domain.exceptions import MalformedIdentifier
from products_store.domain.models import (
    NAME_ATTRIBUTE,
    PRICE_ATTRIBUTE,
    SERIAL_ID_ATTRIBUTE,
    Product,
    parse_serial_id,
)

__all__ = [
    "MalformedIdentifier",
    "NAME_ATTRIBUTE",
    "PRICE_ATTRIBUTE",
    "SERIAL_ID_ATTRIBUTE",
    "Product",
    "parse_serial_id",
]

"""
products-store - Persist product records to a DynamoDB table.

This package provides:

- An immutable `Product` record with structured and textual construction
- A `ProductsRepository` façade exposing a single insert-or-overwrite write
- A `StoreManager` owning the boto3 resource handle and its lifecycle
- Table provisioning helpers for deployment and integration tests
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from products_store.config import Settings, get_settings
from products_store.domain import MalformedIdentifier, Product
from products_store.infrastructure import (
    StoreManager,
    StoreNotInitializedError,
    get_store_manager,
)
from products_store.repositories import ProductsRepository, PutItemOutcome
from products_store.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "MalformedIdentifier",
    "Product",
    # Persistence
    "ProductsRepository",
    "PutItemOutcome",
    "StoreManager",
    "StoreNotInitializedError",
    "get_store_manager",
    # Logging
    "configure_logging",
    "get_logger",
]

"""
Repositories package for products-store.

Each repository binds one table of the store and exposes its write operations.
"""

from products_store.repositories.products import ProductsRepository, PutItemOutcome

__all__ = [
    "ProductsRepository",
    "PutItemOutcome",
]

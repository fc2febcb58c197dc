"""
Utilities package for products-store.

Exports shared helpers for cross-cutting concerns. Keep this package free of
domain-specific logic.
"""

from products_store.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]

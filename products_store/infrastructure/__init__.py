"""
Infrastructure package for products-store.

Centralizes store connectivity (resource factory, lifecycle, readiness) and
table provisioning. Keep this layer focused on I/O and resource management,
decoupled from the domain model.
"""

from products_store.infrastructure.schema import (
    create_products_table,
    delete_all_tables,
    delete_table,
    list_table_names,
)
from products_store.infrastructure.store_factory import (
    StoreManager,
    StoreNotInitializedError,
    build_dynamodb_resource,
    get_store_manager,
    wait_for_store,
)

__all__ = [
    "StoreManager",
    "StoreNotInitializedError",
    "build_dynamodb_resource",
    "create_products_table",
    "delete_all_tables",
    "delete_table",
    "get_store_manager",
    "list_table_names",
    "wait_for_store",
]

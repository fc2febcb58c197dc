"""
DynamoDB store factory utilities for products-store.

Builds boto3 DynamoDB service resources from settings and manages their
lifecycle. `StoreManager` models the handle as explicitly unbound (never opened
or already closed) or bound; asking an unbound manager for its resource raises
`StoreNotInitializedError` instead of handing out a dead handle.

Includes a readiness probe with retry for freshly started endpoints (e.g. a
DynamoDB Local container) using tenacity. Writes themselves are never retried
here.
"""

from __future__ import annotations

import atexit
import threading
from functools import lru_cache
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ConnectionError as BotoConnectionError
from botocore.exceptions import HTTPClientError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from products_store.config import Settings, get_settings
from products_store.repositories.products import ProductsRepository
from products_store.utils.logging import get_logger

log = get_logger(__name__)


class StoreNotInitializedError(RuntimeError):
    """Raised when a store handle is requested from an unbound StoreManager."""


def build_client_config(settings: Settings) -> Config:
    """Translate transport settings into a botocore Config."""
    return Config(
        connect_timeout=settings.dynamodb_connect_timeout_seconds,
        read_timeout=settings.dynamodb_read_timeout_seconds,
        retries={"max_attempts": settings.dynamodb_max_attempts, "mode": "standard"},
    )


def build_dynamodb_resource(settings: Settings, endpoint_url: Optional[str] = None) -> Any:
    """
    Create a boto3 DynamoDB service resource.

    Parameters
    ----------
    settings : Settings
        Region, credentials and transport configuration.
    endpoint_url : str, optional
        Overrides `settings.dynamodb_endpoint_url` (tests point this at a container).

    Returns
    -------
    boto3.resources.base.ServiceResource
        A DynamoDB resource. No request is made until it is used.
    """
    kwargs: Dict[str, Any] = {
        "region_name": settings.aws_region,
        "config": build_client_config(settings),
    }
    endpoint = endpoint_url or settings.dynamodb_endpoint_url
    if endpoint:
        kwargs["endpoint_url"] = endpoint
    if settings.has_static_credentials:
        kwargs["aws_access_key_id"] = settings.aws_access_key_id
        kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
    return boto3.resource("dynamodb", **kwargs)


@retry(
    stop=stop_after_attempt(10),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
    retry=retry_if_exception_type((BotoConnectionError, HTTPClientError)),
    reraise=True,
)
def wait_for_store(dynamodb: Any) -> None:
    """
    Block until the endpoint behind `dynamodb` answers a ListTables call.

    Retries up to 10 times with exponential backoff on connection errors.
    Service errors (bad credentials, throttling) are raised immediately.

    Raises
    ------
    botocore.exceptions.ConnectionError
        If the endpoint is still unreachable after all attempts.
    """
    dynamodb.meta.client.list_tables(Limit=1)


class StoreManager:
    """
    Thread-safe owner of one DynamoDB resource handle.

    Usage
    -----
        with StoreManager(settings) as manager:
            repository = manager.products_repository()
            repository.add(product)
    """

    def __init__(self, settings: Optional[Settings] = None, endpoint_url: Optional[str] = None) -> None:
        self._settings = settings or get_settings()
        self._endpoint_url = endpoint_url
        self._lock = threading.Lock()
        self._resource: Optional[Any] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def is_open(self) -> bool:
        return self._resource is not None

    @property
    def resource(self) -> Any:
        """
        The bound DynamoDB resource.

        Raises
        ------
        StoreNotInitializedError
            If `open()` has not been called or the manager was closed.
        """
        resource = self._resource
        if resource is None:
            raise StoreNotInitializedError("DynamoDB store closed or not yet initialized")
        return resource

    def open(self) -> Any:
        """Create the resource handle if unbound (idempotent) and return it."""
        with self._lock:
            if self._resource is None:
                self._resource = build_dynamodb_resource(self._settings, self._endpoint_url)
                log.info(
                    "DynamoDB resource opened",
                    extra={
                        "region": self._settings.aws_region,
                        "endpoint": self._endpoint_url or self._settings.dynamodb_endpoint_url,
                    },
                )
            return self._resource

    def products_repository(self, table_name: Optional[str] = None) -> ProductsRepository:
        """Bind a ProductsRepository to the open handle."""
        return ProductsRepository(self.resource, table_name or self._settings.products_table_name)

    def close(self) -> None:
        """
        Close the underlying client and return to the unbound state.

        Safe to call more than once; registered with atexit by `get_store_manager`.
        """
        with self._lock:
            resource, self._resource = self._resource, None
        if resource is not None:
            resource.meta.client.close()
            log.info("DynamoDB resource closed")

    def __enter__(self) -> "StoreManager":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@lru_cache(maxsize=1)
def get_store_manager() -> StoreManager:
    """
    Retrieve the process-wide StoreManager, closed automatically on exit.

    The manager starts unbound; call `open()` before using `resource`.
    """
    manager = StoreManager()
    atexit.register(manager.close)
    return manager


__all__ = [
    "StoreManager",
    "StoreNotInitializedError",
    "build_client_config",
    "build_dynamodb_resource",
    "get_store_manager",
    "wait_for_store",
]

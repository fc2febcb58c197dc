"""
Pytest configuration for products-store.

Provides fixtures for:
- Settings with test credentials
- A throwaway DynamoDB Local container (or an endpoint from DYNAMODB_ENDPOINT_URL)
- A clean products table per test, with every table dropped afterwards
- A stubbed boto3 resource for unit tests (no network)
"""

from __future__ import annotations

import os
from typing import Any, Generator, Tuple

import boto3
import pytest
from botocore.stub import Stubber
from testcontainers.core.container import DockerContainer

from products_store.config import Settings
from products_store.infrastructure.schema import create_products_table, delete_all_tables
from products_store.infrastructure.store_factory import StoreManager, wait_for_store

DYNAMODB_LOCAL_IMAGE = "amazon/dynamodb-local"
DYNAMODB_LOCAL_PORT = 8000
TEST_REGION = "us-west-2"
TEST_PRODUCTS_TABLE_NAME = "products"


def integration_enabled() -> bool:
    return os.getenv("RUN_INTEGRATION_TESTS", "0") == "1"


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    DynamoDB Local accepts any static credentials; the region only has to be valid.
    """
    return Settings(
        dynamodb_endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL"),
        aws_region=TEST_REGION,
        aws_access_key_id="test",
        aws_secret_access_key="test",
        products_table_name=TEST_PRODUCTS_TABLE_NAME,
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def dynamodb_endpoint(test_settings: Settings) -> Generator[str, None, None]:
    """
    Endpoint of a running DynamoDB-compatible store.

    Uses DYNAMODB_ENDPOINT_URL when set, otherwise starts a DynamoDB Local
    container for the session. Skips when integration tests are disabled.
    """
    if not integration_enabled():
        pytest.skip("Integration tests require RUN_INTEGRATION_TESTS=1")

    if test_settings.dynamodb_endpoint_url:
        yield test_settings.dynamodb_endpoint_url
        return

    container = DockerContainer(DYNAMODB_LOCAL_IMAGE).with_exposed_ports(DYNAMODB_LOCAL_PORT)
    container.start()
    try:
        # Exposed ports are mapped to random host ports.
        host = container.get_container_host_ip()
        port = container.get_exposed_port(DYNAMODB_LOCAL_PORT)
        yield f"http://{host}:{port}"
    finally:
        container.stop()


@pytest.fixture(scope="session")
def store_manager(
    test_settings: Settings, dynamodb_endpoint: str
) -> Generator[StoreManager, None, None]:
    """
    Session-scoped StoreManager bound to the test endpoint.
    """
    manager = StoreManager(test_settings, endpoint_url=dynamodb_endpoint)
    wait_for_store(manager.open())
    try:
        yield manager
    finally:
        manager.close()


@pytest.fixture
def dynamodb(store_manager: StoreManager) -> Any:
    return store_manager.resource


@pytest.fixture
def products_table(dynamodb: Any, test_settings: Settings) -> Generator[Any, None, None]:
    """
    Create a fresh products table before the test and drop all tables after it.
    """
    table = create_products_table(dynamodb, test_settings.products_table_name)
    try:
        yield table
    finally:
        delete_all_tables(dynamodb)


@pytest.fixture
def stubbed_dynamodb() -> Generator[Tuple[Any, Stubber], None, None]:
    """
    A real boto3 DynamoDB resource whose client is driven by a botocore Stubber.
    """
    resource = boto3.resource(
        "dynamodb",
        region_name=TEST_REGION,
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )
    with Stubber(resource.meta.client) as stubber:
        yield resource, stubber
        stubber.assert_no_pending_responses()

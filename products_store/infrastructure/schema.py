"""
Table provisioning for products-store.

Creates and drops the products table. The repository never calls into this
module: provisioning belongs to deployment and test setup.
"""

from __future__ import annotations

from typing import Any, Dict, List

from products_store.domain.models import SERIAL_ID_ATTRIBUTE
from products_store.utils.logging import get_logger

log = get_logger(__name__)

HASH_KEY_TYPE = "S"
DEFAULT_CAPACITY_UNITS = 10

# Local endpoints finish table operations almost immediately; keep polling tight.
_WAITER_CONFIG: Dict[str, int] = {"Delay": 1, "MaxAttempts": 60}


def products_table_definition(
    table_name: str,
    read_capacity: int = DEFAULT_CAPACITY_UNITS,
    write_capacity: int = DEFAULT_CAPACITY_UNITS,
) -> Dict[str, Any]:
    """CreateTable parameters for a table keyed by `serialId`."""
    return {
        "TableName": table_name,
        "KeySchema": [{"AttributeName": SERIAL_ID_ATTRIBUTE, "KeyType": "HASH"}],
        "AttributeDefinitions": [
            {"AttributeName": SERIAL_ID_ATTRIBUTE, "AttributeType": HASH_KEY_TYPE}
        ],
        "ProvisionedThroughput": {
            "ReadCapacityUnits": read_capacity,
            "WriteCapacityUnits": write_capacity,
        },
    }


def create_products_table(
    dynamodb: Any,
    table_name: str,
    read_capacity: int = DEFAULT_CAPACITY_UNITS,
    write_capacity: int = DEFAULT_CAPACITY_UNITS,
) -> Any:
    """
    Create the products table and wait until it is active.

    Returns
    -------
    boto3 DynamoDB Table resource

    Raises
    ------
    botocore.exceptions.ClientError
        `ResourceInUseException` if the table already exists.
    """
    table = dynamodb.create_table(
        **products_table_definition(table_name, read_capacity, write_capacity)
    )
    table.wait_until_exists(WaiterConfig=_WAITER_CONFIG)
    log.info("Created table", extra={"table": table_name})
    return table


def delete_table(dynamodb: Any, table_name: str) -> None:
    """Delete one table and wait until it is gone."""
    table = dynamodb.Table(table_name)
    table.delete()
    table.wait_until_not_exists(WaiterConfig=_WAITER_CONFIG)
    log.info("Deleted table", extra={"table": table_name})


def list_table_names(dynamodb: Any) -> List[str]:
    return [table.name for table in dynamodb.tables.all()]


def delete_all_tables(dynamodb: Any) -> List[str]:
    """
    Delete every table visible to `dynamodb`.

    Meant for throwaway endpoints (test containers). Returns deleted names.
    """
    names = list_table_names(dynamodb)
    for name in names:
        delete_table(dynamodb, name)
    return names


__all__ = [
    "DEFAULT_CAPACITY_UNITS",
    "HASH_KEY_TYPE",
    "create_products_table",
    "delete_all_tables",
    "delete_table",
    "list_table_names",
    "products_table_definition",
]

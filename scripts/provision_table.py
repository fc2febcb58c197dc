"""
Table provisioning script for products-store.

Creates, drops and lists DynamoDB tables against the configured endpoint
(AWS or a local DynamoDB container). The application itself never creates
tables; run this as part of deployment or local setup:

    python -m scripts.provision_table create --endpoint-url http://localhost:8000
"""

from __future__ import annotations

import sys
import time
from typing import Optional

import typer

from products_store.config import get_settings
from products_store.infrastructure.schema import (
    create_products_table,
    delete_all_tables,
    delete_table,
    list_table_names,
)
from products_store.infrastructure.store_factory import (
    StoreManager,
    get_store_manager,
    wait_for_store,
)
from products_store.utils.logging import configure_logging

app = typer.Typer(help="Provision the products table in DynamoDB.")


def _open_store(endpoint_url: Optional[str]) -> StoreManager:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    if endpoint_url:
        manager = StoreManager(settings, endpoint_url=endpoint_url)
    else:
        manager = get_store_manager()
    resource = manager.open()
    try:
        wait_for_store(resource)
    except Exception:
        manager.close()
        raise
    return manager


@app.command()
def create(
    table: Optional[str] = typer.Option(
        None,
        "--table",
        "-t",
        help="Table name (default from PRODUCTS_TABLE_NAME).",
    ),
    read_capacity: Optional[int] = typer.Option(
        None,
        "--read-capacity",
        help="Provisioned read capacity units.",
    ),
    write_capacity: Optional[int] = typer.Option(
        None,
        "--write-capacity",
        help="Provisioned write capacity units.",
    ),
    endpoint_url: Optional[str] = typer.Option(
        None,
        "--endpoint-url",
        help="Optional endpoint override (e.g., DynamoDB Local).",
    ),
) -> None:
    """
    Create the products table keyed by serialId.
    """
    with _open_store(endpoint_url) as manager:
        settings = manager.settings
        table_name = table or settings.products_table_name
        start = time.perf_counter()
        create_products_table(
            manager.resource,
            table_name,
            read_capacity=read_capacity or settings.products_read_capacity,
            write_capacity=write_capacity or settings.products_write_capacity,
        )
        typer.echo(f"Created table '{table_name}' in {time.perf_counter() - start:.2f}s")


@app.command()
def drop(
    table: Optional[str] = typer.Option(
        None,
        "--table",
        "-t",
        help="Table name (default from PRODUCTS_TABLE_NAME).",
    ),
    all_tables: bool = typer.Option(
        False,
        "--all",
        help="Drop every table at the endpoint. Only meant for throwaway stores.",
    ),
    endpoint_url: Optional[str] = typer.Option(
        None,
        "--endpoint-url",
        help="Optional endpoint override (e.g., DynamoDB Local).",
    ),
) -> None:
    """
    Drop the products table, or every table with --all.
    """
    with _open_store(endpoint_url) as manager:
        if all_tables:
            dropped = delete_all_tables(manager.resource)
            typer.echo(f"Dropped {len(dropped)} table(s): {', '.join(dropped) or '-'}")
            return
        table_name = table or manager.settings.products_table_name
        delete_table(manager.resource, table_name)
        typer.echo(f"Dropped table '{table_name}'")


@app.command("list")
def list_tables(
    endpoint_url: Optional[str] = typer.Option(
        None,
        "--endpoint-url",
        help="Optional endpoint override (e.g., DynamoDB Local).",
    ),
) -> None:
    """
    List tables visible at the endpoint.
    """
    with _open_store(endpoint_url) as manager:
        for name in list_table_names(manager.resource):
            typer.echo(name)


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)

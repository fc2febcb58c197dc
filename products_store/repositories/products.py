"""
Products repository: a single-operation façade over one DynamoDB table.

The repository writes products and nothing else. Reads, conditional writes,
retries and error translation are intentionally left to the store and to the
botocore transport; any ClientError or BotoCoreError reaches the caller as is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from products_store.domain.models import Product
from products_store.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class PutItemOutcome:
    """
    Transport-level result of a PutItem request.
    """

    http_status_code: int
    request_id: Optional[str] = None
    retry_attempts: int = 0
    response: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> "PutItemOutcome":
        metadata = response.get("ResponseMetadata", {})
        return cls(
            http_status_code=metadata.get("HTTPStatusCode", 0),
            request_id=metadata.get("RequestId"),
            retry_attempts=metadata.get("RetryAttempts", 0),
            response=response,
        )

    @property
    def succeeded(self) -> bool:
        return 200 <= self.http_status_code < 300


class ProductsRepository:
    """
    Bind a DynamoDB service resource and a table name, and write products to it.

    The table is assumed to exist with `serialId` (string) as its hash key;
    see `products_store.infrastructure.schema` for provisioning.

    Parameters
    ----------
    dynamodb : boto3 DynamoDB ServiceResource
        An open resource handle, e.g. from `StoreManager.resource`.
    table_name : str
        Name of the bound table. Fixed for the repository's lifetime.
    """

    def __init__(self, dynamodb: Any, table_name: str) -> None:
        self._table_name = table_name
        # Table() is lazy: no request is made until the first write.
        self._table = dynamodb.Table(table_name)

    @property
    def table_name(self) -> str:
        return self._table_name

    def add(self, product: Product) -> PutItemOutcome:
        """
        Insert or overwrite `product` in the bound table.

        Returns
        -------
        PutItemOutcome
            Status code and request metadata of the PutItem call.

        Raises
        ------
        botocore.exceptions.ClientError
            Store-side failures (missing table, throttling, authorization).
        botocore.exceptions.BotoCoreError
            Transport failures (endpoint unreachable, timeouts).
        """
        try:
            response = self._table.put_item(Item=product.to_item())
        except Exception:
            log.warning(
                "put_item failed",
                extra={"table": self._table_name, "serial_id": str(product.serial_id)},
            )
            raise

        outcome = PutItemOutcome.from_response(response)
        log.debug(
            "put_item completed",
            extra={
                "table": self._table_name,
                "serial_id": str(product.serial_id),
                "status": outcome.http_status_code,
            },
        )
        return outcome


__all__ = ["ProductsRepository", "PutItemOutcome"]

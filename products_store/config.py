"""
Configuration settings for products-store.

Uses Pydantic Settings to load environment variables for the DynamoDB endpoint,
transport timeouts, table provisioning and logging. Values can also come from a
local `.env` file, which is how the integration suite points at a container.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Store
    dynamodb_endpoint_url: Optional[str] = Field(None, alias="DYNAMODB_ENDPOINT_URL")
    aws_region: str = Field("us-west-2", alias="AWS_REGION")
    aws_access_key_id: Optional[str] = Field(None, alias="AWS_ACCESS_KEY_ID")
    aws_secret_access_key: Optional[str] = Field(None, alias="AWS_SECRET_ACCESS_KEY")

    # Transport
    dynamodb_connect_timeout_seconds: float = Field(5.0, alias="DYNAMODB_CONNECT_TIMEOUT_SECONDS")
    dynamodb_read_timeout_seconds: float = Field(10.0, alias="DYNAMODB_READ_TIMEOUT_SECONDS")
    dynamodb_max_attempts: int = Field(3, alias="DYNAMODB_MAX_ATTEMPTS", ge=1)

    # Products table
    products_table_name: str = Field("products", alias="PRODUCTS_TABLE_NAME")
    products_read_capacity: int = Field(10, alias="PRODUCTS_READ_CAPACITY", ge=1)
    products_write_capacity: int = Field(10, alias="PRODUCTS_WRITE_CAPACITY", ge=1)

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def has_static_credentials(self) -> bool:
        return bool(self.aws_access_key_id and self.aws_secret_access_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]

import pytest

import products_store
from products_store import config


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DYNAMODB_ENDPOINT_URL",
        "AWS_REGION",
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "PRODUCTS_TABLE_NAME",
        "DYNAMODB_MAX_ATTEMPTS",
        "LOG_LEVEL",
        "LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults(clean_env) -> None:
    settings = config.Settings(_env_file=None)
    assert settings.dynamodb_endpoint_url is None
    assert settings.aws_region == "us-west-2"
    assert settings.products_table_name == "products"
    assert settings.products_read_capacity == 10
    assert settings.products_write_capacity == 10
    assert settings.dynamodb_max_attempts >= 1
    assert settings.log_level == "INFO"
    assert not settings.has_static_credentials


def test_settings_read_environment(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "http://localhost:8000")
    monkeypatch.setenv("PRODUCTS_TABLE_NAME", "catalog")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = config.Settings(_env_file=None)

    assert settings.dynamodb_endpoint_url == "http://localhost:8000"
    assert settings.products_table_name == "catalog"
    assert settings.has_static_credentials
    assert settings.log_json is True


def test_settings_reject_zero_attempts(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DYNAMODB_MAX_ATTEMPTS", "0")
    with pytest.raises(ValueError):
        config.Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert config.get_settings() is config.get_settings()


def test_public_api_exports() -> None:
    for name in ("Product", "ProductsRepository", "StoreManager", "MalformedIdentifier"):
        assert name in products_store.__all__
        assert hasattr(products_store, name)

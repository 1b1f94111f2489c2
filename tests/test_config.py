"""Tests for environment-driven configuration."""

import pytest

import config
from config import AppConfig, ConfigError, get_config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    # Keep a developer's local .env out of these tests
    monkeypatch.setattr(config, "load_dotenv", lambda override=False: None)
    for name in [
        "POSTGRES_URL",
        "POSTGRES_SCHEMA",
        "POSTGRES_SSLMODE",
        "POSTGRES_POOL_MAX",
        "POSTGRES_POOL_TIMEOUT",
        "LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_missing_postgres_url_is_fatal():
    with pytest.raises(ConfigError, match="POSTGRES_URL"):
        get_config()


def test_blank_postgres_url_is_fatal(monkeypatch):
    monkeypatch.setenv("POSTGRES_URL", "   ")
    with pytest.raises(ConfigError):
        get_config()


def test_defaults(monkeypatch):
    monkeypatch.setenv("POSTGRES_URL", "postgresql://localhost/invoices")

    cfg = get_config()

    assert cfg.postgres_url == "postgresql://localhost/invoices"
    assert cfg.postgres_schema == "public"
    assert cfg.postgres_sslmode is None
    assert cfg.pool_max_size == 10
    assert cfg.pool_timeout == 30.0
    assert cfg.log_level == "INFO"


def test_overrides(monkeypatch):
    monkeypatch.setenv("POSTGRES_URL", "postgresql://db/invoices")
    monkeypatch.setenv("POSTGRES_SCHEMA", "billing")
    monkeypatch.setenv("POSTGRES_SSLMODE", "require")
    monkeypatch.setenv("POSTGRES_POOL_MAX", "4")
    monkeypatch.setenv("POSTGRES_POOL_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    cfg = get_config()

    assert cfg.postgres_schema == "billing"
    assert cfg.postgres_sslmode == "require"
    assert cfg.pool_max_size == 4
    assert cfg.pool_timeout == 2.5
    assert cfg.log_level == "DEBUG"


def test_fq_schema_is_quoted():
    cfg = AppConfig(
        postgres_url="postgresql://db/x",
        postgres_schema='Odd"Name',
        postgres_sslmode=None,
        pool_max_size=1,
        pool_timeout=1.0,
        log_level="INFO",
    )
    assert cfg.fq_schema == '"Odd""Name"'

"""Tests for configuration validation."""

import pytest

from custom_components.atag_one.config import (
    client_from_config,
    merge_entry,
    validate_config,
)
from custom_components.atag_one.const import (
    DEFAULT_JAR_PATH,
    DEFAULT_SCAN_INTERVAL,
    DEFAULT_TIMEOUT,
)
from custom_components.atag_one.exceptions import AtagOneConfigError


def test_local_defaults() -> None:
    config = validate_config({"host": "192.168.1.50"})
    assert config["mode"] == "local"
    assert config["jar_path"] == DEFAULT_JAR_PATH
    assert config["java_path"] == "java"
    assert config["scan_interval"] == DEFAULT_SCAN_INTERVAL
    assert config["timeout"] == DEFAULT_TIMEOUT
    assert config["min_temp"] == 5.0
    assert config["max_temp"] == 30.0
    assert config["expose_water_pressure"] is True


def test_local_requires_host() -> None:
    with pytest.raises(AtagOneConfigError, match="Host is required for local mode"):
        validate_config({"mode": "local", "email": "me@example.com"})


@pytest.mark.parametrize(
    "data",
    [
        {"mode": "remote"},
        {"mode": "remote", "email": "me@example.com"},
        {"mode": "remote", "password": "secret"},
        {"mode": "remote", "email": "", "password": "secret"},
    ],
)
def test_remote_requires_credentials(data: dict) -> None:
    with pytest.raises(AtagOneConfigError, match="Email and password are required"):
        validate_config(data)


def test_remote_does_not_need_host() -> None:
    config = validate_config(
        {"mode": "remote", "email": "me@example.com", "password": "secret"}
    )
    assert config.get("host") is None


@pytest.mark.parametrize(
    "data",
    [
        {"mode": "cloud", "host": "192.168.1.50"},
        {"host": "192.168.1.50", "scan_interval": 1},
        {"host": "192.168.1.50", "timeout": "soon"},
    ],
)
def test_schema_errors(data: dict) -> None:
    with pytest.raises(AtagOneConfigError, match="Invalid configuration"):
        validate_config(data)


def test_empty_temperature_range() -> None:
    with pytest.raises(AtagOneConfigError, match="must be below"):
        validate_config({"host": "192.168.1.50", "min_temp": 25, "max_temp": 20})


def test_merge_entry_prefers_options() -> None:
    merged = merge_entry(
        {"host": "192.168.1.50", "scan_interval": 60},
        {"scan_interval": 120, "timeout": None},
    )
    assert merged == {"host": "192.168.1.50", "scan_interval": 120}


def test_client_from_config() -> None:
    config = validate_config(
        {
            "mode": "remote",
            "email": "me@example.com",
            "password": "secret",
            "jar_path": "/opt/atag-one.jar",
            "timeout": 10,
        }
    )
    client = client_from_config(config)
    assert client.mode == "remote"
    assert client.timeout == 10
    assert client.build_args()[:2] == ["-jar", "/opt/atag-one.jar"]

"""Configuration handling for the ATAG One integration.

The configuration comes from a config entry (``data`` merged with
``options``).  :func:`validate_config` fills in defaults through a
voluptuous schema and then enforces the fields that each communication
mode needs: a host in local mode, portal credentials in remote mode.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

import voluptuous as vol

from .api.client import AtagOneClient
from .const import (
    CONF_EMAIL,
    CONF_EXPOSE_DHW_TEMPERATURE,
    CONF_EXPOSE_OUTSIDE_TEMPERATURE,
    CONF_EXPOSE_WATER_PRESSURE,
    CONF_HOST,
    CONF_JAR_PATH,
    CONF_JAVA_PATH,
    CONF_MAX_TEMP,
    CONF_MIN_TEMP,
    CONF_MODE,
    CONF_PASSWORD,
    CONF_SCAN_INTERVAL,
    CONF_TIMEOUT,
    DEFAULT_JAR_PATH,
    DEFAULT_JAVA_PATH,
    DEFAULT_MAX_TEMP,
    DEFAULT_MIN_TEMP,
    DEFAULT_MODE,
    DEFAULT_SCAN_INTERVAL,
    DEFAULT_TIMEOUT,
    MODE_LOCAL,
    MODE_REMOTE,
    MODES,
)
from .exceptions import AtagOneConfigError


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_MODE, default=DEFAULT_MODE): vol.In(MODES),
        vol.Optional(CONF_HOST): vol.Any(None, str),
        vol.Optional(CONF_EMAIL): vol.Any(None, str),
        vol.Optional(CONF_PASSWORD): vol.Any(None, str),
        vol.Optional(CONF_JAR_PATH, default=DEFAULT_JAR_PATH): str,
        vol.Optional(CONF_JAVA_PATH, default=DEFAULT_JAVA_PATH): str,
        vol.Optional(CONF_SCAN_INTERVAL, default=DEFAULT_SCAN_INTERVAL): vol.All(
            vol.Coerce(int), vol.Range(min=5)
        ),
        vol.Optional(CONF_TIMEOUT, default=DEFAULT_TIMEOUT): vol.All(
            vol.Coerce(int), vol.Range(min=1)
        ),
        vol.Optional(CONF_MIN_TEMP, default=DEFAULT_MIN_TEMP): vol.Coerce(float),
        vol.Optional(CONF_MAX_TEMP, default=DEFAULT_MAX_TEMP): vol.Coerce(float),
        vol.Optional(CONF_EXPOSE_OUTSIDE_TEMPERATURE, default=True): bool,
        vol.Optional(CONF_EXPOSE_WATER_PRESSURE, default=True): bool,
        vol.Optional(CONF_EXPOSE_DHW_TEMPERATURE, default=True): bool,
    },
    extra=vol.REMOVE_EXTRA,
)


def validate_config(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate ``data`` and return it with defaults filled in.

    Raises
    ------
    AtagOneConfigError
        If the schema rejects a value, if a field required by the
        selected mode is missing or if the temperature range is empty.
    """
    try:
        config = CONFIG_SCHEMA(dict(data))
    except vol.Invalid as err:
        raise AtagOneConfigError(f"Invalid configuration: {err}") from err

    if config[CONF_MODE] == MODE_LOCAL and not config.get(CONF_HOST):
        raise AtagOneConfigError("Host is required for local mode")
    if config[CONF_MODE] == MODE_REMOTE and (
        not config.get(CONF_EMAIL) or not config.get(CONF_PASSWORD)
    ):
        raise AtagOneConfigError("Email and password are required for remote mode")
    if config[CONF_MIN_TEMP] >= config[CONF_MAX_TEMP]:
        raise AtagOneConfigError(
            f"Minimum temperature {config[CONF_MIN_TEMP]} must be below "
            f"maximum temperature {config[CONF_MAX_TEMP]}"
        )
    return config


def merge_entry(data: Mapping[str, Any], options: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge config entry data and options, options taking precedence."""
    merged = dict(data)
    merged.update({key: value for key, value in options.items() if value is not None})
    return merged


def client_from_config(config: Mapping[str, Any]) -> AtagOneClient:
    """Build an :class:`AtagOneClient` from a validated configuration."""
    return AtagOneClient(
        config[CONF_JAR_PATH],
        mode=config[CONF_MODE],
        host=config.get(CONF_HOST),
        email=config.get(CONF_EMAIL),
        password=config.get(CONF_PASSWORD),
        java_path=config[CONF_JAVA_PATH],
        timeout=config[CONF_TIMEOUT],
    )

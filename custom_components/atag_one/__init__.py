"""Home Assistant integration for the ATAG One thermostat.

This module contains the entry points required by Home Assistant to set
up and tear down the integration.  Each config entry gets an
:class:`~custom_components.atag_one.api.client.AtagOneClient`, which runs
the external ``atag-one.jar`` program, and a
:class:`~custom_components.atag_one.coordinator.AtagOneDataUpdateCoordinator`
that polls it at regular intervals and shares the resulting snapshot
with the platforms.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryError
from homeassistant.helpers import config_validation as cv

from .config import client_from_config, merge_entry, validate_config
from .const import (
    CONF_JAR_PATH,
    CONF_MODE,
    CONF_SCAN_INTERVAL,
    DOMAIN,
    PLATFORMS,
    RELEASES_URL,
)
from .coordinator import AtagOneDataUpdateCoordinator
from .exceptions import AtagOneConfigError
from .services import async_register_services

_LOGGER = logging.getLogger(__name__)

CONFIG_SCHEMA = cv.config_entry_only_config_schema(DOMAIN)


async def async_setup(hass: HomeAssistant, config: dict[str, Any]) -> bool:
    """Set up the ATAG One component.

    The integration is configured through the UI; this only registers
    the services shared by all entries.
    """
    await async_register_services(hass)
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up ATAG One from a config entry.

    Validates the stored configuration, creates the client and the
    coordinator, performs the first poll and forwards the entry to the
    platforms.
    """
    hass.data.setdefault(DOMAIN, {})

    try:
        config = validate_config(merge_entry(entry.data, entry.options))
    except AtagOneConfigError as err:
        raise ConfigEntryError(str(err)) from err

    _LOGGER.debug("Setting up ATAG One entry %s in %s mode", entry.entry_id, config[CONF_MODE])

    if not await hass.async_add_executor_job(os.path.isfile, config[CONF_JAR_PATH]):
        _LOGGER.warning("ATAG One JAR file not found at %s", config[CONF_JAR_PATH])
        _LOGGER.warning(
            "Download it from %s or call the %s.download_client service",
            RELEASES_URL,
            DOMAIN,
        )

    client = client_from_config(config)
    coordinator = AtagOneDataUpdateCoordinator(
        hass, client, config[CONF_SCAN_INTERVAL], config_entry=entry
    )

    # Raises ConfigEntryNotReady when the first poll fails so that Home
    # Assistant retries the setup later.
    await coordinator.async_config_entry_first_refresh()

    hass.data[DOMAIN][entry.entry_id] = {
        "client": client,
        "coordinator": coordinator,
        "config": config,
    }

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    # Reload the entry when the options change (e.g. polling interval).
    entry.async_on_unload(entry.add_update_listener(_async_update_listener))
    entry.async_on_unload(coordinator.async_cancel_delayed_refresh)

    _LOGGER.info("ATAG One thermostat initialized in %s mode", config[CONF_MODE])
    return True


async def _async_update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload the entry after its options were updated."""
    await hass.config_entries.async_reload(entry.entry_id)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        hass.data[DOMAIN].pop(entry.entry_id, None)
    return unload_ok

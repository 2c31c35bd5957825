"""Service handlers for the ATAG One integration.

- download_client: fetch ``atag-one.jar`` from the latest atag-one-api
  release into the jar path of each configured thermostat, or into the
  path given in the service call.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import aiohttp
import voluptuous as vol
from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .const import (
    CONF_JAR_PATH,
    DOMAIN,
    JAR_ASSET_NAME,
    LATEST_RELEASE_API_URL,
    SERVICE_DOWNLOAD_CLIENT,
)
from .config import merge_entry, validate_config
from .exceptions import AtagOneConfigError, AtagOneError

_LOGGER = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT = aiohttp.ClientTimeout(total=120)

DOWNLOAD_CLIENT_SCHEMA = vol.Schema({vol.Optional(CONF_JAR_PATH): str})


def _write_jar(path: str, content: bytes) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    tmp_path = f"{path}.part"
    with open(tmp_path, "wb") as jar_file:
        jar_file.write(content)
    os.replace(tmp_path, path)


async def async_download_client(hass: HomeAssistant, jar_path: str) -> str:
    """Download the latest ``atag-one.jar`` to ``jar_path``.

    Returns the tag of the downloaded release.

    Raises:
        AtagOneError: if the release or the jar cannot be fetched.
    """
    session = async_get_clientsession(hass)
    headers = {"User-Agent": f"home-assistant-{DOMAIN}"}
    try:
        async with session.get(
            LATEST_RELEASE_API_URL, headers=headers, timeout=DOWNLOAD_TIMEOUT
        ) as response:
            response.raise_for_status()
            release: dict[str, Any] = await response.json()

        asset = next(
            (
                asset
                for asset in release.get("assets", [])
                if asset.get("name") == JAR_ASSET_NAME
            ),
            None,
        )
        if asset is None:
            raise AtagOneError(f"{JAR_ASSET_NAME} not found in latest release")

        _LOGGER.info(
            "Downloading %s %s from %s",
            JAR_ASSET_NAME,
            release.get("tag_name"),
            asset["browser_download_url"],
        )
        async with session.get(
            asset["browser_download_url"], headers=headers, timeout=DOWNLOAD_TIMEOUT
        ) as response:
            response.raise_for_status()
            content = await response.read()
    except (TimeoutError, aiohttp.ClientError) as err:
        raise AtagOneError(f"Failed to download {JAR_ASSET_NAME}: {err}") from err

    try:
        await hass.async_add_executor_job(_write_jar, jar_path, content)
    except OSError as err:
        raise AtagOneError(f"Failed to write {jar_path}: {err}") from err
    _LOGGER.info("Saved %s to %s", JAR_ASSET_NAME, jar_path)
    return release.get("tag_name", "")


def _configured_jar_paths(hass: HomeAssistant) -> set[str]:
    """Return the jar path of every config entry, loaded or not.

    Entries whose first poll failed never reach ``hass.data``, and a
    missing jar is the usual reason for that.
    """
    paths = set()
    for entry in hass.config_entries.async_entries(DOMAIN):
        try:
            config = validate_config(merge_entry(entry.data, entry.options))
        except AtagOneConfigError as err:
            _LOGGER.debug("Skipping entry %s: %s", entry.entry_id, err)
            continue
        paths.add(config[CONF_JAR_PATH])
    return paths


async def async_register_services(hass: HomeAssistant) -> None:
    """Register the ATAG One services."""

    async def handle_download_client(call: ServiceCall) -> None:
        """Handle download_client service call."""
        if CONF_JAR_PATH in call.data:
            paths = {call.data[CONF_JAR_PATH]}
        else:
            paths = _configured_jar_paths(hass)
        if not paths:
            raise HomeAssistantError("No ATAG One jar path configured")
        for path in sorted(paths):
            try:
                await async_download_client(hass, path)
            except AtagOneError as err:
                _LOGGER.error("Download of %s failed: %s", path, err)
                raise HomeAssistantError(str(err)) from err

    if not hass.services.has_service(DOMAIN, SERVICE_DOWNLOAD_CLIENT):
        hass.services.async_register(
            DOMAIN,
            SERVICE_DOWNLOAD_CLIENT,
            handle_download_client,
            schema=DOWNLOAD_CLIENT_SCHEMA,
        )

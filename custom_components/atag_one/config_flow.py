"""Configuration flow for the ATAG One integration.

The flow first asks how the thermostat is reached (local network or the
ATAG portal) together with the location of the ``atag-one.jar`` client,
then prompts for the host or the portal credentials.  The entry is only
created once the client returned a readable report.  An options flow
allows tuning the polling interval, the process timeout, the target
temperature range and the optional sensors after the initial setup.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import voluptuous as vol
from homeassistant import config_entries
from homeassistant.config_entries import ConfigEntry, ConfigFlowResult
from homeassistant.core import HomeAssistant, callback

from .config import client_from_config, merge_entry, validate_config
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
    DEFAULT_NAME,
    DEFAULT_SCAN_INTERVAL,
    DEFAULT_TIMEOUT,
    DOMAIN,
    JAR_ASSET_NAME,
    JAR_DIRECTORY,
    MODE_LOCAL,
    MODE_REMOTE,
    MODES,
)
from .exceptions import AtagOneConfigError, AtagOneError

_LOGGER = logging.getLogger(__name__)


async def _async_validate_input(hass: HomeAssistant, data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate the user input allows us to read the thermostat.

    Runs the client once.  Raises :class:`AtagOneConfigError` for an
    incomplete configuration and any other :class:`AtagOneError` when the
    client cannot produce a report.
    """
    config = validate_config(data)
    client = client_from_config(config)
    return await client.async_read()


def _identifier(data: Dict[str, Any]) -> str:
    if data.get(CONF_MODE, DEFAULT_MODE) == MODE_REMOTE:
        return str(data.get(CONF_EMAIL, "")).lower()
    return str(data.get(CONF_HOST, ""))


class AtagOneConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for ATAG One."""

    VERSION = 1

    def __init__(self) -> None:
        self._errors: Dict[str, str] = {}
        self._data: Dict[str, Any] = {}

    async def async_step_user(self, user_input: Dict[str, Any] | None = None) -> ConfigFlowResult:
        """Choose the communication mode and the client location."""
        if user_input is not None:
            self._data = dict(user_input)
            if user_input[CONF_MODE] == MODE_REMOTE:
                return await self.async_step_remote()
            return await self.async_step_local()

        data_schema = vol.Schema(
            {
                vol.Required(CONF_MODE, default=DEFAULT_MODE): vol.In(MODES),
                vol.Required(
                    CONF_JAR_PATH,
                    default=self.hass.config.path(JAR_DIRECTORY, JAR_ASSET_NAME),
                ): str,
                vol.Required(CONF_JAVA_PATH, default=DEFAULT_JAVA_PATH): str,
            }
        )
        return self.async_show_form(step_id="user", data_schema=data_schema)

    async def async_step_local(self, user_input: Dict[str, Any] | None = None) -> ConfigFlowResult:
        """Collect the thermostat address."""
        if user_input is not None:
            return await self._async_create_or_error("local", user_input)
        return self._async_show_local_form()

    async def async_step_remote(self, user_input: Dict[str, Any] | None = None) -> ConfigFlowResult:
        """Collect the ATAG portal credentials."""
        if user_input is not None:
            return await self._async_create_or_error("remote", user_input)
        return self._async_show_remote_form()

    async def _async_create_or_error(self, step_id: str, user_input: Dict[str, Any]) -> ConfigFlowResult:
        self._errors = {}
        data = {**self._data, **user_input}
        if step_id == "local":
            data[CONF_MODE] = MODE_LOCAL
        else:
            data[CONF_MODE] = MODE_REMOTE

        # Prevent duplicate entries for the same thermostat or account
        identifier = _identifier(data)
        for entry in self._async_current_entries():
            if _identifier(dict(entry.data)) == identifier:
                return self.async_abort(reason="already_configured")

        try:
            await _async_validate_input(self.hass, data)
        except AtagOneConfigError as err:
            _LOGGER.error("Invalid ATAG One configuration: %s", err)
            self._errors["base"] = "invalid_config"
        except AtagOneError as err:
            _LOGGER.error("Error reading ATAG One thermostat: %s", err)
            self._errors["base"] = "cannot_connect"

        if not self._errors:
            title = data[CONF_HOST] if step_id == "local" else data[CONF_EMAIL]
            return self.async_create_entry(title=f"{DEFAULT_NAME} ({title})", data=data)

        if step_id == "local":
            return self._async_show_local_form(user_input)
        return self._async_show_remote_form(user_input)

    @callback
    def _async_show_local_form(self, user_input: Dict[str, Any] | None = None) -> ConfigFlowResult:
        return self.async_show_form(
            step_id="local",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_HOST, default=(user_input or {}).get(CONF_HOST, "")): str,
                }
            ),
            errors=self._errors,
        )

    @callback
    def _async_show_remote_form(self, user_input: Dict[str, Any] | None = None) -> ConfigFlowResult:
        return self.async_show_form(
            step_id="remote",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_EMAIL, default=(user_input or {}).get(CONF_EMAIL, "")): str,
                    vol.Required(CONF_PASSWORD): str,
                }
            ),
            errors=self._errors,
        )

    @staticmethod
    @callback
    def async_get_options_flow(config_entry: ConfigEntry) -> "AtagOneOptionsFlow":
        return AtagOneOptionsFlow()


class AtagOneOptionsFlow(config_entries.OptionsFlow):
    """Handle an options flow for ATAG One."""

    async def async_step_init(self, user_input: Dict[str, Any] | None = None) -> ConfigFlowResult:
        """Manage the options for the integration.

        The new options are validated together with the entry data; the
        entry is reloaded by the update listener once they are saved.
        """
        errors: Dict[str, str] = {}
        if user_input is not None:
            try:
                validate_config(merge_entry(self.config_entry.data, user_input))
            except AtagOneConfigError as err:
                _LOGGER.error("Invalid ATAG One options: %s", err)
                errors["base"] = "invalid_config"
            else:
                return self.async_create_entry(title="", data=user_input)

        current = merge_entry(self.config_entry.data, self.config_entry.options)
        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(
                {
                    vol.Required(
                        CONF_JAR_PATH, default=current.get(CONF_JAR_PATH, DEFAULT_JAR_PATH)
                    ): str,
                    vol.Required(
                        CONF_JAVA_PATH, default=current.get(CONF_JAVA_PATH, DEFAULT_JAVA_PATH)
                    ): str,
                    vol.Optional(
                        CONF_SCAN_INTERVAL,
                        default=current.get(CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL),
                    ): int,
                    vol.Optional(
                        CONF_TIMEOUT, default=current.get(CONF_TIMEOUT, DEFAULT_TIMEOUT)
                    ): int,
                    vol.Optional(
                        CONF_MIN_TEMP, default=current.get(CONF_MIN_TEMP, DEFAULT_MIN_TEMP)
                    ): vol.Coerce(float),
                    vol.Optional(
                        CONF_MAX_TEMP, default=current.get(CONF_MAX_TEMP, DEFAULT_MAX_TEMP)
                    ): vol.Coerce(float),
                    vol.Optional(
                        CONF_EXPOSE_OUTSIDE_TEMPERATURE,
                        default=current.get(CONF_EXPOSE_OUTSIDE_TEMPERATURE, True),
                    ): bool,
                    vol.Optional(
                        CONF_EXPOSE_WATER_PRESSURE,
                        default=current.get(CONF_EXPOSE_WATER_PRESSURE, True),
                    ): bool,
                    vol.Optional(
                        CONF_EXPOSE_DHW_TEMPERATURE,
                        default=current.get(CONF_EXPOSE_DHW_TEMPERATURE, True),
                    ): bool,
                }
            ),
            errors=errors,
        )

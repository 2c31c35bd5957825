"""Data update coordinator for the ATAG One integration.

The coordinator runs the ``atag-one.jar`` client at a fixed interval,
extracts the JSON report from its output and applies it to a single
:class:`~custom_components.atag_one.models.AtagOneSnapshot`.  Entities
inherit from :class:`homeassistant.helpers.update_coordinator.CoordinatorEntity`
and read their values from ``self.coordinator.data``.

Only one client process runs at a time.  A poll triggered while another
one is still in flight returns the current snapshot without starting a
new process.  A failed poll leaves the snapshot as it was.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import CALLBACK_TYPE, HomeAssistant, callback
from homeassistant.helpers.event import async_call_later
from homeassistant.helpers.update_coordinator import (
    DataUpdateCoordinator,
    UpdateFailed,
)

from .api.client import AtagOneClient
from .const import DOMAIN, REFRESH_AFTER_SET_DELAY
from .exceptions import AtagOneCommunicationError, AtagOneError
from .models import AtagOneSnapshot
from .utils import apply_report

_LOGGER = logging.getLogger(__name__)


class AtagOneDataUpdateCoordinator(DataUpdateCoordinator[AtagOneSnapshot]):
    """Class to manage polling a single ATAG One thermostat."""

    def __init__(
        self,
        hass: HomeAssistant,
        client: AtagOneClient,
        scan_interval: int,
        config_entry: Optional[ConfigEntry] = None,
    ) -> None:
        self.client: AtagOneClient = client
        self.snapshot: AtagOneSnapshot = AtagOneSnapshot()
        self.is_updating: bool = False
        self._last_poll_failed: bool = False
        self._cancel_delayed_refresh: Optional[CALLBACK_TYPE] = None
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=f"{DOMAIN} data coordinator",
            update_interval=timedelta(seconds=scan_interval),
        )

    async def _async_update_data(self) -> AtagOneSnapshot:
        """Run the client and apply its report to the snapshot.

        Returns the snapshot object shared with the entities.  Errors of
        the client or of the extraction are logged and converted into
        :class:`UpdateFailed`; the snapshot is not modified in that case.
        """
        if self.is_updating:
            _LOGGER.debug("Update already in progress, skipping")
            return self.snapshot

        self.is_updating = True
        try:
            report = await self.client.async_read()
            apply_report(self.snapshot, report)
            if self._last_poll_failed:
                _LOGGER.info("ATAG One thermostat is responding again")
            self._last_poll_failed = False
            return self.snapshot
        except AtagOneError as err:
            # Only the first failure of an outage is logged as an error.
            log = _LOGGER.debug if self._last_poll_failed else _LOGGER.error
            log("Failed to update ATAG One data: %s", err)
            self._last_poll_failed = True
            raise UpdateFailed(f"Error fetching ATAG One data: {err}") from err
        finally:
            self.is_updating = False

    async def async_set_target_temperature(self, temperature: float) -> None:
        """Send a new setpoint to the thermostat.

        On success the snapshot and the entities are updated right away
        and a refresh is scheduled shortly after, giving the thermostat
        time to apply the change.

        Raises
        ------
        AtagOneCommunicationError
            If the client fails.  The target temperature is left as is.
        """
        try:
            await self.client.async_set_temperature(temperature)
        except AtagOneError as err:
            _LOGGER.error("Failed to set target temperature: %s", err)
            raise AtagOneCommunicationError(
                f"Failed to set target temperature: {err}"
            ) from err

        self.snapshot.target_temperature = float(temperature)
        self.async_set_updated_data(self.snapshot)
        self._schedule_delayed_refresh()

    @callback
    def _schedule_delayed_refresh(self) -> None:
        if self._cancel_delayed_refresh is not None:
            self._cancel_delayed_refresh()
        self._cancel_delayed_refresh = async_call_later(
            self.hass, REFRESH_AFTER_SET_DELAY, self._async_delayed_refresh
        )

    async def _async_delayed_refresh(self, _now) -> None:
        self._cancel_delayed_refresh = None
        if self.is_updating:
            # The running poll may predate the setpoint change.
            self._schedule_delayed_refresh()
            return
        await self.async_request_refresh()

    @callback
    def async_cancel_delayed_refresh(self) -> None:
        """Cancel a pending refresh scheduled after a setpoint change."""
        if self._cancel_delayed_refresh is not None:
            self._cancel_delayed_refresh()
            self._cancel_delayed_refresh = None

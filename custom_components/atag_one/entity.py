"""Base entity shared by all ATAG One platforms."""

from __future__ import annotations

from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DEFAULT_NAME, DOMAIN
from .coordinator import AtagOneDataUpdateCoordinator
from .models import AtagOneSnapshot


class AtagOneEntity(CoordinatorEntity[AtagOneDataUpdateCoordinator]):
    """Entity bound to the snapshot of one thermostat.

    ``entry_id`` identifies the device and prefixes the unique ID of each
    entity.  ``host`` is used as serial number in local mode.
    """

    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: AtagOneDataUpdateCoordinator,
        entry_id: str,
        key: str,
        host: str | None = None,
    ) -> None:
        super().__init__(coordinator)
        self._attr_unique_id = f"{entry_id}_{key}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry_id)},
            name=DEFAULT_NAME,
            manufacturer="ATAG",
            model="ATAG One",
            serial_number=host or "Remote",
        )

    @property
    def snapshot(self) -> AtagOneSnapshot:
        return self.coordinator.snapshot

"""Binary sensor platform for the ATAG One integration.

Two binary sensors are derived from the snapshot: the burner flame and a
low water pressure alarm, which turns on below one bar.  The pressure
alarm follows the water pressure option.
"""

from __future__ import annotations

from dataclasses import dataclass

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
    BinarySensorEntityDescription,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import CONF_EXPOSE_WATER_PRESSURE, CONF_HOST, DOMAIN
from .coordinator import AtagOneDataUpdateCoordinator
from .entity import AtagOneEntity


@dataclass(frozen=True, kw_only=True)
class AtagOneBinarySensorEntityDescription(BinarySensorEntityDescription):
    """Binary sensor description bound to a snapshot attribute."""

    attr: str
    option: str | None = None


BINARY_SENSORS: tuple[AtagOneBinarySensorEntityDescription, ...] = (
    AtagOneBinarySensorEntityDescription(
        key="flame",
        translation_key="flame",
        attr="flame_active",
        device_class=BinarySensorDeviceClass.HEAT,
        icon="mdi:fire",
    ),
    AtagOneBinarySensorEntityDescription(
        key="low_pressure",
        translation_key="low_pressure",
        attr="low_pressure",
        option=CONF_EXPOSE_WATER_PRESSURE,
        device_class=BinarySensorDeviceClass.PROBLEM,
        icon="mdi:gauge-low",
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities,
) -> None:
    """Set up ATAG One binary sensors from a config entry."""
    data = hass.data[DOMAIN][entry.entry_id]
    coordinator: AtagOneDataUpdateCoordinator = data["coordinator"]
    config = data["config"]
    async_add_entities(
        [
            AtagOneBinarySensor(coordinator, entry.entry_id, description, config.get(CONF_HOST))
            for description in BINARY_SENSORS
            if description.option is None or config.get(description.option, True)
        ]
    )


class AtagOneBinarySensor(AtagOneEntity, BinarySensorEntity):
    """Boolean state of the thermostat."""

    entity_description: AtagOneBinarySensorEntityDescription

    def __init__(
        self,
        coordinator: AtagOneDataUpdateCoordinator,
        entry_id: str,
        description: AtagOneBinarySensorEntityDescription,
        host: str | None = None,
    ) -> None:
        super().__init__(coordinator, entry_id, description.key, host)
        self.entity_description = description

    @property
    def is_on(self) -> bool:
        return bool(getattr(self.snapshot, self.entity_description.attr))

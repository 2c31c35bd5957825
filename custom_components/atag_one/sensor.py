"""Sensor platform for the ATAG One integration.

This module defines the measurement sensors of the thermostat that are
not covered by the climate entity: the outside temperature, the
domestic hot water temperature and the central heating water pressure.
Each sensor reads one attribute of the coordinator snapshot and can be
switched off through the integration options.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import UnitOfPressure, UnitOfTemperature
from homeassistant.core import HomeAssistant

from .const import (
    CONF_EXPOSE_DHW_TEMPERATURE,
    CONF_EXPOSE_OUTSIDE_TEMPERATURE,
    CONF_EXPOSE_WATER_PRESSURE,
    CONF_HOST,
    DOMAIN,
)
from .coordinator import AtagOneDataUpdateCoordinator
from .entity import AtagOneEntity

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class AtagOneSensorEntityDescription(SensorEntityDescription):
    """Sensor description bound to a snapshot attribute."""

    attr: str
    option: str


SENSORS: tuple[AtagOneSensorEntityDescription, ...] = (
    AtagOneSensorEntityDescription(
        key="outside_temperature",
        translation_key="outside_temperature",
        attr="outside_temperature",
        option=CONF_EXPOSE_OUTSIDE_TEMPERATURE,
        device_class=SensorDeviceClass.TEMPERATURE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        icon="mdi:weather-partly-cloudy",
    ),
    AtagOneSensorEntityDescription(
        key="dhw_temperature",
        translation_key="dhw_temperature",
        attr="dhw_temperature",
        option=CONF_EXPOSE_DHW_TEMPERATURE,
        device_class=SensorDeviceClass.TEMPERATURE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        icon="mdi:water-boiler",
    ),
    AtagOneSensorEntityDescription(
        key="water_pressure",
        translation_key="water_pressure",
        attr="water_pressure",
        option=CONF_EXPOSE_WATER_PRESSURE,
        device_class=SensorDeviceClass.PRESSURE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfPressure.BAR,
        icon="mdi:gauge",
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities,
) -> None:
    """Set up ATAG One sensors from a config entry."""
    data = hass.data[DOMAIN][entry.entry_id]
    coordinator: AtagOneDataUpdateCoordinator = data["coordinator"]
    config = data["config"]
    sensors = [
        AtagOneSensor(coordinator, entry.entry_id, description, config.get(CONF_HOST))
        for description in SENSORS
        if config.get(description.option, True)
    ]
    if not sensors:
        _LOGGER.debug("No ATAG One sensors enabled")
        return
    async_add_entities(sensors)


class AtagOneSensor(AtagOneEntity, SensorEntity):
    """Representation of a single ATAG One measurement."""

    entity_description: AtagOneSensorEntityDescription

    def __init__(
        self,
        coordinator: AtagOneDataUpdateCoordinator,
        entry_id: str,
        description: AtagOneSensorEntityDescription,
        host: str | None = None,
    ) -> None:
        super().__init__(coordinator, entry_id, description.key, host)
        self.entity_description = description

    @property
    def native_value(self) -> Any:
        """Return the state of the sensor."""
        return round(float(getattr(self.snapshot, self.entity_description.attr)), 2)

import logging
from typing import Any

from homeassistant.components.climate import (
    ClimateEntity,
    ClimateEntityFeature,
    HVACAction,
    HVACMode,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature
from homeassistant.core import HomeAssistant

from .const import (
    CONF_HOST,
    CONF_MAX_TEMP,
    CONF_MIN_TEMP,
    DEFAULT_MAX_TEMP,
    DEFAULT_MIN_TEMP,
    DOMAIN,
    TARGET_TEMPERATURE_STEP,
)
from .coordinator import AtagOneDataUpdateCoordinator
from .entity import AtagOneEntity

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities
) -> None:
    """Set up the thermostat entity from a config entry."""
    data = hass.data[DOMAIN][entry.entry_id]
    coordinator: AtagOneDataUpdateCoordinator = data["coordinator"]
    config = data["config"]
    async_add_entities(
        [
            AtagOneThermostat(
                coordinator,
                entry.entry_id,
                host=config.get(CONF_HOST),
                min_temp=config.get(CONF_MIN_TEMP, DEFAULT_MIN_TEMP),
                max_temp=config.get(CONF_MAX_TEMP, DEFAULT_MAX_TEMP),
            )
        ]
    )


class AtagOneThermostat(AtagOneEntity, ClimateEntity):
    """Thermostat entity of the ATAG One."""

    _attr_name = None
    _attr_temperature_unit = UnitOfTemperature.CELSIUS
    _attr_target_temperature_step = TARGET_TEMPERATURE_STEP
    _attr_supported_features = (
        ClimateEntityFeature.TARGET_TEMPERATURE
        | ClimateEntityFeature.TURN_OFF
        | ClimateEntityFeature.TURN_ON
    )
    _attr_hvac_modes = [HVACMode.OFF, HVACMode.HEAT, HVACMode.AUTO]

    def __init__(
        self,
        coordinator: AtagOneDataUpdateCoordinator,
        entry_id: str,
        host: str | None = None,
        min_temp: float = DEFAULT_MIN_TEMP,
        max_temp: float = DEFAULT_MAX_TEMP,
    ) -> None:
        super().__init__(coordinator, entry_id, "thermostat", host)
        self._attr_min_temp = min_temp
        self._attr_max_temp = max_temp
        # The device mode is not switched; the selection is kept here.
        self._hvac_mode = HVACMode.AUTO

    @property
    def current_temperature(self) -> float:
        return self.snapshot.current_temperature

    @property
    def target_temperature(self) -> float:
        return self.snapshot.target_temperature

    @property
    def hvac_mode(self) -> HVACMode:
        return self._hvac_mode

    @property
    def hvac_action(self) -> HVACAction:
        return HVACAction.HEATING if self.snapshot.heating else HVACAction.IDLE

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        return {"flame_active": self.snapshot.flame_active}

    async def async_set_temperature(self, **kwargs: Any) -> None:
        temperature = kwargs.get(ATTR_TEMPERATURE)
        if temperature is None:
            return
        _LOGGER.info("Setting target temperature to %s°C", temperature)
        await self.coordinator.async_set_target_temperature(temperature)

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        if hvac_mode not in self.hvac_modes:
            _LOGGER.error("HVAC mode %s not supported", hvac_mode)
            return
        _LOGGER.info("Setting HVAC mode to %s", hvac_mode)
        self._hvac_mode = hvac_mode
        self.async_write_ha_state()
        await self.coordinator.async_request_refresh()

    async def async_turn_on(self) -> None:
        await self.async_set_hvac_mode(HVACMode.AUTO)

    async def async_turn_off(self) -> None:
        await self.async_set_hvac_mode(HVACMode.OFF)

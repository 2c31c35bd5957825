"""Tests for the ATAG One sensor and binary sensor entities."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from custom_components.atag_one import binary_sensor, sensor
from custom_components.atag_one.binary_sensor import BINARY_SENSORS, AtagOneBinarySensor
from custom_components.atag_one.models import AtagOneSnapshot
from custom_components.atag_one.sensor import SENSORS, AtagOneSensor

from .common import DummyCoordinator


def test_sensors_expose_values() -> None:
    """Verify that AtagOneSensor exposes snapshot values."""
    snapshot = AtagOneSnapshot(outside_temperature=-3.456, dhw_temperature=52.0, water_pressure=1.234)
    coordinator = DummyCoordinator(snapshot)
    sensors = {
        description.key: AtagOneSensor(coordinator, "test", description)
        for description in SENSORS
    }

    assert sensors["outside_temperature"].native_value == pytest.approx(-3.46)
    assert sensors["dhw_temperature"].native_value == pytest.approx(52.0)
    assert sensors["water_pressure"].native_value == pytest.approx(1.23)
    assert sensors["water_pressure"].native_unit_of_measurement == "bar"
    assert sensors["dhw_temperature"].unique_id == "test_dhw_temperature"
    for entity in sensors.values():
        assert entity.available is True


@pytest.mark.parametrize(("pressure", "low"), [(0.8, True), (1.0, False), (1.9, False)])
def test_low_pressure_binary_sensor(pressure: float, low: bool) -> None:
    coordinator = DummyCoordinator(AtagOneSnapshot(water_pressure=pressure))
    description = next(d for d in BINARY_SENSORS if d.key == "low_pressure")
    assert AtagOneBinarySensor(coordinator, "test", description).is_on is low


def test_flame_binary_sensor() -> None:
    snapshot = AtagOneSnapshot(flame_active=True)
    description = next(d for d in BINARY_SENSORS if d.key == "flame")
    entity = AtagOneBinarySensor(DummyCoordinator(snapshot), "test", description)
    assert entity.is_on is True
    snapshot.flame_active = False
    assert entity.is_on is False


def _hass_with(mock_hass, entry, config: dict):
    mock_hass.data = {
        "atag_one": {
            entry.entry_id: {"coordinator": DummyCoordinator(), "config": config}
        }
    }
    return mock_hass


@pytest.mark.asyncio
async def test_setup_entry_honours_expose_options(mock_hass, mock_config_entry) -> None:
    hass = _hass_with(
        mock_hass,
        mock_config_entry,
        {"expose_outside_temperature": False, "expose_water_pressure": False},
    )
    add_sensors = MagicMock()
    add_binary_sensors = MagicMock()

    await sensor.async_setup_entry(hass, mock_config_entry, add_sensors)
    await binary_sensor.async_setup_entry(hass, mock_config_entry, add_binary_sensors)

    sensor_keys = [entity.entity_description.key for entity in add_sensors.call_args[0][0]]
    binary_keys = [entity.entity_description.key for entity in add_binary_sensors.call_args[0][0]]
    assert sensor_keys == ["dhw_temperature"]
    assert binary_keys == ["flame"]


@pytest.mark.asyncio
async def test_setup_entry_without_sensors(mock_hass, mock_config_entry) -> None:
    hass = _hass_with(
        mock_hass,
        mock_config_entry,
        {
            "expose_outside_temperature": False,
            "expose_water_pressure": False,
            "expose_dhw_temperature": False,
        },
    )
    add_sensors = MagicMock()

    await sensor.async_setup_entry(hass, mock_config_entry, add_sensors)

    add_sensors.assert_not_called()

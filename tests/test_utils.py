"""Tests for the report extraction helpers."""

import pytest

from custom_components.atag_one.exceptions import AtagOneParseError
from custom_components.atag_one.models import AtagOneSnapshot
from custom_components.atag_one.utils import apply_report, extract_json, mask_args

from .common import SAMPLE_OUTPUT


def test_extract_json_from_client_output() -> None:
    """The report at the end of the output is decoded, nested objects included."""
    data = extract_json(SAMPLE_OUTPUT)
    assert data["roomTemperature"] == 19.4
    assert data["flameStatus"] == "On"
    assert data["version"] == {"major": 1, "minor": 3}


def test_extract_json_uses_last_object() -> None:
    """Objects earlier in the output are ignored."""
    output = 'debug {"roomTemperature": 1.0}\nreport {"roomTemperature": 21.0}\n\n'
    assert extract_json(output) == {"roomTemperature": 21.0}


@pytest.mark.parametrize(
    "output",
    [
        "",
        "Connection refused",
        '{"roomTemperature": 21.0} trailing text',
    ],
)
def test_extract_json_without_trailing_object(output: str) -> None:
    with pytest.raises(AtagOneParseError, match="No JSON data found"):
        extract_json(output)


def test_extract_json_malformed() -> None:
    with pytest.raises(AtagOneParseError, match="Invalid JSON"):
        extract_json("report {roomTemperature: 21.0}")


def test_apply_report_updates_present_fields_only() -> None:
    """Fields absent from the report keep their previous values."""
    snapshot = AtagOneSnapshot(
        current_temperature=18.0,
        target_temperature=19.0,
        outside_temperature=3.0,
        dhw_temperature=45.0,
        water_pressure=1.4,
    )
    written = apply_report(snapshot, {"roomTemperature": 20.25, "chWaterPressure": "1.8", "unknown": 1})

    assert sorted(written) == ["current_temperature", "water_pressure"]
    assert snapshot.current_temperature == pytest.approx(20.25)
    assert snapshot.water_pressure == pytest.approx(1.8)
    assert snapshot.target_temperature == pytest.approx(19.0)
    assert snapshot.outside_temperature == pytest.approx(3.0)
    assert snapshot.dhw_temperature == pytest.approx(45.0)
    assert snapshot.flame_active is False
    assert snapshot.heating is False


def test_apply_report_full_sample() -> None:
    snapshot = AtagOneSnapshot()
    apply_report(snapshot, extract_json(SAMPLE_OUTPUT))
    assert snapshot.current_temperature == pytest.approx(19.4)
    assert snapshot.target_temperature == pytest.approx(20.5)
    assert snapshot.outside_temperature == pytest.approx(7.3)
    assert snapshot.dhw_temperature == pytest.approx(51.2)
    assert snapshot.water_pressure == pytest.approx(1.6)
    assert snapshot.flame_active is True
    assert snapshot.heating is True
    assert snapshot.low_pressure is False


@pytest.mark.parametrize(
    ("report", "flame", "heating"),
    [
        ({"flameStatus": "Off", "roomTemperature": 19.0, "targetTemperature": 21.0}, False, True),
        ({"flameStatus": "Off", "roomTemperature": 20.6, "targetTemperature": 21.0}, False, False),
        ({"flameStatus": "Off", "roomTemperature": 22.0, "targetTemperature": 21.0}, False, False),
        ({"flameStatus": "CH", "roomTemperature": 22.0, "targetTemperature": 21.0}, True, True),
    ],
)
def test_apply_report_heating_state(report: dict, flame: bool, heating: bool) -> None:
    snapshot = AtagOneSnapshot()
    apply_report(snapshot, report)
    assert snapshot.flame_active is flame
    assert snapshot.heating is heating


def test_apply_report_keeps_heating_without_flame_status() -> None:
    """The heating state is only recomputed when the flame status is reported."""
    snapshot = AtagOneSnapshot(heating=True, flame_active=True)
    apply_report(snapshot, {"roomTemperature": 25.0, "targetTemperature": 18.0})
    assert snapshot.heating is True
    assert snapshot.flame_active is True


def test_apply_report_invalid_value_leaves_snapshot() -> None:
    snapshot = AtagOneSnapshot(current_temperature=18.0, target_temperature=19.0)
    with pytest.raises(AtagOneParseError):
        apply_report(snapshot, {"targetTemperature": 22.0, "roomTemperature": "n/a"})
    assert snapshot.current_temperature == pytest.approx(18.0)
    assert snapshot.target_temperature == pytest.approx(19.0)


def test_mask_args_hides_password() -> None:
    args = ["-jar", "atag-one.jar", "-r", "-e", "me@example.com", "-p", "secret"]
    assert mask_args(args) == ["-jar", "atag-one.jar", "-r", "-e", "me@example.com", "-p", "******"]

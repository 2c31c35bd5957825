"""Shared helpers for the ATAG One tests."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from custom_components.atag_one.models import AtagOneSnapshot

# Output of ``atag-one.jar`` in local mode: a few log lines followed by
# the JSON report.
SAMPLE_OUTPUT = """\
Connecting to ATAG One thermostat at 192.168.1.50...
Response received, parsing report
{
  "latitude": 52.1,
  "deviceId": "6808-1401-3109_15-30-001-544",
  "deviceAlias": "CV-ketel",
  "roomTemperature": 19.4,
  "targetTemperature": 20.5,
  "outsideTemperature": 7.3,
  "dhwWaterTemperature": 51.2,
  "chWaterPressure": 1.6,
  "flameStatus": "On",
  "version": {"major": 1, "minor": 3}
}
"""


class DummyClient:
    """Stub of AtagOneClient returning a predetermined report."""

    def __init__(self, report: dict | None = None, error: Exception | None = None) -> None:
        self.report = report or {}
        self.error = error
        self.read_calls = 0
        self.set_calls: list[float] = []

    async def async_read(self) -> dict:
        self.read_calls += 1
        if self.error is not None:
            raise self.error
        return self.report

    async def async_set_temperature(self, temperature: float) -> str:
        self.set_calls.append(temperature)
        if self.error is not None:
            raise self.error
        return ""


class DummyCoordinator:
    """Coordinator stub exposing a snapshot for entity tests."""

    def __init__(self, snapshot: AtagOneSnapshot | None = None) -> None:
        self.snapshot = snapshot or AtagOneSnapshot()
        self.data = self.snapshot
        self.last_update_success = True
        self.config_entry = SimpleNamespace(entry_id="test")
        self.async_set_target_temperature = AsyncMock()
        self.async_request_refresh = AsyncMock()
        self.async_add_listener = MagicMock(return_value=lambda: None)


"""Data model for the ATAG One integration.

The :class:`AtagOneSnapshot` holds the last known readings of the single
configured thermostat.  It lives in memory only, is owned by the data
coordinator and is updated field by field after each successful poll.
"""

from __future__ import annotations

from dataclasses import dataclass

from .const import LOW_PRESSURE_THRESHOLD


@dataclass
class AtagOneSnapshot:
    """Last known readings of the thermostat."""

    current_temperature: float = 20.0
    target_temperature: float = 20.0
    outside_temperature: float = 0.0
    dhw_temperature: float = 0.0
    water_pressure: float = 0.0
    flame_active: bool = False
    heating: bool = False

    @property
    def low_pressure(self) -> bool:
        """Return True when the central heating pressure is too low."""
        return self.water_pressure < LOW_PRESSURE_THRESHOLD

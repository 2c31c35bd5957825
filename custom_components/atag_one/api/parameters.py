"""Field definitions for the ATAG One client report.

``REPORT`` maps each JSON field printed by ``atag-one.jar`` to the
snapshot attribute it feeds and the converter applied to the raw value.
The flame status is listed separately because it also drives the
derived heating state.
"""

from ..const import (
    FIELD_DHW_TEMPERATURE,
    FIELD_FLAME_STATUS,
    FIELD_OUTSIDE_TEMPERATURE,
    FIELD_ROOM_TEMPERATURE,
    FIELD_TARGET_TEMPERATURE,
    FIELD_WATER_PRESSURE,
)

REPORT = {
    FIELD_ROOM_TEMPERATURE: {"attr": "current_temperature", "type": float},
    FIELD_TARGET_TEMPERATURE: {"attr": "target_temperature", "type": float},
    FIELD_OUTSIDE_TEMPERATURE: {"attr": "outside_temperature", "type": float},
    FIELD_DHW_TEMPERATURE: {"attr": "dhw_temperature", "type": float},
    FIELD_WATER_PRESSURE: {"attr": "water_pressure", "type": float},
}

FLAME = {
    FIELD_FLAME_STATUS: {"attr": "flame_active", "type": str},
}

"""Constants used by the ATAG One integration.

This module defines the configuration keys, defaults and the JSON field
names reported by the ``atag-one.jar`` client.  Keeping them in one
place avoids hard coding strings throughout the integration.
"""

from __future__ import annotations

from homeassistant.const import Platform


# The domain string must match the name of the directory in
# ``custom_components``.
DOMAIN: str = "atag_one"

# Configuration keys exposed to the user via the config flow.
CONF_MODE: str = "mode"
CONF_HOST: str = "host"
CONF_EMAIL: str = "email"
CONF_PASSWORD: str = "password"
CONF_JAR_PATH: str = "jar_path"
CONF_JAVA_PATH: str = "java_path"
CONF_SCAN_INTERVAL: str = "scan_interval"
CONF_TIMEOUT: str = "timeout"
CONF_MIN_TEMP: str = "min_temp"
CONF_MAX_TEMP: str = "max_temp"
CONF_EXPOSE_OUTSIDE_TEMPERATURE: str = "expose_outside_temperature"
CONF_EXPOSE_WATER_PRESSURE: str = "expose_water_pressure"
CONF_EXPOSE_DHW_TEMPERATURE: str = "expose_dhw_temperature"

# Communication modes of the external client.
MODE_LOCAL: str = "local"
MODE_REMOTE: str = "remote"
MODES: list[str] = [MODE_LOCAL, MODE_REMOTE]

# Defaults.  Intervals and timeouts are expressed in seconds.
DEFAULT_NAME: str = "ATAG One"
DEFAULT_MODE: str = MODE_LOCAL
DEFAULT_JAR_PATH: str = "/config/atag-one/atag-one.jar"
DEFAULT_JAVA_PATH: str = "java"
DEFAULT_SCAN_INTERVAL: int = 60
DEFAULT_TIMEOUT: int = 30
DEFAULT_MIN_TEMP: float = 5.0
DEFAULT_MAX_TEMP: float = 30.0
TARGET_TEMPERATURE_STEP: float = 0.5

# Delay before re-reading the device after a setpoint change.
REFRESH_AFTER_SET_DELAY: float = 2.0

# Below this pressure (bar) the low pressure binary sensor turns on.
LOW_PRESSURE_THRESHOLD: float = 1.0

# A room this far below the target counts as heating even with the
# flame off.
HEATING_HYSTERESIS: float = 0.5

# Where the client jar is published.
RELEASES_URL: str = "https://github.com/kozmoz/atag-one-api/releases"
LATEST_RELEASE_API_URL: str = (
    "https://api.github.com/repos/kozmoz/atag-one-api/releases/latest"
)
JAR_ASSET_NAME: str = "atag-one.jar"
# Directory below the Home Assistant config directory holding the jar.
JAR_DIRECTORY: str = "atag-one"

SERVICE_DOWNLOAD_CLIENT: str = "download_client"

# JSON field names printed by the client.
FIELD_ROOM_TEMPERATURE: str = "roomTemperature"
FIELD_TARGET_TEMPERATURE: str = "targetTemperature"
FIELD_OUTSIDE_TEMPERATURE: str = "outsideTemperature"
FIELD_DHW_TEMPERATURE: str = "dhwWaterTemperature"
FIELD_WATER_PRESSURE: str = "chWaterPressure"
FIELD_FLAME_STATUS: str = "flameStatus"

FLAME_STATUS_OFF: str = "Off"

PLATFORMS: list[Platform] = [
    Platform.CLIMATE,
    Platform.SENSOR,
    Platform.BINARY_SENSOR,
]

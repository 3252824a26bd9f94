"""Property names and channel identifiers shared across the package."""
from __future__ import annotations

# Property carrying the hex-encoded extended device state blob.
EXTENDED_DEVICE_STATE_PROPERTY_NAME = "extendedDeviceState"

POWER_CONSUMPTION_CHANNEL_ID = "powerConsumption"
WATER_CONSUMPTION_CHANNEL_ID = "waterConsumption"

DIAGNOSTICS_LOGGER_NAME = "mielelink.decode"

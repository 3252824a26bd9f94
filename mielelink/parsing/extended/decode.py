"""
Extraction of consumption values from the dishwasher's extended device state.

The appliance reports ``extendedDeviceState`` as a hex string. Byte 16 holds
the energy used by the current program in tenths of a kilowatt hour, byte 18
the water used in tenths of a litre.
"""
from __future__ import annotations

import logging
from typing import Optional

from mielelink.const import POWER_CONSUMPTION_CHANNEL_ID, WATER_CONSUMPTION_CHANNEL_ID
from mielelink.core.binary import hex_to_bytes, tenths_at

POWER_CONSUMPTION_BYTE_POSITION = 16
WATER_CONSUMPTION_BYTE_POSITION = 18
EXTENDED_STATE_MIN_SIZE_BYTES = 19


def decode_extended_state(raw_hex: str) -> bytes:
    """
    Decode the hex-encoded extended state into bytes.

    Raises:
        ExtendedStateError: If *raw_hex* is not valid hex.
    """
    return hex_to_bytes(raw_hex)


def extract_consumption(blob: bytes, logger: Optional[logging.Logger] = None) -> dict[str, str]:
    """
    Read power and water consumption from an extended state blob.

    Returns:
        A dict mapping the consumption channel ids to decimal strings
        (kWh and litres), or an empty dict when the blob is too short.
    """
    if len(blob) < EXTENDED_STATE_MIN_SIZE_BYTES:
        if logger is not None:
            logger.debug(
                "extended_state_too_short",
                extra={"details": {"length": len(blob), "required": EXTENDED_STATE_MIN_SIZE_BYTES}},
            )
        return {}

    return {
        POWER_CONSUMPTION_CHANNEL_ID: str(tenths_at(blob, POWER_CONSUMPTION_BYTE_POSITION)),
        WATER_CONSUMPTION_CHANNEL_ID: str(tenths_at(blob, WATER_CONSUMPTION_BYTE_POSITION)),
    }

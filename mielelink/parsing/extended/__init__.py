from mielelink.parsing.extended.decode import (
    EXTENDED_STATE_MIN_SIZE_BYTES,
    POWER_CONSUMPTION_BYTE_POSITION,
    WATER_CONSUMPTION_BYTE_POSITION,
    decode_extended_state,
    extract_consumption,
)

__all__ = [
    "EXTENDED_STATE_MIN_SIZE_BYTES",
    "POWER_CONSUMPTION_BYTE_POSITION",
    "WATER_CONSUMPTION_BYTE_POSITION",
    "decode_extended_state",
    "extract_consumption",
]

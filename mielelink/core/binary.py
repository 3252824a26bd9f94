from __future__ import annotations

from decimal import Decimal

from mielelink.exceptions import ExtendedStateError


def hex_to_bytes(hex_data: str) -> bytes:
    cleaned = "".join(hex_data.split())
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise ExtendedStateError(f"Invalid hex payload: {exc}") from exc


def tenths_at(data: bytes, index: int) -> Decimal:
    """Read the unsigned byte at *index* as a value expressed in tenths."""
    return Decimal(data[index]) / Decimal(10)

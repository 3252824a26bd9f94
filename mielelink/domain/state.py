"""
Typed channel states produced by the decoders.

A decoded channel is one of the concrete state types below, the explicit
``UnDef.UNDEF`` marker (a defined, displayable "unknown" value), or ``None``
when decoding failed for this polling cycle.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)


class OnOff(str, Enum):
    ON = "ON"
    OFF = "OFF"


class OpenClosed(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class UnDef(str, Enum):
    UNDEF = "UNDEF"


class Unit(str, Enum):
    """Units used by quantity channels."""
    KILOWATT_HOUR = "kWh"
    LITRE = "l"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Unit":
        unit = _UNIT_ALIASES.get(symbol)
        if unit is None:
            raise ValueError(f"Unknown unit symbol '{symbol}'")
        return unit


_UNIT_ALIASES: dict[str, Unit] = {
    "kWh": Unit.KILOWATT_HOUR,
    "l": Unit.LITRE,
    "L": Unit.LITRE,
}


@dataclass(frozen=True)
class StringState:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DateTimeState:
    """
    A point in time, always held in UTC with second precision.

    ``str()`` renders it as ``YYYY-MM-DDTHH:MM:SS`` without an offset suffix.
    """
    value: dt.datetime

    def __str__(self) -> str:
        return format_timestamp(self.value)


@dataclass(frozen=True)
class QuantityState:
    value: Decimal
    unit: Unit

    def __str__(self) -> str:
        return f"{self.value} {self.unit.value}"


State = Union[StringState, DateTimeState, QuantityState, OnOff, OpenClosed, UnDef]


def format_timestamp(moment: dt.datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(dt.timezone.utc).replace(tzinfo=None)
    return moment.replace(microsecond=0).isoformat(timespec="seconds")

"""
Typed parsers turning a resolved string into a channel state.

Each parser raises ``DecodeError`` on malformed input; callers decide how the
failure is reported. The minute-count conversion used by the time channels is
the exception: it follows a ``TimeParseFailurePolicy`` instead of raising.
"""
from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from mielelink.domain.state import (
    EPOCH,
    DateTimeState,
    OnOff,
    OpenClosed,
    QuantityState,
    StringState,
    Unit,
    format_timestamp,
)
from mielelink.exceptions import DecodeError

# Signed 64-bit range accepted for minute counts.
_LONG_MIN = -(2 ** 63)
_LONG_MAX = 2 ** 63 - 1
_MILLIS_PER_MINUTE = 60000

_MINUTES_PATTERN = re.compile(r"[+-]?[0-9]+")
_QUANTITY_PATTERN = re.compile(
    r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)\s*(\S+)?\s*"
)


class TimeParseFailurePolicy(str, Enum):
    """What a time channel yields when its minute count is not an integer."""
    DEGRADE_TO_EPOCH = "degrade_to_epoch"
    UNDEF = "undef"
    ABSENT = "absent"


def parse_string(text: str) -> StringState:
    return StringState(text)


def parse_on_off(text: str) -> OnOff:
    try:
        return OnOff(text)
    except ValueError as exc:
        raise DecodeError(f"'{text}' is not an on/off token") from exc


def parse_open_closed(text: str) -> OpenClosed:
    try:
        return OpenClosed(text)
    except ValueError as exc:
        raise DecodeError(f"'{text}' is not an open/closed token") from exc


def parse_datetime(text: str) -> DateTimeState:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    try:
        moment = dt.datetime.fromisoformat(text)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"'{text}' is not a timestamp") from exc
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=dt.timezone.utc)
    else:
        moment = moment.astimezone(dt.timezone.utc)
    return DateTimeState(moment.replace(microsecond=0))


def parse_quantity(text: str, unit: Unit) -> QuantityState:
    """
    Parse a numeric magnitude with an optional trailing unit symbol.

    A bare number takes the channel unit. A unit symbol, when present, must
    denote that same unit; no conversion is performed.
    """
    match = _QUANTITY_PATTERN.fullmatch(text)
    if not match:
        raise DecodeError(f"'{text}' is not a quantity")
    try:
        magnitude = Decimal(match.group(1))
    except InvalidOperation as exc:
        raise DecodeError(f"'{text}' is not a quantity") from exc

    symbol = match.group(2)
    if symbol is not None:
        try:
            given = Unit.from_symbol(symbol)
        except ValueError as exc:
            raise DecodeError(str(exc)) from exc
        if given is not unit:
            raise DecodeError(f"Expected unit '{unit.value}', got '{symbol}'")
    return QuantityState(magnitude, unit)


def parse_minutes(text: str) -> int:
    if text is None or not _MINUTES_PATTERN.fullmatch(text):
        raise DecodeError(f"'{text}' is not a minute count")
    minutes = int(text)
    if not _LONG_MIN <= minutes <= _LONG_MAX:
        raise DecodeError(f"'{text}' is out of range")
    return minutes


def minutes_to_timestamp(
    text: str,
    policy: TimeParseFailurePolicy = TimeParseFailurePolicy.DEGRADE_TO_EPOCH,
) -> Optional[str]:
    """
    Convert a count of minutes since the epoch into a UTC timestamp string.

    Returns ``None`` only when *text* is not a usable minute count and the
    policy is not ``DEGRADE_TO_EPOCH``; under that policy the epoch itself is
    returned instead.
    """
    try:
        millis = parse_minutes(text) * _MILLIS_PER_MINUTE
        moment = EPOCH + dt.timedelta(milliseconds=millis)
    except (DecodeError, OverflowError):
        if policy is not TimeParseFailurePolicy.DEGRADE_TO_EPOCH:
            return None
        moment = EPOCH
    return format_timestamp(moment)

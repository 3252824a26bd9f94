"""
Typed value parsers for channel states.

Parsers accept the string left after localization resolution and return one
of the state types in ``mielelink.domain.state``.
"""
from mielelink.parsing.values.decode import (
    TimeParseFailurePolicy,
    minutes_to_timestamp,
    parse_datetime,
    parse_minutes,
    parse_on_off,
    parse_open_closed,
    parse_quantity,
    parse_string,
)

__all__ = [
    "TimeParseFailurePolicy",
    "minutes_to_timestamp",
    "parse_datetime",
    "parse_minutes",
    "parse_on_off",
    "parse_open_closed",
    "parse_quantity",
    "parse_string",
]

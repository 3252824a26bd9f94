"""
Channel selectors: one immutable row per channel, plus its decoding rule.

Most selectors share the generic rule, which parses the resolved string by
the selector's value kind. A few channels override it (minute-count times and
the door signal); the override is chosen by the selector's ``rule`` tag.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from mielelink.config import get_settings
from mielelink.diagnostics import get_diagnostics
from mielelink.domain.state import State, UnDef, Unit
from mielelink.parsing.localization import LocalizationDescriptor
from mielelink.parsing.values.decode import (
    TimeParseFailurePolicy,
    minutes_to_timestamp,
    parse_datetime,
    parse_on_off,
    parse_open_closed,
    parse_quantity,
    parse_string,
)


class ValueKind(str, Enum):
    STRING = "String"
    DATETIME = "DateTime"
    OPEN_CLOSED = "OpenClosed"
    ON_OFF = "OnOff"
    QUANTITY = "Quantity"


class DecodeRule(str, Enum):
    """Channel-specific decoding rule attached to a selector."""
    GENERIC = "generic"
    MINUTES = "minutes"
    DOOR = "door"


@dataclass(frozen=True)
class ChannelSelector:
    """
    Decoding metadata for a single appliance channel.

    Attributes:
        name: Stable selector name (e.g. ``START_TIME``).
        source_key: Device property read by this selector, ``None`` when synthetic.
        channel_id: Identifier of the channel the decoded state is published to.
        value_kind: Target typed representation.
        is_property: Static appliance attribute rather than dynamic state.
        is_extended_state: Value lives in the extended device state blob.
        unit: Unit of quantity channels.
        rule: Decoding rule applied after localization.
    """
    name: str
    source_key: Optional[str]
    channel_id: str
    value_kind: ValueKind
    is_property: bool = False
    is_extended_state: bool = False
    unit: Optional[Unit] = None
    rule: DecodeRule = DecodeRule.GENERIC

    def __post_init__(self) -> None:
        if self.value_kind is ValueKind.QUANTITY and self.unit is None:
            raise ValueError(f"Quantity selector {self.name} requires a unit")

    def decode(
        self,
        raw: str,
        localization: Optional[LocalizationDescriptor] = None,
        *,
        policy: Optional[TimeParseFailurePolicy] = None,
        logger: Optional[logging.Logger] = None,
    ) -> Optional[State]:
        """
        Decode a raw device value into a typed state.

        Never raises for malformed input. Failures are logged as
        ``decode_failed`` on the diagnostic sink and yield ``None``.

        Args:
            raw: The value as reported by the device.
            localization: Optional descriptor resolved before typed parsing.
            policy: Overrides the configured time parse failure policy.
            logger: Overrides the process-wide diagnostic sink.

        Returns:
            A typed state, ``UnDef.UNDEF``, or ``None``.
        """
        log = logger or get_diagnostics()
        text = localization.resolve(raw) if localization is not None else raw
        return _RULES[self.rule](self, text, policy, log)

    def parse(self, text: str, logger: Optional[logging.Logger] = None) -> Optional[State]:
        """Generic typed parse of an already resolved string."""
        try:
            return _PARSERS[self.value_kind](text, self)
        except Exception as exc:
            (logger or get_diagnostics()).error(
                "decode_failed",
                extra={
                    "details": {
                        "selector": self.name,
                        "channel": self.channel_id,
                        "raw": text,
                        "error": str(exc),
                    }
                },
            )
            return None

    def __str__(self) -> str:
        return self.source_key or self.name


_Parser = Callable[[str, ChannelSelector], State]
_Rule = Callable[[ChannelSelector, str, Optional[TimeParseFailurePolicy], logging.Logger], Optional[State]]

_PARSERS: dict[ValueKind, _Parser] = {
    ValueKind.STRING: lambda text, selector: parse_string(text),
    ValueKind.DATETIME: lambda text, selector: parse_datetime(text),
    ValueKind.OPEN_CLOSED: lambda text, selector: parse_open_closed(text),
    ValueKind.ON_OFF: lambda text, selector: parse_on_off(text),
    ValueKind.QUANTITY: lambda text, selector: parse_quantity(text, selector.unit),
}


def _decode_generic(selector, text, policy, logger):
    return selector.parse(text, logger)


def _decode_minutes(selector, text, policy, logger):
    if policy is None:
        policy = get_settings().time_parse_failure_policy
    timestamp = minutes_to_timestamp(text, TimeParseFailurePolicy.ABSENT)
    if timestamp is None:
        details = {"selector": selector.name, "raw": text, "policy": policy.value}
        if policy is not TimeParseFailurePolicy.DEGRADE_TO_EPOCH:
            logger.warning("time_unparseable", extra={"details": details})
            return UnDef.UNDEF if policy is TimeParseFailurePolicy.UNDEF else None
        logger.debug("time_degraded", extra={"details": details})
        timestamp = minutes_to_timestamp(text, policy)
    return selector.parse(timestamp, logger)


def _decode_door(selector, text, policy, logger):
    if text == "true":
        return selector.parse("OPEN", logger)
    if text == "false":
        return selector.parse("CLOSED", logger)
    return UnDef.UNDEF


_RULES: dict[DecodeRule, _Rule] = {
    DecodeRule.GENERIC: _decode_generic,
    DecodeRule.MINUTES: _decode_minutes,
    DecodeRule.DOOR: _decode_door,
}

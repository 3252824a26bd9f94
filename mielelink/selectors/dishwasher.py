"""
Channel selectors for Miele dishwashers.
"""
from __future__ import annotations

from mielelink.const import (
    EXTENDED_DEVICE_STATE_PROPERTY_NAME,
    POWER_CONSUMPTION_CHANNEL_ID,
    WATER_CONSUMPTION_CHANNEL_ID,
)
from mielelink.domain.state import Unit
from mielelink.selectors.base import ChannelSelector, DecodeRule, ValueKind
from mielelink.selectors.registry import SelectorRegistry

PRODUCT_TYPE = ChannelSelector("PRODUCT_TYPE", "productTypeId", "productType", ValueKind.STRING, is_property=True)
DEVICE_TYPE = ChannelSelector("DEVICE_TYPE", "mieleDeviceType", "deviceType", ValueKind.STRING, is_property=True)
BRAND_ID = ChannelSelector("BRAND_ID", "brandId", "brandId", ValueKind.STRING, is_property=True)
COMPANY_ID = ChannelSelector("COMPANY_ID", "companyId", "companyId", ValueKind.STRING, is_property=True)
STATE = ChannelSelector("STATE", "state", "state", ValueKind.STRING)
PROGRAMID = ChannelSelector("PROGRAMID", "programId", "program", ValueKind.STRING)
PROGRAMPHASE = ChannelSelector("PROGRAMPHASE", "phase", "phase", ValueKind.STRING)

# Times are reported as minute counts.
START_TIME = ChannelSelector("START_TIME", "startTime", "start", ValueKind.DATETIME, rule=DecodeRule.MINUTES)
DURATION = ChannelSelector("DURATION", "duration", "duration", ValueKind.DATETIME, rule=DecodeRule.MINUTES)
ELAPSED_TIME = ChannelSelector("ELAPSED_TIME", "elapsedTime", "elapsed", ValueKind.DATETIME, rule=DecodeRule.MINUTES)
FINISH_TIME = ChannelSelector("FINISH_TIME", "finishTime", "finish", ValueKind.DATETIME, rule=DecodeRule.MINUTES)

DOOR = ChannelSelector("DOOR", "signalDoor", "door", ValueKind.OPEN_CLOSED, rule=DecodeRule.DOOR)
SWITCH = ChannelSelector("SWITCH", None, "switch", ValueKind.ON_OFF)

POWER_CONSUMPTION = ChannelSelector(
    "POWER_CONSUMPTION",
    EXTENDED_DEVICE_STATE_PROPERTY_NAME,
    POWER_CONSUMPTION_CHANNEL_ID,
    ValueKind.QUANTITY,
    is_extended_state=True,
    unit=Unit.KILOWATT_HOUR,
)
WATER_CONSUMPTION = ChannelSelector(
    "WATER_CONSUMPTION",
    EXTENDED_DEVICE_STATE_PROPERTY_NAME,
    WATER_CONSUMPTION_CHANNEL_ID,
    ValueKind.QUANTITY,
    is_extended_state=True,
    unit=Unit.LITRE,
)

DISHWASHER = SelectorRegistry(
    [
        PRODUCT_TYPE,
        DEVICE_TYPE,
        BRAND_ID,
        COMPANY_ID,
        STATE,
        PROGRAMID,
        PROGRAMPHASE,
        START_TIME,
        DURATION,
        ELAPSED_TIME,
        FINISH_TIME,
        DOOR,
        SWITCH,
        POWER_CONSUMPTION,
        WATER_CONSUMPTION,
    ]
)

from mielelink.domain import ApplianceSnapshot, OnOff, OpenClosed, UnDef
from mielelink.parsing.localization import LocalizationDescriptor
from mielelink.parsing.values import TimeParseFailurePolicy
from mielelink.selectors import DISHWASHER, ChannelSelector, SelectorRegistry, ValueKind
from mielelink.config import DecoderSettings
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "ApplianceSnapshot",
    "ChannelSelector",
    "DecoderSettings",
    "DISHWASHER",
    "LocalizationDescriptor",
    "OnOff",
    "OpenClosed",
    "SelectorRegistry",
    "TimeParseFailurePolicy",
    "UnDef",
    "ValueKind",
]

try:
    __version__ = version("mielelink")
except PackageNotFoundError:
    __version__ = "0.0.0"

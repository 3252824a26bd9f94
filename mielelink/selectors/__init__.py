"""
Channel selectors bind appliance properties to typed channels.

``DISHWASHER`` is the registry for Miele dishwashers; individual selectors
are importable from ``mielelink.selectors.dishwasher``.
"""
from mielelink.selectors.base import ChannelSelector, DecodeRule, ValueKind
from mielelink.selectors.dishwasher import DISHWASHER
from mielelink.selectors.registry import SelectorRegistry

__all__ = ["ChannelSelector", "DecodeRule", "ValueKind", "SelectorRegistry", "DISHWASHER"]

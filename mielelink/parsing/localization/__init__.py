"""
Localization descriptors supplied by the appliance with each property value.
"""
from mielelink.parsing.localization.model import LocalizationDescriptor

__all__ = ["LocalizationDescriptor"]

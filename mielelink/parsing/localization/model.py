from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mielelink.core.text import as_string


class LocalizationDescriptor(BaseModel):
    """
    Device-supplied localization hints for a single property value.

    The appliance reports these alongside each property as metadata. Field
    aliases match the appliance's JSON keys, so a metadata object can be
    validated directly with ``model_validate`` / ``model_validate_json``.

    Attributes:
        enum_map: Device-internal code -> localized display string.
        localized_value: A value the device has already localized.
        localized_id: The device's identifier for the localized value.
        access: Access mode reported by the device, if any.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    enum_map: Optional[dict[str, str]] = Field(None, alias="MieleEnum")
    localized_value: Optional[str] = Field(None, alias="LocalizedValue")
    localized_id: Optional[str] = Field(None, alias="LocalizedID")
    access: Optional[str] = Field(None, alias="access")

    @field_validator("enum_map", mode="before")
    @classmethod
    def _stringify_enum_values(cls, value: Any) -> Any:
        # Enum tables arrive as JSON objects whose values may be numbers or booleans.
        if isinstance(value, dict):
            return {str(key): as_string(item) for key, item in value.items()}
        return value

    def lookup_code(self, raw: str) -> Optional[str]:
        """
        Return the code whose display string equals *raw*.

        Both sides are stripped of surrounding whitespace; the comparison is
        otherwise exact and case-sensitive.
        """
        if not self.enum_map:
            return None
        wanted = raw.strip()
        for code, display in self.enum_map.items():
            if display.strip() == wanted:
                return code
        return None

    def resolve(self, raw: str) -> str:
        """Resolve *raw* through the enum table, then the localized value."""
        code = self.lookup_code(raw)
        if code is not None:
            return code
        if self.localized_value is not None:
            return self.localized_value
        return raw


"""
This module provides a container for one polling cycle of appliance properties
and decodes it into channel states.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from pydantic import ValidationError

from mielelink.core.text import as_string
from mielelink.diagnostics import get_diagnostics
from mielelink.domain.state import State
from mielelink.exceptions import ExtendedStateError
from mielelink.parsing.extended import decode_extended_state, extract_consumption
from mielelink.parsing.localization import LocalizationDescriptor
from mielelink.parsing.values import TimeParseFailurePolicy

if TYPE_CHECKING:
    from mielelink.selectors.registry import SelectorRegistry


@dataclass
class ApplianceSnapshot:
    """
    A snapshot of appliance properties as received during one polling cycle.

    Entries in ``raw`` are either plain values or dicts of the form
    ``{"value": ..., "metadata": {...}}``, where ``metadata`` is the device's
    localization object (a dict or its JSON text).

    Attributes:
        raw: The property name -> entry mapping as received from the device.
        received_at: The timestamp when the snapshot was taken.
    """
    raw: dict[str, Any]
    received_at: Optional[datetime] = None

    def get(self, name: str) -> Any:
        return self.raw.get(name)

    def value(self, name: str) -> Optional[str]:
        """Return the string value of property *name*, or ``None`` if absent."""
        entry = self.get(name)
        if isinstance(entry, dict):
            entry = entry.get("value")
        if entry is None:
            return None
        return entry if isinstance(entry, str) else as_string(entry)

    def metadata(self, name: str, logger: Optional[logging.Logger] = None) -> Optional[LocalizationDescriptor]:
        """
        Build the localization descriptor attached to property *name*.

        Invalid metadata is logged and treated as absent.
        """
        entry = self.get(name)
        if not isinstance(entry, dict):
            return None
        meta = entry.get("metadata")
        if meta is None:
            return None
        try:
            if isinstance(meta, str):
                return LocalizationDescriptor.model_validate_json(meta)
            return LocalizationDescriptor.model_validate(meta)
        except ValidationError as exc:
            (logger or get_diagnostics()).warning(
                "metadata_invalid",
                extra={"details": {"property": name, "error": str(exc)}},
            )
            return None

    def decode_channels(
        self,
        registry: "SelectorRegistry",
        *,
        policy: Optional[TimeParseFailurePolicy] = None,
        logger: Optional[logging.Logger] = None,
    ) -> dict[str, Optional[State]]:
        """
        Decode every channel of *registry* whose source property is present.

        Synthetic selectors and selectors whose property is missing are left
        out. A channel that fails to decode maps to ``None``; it never keeps
        the remaining channels from being decoded.

        Returns:
            A dict mapping channel ids to decoded states.
        """
        log = logger or get_diagnostics()
        states: dict[str, Optional[State]] = {}
        extended: dict[str, Optional[dict[str, str]]] = {}

        for selector in registry:
            if selector.source_key is None:
                continue
            raw = self.value(selector.source_key)
            if raw is None:
                continue

            if selector.is_extended_state:
                if selector.source_key not in extended:
                    extended[selector.source_key] = self._consumption(selector.source_key, raw, log)
                values = extended[selector.source_key]
                if values is None:
                    states[selector.channel_id] = None
                elif selector.channel_id in values:
                    states[selector.channel_id] = selector.decode(
                        values[selector.channel_id], policy=policy, logger=log
                    )
                continue

            localization = self.metadata(selector.source_key, log)
            states[selector.channel_id] = selector.decode(raw, localization, policy=policy, logger=log)

        return states

    def _consumption(self, name: str, raw: str, logger: logging.Logger) -> Optional[dict[str, str]]:
        if not raw:
            return {}
        try:
            blob = decode_extended_state(raw)
        except ExtendedStateError as exc:
            logger.error("decode_failed", extra={"details": {"property": name, "raw": raw, "error": str(exc)}})
            return None
        return extract_consumption(blob, logger)

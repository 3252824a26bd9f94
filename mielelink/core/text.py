from __future__ import annotations

from typing import Any


def as_string(item: Any) -> str:
    """Render a JSON scalar the way the appliance spells it (``true``/``false`` for booleans)."""
    if isinstance(item, bool):
        return "true" if item else "false"
    return str(item)

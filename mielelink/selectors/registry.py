from __future__ import annotations

from typing import Iterable, Iterator, Optional

from mielelink.exceptions import DuplicateChannelError
from mielelink.selectors.base import ChannelSelector


class SelectorRegistry:
    """
    Read-only, ordered set of channel selectors for one appliance type.

    Provides lookup by selector name, channel id and device property key.
    Construction rejects two selectors feeding the same channel.
    """

    def __init__(self, selectors: Iterable[ChannelSelector]) -> None:
        self._selectors: tuple[ChannelSelector, ...] = tuple(selectors)
        self._by_channel: dict[str, ChannelSelector] = {}
        self._by_name: dict[str, ChannelSelector] = {}
        for selector in self._selectors:
            if selector.channel_id in self._by_channel:
                raise DuplicateChannelError(f"Channel '{selector.channel_id}' is bound twice")
            if selector.name in self._by_name:
                raise DuplicateChannelError(f"Selector name '{selector.name}' is used twice")
            self._by_channel[selector.channel_id] = selector
            self._by_name[selector.name] = selector

    def get(self, name: str) -> Optional[ChannelSelector]:
        """
        Look up a selector by its name.

        Args:
            name: The selector name (e.g. ``"DOOR"``).

        Returns:
            The ``ChannelSelector`` if found, otherwise ``None``.
        """
        return self._by_name.get(name)

    def by_channel(self, channel_id: str) -> Optional[ChannelSelector]:
        return self._by_channel.get(channel_id)

    def by_source_key(self, source_key: str) -> list[ChannelSelector]:
        """Return every selector reading *source_key*, in declaration order."""
        return [s for s in self._selectors if s.source_key == source_key]

    def properties(self) -> list[ChannelSelector]:
        return [s for s in self._selectors if s.is_property]

    def extended_states(self) -> list[ChannelSelector]:
        return [s for s in self._selectors if s.is_extended_state]

    def all(self) -> list[ChannelSelector]:
        return list(self._selectors)

    def __iter__(self) -> Iterator[ChannelSelector]:
        return iter(self._selectors)

    def __len__(self) -> int:
        return len(self._selectors)

    def __contains__(self, item: ChannelSelector | str) -> bool:
        if isinstance(item, ChannelSelector):
            return self._by_channel.get(item.channel_id) == item
        return item in self._by_channel

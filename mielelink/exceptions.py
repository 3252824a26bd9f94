from __future__ import annotations


class DecodeError(ValueError):
    """Raised by the typed parsers when a string cannot become a state.

    Never escapes ``ChannelSelector.decode``; it is reported and turned into
    an absent state there.
    """


class DuplicateChannelError(ValueError):
    pass


class ExtendedStateError(ValueError):
    pass

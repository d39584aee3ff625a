from __future__ import annotations
from enum import Enum
from typing import Union


class Channel(str, Enum):
    """One byte of an ``#AARRGGBB`` string, valued by its one-letter tag."""
    ALPHA = "a"
    RED = "r"
    GREEN = "g"
    BLUE = "b"

    @property
    def offset(self) -> int:
        """Index of the channel's first hex digit, after the marker."""
        return _offsets[self]

    @classmethod
    def coerce(cls, channel: ChannelLike) -> Channel:
        if isinstance(channel, Channel):
            return channel
        try:
            return cls(channel.lower())
        except (ValueError, AttributeError):
            raise ValueError(f"Unknown channel tag: {channel!r}") from None


ChannelLike = Union[Channel, str]

_offsets = {
    Channel.ALPHA: 1,
    Channel.RED: 3,
    Channel.GREEN: 5,
    Channel.BLUE: 7,
}

ARGB_ORDER = (Channel.ALPHA, Channel.RED, Channel.GREEN, Channel.BLUE)

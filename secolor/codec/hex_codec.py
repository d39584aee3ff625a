"""
``#AARRGGBB`` codec.

The decoding side is lenient: malformed strings resolve to zero bytes
instead of raising, so placeholder or half-typed values coming from a picker
never break a caller. See :mod:`secolor.strict` for the raising variants.
"""
from __future__ import annotations
import math
import string

from boundednumbers.functions import clamp

from ..types.channel_types import ARGB_ORDER, Channel, ChannelLike
from ..types.color_types import Rgb
from ..types.format_type import BYTE_MAX

HEX_MARKER = "#"
HEX_LENGTH = 9
FALLBACK_BYTE = "00"

_HEX_DIGITS = frozenset(string.hexdigits)


def extract_channel(hex_string: str, channel: ChannelLike) -> str:
    """
    Return the two hex digits of one channel of an ``#AARRGGBB`` string.

    Args:
        hex_string: 9 character string, a marker followed by AARRGGBB
        channel: Channel member or its one-letter tag (case-insensitive)

    Returns:
        The 2 character substring, or ``"00"`` when the string is empty,
        blank or not 9 characters long. Digits are not validated here.

    Raises:
        ValueError: ``channel`` is a tag that names no channel. Unlike a
            malformed hex string this never falls back to ``"00"``.
    """
    channel = Channel.coerce(channel)
    if not hex_string or hex_string.isspace() or len(hex_string) != HEX_LENGTH:
        return FALLBACK_BYTE
    start = channel.offset
    return hex_string[start:start + 2]


def assemble_hex(alpha: str, red: str, green: str, blue: str) -> str:
    """Join four 2-digit fragments into ``#AARRGGBB``. Fragments are not checked."""
    return HEX_MARKER + alpha + red + green + blue


def is_valid_hex(value: str) -> bool:
    """True if every character is a hex digit; vacuously true for ``""``."""
    return all(c in _HEX_DIGITS for c in value)


def parse_hex_byte(value: str) -> int:
    """Parse base-16 digits, returning 0 for anything that is not pure hex."""
    if not value or not is_valid_hex(value):
        return 0
    return int(value, 16)


def make_color(a: int, r: int, g: int, b: int) -> Rgb:
    """
    Build an ``Rgb`` from ARGB ints.

    If any channel falls outside [0, 255] the whole color is discarded and
    transparent black ``Rgb(0, 0, 0, 0)`` is returned.
    """
    if all(0 <= c <= BYTE_MAX for c in (a, r, g, b)):
        return Rgb(r, g, b, a)
    return Rgb(0, 0, 0, 0)


def color_from_hex(hex_string: str) -> Rgb:
    """Decode ``#AARRGGBB``; malformed channels decode as 0."""
    a, r, g, b = (parse_hex_byte(extract_channel(hex_string, c)) for c in ARGB_ORDER)
    return make_color(a, r, g, b)


def byte_to_hex(value: float) -> str:
    """
    Truncate toward zero, clamp into a byte and render as 2 uppercase hex digits.

    NaN renders as ``"00"``; infinities clamp like any other out-of-range value.
    """
    if math.isnan(value):
        return FALLBACK_BYTE
    if math.isinf(value):
        value = BYTE_MAX if value > 0 else 0
    byte = int(clamp(int(value), 0, BYTE_MAX))
    return f"{byte:02X}"


def color_to_hex(color: Rgb) -> str:
    """Encode an ``Rgb`` as ``#AARRGGBB``."""
    return assemble_hex(
        byte_to_hex(color.a),
        byte_to_hex(color.r),
        byte_to_hex(color.g),
        byte_to_hex(color.b),
    )

"""
Validating counterparts of the lenient codec and conversion functions.

The core API never raises on bad colors: hex input falls back to zero bytes
and out-of-range channels produce whatever the arithmetic gives. The
functions here check first and raise ``InvalidHexInput`` or
``OutOfRangeChannel`` instead.
"""
from __future__ import annotations
import warnings
from typing import Literal

from .codec.hex_codec import HEX_LENGTH, HEX_MARKER, color_from_hex, extract_channel, is_valid_hex, parse_hex_byte
from .conversions.hsv_ranges import se_to_standard, standard_to_se
from .conversions.to_hsv import rgb_to_hsv
from .conversions.to_rgb import hsv_to_rgb
from .errors import ChannelRangeWarning, InvalidHexInput, OutOfRangeChannel
from .types.channel_types import ChannelLike
from .types.color_types import ColorBase, Rgb, SeHsv, StandardHsv
from .types.format_type import ColorSpace, channel_ranges

OnError = Literal["raise", "warn"]


def check_range(name: str, value: float, low: float, high: float, on_error: OnError = "raise") -> bool:
    """
    Check ``low <= value <= high``.

    Returns True when in range. Otherwise raises OutOfRangeChannel, or with
    ``on_error="warn"`` emits a ChannelRangeWarning and returns False.
    """
    if low <= value <= high:
        return True
    if on_error == "warn":
        warnings.warn(f"{name}={value!r} is outside [{low}, {high}]", ChannelRangeWarning, stacklevel=2)
        return False
    raise OutOfRangeChannel(name, value, low, high)


def check_color(color: ColorBase, on_error: OnError = "raise") -> bool:
    """Range-check every channel of a color value against its space."""
    ranges = channel_ranges[color.space]
    ok = True
    for name, value, (low, high) in zip(color.channel_names, color.value, ranges):
        ok = check_range(name, value, low, high, on_error) and ok
    # alpha has the same byte range as the color channels
    if isinstance(color, Rgb):
        ok = check_range("a", color.a, *ranges[0], on_error) and ok
    return ok


def _check_hsv_channels(space: ColorSpace, h: float, s: float, v: float) -> None:
    for name, value, (low, high) in zip("hsv", (h, s, v), channel_ranges[space]):
        check_range(name, value, low, high)


def strict_is_hex_color(hex_string: str) -> bool:
    return (
        len(hex_string) == HEX_LENGTH
        and hex_string.startswith(HEX_MARKER)
        and is_valid_hex(hex_string[1:])
    )


def strict_extract_channel(hex_string: str, channel: ChannelLike) -> str:
    if not strict_is_hex_color(hex_string):
        raise InvalidHexInput(f"Expected '#AARRGGBB', got {hex_string!r}")
    return extract_channel(hex_string, channel)


def strict_parse_hex_byte(value: str) -> int:
    if not value or not is_valid_hex(value):
        raise InvalidHexInput(f"Not a hex number: {value!r}")
    return parse_hex_byte(value)


def strict_color_from_hex(hex_string: str) -> Rgb:
    if not strict_is_hex_color(hex_string):
        raise InvalidHexInput(f"Expected '#AARRGGBB', got {hex_string!r}")
    return color_from_hex(hex_string)


def strict_rgb_to_hsv(r: int, g: int, b: int) -> StandardHsv:
    for name, value in zip("rgb", (r, g, b)):
        check_range(name, value, *channel_ranges[ColorSpace.RGB][0])
    return rgb_to_hsv(r, g, b)


def strict_hsv_to_rgb(h: float, s: float, v: float) -> Rgb:
    # 360 is accepted as an alias of 0
    _check_hsv_channels(ColorSpace.STANDARD_HSV, h, s, v)
    return hsv_to_rgb(h, s, v)


def strict_standard_to_se(hsv: StandardHsv) -> SeHsv:
    _check_hsv_channels(ColorSpace.STANDARD_HSV, *hsv.value)
    return standard_to_se(hsv)


def strict_se_to_standard(hsv: SeHsv) -> StandardHsv:
    _check_hsv_channels(ColorSpace.SE_HSV, *hsv.value)
    return se_to_standard(hsv)

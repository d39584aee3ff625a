"""secolor: RGB, HSV and Space Engineers color conversions."""

from .types.color_types import ColorBase, Rgb, StandardHsv, SeHsv, BlueprintHsv
from .types.channel_types import Channel
from .types.format_type import ColorSpace, BlueprintMapping

from .codec import (
    extract_channel,
    assemble_hex,
    is_valid_hex,
    parse_hex_byte,
    make_color,
    color_from_hex,
    byte_to_hex,
    color_to_hex,
)
from .conversions import (
    rgb_to_hsv,
    rgb_color_to_hsv,
    hsv_to_rgb,
    hsv_to_rgba,
    hsv_color_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    standard_to_se,
    se_to_standard,
    se_to_blueprint_linear,
    blueprint_linear_to_se,
    se_to_blueprint_via_standard,
    blueprint_via_standard_to_se,
    convert,
    np_convert,
)
from .errors import ColorError, InvalidHexInput, OutOfRangeChannel, ChannelRangeWarning

__version__ = "1.0.0"

__all__ = [
    # value types
    "ColorBase",
    "Rgb",
    "StandardHsv",
    "SeHsv",
    "BlueprintHsv",
    "Channel",
    "ColorSpace",
    "BlueprintMapping",
    # hex codec
    "extract_channel",
    "assemble_hex",
    "is_valid_hex",
    "parse_hex_byte",
    "make_color",
    "color_from_hex",
    "byte_to_hex",
    "color_to_hex",
    # conversions
    "rgb_to_hsv",
    "rgb_color_to_hsv",
    "hsv_to_rgb",
    "hsv_to_rgba",
    "hsv_color_to_rgb",
    "np_rgb_to_hsv",
    "np_hsv_to_rgb",
    "standard_to_se",
    "se_to_standard",
    "se_to_blueprint_linear",
    "blueprint_linear_to_se",
    "se_to_blueprint_via_standard",
    "blueprint_via_standard_to_se",
    "convert",
    "np_convert",
    # errors
    "ColorError",
    "InvalidHexInput",
    "OutOfRangeChannel",
    "ChannelRangeWarning",
    "__version__",
]

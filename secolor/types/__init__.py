from .color_types import ColorBase, Rgb, StandardHsv, SeHsv, BlueprintHsv, AnyColor, space_to_class
from .channel_types import Channel, ChannelLike, ARGB_ORDER
from .format_type import ColorSpace, BlueprintMapping

__all__ = [
    "ColorBase",
    "Rgb",
    "StandardHsv",
    "SeHsv",
    "BlueprintHsv",
    "AnyColor",
    "space_to_class",
    "Channel",
    "ChannelLike",
    "ARGB_ORDER",
    "ColorSpace",
    "BlueprintMapping",
]

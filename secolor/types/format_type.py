# No dependencies
from enum import Enum


class ColorSpace(str, Enum):
    RGB = "rgb"
    STANDARD_HSV = "standard"
    SE_HSV = "se"
    BLUEPRINT_HSV = "blueprint"


class BlueprintMapping(str, Enum):
    """How SE picker saturation/value are normalized for blueprints.

    LINEAR divides by the picker magnitude (``s / 100``), VIA_STANDARD
    applies the same affine shift as the standard form (``(s + 100) / 200``).
    """
    LINEAR = "linear"
    VIA_STANDARD = "via_standard"


BYTE_MAX = 255
HUE_360 = 360
ACHROMATIC_EPSILON = 1e-5

# SE picker scale for saturation and value
SE_SV_MIN = -100.0
SE_SV_MAX = 100.0
SE_SV_SPAN = SE_SV_MAX - SE_SV_MIN

# (low, high) per channel, hue first
channel_ranges = {
    ColorSpace.RGB: ((0, BYTE_MAX), (0, BYTE_MAX), (0, BYTE_MAX)),
    ColorSpace.STANDARD_HSV: ((0.0, HUE_360), (0.0, 1.0), (0.0, 1.0)),
    ColorSpace.SE_HSV: ((0.0, HUE_360), (SE_SV_MIN, SE_SV_MAX), (SE_SV_MIN, SE_SV_MAX)),
    ColorSpace.BLUEPRINT_HSV: ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0)),
}

format_classes = {
    ColorSpace.RGB: int,
    ColorSpace.STANDARD_HSV: float,
    ColorSpace.SE_HSV: float,
    ColorSpace.BLUEPRINT_HSV: float,
}

"""
secolor Color Conversions
=========================

Scalar and vectorized (numpy) conversions between 8-bit RGB and the three
HSV forms used by Space Engineers tooling.

Conversion Functions
-------------------

RGB → HSV:
    rgb_to_hsv(r, g, b)
        8-bit channels to StandardHsv
    rgb_color_to_hsv(rgb)
        Same, from an Rgb value
    np_rgb_to_hsv(r, g, b)
        Vectorized RGB to HSV conversion

HSV → RGB:
    hsv_to_rgb(h, s, v)
        StandardHsv channels to an opaque Rgb
    hsv_to_rgba(h, s, v, alpha)
        Same with an explicit alpha
    hsv_color_to_rgb(hsv, alpha=255)
        Same, from a StandardHsv value
    np_hsv_to_rgb(h, s, v)
        Vectorized HSV to RGB conversion

HSV ranges:
    standard_to_se(hsv) / se_to_standard(hsv)
        [0, 1] ↔ [-100, 100] saturation and value
    se_to_blueprint_linear(hsv) / blueprint_linear_to_se(hsv)
        Blueprint s, v as s / 100
    se_to_blueprint_via_standard(hsv) / blueprint_via_standard_to_se(hsv)
        Blueprint s, v as (s + 100) / 200

High-Level API
-------------
    convert(color, to_space, blueprint_mapping=None)
        Universal converter for the value types
    np_convert(color, from_space, to_space, blueprint_mapping=None)
        Vectorized universal converter

Examples
--------
>>> from secolor.conversions import rgb_to_hsv, standard_to_se
>>> hsv = rgb_to_hsv(255, 0, 0)
>>> standard_to_se(hsv)
SeHsv(h=0.0, s=100.0, v=100.0)
"""

# RGB → HSV conversions
from .to_hsv import (
    rgb_to_hsv,
    rgb_color_to_hsv,
    np_rgb_to_hsv,
)

# HSV → RGB conversions
from .to_rgb import (
    hsv_to_rgb,
    hsv_to_rgba,
    hsv_color_to_rgb,
    np_hsv_to_rgb,
)

# HSV range remapping
from .hsv_ranges import (
    standard_to_se,
    se_to_standard,
    se_to_blueprint_linear,
    blueprint_linear_to_se,
    se_to_blueprint_via_standard,
    blueprint_via_standard_to_se,
    se_to_blueprint,
    blueprint_to_se,
    np_standard_to_se,
    np_se_to_standard,
    np_se_to_blueprint,
    np_blueprint_to_se,
)

# High-level API
from .wrapper import convert, np_convert

# Types and enums
from ..types.format_type import ColorSpace, BlueprintMapping

__all__ = [
    # RGB → HSV
    'rgb_to_hsv',
    'rgb_color_to_hsv',
    'np_rgb_to_hsv',

    # HSV → RGB
    'hsv_to_rgb',
    'hsv_to_rgba',
    'hsv_color_to_rgb',
    'np_hsv_to_rgb',

    # HSV ranges
    'standard_to_se',
    'se_to_standard',
    'se_to_blueprint_linear',
    'blueprint_linear_to_se',
    'se_to_blueprint_via_standard',
    'blueprint_via_standard_to_se',
    'se_to_blueprint',
    'blueprint_to_se',
    'np_standard_to_se',
    'np_se_to_standard',
    'np_se_to_blueprint',
    'np_blueprint_to_se',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'ColorSpace',
    'BlueprintMapping',
]

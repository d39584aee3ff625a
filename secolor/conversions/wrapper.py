import numpy as np
from typing import Callable, Optional

from ..types.color_types import AnyColor, BlueprintHsv, ColorBase, Rgb, SeHsv, StandardHsv
from ..types.format_type import BlueprintMapping, ColorSpace

from .to_hsv import rgb_color_to_hsv, np_rgb_to_hsv
from .to_rgb import hsv_color_to_rgb, np_hsv_to_rgb
from .hsv_ranges import (
    standard_to_se, se_to_standard, se_to_blueprint, blueprint_to_se,
    np_standard_to_se, np_se_to_standard, np_se_to_blueprint, np_blueprint_to_se,
)

ArrayConverter = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]


def _require_mapping(mapping: Optional[BlueprintMapping]) -> BlueprintMapping:
    if mapping is None:
        raise ValueError(
            "Blueprint conversions need an explicit blueprint_mapping "
            "(BlueprintMapping.LINEAR or BlueprintMapping.VIA_STANDARD)"
        )
    return BlueprintMapping(mapping)


def _to_standard(color: ColorBase, mapping: Optional[BlueprintMapping]) -> StandardHsv:
    if isinstance(color, StandardHsv):
        return color
    if isinstance(color, Rgb):
        return rgb_color_to_hsv(color)
    if isinstance(color, SeHsv):
        return se_to_standard(color)
    if isinstance(color, BlueprintHsv):
        return se_to_standard(blueprint_to_se(color, _require_mapping(mapping)))
    raise TypeError(f"Unsupported color type: {type(color).__name__}")


def _from_standard(hsv: StandardHsv, to_space: ColorSpace,
                   mapping: Optional[BlueprintMapping]) -> AnyColor:
    if to_space is ColorSpace.STANDARD_HSV:
        return hsv
    if to_space is ColorSpace.RGB:
        return hsv_color_to_rgb(hsv)
    if to_space is ColorSpace.SE_HSV:
        return standard_to_se(hsv)
    return se_to_blueprint(standard_to_se(hsv), _require_mapping(mapping))


def convert(
    color: AnyColor,
    to_space: ColorSpace,
    *,
    blueprint_mapping: Optional[BlueprintMapping] = None,
) -> AnyColor:
    """
    Convert any color value into another representation.

    Everything is routed through ``StandardHsv``; RGB produced this way is
    opaque.

    Args:
        color: Rgb, StandardHsv, SeHsv or BlueprintHsv
        to_space: Target ColorSpace (or its string value)
        blueprint_mapping: Required when either side is blueprint HSV

    Returns:
        New value of the target type (or ``color`` itself for a same-space call)
    """
    if not isinstance(color, ColorBase):
        raise TypeError(f"Unsupported color type: {type(color).__name__}")
    to_space = ColorSpace(to_space)
    if color.space is to_space:
        return color  # No conversion needed
    standard = _to_standard(color, blueprint_mapping)
    return _from_standard(standard, to_space, blueprint_mapping)


def _array_to_standard(from_space: ColorSpace, mapping: Optional[BlueprintMapping]) -> ArrayConverter:
    if from_space is ColorSpace.RGB:
        return np_rgb_to_hsv
    if from_space is ColorSpace.SE_HSV:
        return np_se_to_standard
    if from_space is ColorSpace.BLUEPRINT_HSV:
        m = _require_mapping(mapping)

        def blueprint_to_standard(h, s, v):
            se = np_blueprint_to_se(h, s, v, m)
            return np_se_to_standard(se[..., 0], se[..., 1], se[..., 2])
        return blueprint_to_standard
    return lambda h, s, v: np.stack([h, s, v], axis=-1).astype(float)


def _array_from_standard(to_space: ColorSpace, mapping: Optional[BlueprintMapping]) -> ArrayConverter:
    if to_space is ColorSpace.RGB:
        return np_hsv_to_rgb
    if to_space is ColorSpace.SE_HSV:
        return np_standard_to_se
    if to_space is ColorSpace.BLUEPRINT_HSV:
        m = _require_mapping(mapping)

        def standard_to_blueprint(h, s, v):
            se = np_standard_to_se(h, s, v)
            return np_se_to_blueprint(se[..., 0], se[..., 1], se[..., 2], m)
        return standard_to_blueprint
    return lambda h, s, v: np.stack([h, s, v], axis=-1).astype(float)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    *,
    blueprint_mapping: Optional[BlueprintMapping] = None,
) -> np.ndarray:
    """
    Vectorized ``convert`` over arrays of shape (..., 3).

    RGB arrays carry no alpha channel here.
    """
    from_space, to_space = ColorSpace(from_space), ColorSpace(to_space)
    if from_space is to_space:
        return color  # No conversion needed
    color = np.asarray(color, dtype=float)
    if color.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {color.shape}")

    standard = _array_to_standard(from_space, blueprint_mapping)(
        color[..., 0], color[..., 1], color[..., 2]
    )
    return _array_from_standard(to_space, blueprint_mapping)(
        standard[..., 0], standard[..., 1], standard[..., 2]
    )

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Rgb, StandardHsv
from ..types.format_type import ACHROMATIC_EPSILON, BYTE_MAX, HUE_360


def rgb_to_hsv(r: int, g: int, b: int) -> StandardHsv:
    """
    Convert 8-bit RGB channels to standard HSV.

    Input:
        r, g, b ∈ [0, 255]

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]

    When several channels share the maximum, red wins over green and green
    over blue when picking the hue formula.
    """
    r, g, b = r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX

    v = max(r, g, b)
    delta = v - min(r, g, b)

    s = 0.0 if v <= ACHROMATIC_EPSILON else delta / v
    if s == 0:
        return StandardHsv(0.0, s, v)

    if r == v:
        h = (g - b) / delta
    elif g == v:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    h *= 60
    if h < 0.0:
        h += HUE_360
    return StandardHsv(h, s, v)


def rgb_color_to_hsv(color: Rgb) -> StandardHsv:
    """``rgb_to_hsv`` for an ``Rgb`` value; alpha is dropped."""
    return rgb_to_hsv(color.r, color.g, color.b)


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized rgb_to_hsv.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float) / BYTE_MAX
    g = np.asarray(g, dtype=float) / BYTE_MAX
    b = np.asarray(b, dtype=float) / BYTE_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    v = np.maximum.reduce([r, g, b])
    delta = v - np.minimum.reduce([r, g, b])

    lit = v > ACHROMATIC_EPSILON
    s = np.where(lit, delta / np.where(lit, v, 1.0), 0.0)

    chromatic = s != 0
    safe_delta = np.where(chromatic, delta, 1.0)
    h = np.select(
        [r == v, g == v],
        [(g - b) / safe_delta, 2 + (b - r) / safe_delta],
        default=4 + (r - g) / safe_delta,
    )
    h = h * 60
    h = np.where(h < 0.0, h + HUE_360, h)
    h = np.where(chromatic, h, 0.0)

    return np.stack([h, s, v], axis=-1)

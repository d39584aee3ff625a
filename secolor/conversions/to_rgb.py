import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Rgb, StandardHsv
from ..types.format_type import BYTE_MAX, HUE_360


def _hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    if s == 0:
        return v, v, v

    sector = 0.0 if h == HUE_360 else h / 60
    if math.isfinite(sector):
        i = math.floor(sector)
        f = sector - i
    else:
        # NaN or infinite hue has no sector; take the fallback with f = 0
        i, f = -1, 0.0

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    # sector 5, and anything outside 0-5
    return v, p, q


def _unit_to_byte(x: float) -> int:
    """Scale to 0-255 and truncate; NaN becomes 0 and infinities saturate at 0 or 255."""
    scaled = x * BYTE_MAX
    if math.isnan(scaled):
        return 0
    if math.isinf(scaled):
        return BYTE_MAX if scaled > 0 else 0
    return int(scaled)


def hsv_to_rgba(h: float, s: float, v: float, alpha: int) -> Rgb:
    """
    Convert standard HSV to an 8-bit color with the given alpha.

    Input:
        h ∈ [0, 360]  (360 is treated as 0)
        s ∈ [0, 1]
        v ∈ [0, 1]

    Channels are scaled by 255 and truncated, so a round trip through
    rgb_to_hsv can land one step below the starting channel.
    """
    r, g, b = _hsv_to_unit_rgb(h, s, v)
    return Rgb(_unit_to_byte(r), _unit_to_byte(g), _unit_to_byte(b), alpha)


def hsv_to_rgb(h: float, s: float, v: float) -> Rgb:
    """Opaque variant of ``hsv_to_rgba``."""
    return hsv_to_rgba(h, s, v, BYTE_MAX)


def hsv_color_to_rgb(color: StandardHsv, alpha: int = BYTE_MAX) -> Rgb:
    return hsv_to_rgba(color.h, color.s, color.v, alpha)


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized hsv_to_rgb.

    Args:
        h: array-like or scalar, [0,360] hue
        s: array-like or scalar, [0,1] saturation
        v: array-like or scalar, [0,1] value

    Returns:
        rgb: integer array of shape (..., 3), channels in [0, 255]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    sector = np.where(h == HUE_360, 0.0, h / 60)
    finite = np.isfinite(sector)
    safe = np.where(finite, sector, 0.0)
    i = np.where(finite, np.floor(safe), -1.0)
    f = safe - np.floor(safe)

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    sectors = [i == 0, i == 1, i == 2, i == 3, i == 4]
    r = np.select(sectors, [v, q, p, p, t], default=v)
    g = np.select(sectors, [t, v, v, q, p], default=p)
    b = np.select(sectors, [p, p, t, v, v], default=q)

    gray = s == 0
    rgb = np.stack([
        np.where(gray, v, r),
        np.where(gray, v, g),
        np.where(gray, v, b),
    ], axis=-1)
    # astype truncates toward zero, matching int()
    scaled = rgb * BYTE_MAX
    scaled = np.where(np.isnan(scaled), 0.0, scaled)
    scaled = np.where(np.isposinf(scaled), BYTE_MAX, np.where(np.isneginf(scaled), 0.0, scaled))
    return scaled.astype(int)

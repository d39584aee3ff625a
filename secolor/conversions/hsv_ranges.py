"""
Affine remapping between the three HSV forms.

StandardHsv   h ∈ [0, 360)   s, v ∈ [0, 1]
SeHsv         h ∈ [0, 360)   s, v ∈ [-100, 100]
BlueprintHsv  h, s, v ∈ [0, 1]

Blueprint saturation/value come in two flavours, see ``BlueprintMapping``.
They disagree for every s/v except 100, so callers pick one explicitly.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import BlueprintHsv, SeHsv, StandardHsv
from ..types.format_type import BlueprintMapping, HUE_360, SE_SV_MAX, SE_SV_SPAN


def standard_to_se(hsv: StandardHsv) -> SeHsv:
    """Map s, v from [0, 1] onto the [-100, 100] picker scale."""
    return SeHsv(hsv.h, hsv.s * SE_SV_SPAN - SE_SV_MAX, hsv.v * SE_SV_SPAN - SE_SV_MAX)


def se_to_standard(hsv: SeHsv) -> StandardHsv:
    """Inverse of standard_to_se."""
    return StandardHsv(hsv.h, (hsv.s + SE_SV_MAX) / SE_SV_SPAN, (hsv.v + SE_SV_MAX) / SE_SV_SPAN)


def se_to_blueprint_linear(hsv: SeHsv) -> BlueprintHsv:
    return BlueprintHsv(hsv.h / HUE_360, hsv.s / SE_SV_MAX, hsv.v / SE_SV_MAX)


def blueprint_linear_to_se(hsv: BlueprintHsv) -> SeHsv:
    return SeHsv(hsv.h * HUE_360, hsv.s * SE_SV_MAX, hsv.v * SE_SV_MAX)


def se_to_blueprint_via_standard(hsv: SeHsv) -> BlueprintHsv:
    standard = se_to_standard(hsv)
    return BlueprintHsv(standard.h / HUE_360, standard.s, standard.v)


def blueprint_via_standard_to_se(hsv: BlueprintHsv) -> SeHsv:
    return standard_to_se(StandardHsv(hsv.h * HUE_360, hsv.s, hsv.v))


def se_to_blueprint(hsv: SeHsv, mapping: BlueprintMapping) -> BlueprintHsv:
    if BlueprintMapping(mapping) is BlueprintMapping.LINEAR:
        return se_to_blueprint_linear(hsv)
    return se_to_blueprint_via_standard(hsv)


def blueprint_to_se(hsv: BlueprintHsv, mapping: BlueprintMapping) -> SeHsv:
    if BlueprintMapping(mapping) is BlueprintMapping.LINEAR:
        return blueprint_linear_to_se(hsv)
    return blueprint_via_standard_to_se(hsv)


# ---------------------------------------------------------------------------
# Vectorized versions, each returning an array of shape (..., 3)
# ---------------------------------------------------------------------------

def _stack(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    out_shape = np.broadcast(h, s, v).shape
    return np.stack([np.broadcast_to(c, out_shape) for c in (h, s, v)], axis=-1)


def np_standard_to_se(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    hsv = _stack(h, s, v)
    hsv[..., 1:] = hsv[..., 1:] * SE_SV_SPAN - SE_SV_MAX
    return hsv


def np_se_to_standard(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    hsv = _stack(h, s, v)
    hsv[..., 1:] = (hsv[..., 1:] + SE_SV_MAX) / SE_SV_SPAN
    return hsv


def np_se_to_blueprint(h: NDArray, s: NDArray, v: NDArray, mapping: BlueprintMapping) -> NDArray:
    hsv = _stack(h, s, v)
    hsv[..., 0] /= HUE_360
    if BlueprintMapping(mapping) is BlueprintMapping.LINEAR:
        hsv[..., 1:] /= SE_SV_MAX
    else:
        hsv[..., 1:] = (hsv[..., 1:] + SE_SV_MAX) / SE_SV_SPAN
    return hsv


def np_blueprint_to_se(h: NDArray, s: NDArray, v: NDArray, mapping: BlueprintMapping) -> NDArray:
    hsv = _stack(h, s, v)
    hsv[..., 0] *= HUE_360
    if BlueprintMapping(mapping) is BlueprintMapping.LINEAR:
        hsv[..., 1:] *= SE_SV_MAX
    else:
        hsv[..., 1:] = hsv[..., 1:] * SE_SV_SPAN - SE_SV_MAX
    return hsv

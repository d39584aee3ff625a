import numpy as np
import pytest

from secolor.conversions.to_rgb import hsv_to_rgb, hsv_to_rgba, hsv_color_to_rgb, np_hsv_to_rgb
from secolor.types.color_types import Rgb, StandardHsv
from tests.samples import samples_rgb_hsv


def test_hsv_to_rgb():
    for (r, g, b), (h, s, v) in samples_rgb_hsv.items():
        out = hsv_to_rgb(h, s, v)

        assert abs(out.r - r) <= 1
        assert abs(out.g - g) <= 1
        assert abs(out.b - b) <= 1
        assert out.a == 255


def test_sectors():
    assert hsv_to_rgb(0, 1, 1) == Rgb(255, 0, 0)
    assert hsv_to_rgb(120, 1, 1) == Rgb(0, 255, 0)
    assert hsv_to_rgb(240, 1, 1) == Rgb(0, 0, 255)
    assert hsv_to_rgb(60, 1, 1) == Rgb(255, 255, 0)
    assert hsv_to_rgb(180, 1, 1) == Rgb(0, 255, 255)
    assert hsv_to_rgb(300, 1, 1) == Rgb(255, 0, 255)


def test_hue_360_is_hue_0():
    assert hsv_to_rgb(360, 1, 1) == hsv_to_rgb(0, 1, 1)
    assert hsv_to_rgb(360, 0.5, 0.8) == hsv_to_rgb(0, 0.5, 0.8)


def test_achromatic_ignores_hue():
    for h in (0, 45, 200, 359.9, 360, 1000):
        assert hsv_to_rgb(h, 0, 0.5) == Rgb(127, 127, 127)
        assert hsv_to_rgb(h, 0, 1) == Rgb(255, 255, 255)
        assert hsv_to_rgb(h, 0, 0) == Rgb(0, 0, 0)


def test_out_of_range_sector_falls_back_to_sector_5():
    # h=400 -> sector 6, h=-30 -> sector -1; both use (v, p, q)
    v, s = 1.0, 1.0
    for h in (400.0, -30.0):
        sector = h / 60
        f = sector - np.floor(sector)
        p = v * (1 - s)
        q = v * (1 - s * f)
        assert hsv_to_rgb(h, s, v) == Rgb(int(v * 255), int(p * 255), int(q * 255))


def test_channels_truncate():
    # 0.999 * 255 = 254.745 -> 254
    assert hsv_to_rgb(0, 0, 0.999) == Rgb(254, 254, 254)


def test_hsv_to_rgba_keeps_alpha():
    assert hsv_to_rgba(0, 1, 1, 128) == Rgb(255, 0, 0, 128)
    assert hsv_color_to_rgb(StandardHsv(120, 1, 1), alpha=7) == Rgb(0, 255, 0, 7)
    assert hsv_color_to_rgb(StandardHsv(120, 1, 1)).a == 255


def test_hsv_to_rgb_numpy_matches_scalar():
    the_matrix = np.array(list(samples_rgb_hsv.values()))
    rgb = np_hsv_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert rgb.dtype.kind == "i"
    for (h, s, v), row in zip(the_matrix, rgb):
        assert tuple(row) == hsv_to_rgb(h, s, v).rgb


def test_hsv_to_rgb_numpy_fallbacks():
    h = np.array([360.0, 400.0, -30.0, 90.0])
    s = np.array([1.0, 1.0, 1.0, 0.0])
    v = np.array([1.0, 1.0, 1.0, 0.5])
    rgb = np_hsv_to_rgb(h, s, v)
    for (hh, ss, vv), row in zip(zip(h, s, v), rgb):
        assert tuple(row) == hsv_to_rgb(hh, ss, vv).rgb


def test_hsv_to_rgb_numpy_broadcasts():
    rgb = np_hsv_to_rgb(np.array([0.0, 120.0, 240.0]), 1.0, 1.0)
    assert rgb.tolist() == [[255, 0, 0], [0, 255, 0], [0, 0, 255]]


def test_non_finite_input_does_not_raise():
    nan, inf = float("nan"), float("inf")
    # a hue with no sector takes the (v, p, q) fallback with f = 0
    assert hsv_to_rgb(nan, 1, 1) == Rgb(255, 0, 255)
    assert hsv_to_rgb(inf, 1, 1) == Rgb(255, 0, 255)
    assert hsv_to_rgb(-inf, 1, 1) == Rgb(255, 0, 255)
    # NaN channels become 0, infinite channels saturate
    assert hsv_to_rgb(0, 0, nan) == Rgb(0, 0, 0)
    assert hsv_to_rgb(0, 0.5, inf) == Rgb(255, 255, 255)
    assert hsv_to_rgb(0, 0, -inf) == Rgb(0, 0, 0)


def test_non_finite_input_numpy_matches_scalar():
    nan, inf = float("nan"), float("inf")
    cases = [(nan, 1, 1), (inf, 1, 1), (-inf, 1, 1), (0, 0, nan), (0, 0.5, inf), (0, 0, -inf)]
    h, s, v = (np.array(c, dtype=float) for c in zip(*cases))
    rgb = np_hsv_to_rgb(h, s, v)
    for case, row in zip(cases, rgb):
        assert tuple(row) == hsv_to_rgb(*case).rgb

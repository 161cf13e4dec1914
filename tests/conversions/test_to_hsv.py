import numpy as np

from chromahub.consts import EPSILON
from chromahub.conversions.hexagonal import np_rgb_to_hsv, rgb_to_hsv
from chromahub.samples.colors import samples_rgb_hsv


def test_unit_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = rgb_to_hsv(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(v_out - v_exp) < 1e-9


def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    result = np_rgb_to_hsv(the_matrix)
    assert np.allclose(result, expected, atol=1e-9)


def test_black_has_zero_saturation():
    assert rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    out = np_rgb_to_hsv(np.zeros((4, 3)))
    assert np.all(out == 0.0)


def test_gray_is_achromatic():
    h, s, v = rgb_to_hsv(0.3, 0.3, 0.3)
    assert (h, s, v) == (0.0, 0.0, 0.3)


def test_near_gray_counts_as_gray():
    noisy = (0.7, 0.7 - EPSILON, 0.7 + 2 * EPSILON)
    h, s, v = rgb_to_hsv(*noisy)
    assert (h, s) == (0.0, 0.0)
    assert abs(v - 0.7) < 1e-12
    out = np_rgb_to_hsv(np.array([noisy]))
    assert np.array_equal(out[0, :2], [0.0, 0.0])

"""Tests for cvdlab.core.simulation — deficiency transforms."""

import pytest

from cvdlab.core import config as c
from cvdlab.core.simulation import (
    InvalidDeficiencyError,
    dichromatic,
    get_transform,
    monochromatic,
    normalize_deficiency,
    simulate_color,
)


def _close(actual, expected, tol):
    return all(abs(a - e) <= tol for a, e in zip(actual, expected))


class TestDichromatic:
    def test_red_protanopia(self):
        assert _close(simulate_color((255, 0, 0), "protanopia"), (43, 43, 0), 2)

    def test_black_stays_black(self):
        for key in c.DICHROMATIC_KEYS:
            assert simulate_color((0, 0, 0), key) == (0, 0, 0)

    def test_white_stays_near_white(self):
        for key in c.DICHROMATIC_KEYS:
            assert all(ch >= 252 for ch in simulate_color((255, 255, 255), key))

    def test_output_in_range(self):
        for key in c.DICHROMATIC_KEYS:
            for rgb in [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0), (17, 99, 231)]:
                out = simulate_color(rgb, key)
                assert all(isinstance(ch, int) and 0 <= ch <= 255 for ch in out)

    def test_input_is_sanitized_first(self):
        matrix = c.CVD_LMS_MATRICES["deuteranopia"]
        assert dichromatic((400, -3, 0), matrix) == dichromatic((255, 0, 0), matrix)

    def test_protanopia_collapses_red_green_axis(self):
        red = simulate_color((255, 0, 0), "protanopia")
        assert abs(red[0] - red[1]) <= 2


class TestMonochromatic:
    weights = c.CVD_RGB_WEIGHTS["achromatopsia"]

    def test_green_achromatopsia(self):
        assert _close(simulate_color((0, 255, 0), "achromatopsia"), (182, 182, 182), 1)

    @pytest.mark.parametrize("rgb", [
        (0, 0, 0), (255, 255, 255), (255, 0, 0), (3, 141, 77), (250, 128, 114),
    ])
    def test_channels_equal(self, rgb):
        r, g, b = monochromatic(rgb, self.weights)
        assert r == g == b

    def test_out_of_range_input(self):
        assert monochromatic((300, -20, 0), self.weights) == (54, 54, 54)


class TestDeficiencySelection:
    def test_all_keys_resolve(self):
        for key in c.SIMULATE_KEYS:
            assert callable(get_transform(key))

    def test_normalizes_case_and_whitespace(self):
        assert normalize_deficiency("  Protanopia ") == "protanopia"

    def test_unknown_raises(self):
        with pytest.raises(InvalidDeficiencyError):
            simulate_color((10, 20, 30), "sepia")

    def test_none_raises(self):
        with pytest.raises(InvalidDeficiencyError):
            get_transform(None)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            get_transform("")

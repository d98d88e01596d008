"""Tests for cvdlab.shared.parser — css color and gradient text."""

import pytest

from cvdlab.core.types import ColorStop, Gradient
from cvdlab.shared.parser import (
    is_direction,
    parse_color,
    parse_gradient,
    parse_stop,
    split_top_level,
)


class TestParseColor:
    def test_rgb(self):
        assert parse_color("rgb(255, 0, 0)") == (255, 0, 0)

    def test_rgba_discards_alpha(self):
        assert parse_color("rgba(10, 20, 30, 0.5)") == (10, 20, 30)

    def test_no_spaces(self):
        assert parse_color("rgb(1,2,3)") == (1, 2, 3)

    def test_black_is_a_color(self):
        assert parse_color("rgb(0, 0, 0)") == (0, 0, 0)

    def test_channels_clamped(self):
        assert parse_color("rgb(300, 0, 12)") == (255, 0, 12)

    def test_color_inside_box_shadow(self):
        assert parse_color("rgb(1, 2, 3) 0px 2px 4px 0px") == (1, 2, 3)

    @pytest.mark.parametrize("text", [
        None,
        "",
        "transparent",
        "TRANSPARENT",
        "red",
        "#ff0000",
        "rgba(0, 0, 0, 0)",
        "rgba(12, 40, 99, 0%)",
        "rgb(1.5, 2, 3)",
        "none",
    ])
    def test_absent_or_unparseable(self, text):
        assert parse_color(text) is None


class TestSplitTopLevel:
    def test_ignores_nested_commas(self):
        parts = split_top_level("to right, rgb(1, 2, 3) 10%, rgba(4, 5, 6, 0.5)")
        assert parts == ["to right", "rgb(1, 2, 3) 10%", "rgba(4, 5, 6, 0.5)"]

    def test_single_part(self):
        assert split_top_level("rgb(1, 2, 3)") == ["rgb(1, 2, 3)"]


class TestParseStop:
    def test_percentage(self):
        assert parse_stop("rgb(1, 2, 3) 50%") == ColorStop("rgb(1, 2, 3)", "50%")

    def test_pixels(self):
        assert parse_stop("rgb(1, 2, 3) 12px") == ColorStop("rgb(1, 2, 3)", "12px")

    def test_decimal_percentage(self):
        assert parse_stop("red 33.5%") == ColorStop("red", "33.5%")

    def test_no_position(self):
        assert parse_stop(" rgb(1, 2, 3) ") == ColorStop("rgb(1, 2, 3)", None)

    def test_other_unit_is_not_a_position(self):
        assert parse_stop("red 2em") == ColorStop("red 2em", None)


class TestParseGradient:
    def test_direction_and_stops(self):
        g = parse_gradient("linear-gradient(to right, rgb(255, 0, 0), rgb(0, 0, 255) 100%)")
        assert g == Gradient(
            direction="to right",
            stops=(ColorStop("rgb(255, 0, 0)"), ColorStop("rgb(0, 0, 255)", "100%")),
        )

    def test_angle_direction(self):
        g = parse_gradient("linear-gradient(45deg, red, blue)")
        assert g.direction == "45deg"
        assert [s.color for s in g.stops] == ["red", "blue"]

    def test_missing_direction(self):
        g = parse_gradient("linear-gradient(rgb(255, 0, 0), rgb(0, 0, 255))")
        assert g.direction is None
        assert len(g.stops) == 2

    def test_surrounding_whitespace(self):
        assert parse_gradient("  linear-gradient(90deg, red, blue)  ") is not None

    @pytest.mark.parametrize("text", [
        None,
        "",
        "none",
        "url(image.png)",
        "linear-gradient(to right, red",
        "linear-gradient(to right)",
        "linear-gradient()",
        "linear-gradient(to right, , red)",
        "repeating-linear-gradient(red, blue)",
        "linear-gradient(red, blue), url(a.png)",
    ])
    def test_rejected(self, text):
        assert parse_gradient(text) is None


class TestIsDirection:
    @pytest.mark.parametrize("token", ["to right", "to top left", "45deg", "-0.25turn", "1.2rad", "100grad"])
    def test_directions(self, token):
        assert is_direction(token)

    @pytest.mark.parametrize("token", ["red", "rgb(1, 2, 3)", "45", "tomato"])
    def test_not_directions(self, token):
        assert not is_direction(token)

import numpy as np
import pytest

from chromatheme.gradients import bezier_weights, gradstop, parse_color, format_color


def test_two_anchors_linear():
    assert gradstop(3, "hex", ["#000000", "#FFFFFF"]) == ["#000000", "#808080", "#FFFFFF"]


def test_stop_count_and_endpoints_hex():
    stops = gradstop(8, "hex", ["#212121", "#336699", "#FFFFFF"])
    assert len(stops) == 8
    assert stops[0] == "#212121"
    assert stops[-1] == "#FFFFFF"


def test_quadratic_curve_values():
    # (1-t)^2 * 33 + 2t(1-t) * 255 + t^2 * 255 at t = 1/7 and 6/7
    stops = gradstop(8, "hex", ["#212121", "#FFFFFF", "#FFFFFF"])
    assert stops[1] == "#5C5C5C"
    assert stops[6] == "#FAFAFA"


def test_rgb_format():
    stops = gradstop(8, "rgb", ["rgb(92, 92, 92)", "rgb(255,255,255)", "rgb(250, 250, 250)"])
    assert stops[0] == "rgb(92, 92, 92)"
    assert stops[1] == "rgb(135, 135, 135)"
    assert stops[-1] == "rgb(250, 250, 250)"


def test_four_anchors_cubic():
    stops = gradstop(4, "rgb", ["rgb(0, 0, 0)", "rgb(0, 0, 0)", "rgb(255, 255, 255)", "rgb(255, 255, 255)"])
    assert stops[0] == "rgb(0, 0, 0)"
    assert stops[-1] == "rgb(255, 255, 255)"
    assert len(stops) == 4


def test_fewer_stops_than_anchors():
    with pytest.raises(ValueError):
        gradstop(2, "hex", ["#000000", "#808080", "#FFFFFF"])


def test_single_anchor():
    with pytest.raises(ValueError):
        gradstop(8, "hex", ["#000000"])


def test_anchor_format_mismatch():
    with pytest.raises(ValueError):
        gradstop(8, "rgb", ["#000000", "rgb(0, 0, 0)"])
    with pytest.raises(ValueError):
        gradstop(8, "hsl", ["hsl(0, 0, 0)", "hsl(0, 0, 100)"])


def test_bezier_weights_partition_unity():
    u = np.linspace(0.0, 1.0, 11)
    for degree in (1, 2, 3):
        weights = bezier_weights(u, degree)
        assert weights.shape == (11, degree + 1)
        assert np.allclose(weights.sum(axis=1), 1.0)


def test_parse_and_format():
    assert np.array_equal(parse_color("#336699", "hex"), [51.0, 102.0, 153.0])
    assert np.array_equal(parse_color("rgb(51, 102, 153)", "rgb"), [51.0, 102.0, 153.0])
    assert format_color(np.array([51.4, 101.5, 300.0]), "rgb") == "rgb(51, 102, 255)"
    assert format_color(np.array([51.0, 102.0, 153.0]), "hex") == "#336699"


def test_parse_malformed_hex_anchor_raises():
    with pytest.raises(ValueError):
        parse_color("#GGGGGG", "hex")
    with pytest.raises(ValueError):
        gradstop(3, "hex", ["#33669", "#FFFFFF"])

import math

import pytest

from satty.geometry import (
    Angle,
    Vec2D,
    rect_ensure_in_bounds,
    rect_ensure_positive_size,
    rect_round,
)


def test_angle_from_degrees_matches_radians():
    assert Angle.from_degrees(180.0).radians == pytest.approx(math.pi)
    assert Angle.from_radians(1.25).radians == 1.25


def test_angle_trigonometry_and_scaling():
    angle = Angle.from_degrees(90.0)
    assert angle.sin() == pytest.approx(1.0)
    assert angle.cos() == pytest.approx(0.0, abs=1e-12)
    assert (angle * 2.0).radians == pytest.approx(math.pi)


def test_vector_arithmetic():
    a = Vec2D(1.0, 2.0)
    b = Vec2D(3.0, 5.0)
    assert a + b == Vec2D(4.0, 7.0)
    assert (a + b) - b == a
    assert a * 2.0 == Vec2D(2.0, 4.0)
    c = a
    c += b
    assert c == a + b


def test_zero_and_is_zero():
    assert Vec2D.zero() == Vec2D(0.0, 0.0)
    assert Vec2D.zero().is_zero()
    assert not Vec2D(0.0, 0.5).is_zero()


def test_norm_and_norm2():
    v = Vec2D(3.0, 4.0)
    assert v.norm2() == pytest.approx(v.norm() ** 2)
    assert v.norm() == pytest.approx(5.0)


def test_angle_and_from_angle_round_trip():
    for degrees in (0.0, 30.0, 90.0, 135.0, -60.0):
        angle = Angle.from_degrees(degrees)
        v = Vec2D.from_angle(angle)
        assert v.norm() == pytest.approx(1.0)
        assert v.angle().radians == pytest.approx(angle.radians)


def test_positive_y_axis_angle():
    assert Vec2D(0.0, 1.0).angle().radians == pytest.approx(math.pi / 2)


@pytest.mark.parametrize(
    "vector",
    [Vec2D(10.0, 1.0), Vec2D(-7.0, 3.0), Vec2D(2.0, -9.0), Vec2D(-4.0, -4.5), Vec2D(0.0, 6.0)],
)
def test_snapped_vector_keeps_length_quadrant_and_snaps_angle(vector):
    snapped = vector.snapped_vector_15deg()
    assert snapped.norm() == pytest.approx(vector.norm(), rel=1e-5)
    assert (snapped.x < 0) == (vector.x < 0)
    assert (snapped.y < 0) == (vector.y < 0)
    steps = math.degrees(snapped.angle().radians) / 15.0
    assert steps == pytest.approx(round(steps), abs=1e-3)


def test_snapped_vector_near_axis_lies_on_axis():
    snapped = Vec2D(10.0, 1.0).snapped_vector_15deg()
    assert snapped.y == pytest.approx(0.0, abs=1e-5)
    assert snapped.x == pytest.approx(Vec2D(10.0, 1.0).norm())


def test_display_format():
    assert str(Vec2D(1.0, 2.5)) == "(1,2.5)"


def test_rect_ensure_positive_size_keeps_corners():
    pos, size = rect_ensure_positive_size(Vec2D(10.0, 10.0), Vec2D(-4.0, -6.0))
    assert size == Vec2D(4.0, 6.0)
    corners = {(pos.x, pos.y), (pos.x + size.x, pos.y + size.y)}
    assert (10.0, 10.0) in corners


def test_rect_ensure_positive_size_untouched_when_positive():
    rect = rect_ensure_positive_size(Vec2D(1.0, 2.0), Vec2D(3.0, 4.0))
    assert rect == (Vec2D(1.0, 2.0), Vec2D(3.0, 4.0))


def test_rect_in_bounds_unchanged_when_inside():
    rect = (Vec2D(1.0, 1.0), Vec2D(2.0, 2.0))
    bounds = (Vec2D(0.0, 0.0), Vec2D(10.0, 10.0))
    assert rect_ensure_in_bounds(rect, bounds) == rect


def test_rect_in_bounds_clips_far_edges():
    pos, size = rect_ensure_in_bounds(
        (Vec2D(5.0, 5.0), Vec2D(20.0, 20.0)), (Vec2D(0.0, 0.0), Vec2D(10.0, 10.0))
    )
    assert pos == Vec2D(5.0, 5.0)
    assert size == Vec2D(5.0, 5.0)


def test_rect_in_bounds_moves_position_but_keeps_size():
    pos, size = rect_ensure_in_bounds(
        (Vec2D(-3.0, 2.0), Vec2D(4.0, 4.0)), (Vec2D(0.0, 0.0), Vec2D(10.0, 10.0))
    )
    assert pos == Vec2D(0.0, 2.0)
    assert size == Vec2D(4.0, 4.0)


def test_rect_round_halves_away_from_zero():
    pos, size = rect_round((Vec2D(1.5, -0.5), Vec2D(2.4, 2.5)))
    assert pos == Vec2D(2.0, -1.0)
    assert size == Vec2D(2.0, 3.0)
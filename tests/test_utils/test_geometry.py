"""Tests for polygon measurement and per-lap contraction."""

import math

import pytest

from polyspiral.engine.errors import DegenerateGeometry
from polyspiral.utils.geometry import central_angle, contraction, measure


def test_central_angle():
    assert central_angle(4) == pytest.approx(math.pi / 2)
    assert central_angle(6) == pytest.approx(math.pi / 3)


def test_measure_triangle():
    # Odd: side equals the box edge, height is the altitude
    side, height = measure(100, 3, central_angle(3))
    assert side == pytest.approx(100)
    assert height == pytest.approx(100 * math.sqrt(3) / 2)


def test_measure_square():
    side, height = measure(100, 4, central_angle(4))
    assert side == pytest.approx(100)
    assert height == pytest.approx(100)


def test_measure_pentagon():
    size = 200
    r = size / (2 * math.sin(0.4 * math.pi))
    side, height = measure(size, 5, central_angle(5))
    assert side == pytest.approx(2 * r * math.sin(math.pi / 5))
    assert height == pytest.approx(r + r * math.cos(math.pi / 5))
    assert height < size


def test_measure_hexagon_has_vertex_facing_side():
    side, height = measure(280, 6, central_angle(6))
    assert side == pytest.approx(140)
    assert height == pytest.approx(280 * math.cos(math.pi / 6))


def test_measure_octagon_flat_to_flat():
    side, height = measure(100, 8, central_angle(8))
    assert side == pytest.approx(100 * math.tan(math.pi / 8))
    assert height == pytest.approx(100)


def test_measure_is_deterministic():
    assert measure(123.4, 7, central_angle(7)) == measure(123.4, 7, central_angle(7))


def test_contraction_square():
    inset, outset = contraction(10, central_angle(4))
    assert inset == pytest.approx(10)
    assert outset == pytest.approx(0, abs=1e-6)


def test_contraction_triangle_outset_positive():
    inset, outset = contraction(10, central_angle(3))
    assert inset == pytest.approx(20 / math.sqrt(3))
    assert outset == pytest.approx(10 / math.sqrt(3))
    assert outset > 0


@pytest.mark.parametrize("sides", [5, 6, 8, 12])
def test_contraction_outset_negative_from_five_sides(sides):
    inset, outset = contraction(10, central_angle(sides))
    assert inset > 10
    assert outset < 0
    assert abs(outset) < inset


def test_contraction_hexagon_values():
    inset, outset = contraction(10, central_angle(6))
    assert inset == pytest.approx(20 / math.sqrt(3))
    assert outset == pytest.approx(-10 / math.sqrt(3))


def test_contraction_two_sides_fails_fast():
    with pytest.raises(DegenerateGeometry):
        contraction(10, central_angle(2))

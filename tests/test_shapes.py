import math

import pytest

from monotone_triang import shapes
from monotone_triang.geometry import polygon_area
from monotone_triang.validate import is_counter_clockwise, is_simple

FIXED = [
    shapes.unit_square,
    shapes.square_with_midpoints,
    shapes.l_shape,
    shapes.arrow_shape,
    shapes.notched_square,
    shapes.notched_polygon,
    shapes.w_polygon,
]


@pytest.mark.parametrize("factory", FIXED)
def test_fixed_shapes(factory):
    points = factory()
    assert is_counter_clockwise(points)
    assert is_simple(points)


@pytest.mark.parametrize("name", sorted(shapes.SHAPES))
@pytest.mark.parametrize("n", [8, 40])
def test_families(name, n):
    points = shapes.make_shape(name, n)
    assert len(points) >= 3
    assert is_counter_clockwise(points)
    assert is_simple(points)


def test_families_are_deterministic():
    assert shapes.make_shape("random", 50) == shapes.make_shape("random", 50)


def test_rotation_keeps_area():
    points = shapes.comb_polygon(3)
    rotated = shapes.rotate_points(points, shapes.GENERAL_POSITION_ANGLE)
    assert polygon_area(rotated) == pytest.approx(polygon_area(points))
    assert len({y for _, y in rotated}) == len(rotated)


def test_unknown_shape():
    with pytest.raises(ValueError):
        shapes.make_shape("spiral", 10)


def test_rotation_about_center():
    square = shapes.unit_square()
    turned = shapes.rotate_points(square, math.pi / 2, center=(0.5, 0.5))
    # a quarter turn about its centre maps each corner onto the next
    for got, want in zip(turned, square[1:] + square[:1]):
        assert got == pytest.approx(want, abs=1e-12)


@pytest.mark.parametrize("n", [3, 7, 16])
def test_convex_polygon_is_regular(n):
    points = shapes.convex_polygon(n, radius=2.0)
    assert all(math.hypot(x, y) == pytest.approx(2.0) for x, y in points)
    assert polygon_area(points) == pytest.approx(0.5 * n * 4.0 * math.sin(2 * math.pi / n))


def test_random_polygon_radii():
    points = shapes.random_polygon(60, radius=10.0, seed=7)
    assert len(points) == 60
    assert all(4.0 <= math.hypot(x, y) <= 10.0 for x, y in points)
    assert shapes.random_polygon(60, radius=10.0, seed=8) != points


def test_star_alternates_tips_and_notches():
    points = shapes.star_polygon(5, outer=10.0, inner=3.0)
    radii = [math.hypot(x, y) for x, y in points]
    assert radii == pytest.approx([10.0, 3.0] * 5)

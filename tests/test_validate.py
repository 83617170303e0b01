from monotone_triang.shapes import l_shape, notched_square, square_with_midpoints, unit_square
from monotone_triang.validate import (
    crossing_edges,
    is_counter_clockwise,
    is_simple,
    is_y_monotone,
    verify_triangulation,
)

BOWTIE = [(0, 0), (1, 1), (1, 0), (0, 1)]
# edge (1,1)->(3,5) runs back over (2,3)->(1,1)
SPIKE = [(3, 5), (1, 6), (0, 1), (5, 0), (4, 1), (2, 3), (1, 1)]
# vertex (2,0) sits on the bottom edge
TOUCH = [(0, 0), (4, 0), (4, 4), (2, 0), (0, 4)]


def test_winding():
    assert is_counter_clockwise(unit_square())
    assert not is_counter_clockwise(unit_square()[::-1])


def test_is_simple():
    assert is_simple(unit_square())
    assert is_simple(notched_square())
    assert not is_simple(BOWTIE)


def test_is_simple_rejects_degenerate_contact():
    assert not is_simple(SPIKE)
    assert not is_simple(TOUCH)
    # repeated point
    assert not is_simple([(0, 0), (1, 0), (1, 0), (1, 1)])
    # straight collinear run is fine
    assert is_simple(square_with_midpoints())
    assert not is_simple([(0, 0), (1, 0)])


def test_is_y_monotone():
    assert is_y_monotone(unit_square())
    assert is_y_monotone([(0, 0), (2, 1), (1, 2), (2, 3), (0, 4)])
    # the notch bottom has both neighbours above it
    assert not is_y_monotone(notched_square())


def test_verify_triangulation_ok():
    ok, msg = verify_triangulation(unit_square(), [(0, 1, 2), (0, 2, 3)])
    assert ok
    assert msg == "OK"


def test_verify_triangulation_failures():
    square = unit_square()

    ok, msg = verify_triangulation(square, [(0, 1, 2)])
    assert not ok and msg.startswith("Wrong count")

    ok, msg = verify_triangulation(square, [(0, 1, 2), (0, 2, 7)])
    assert not ok and msg.startswith("Invalid vertex index")

    ok, msg = verify_triangulation(square, [(0, 1, 2), (0, 3, 2)])
    assert not ok and "winding" in msg

    ok, msg = verify_triangulation(l_shape(), [(0, 1, 2)] * 4)
    assert not ok and msg.startswith("Area mismatch")


def test_crossing_edges():
    assert crossing_edges(unit_square(), [(0, 1, 2), (0, 2, 3)]) == []
    assert crossing_edges(unit_square(), [(0, 1, 2), (1, 2, 3)]) == [((0, 2), (1, 3))]

"""
Geometric predicates shared by the mesh, the decomposer and the triangulator.

All stages must agree on these: the decomposer's visibility and side tests
and the triangulator's chain tests call the same functions, with the same
strict / non-strict comparisons, so their answers never contradict each
other on borderline input.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

Point = Tuple[float, float]
Triangle = Tuple[int, int, int]


def cross(o: Point, a: Point, b: Point) -> float:
    """Cross product of vectors OA and OB."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def signed_area(a: Point, b: Point, c: Point) -> float:
    """Signed area of triangle abc, positive when counter-clockwise."""
    return 0.5 * cross(a, b, c)


def triangle_area(a: Point, b: Point, c: Point) -> float:
    return abs(signed_area(a, b, c))


def polygon_area(points: Sequence[Point]) -> float:
    """Signed shoelace area, positive for a counter-clockwise polygon."""
    n = len(points)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1] - points[j][0] * points[i][1]
    return area / 2


def sweep_key(p: Point) -> Tuple[float, float]:
    """Top-to-bottom order: y descending, ties broken by x ascending."""
    return (-p[1], p[0])


def comes_before(p: Point, q: Point) -> bool:
    """True if p is swept before q."""
    return sweep_key(p) < sweep_key(q)


def _opposite_signs(u: float, v: float) -> bool:
    return (u > 0 and v < 0) or (u < 0 and v > 0)


def segments_cross(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """Straddle test: open segments a1a2 and b1b2 properly cross.

    Both orientation pairs must have strictly opposite signs, so collinear,
    touching and shared-endpoint configurations all return False.
    """
    if not _opposite_signs(cross(b1, b2, a1), cross(b1, b2, a2)):
        return False
    return _opposite_signs(cross(a1, a2, b1), cross(a1, a2, b2))


def is_left_of(p: Point, a: Point, b: Point) -> bool:
    """Side test against segment ab walked bottom to top.

    The endpoints are swapped so that ``a`` is the lower one; points on the
    supporting line count as left.
    """
    if a[1] > b[1]:
        a, b = b, a
    return cross(a, b, p) >= 0


def is_reflex(prev: Point, v: Point, nxt: Point) -> bool:
    """Interior angle at v exceeds 180 degrees (counter-clockwise polygon)."""
    return signed_area(prev, v, nxt) < 0


def in_cone(prev: Point, v: Point, nxt: Point, w: Point) -> bool:
    """True if the chord v->w leaves v through the polygon interior.

    prev and nxt are v's neighbours on a counter-clockwise boundary.
    """
    if cross(prev, v, nxt) >= 0:
        return cross(v, nxt, w) > 0 and cross(v, w, prev) > 0
    # reflex: inside unless w falls in the (convex) exterior wedge
    return not (cross(v, prev, w) >= 0 and cross(v, w, nxt) >= 0)


def x_at(upper: Point, lower: Point, y: float) -> float:
    """x of segment upper-lower at height y, clamped to the segment."""
    x1, y1 = upper
    x2, y2 = lower
    if abs(y1 - y2) < 1e-12:
        return min(x1, x2)
    t = (y1 - y) / (y1 - y2)
    t = max(0.0, min(1.0, t))
    return x1 + t * (x2 - x1)


def departure_angle(upper: Point, lower: Point) -> float:
    """Direction of travel from upper to lower endpoint, in [-pi, 0]."""
    return math.atan2(lower[1] - upper[1], lower[0] - upper[0])

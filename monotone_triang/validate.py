"""
Input checks and output verification.

The pipeline itself trusts its input to be simple and counter-clockwise;
callers that cannot guarantee this check with ``is_simple`` and
``is_counter_clockwise`` first. ``verify_triangulation`` repeats the
correctness checks used when benchmarking triangulators.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .geometry import (
    Point,
    Triangle,
    comes_before,
    cross,
    polygon_area,
    segments_cross,
    signed_area,
    sweep_key,
    triangle_area,
)


def is_counter_clockwise(points: Sequence[Point]) -> bool:
    return polygon_area(points) > 0


def _on_segment(p: Point, a: Point, b: Point) -> bool:
    """p lies on the closed segment ab."""
    if cross(a, b, p) != 0:
        return False
    return (min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= p[1] <= max(a[1], b[1]))


def _edges_touch(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """Closed segments share a point: proper crossing, touching or collinear overlap."""
    return (segments_cross(a1, a2, b1, b2)
            or _on_segment(b1, a1, a2) or _on_segment(b2, a1, a2)
            or _on_segment(a1, b1, b2) or _on_segment(a2, b1, b2))


def _folds_back(prev: Point, v: Point, nxt: Point) -> bool:
    """Edges prev-v and v-nxt are collinear and overlap past v."""
    if cross(prev, v, nxt) != 0:
        return False
    return (prev[0] - v[0]) * (nxt[0] - v[0]) + (prev[1] - v[1]) * (nxt[1] - v[1]) > 0


def is_simple(points: Sequence[Point]) -> bool:
    """Boundary never meets itself except where consecutive edges share a vertex. O(n^2).

    Rejects repeated consecutive points, a vertex lying on a non-adjacent
    edge, and adjacent edges doubling back over each other. Collinear runs
    that continue straight on are allowed.
    """
    n = len(points)
    if n < 3:
        return False
    for i in range(n):
        prev, v, nxt = points[i - 1], points[i], points[(i + 1) % n]
        if v == nxt or _folds_back(prev, v, nxt):
            return False

    for i in range(n):
        a1, a2 = points[i], points[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if _edges_touch(a1, a2, points[j], points[(j + 1) % n]):
                return False
    return True


def is_y_monotone(points: Sequence[Point]) -> bool:
    """Walk from the topmost vertex: y never rises until the bottommost, never falls after.

    Top and bottom are taken in sweep order (y, then x), so a flat top or
    bottom edge is allowed.
    """
    n = len(points)
    top = min(range(n), key=lambda i: sweep_key(points[i]))
    bottom = max(range(n), key=lambda i: sweep_key(points[i]))

    i = top
    while i != bottom:
        j = (i + 1) % n
        if not comes_before(points[i], points[j]):
            return False
        i = j
    while i != top:
        j = (i + 1) % n
        if not comes_before(points[j], points[i]):
            return False
        i = j
    return True


def verify_triangulation(points: Sequence[Point], triangles: Sequence[Triangle],
                         tolerance: float = 1e-6) -> Tuple[bool, str]:
    """Check count, indices, area conservation and winding consistency."""
    n = len(points)

    expected = n - 2
    if len(triangles) != expected:
        return False, f"Wrong count: {len(triangles)} != {expected}"

    for tri in triangles:
        for v in tri:
            if v < 0 or v >= n:
                return False, f"Invalid vertex index: {v}"

    poly_a = polygon_area(points)
    areas = [signed_area(points[a], points[b], points[c]) for a, b, c in triangles]
    if poly_a > 0 and any(a < 0 for a in areas):
        return False, "Triangle winding differs from polygon winding"
    if poly_a < 0 and any(a > 0 for a in areas):
        return False, "Triangle winding differs from polygon winding"

    tri_a = sum(triangle_area(points[a], points[b], points[c]) for a, b, c in triangles)
    if abs(abs(poly_a) - tri_a) > tolerance * max(1.0, abs(poly_a)):
        return False, f"Area mismatch: {abs(poly_a):.6f} vs {tri_a:.6f}"

    return True, "OK"


def crossing_edges(points: Sequence[Point], triangles: Sequence[Triangle]) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """Pairs of triangle edges that properly cross each other."""
    edges = set()
    for a, b, c in triangles:
        for u, v in ((a, b), (b, c), (c, a)):
            edges.add((min(u, v), max(u, v)))
    edges = sorted(edges)

    crossings = []
    for i, (a, b) in enumerate(edges):
        for c, d in edges[i + 1:]:
            if len({a, b, c, d}) < 4:
                continue
            if segments_cross(points[a], points[b], points[c], points[d]):
                crossings.append(((a, b), (c, d)))
    return crossings

"""
Deterministic polygon generators for tests, the CLI and benchmarks.

Every generator returns a simple counter-clockwise polygon as a list of
(x, y) tuples.
"""

from __future__ import annotations

import math
import random
from typing import Callable, Dict, List, Sequence

from .geometry import Point

# Rotation used to move generated shapes off axis-aligned ties (equal y).
GENERAL_POSITION_ANGLE = 0.123456789  # radians


def _polar(angle: float, r: float) -> Point:
    return (r * math.cos(angle), r * math.sin(angle))


def rotate_points(points: Sequence[Point], angle_rad: float,
                  center: Point = (0.0, 0.0)) -> List[Point]:
    """Rotate counter-clockwise about ``center``."""
    cx, cy = center
    c, s = math.cos(angle_rad), math.sin(angle_rad)
    rotated = []
    for x, y in points:
        dx, dy = x - cx, y - cy
        rotated.append((cx + c * dx - s * dy, cy + s * dx + c * dy))
    return rotated


def unit_square() -> List[Point]:
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


def square_with_midpoints() -> List[Point]:
    """2x2 square sampled at its corners and edge midpoints (collinear runs)."""
    return [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2), (0, 1)]


def convex_polygon(n: int, radius: float = 100.0) -> List[Point]:
    """Regular n-gon centred on the origin."""
    step = 2 * math.pi / n
    return [_polar(i * step, radius) for i in range(n)]


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> List[Point]:
    """Star-shaped about the origin: sorted random angles, radii in [0.4, 1] * radius."""
    rng = random.Random(seed + n)
    angles = sorted(rng.uniform(0.0, 2 * math.pi) for _ in range(n))
    return [_polar(a, rng.uniform(0.4 * radius, radius)) for a in angles]


def star_polygon(n_pairs: int, outer: float = 100.0, inner: float = 30.0) -> List[Point]:
    """Alternating tips and notches; every notch is reflex."""
    step = math.pi / n_pairs
    return [_polar(i * step, inner if i % 2 else outer) for i in range(2 * n_pairs)]


def l_shape() -> List[Point]:
    return [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]


def arrow_shape() -> List[Point]:
    return [(0, 1), (2, 1), (2, 0), (4, 1.5), (2, 3), (2, 2), (0, 2)]


def notched_square() -> List[Point]:
    """Square with its top edge pushed in: one reflex vertex."""
    return [(0, 0), (2, 0), (2, 2), (1, 1), (0, 2)]


def notched_polygon() -> List[Point]:
    """Box with a notch from below (SPLIT) and a notch from above (MERGE).

    The left wall has an extra vertex between the notches, so the two
    reflex vertices are resolved by separate diagonals.
    """
    return [
        (0, 0), (1, 0), (1.5, 1), (2, 0), (4, 0),
        (4, 4), (3, 4), (2.5, 3), (2, 4), (0, 4), (0, 2),
    ]


def comb_polygon(teeth: int, height: float = 3.0) -> List[Point]:
    """Comb with unit-wide teeth pointing up; each gap bottom is a MERGE."""
    points: List[Point] = [(0, 0), (2 * teeth - 1, 0)]
    for i in reversed(range(teeth)):
        x0, x1 = 2 * i, 2 * i + 1
        points += [(x1, 1 + height), (x0, 1 + height)]
        if i > 0:
            points += [(x0, 1), (x0 - 1, 1)]
    return points


def w_polygon() -> List[Point]:
    """'W'-like outline: two top valleys over a jagged bottom."""
    return [
        (0, 0), (2, 1), (4, 0), (6, 1), (8, 0),
        (8, 6), (6, 3), (4, 5), (2, 3), (0, 6),
    ]


# Families that scale with a vertex count (roughly n vertices each)
SHAPES: Dict[str, Callable[[int], List[Point]]] = {
    "convex": convex_polygon,
    "random": random_polygon,
    "star": lambda n: star_polygon(max(3, n // 2)),
    "comb": lambda n: comb_polygon(max(1, n // 4)),
}


def make_shape(name: str, n: int, rotate: bool = True) -> List[Point]:
    try:
        factory = SHAPES[name]
    except KeyError:
        raise ValueError(f"unknown shape {name!r}; choose from {sorted(SHAPES)}") from None
    points = factory(n)
    if rotate:
        points = rotate_points(points, GENERAL_POSITION_ANGLE)
    return points

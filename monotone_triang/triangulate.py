"""
Stack-based triangulation of y-monotone pieces, and the full pipeline

    points -> HalfEdgeMesh -> MonotoneDecomposer -> MonotoneTriangulator

Triangles are index triples into the caller's point sequence. Every
triangle is emitted counter-clockwise (matching counter-clockwise input)
and rotated so that its smallest index comes first, e.g. the unit square
gives ``[(0, 1, 2), (0, 2, 3)]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .config import DEFAULT_CONFIG, TriangulationConfig
from .decompose import Diagonal, MonotoneDecomposer
from .errors import DegenerateInputError, DegenerateMonotonePieceError
from .geometry import Point, Triangle, cross, polygon_area, signed_area, sweep_key
from .halfedge import HalfEdgeMesh

logger = logging.getLogger(__name__)


def rotate_min_first(tri: Triangle) -> Triangle:
    """Rotate a triangle (keeping its cyclic order) so the smallest id leads."""
    i = tri.index(min(tri))
    return tri[i:] + tri[:i]


class MonotoneTriangulator:
    """Triangulates one y-monotone polygon given as a mesh."""

    def __init__(self, config: TriangulationConfig = DEFAULT_CONFIG):
        self.config = config

    def triangulate(self, piece: HalfEdgeMesh) -> List[Triangle]:
        verts = piece.vertices()
        if len(verts) < 3:
            raise DegenerateMonotonePieceError(
                f"monotone piece {piece.vertex_ids()} has fewer than 3 vertices")

        order = sorted(verts, key=lambda v: sweep_key(piece.position(v)))
        on_left = {v: piece.is_left_chain(v) for v in order}
        triangles: List[Triangle] = []

        stack = [order[0], order[1]]
        for j in range(2, len(order) - 1):
            u = order[j]
            if on_left[u] != on_left[stack[-1]]:
                # Opposite chains: u sees every vertex on the stack
                while len(stack) > 1:
                    top = stack.pop()
                    triangles.append(self._emit(piece, u, top, stack[-1]))
                stack = [order[j - 1], u]
            else:
                last = stack.pop()
                while stack and self._can_cut(piece, u, last, stack[-1], on_left[u]):
                    triangles.append(self._emit(piece, u, last, stack[-1]))
                    last = stack.pop()
                stack.append(last)
                stack.append(u)

        bottom = order[-1]
        while len(stack) > 1:
            top = stack.pop()
            triangles.append(self._emit(piece, bottom, top, stack[-1]))

        logger.debug("piece of %d vertices -> %d triangles", len(verts), len(triangles))
        return triangles

    def _can_cut(self, piece: HalfEdgeMesh, u: int, last: int, cand: int, left_chain: bool) -> bool:
        """Triangle (u, last, cand) on one chain lies inside the piece.

        Walking the chain in boundary order the turn at ``last`` must be
        convex, i.e. strictly to the left.
        """
        pu, pl, pc = piece.position(u), piece.position(last), piece.position(cand)
        if left_chain:
            convex = cross(pc, pl, pu) > 0
        else:
            convex = cross(pu, pl, pc) > 0
        if not convex:
            return False
        if self.config.check_visibility:
            return self._visible(piece, pu, pc)
        return True

    @staticmethod
    def _visible(piece: HalfEdgeMesh, p1: Point, p2: Point) -> bool:
        """No boundary edge of the piece properly crosses segment p1p2."""
        return not any(piece.segment_intersects(e, p1, p2) for e in piece.traverse())

    @staticmethod
    def _emit(piece: HalfEdgeMesh, a: int, b: int, c: int) -> Triangle:
        if signed_area(piece.position(a), piece.position(b), piece.position(c)) < 0:
            b, c = c, b
        return rotate_min_first((piece.vertex_id(a), piece.vertex_id(b), piece.vertex_id(c)))


@dataclass
class TriangulationResult:
    triangles: List[Triangle]
    pieces: List[List[int]] = field(default_factory=list)   # vertex ids per monotone piece
    diagonals: List[Diagonal] = field(default_factory=list)


def triangulate_polygon(points: Sequence[Point],
                        config: TriangulationConfig = DEFAULT_CONFIG) -> TriangulationResult:
    """Triangulate a simple polygon given as an ordered, implicitly closed point list.

    The polygon must be counter-clockwise unless ``config.normalize_winding``
    is set, in which case clockwise input is reversed internally and the
    triangles come back clockwise, in the caller's indexing.
    """
    pts = [(float(x), float(y)) for x, y in points]
    n = len(pts)
    if n < 3:
        raise DegenerateInputError(f"polygon needs at least 3 points, got {n}")

    reverse = config.normalize_winding and polygon_area(pts) < 0
    if reverse:
        logger.debug("clockwise input, reversing %d points", n)
        pts.reverse()

    mesh = HalfEdgeMesh.from_points(pts, area_epsilon=config.area_epsilon)
    decomposer = MonotoneDecomposer(config)
    diagonals = decomposer.find_diagonals(mesh)
    pieces = decomposer.apply_diagonals(mesh, diagonals) if diagonals else [mesh]

    triangulator = MonotoneTriangulator(config)
    triangles: List[Triangle] = []
    for piece in pieces:
        triangles.extend(triangulator.triangulate(piece))
    piece_ids = [piece.vertex_ids() for piece in pieces]

    if reverse:
        def back(i: int) -> int:
            return n - 1 - i
        # Same triangles in the caller's indexing, wound like the caller's polygon
        triangles = [rotate_min_first((back(a), back(c), back(b))) for a, b, c in triangles]
        piece_ids = [[back(i) for i in ids] for ids in piece_ids]
        diagonals = [Diagonal(back(d.a), back(d.b)) for d in diagonals]

    logger.debug("%d points -> %d diagonals, %d pieces, %d triangles",
                 n, len(diagonals), len(pieces), len(triangles))
    return TriangulationResult(triangles, piece_ids, list(diagonals))


def triangulate(points: Sequence[Point],
                config: TriangulationConfig = DEFAULT_CONFIG) -> List[Triangle]:
    """Shortcut for ``triangulate_polygon(points, config).triangles``."""
    return triangulate_polygon(points, config).triangles

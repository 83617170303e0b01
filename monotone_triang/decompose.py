"""
Sweep-line decomposition of a simple polygon into y-monotone pieces.

Vertices are swept top to bottom (y descending, ties by x ascending) and
classified as START, END, SPLIT, MERGE or REGULAR. The sweep keeps the
left-boundary edges it currently crosses, each with a helper vertex, and
records a diagonal whenever a SPLIT vertex or a MERGE helper has to be
connected. The diagonals are then applied one by one with
``HalfEdgeMesh.partition``.

The nearest-left-edge query scans the active set linearly, so a sweep is
O(n^2) in the worst case (O(n log n) needs a balanced tree keyed on x at
the sweep line).
"""

from __future__ import annotations

import logging
import math
from collections import deque
from enum import Enum, auto
from typing import Dict, Iterator, List, NamedTuple, Tuple

from .config import DEFAULT_CONFIG, TriangulationConfig
from .errors import InvalidDiagonalError, NoVisibleHelperError
from .geometry import Point, comes_before, departure_angle, sweep_key, x_at
from .halfedge import HalfEdgeMesh

logger = logging.getLogger(__name__)


class VertexType(Enum):
    START = auto()      # both neighbours below, interior angle < pi
    END = auto()        # both neighbours above, interior angle < pi
    SPLIT = auto()      # both neighbours below, interior angle > pi
    MERGE = auto()      # both neighbours above, interior angle > pi
    REGULAR = auto()    # one neighbour above, one below


class Diagonal(NamedTuple):
    """Chord between two vertices, by input id."""
    a: int
    b: int


def classify_vertex(mesh: HalfEdgeMesh, v: int) -> VertexType:
    p = mesh.position(v)
    prev_below = comes_before(p, mesh.position(mesh.prev_vertex(v)))
    next_below = comes_before(p, mesh.position(mesh.next_vertex(v)))

    if prev_below and next_below:
        return VertexType.SPLIT if mesh.is_reflex_vertex(v) else VertexType.START
    if not prev_below and not next_below:
        return VertexType.MERGE if mesh.is_reflex_vertex(v) else VertexType.END
    return VertexType.REGULAR


def _upper_lower(mesh: HalfEdgeMesh, e: int) -> Tuple[Point, Point]:
    s, d = mesh.position(mesh.start(e)), mesh.position(mesh.dest(e))
    return (d, s) if comes_before(d, s) else (s, d)


def compare_edges(mesh: HalfEdgeMesh, e1: int, e2: int, y: float,
                  config: TriangulationConfig = DEFAULT_CONFIG) -> int:
    """Left-to-right order of two edges where they cross the line at ``y``.

    Edges whose interpolated x differ by less than ``config.tie_epsilon``
    are ordered by the direction in which they leave their upper endpoint
    (the one pointing further left first). Only consistent between edges
    evaluated at the same ``y``.
    """
    u1, l1 = _upper_lower(mesh, e1)
    u2, l2 = _upper_lower(mesh, e2)
    x1, x2 = x_at(u1, l1, y), x_at(u2, l2, y)

    if abs(x1 - x2) < config.tie_epsilon:
        t1, t2 = departure_angle(u1, l1), departure_angle(u2, l2)
        if abs(t1 - t2) < config.angle_epsilon:
            return 0
        return -1 if t1 < t2 else 1
    return -1 if x1 < x2 else 1


class ActiveEdgeSet:
    """Left-boundary edges crossing the sweep line, kept left to right.

    Each edge is placed by binary search with ``compare_edges`` at the
    sweep height current at insertion. Active edges never cross each other,
    so the order found then stays valid while the sweep moves down.
    """

    def __init__(self, mesh: HalfEdgeMesh, config: TriangulationConfig = DEFAULT_CONFIG):
        self.mesh = mesh
        self.config = config
        self.edges: List[int] = []
        self.helpers: Dict[int, int] = {}
        self.sweep_y = math.inf

    def advance(self, y: float) -> None:
        self.sweep_y = y

    def insert(self, e: int, helper: int) -> None:
        lo, hi = 0, len(self.edges)
        while lo < hi:
            mid = (lo + hi) // 2
            if compare_edges(self.mesh, self.edges[mid], e, self.sweep_y, self.config) < 0:
                lo = mid + 1
            else:
                hi = mid
        self.edges.insert(lo, e)
        self.helpers[e] = helper

    def remove(self, e: int) -> int:
        """Drop ``e`` and return its helper."""
        helper = self.helper(e)
        self.edges.remove(e)
        del self.helpers[e]
        return helper

    def helper(self, e: int) -> int:
        try:
            return self.helpers[e]
        except KeyError:
            raise NoVisibleHelperError(
                f"edge {self.mesh.arena.vertices[self.mesh.start(e)]} is not on the sweep line") from None

    def set_helper(self, e: int, v: int) -> None:
        self.helpers[e] = v

    def left_of(self, v: int) -> int:
        """Nearest active edge strictly to the left of vertex v."""
        for e in reversed(self.edges):
            if not self.mesh.is_left_of_edge(v, e):
                return e
        raise NoVisibleHelperError(
            f"no active edge left of {self.mesh.arena.vertices[v]}; is the polygon counter-clockwise?")

    def __len__(self) -> int:
        return len(self.edges)

    def __contains__(self, e: int) -> bool:
        return e in self.helpers

    def __iter__(self) -> Iterator[int]:
        return iter(self.edges)


class MonotoneDecomposer:
    """Splits a simple counter-clockwise polygon into y-monotone pieces."""

    def __init__(self, config: TriangulationConfig = DEFAULT_CONFIG):
        self.config = config

    def classify(self, mesh: HalfEdgeMesh) -> Dict[int, VertexType]:
        return {v: classify_vertex(mesh, v) for v in mesh.vertices()}

    def find_diagonals(self, mesh: HalfEdgeMesh) -> List[Diagonal]:
        """Run the sweep and return the diagonals it records."""
        types = self.classify(mesh)
        active = ActiveEdgeSet(mesh, self.config)
        diagonals: List[Diagonal] = []

        if logger.isEnabledFor(logging.DEBUG):
            counts = {t.name: 0 for t in VertexType}
            for t in types.values():
                counts[t.name] += 1
            logger.debug("vertex types: %s", counts)

        def record(v: int, helper: int):
            d = Diagonal(mesh.vertex_id(v), mesh.vertex_id(helper))
            logger.debug("diagonal %d-%d", d.a, d.b)
            diagonals.append(d)

        def close_incoming(v: int):
            """Retire the edge ending at v, connecting a MERGE helper first."""
            e = mesh.prev(mesh.edge_of(v))
            helper = active.helper(e)
            if types[helper] is VertexType.MERGE:
                record(v, helper)
            active.remove(e)

        def update_left_helper(v: int):
            e = active.left_of(v)
            helper = active.helper(e)
            if types[helper] is VertexType.MERGE:
                record(v, helper)
            active.set_helper(e, v)

        order = sorted(mesh.vertices(), key=lambda v: sweep_key(mesh.position(v)))
        for v in order:
            active.advance(mesh.position(v)[1])
            vtype = types[v]

            if vtype is VertexType.START:
                active.insert(mesh.edge_of(v), v)

            elif vtype is VertexType.END:
                close_incoming(v)

            elif vtype is VertexType.SPLIT:
                e = active.left_of(v)
                record(v, active.helper(e))
                active.set_helper(e, v)
                active.insert(mesh.edge_of(v), v)

            elif vtype is VertexType.MERGE:
                close_incoming(v)
                update_left_helper(v)

            else:
                # Interior to the right: the boundary continues downward
                if mesh.is_left_chain(v):
                    close_incoming(v)
                    active.insert(mesh.edge_of(v), v)
                else:
                    update_left_helper(v)

        return diagonals

    def apply_diagonals(self, mesh: HalfEdgeMesh, diagonals: List[Diagonal]) -> List[HalfEdgeMesh]:
        """Split ``mesh`` along every diagonal, returning the final pieces."""
        pieces = [mesh]
        pending = deque(diagonals)
        while pending:
            d = pending.popleft()
            i, a, b = self._locate(pieces, d)
            pieces[i:i + 1] = pieces[i].partition(a, b)

        results: List[HalfEdgeMesh] = []
        for piece in pieces:
            self._add_result(results, piece)
        return results

    def decompose(self, mesh: HalfEdgeMesh) -> List[HalfEdgeMesh]:
        diagonals = self.find_diagonals(mesh)
        if not diagonals:
            return [mesh]
        pieces = self.apply_diagonals(mesh, diagonals)
        logger.debug("%d diagonals -> %d monotone pieces", len(diagonals), len(pieces))
        return pieces

    @staticmethod
    def _locate(pieces: List[HalfEdgeMesh], d: Diagonal) -> Tuple[int, int, int]:
        """Find the piece the diagonal cuts through and its endpoint handles.

        After earlier splits an endpoint may sit on several pieces; the
        right one is where the chord enters the interior at both ends.
        """
        for i, piece in enumerate(pieces):
            a = piece.find_vertex(d.a)
            b = piece.find_vertex(d.b)
            if a is None or b is None:
                continue
            if piece.chord_inside(a, piece.position(b)) and piece.chord_inside(b, piece.position(a)):
                return i, a, b
        raise InvalidDiagonalError(f"no piece contains diagonal {d.a}-{d.b}")

    @staticmethod
    def _add_result(results: List[HalfEdgeMesh], piece: HalfEdgeMesh) -> None:
        root = piece.root
        for kept in results:
            if kept.contains_edge(root):
                logger.debug("dropping piece %s, already captured", piece)
                return
        results.append(piece)

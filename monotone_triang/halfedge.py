"""
Half-edge representation of a simple polygon.

Vertices and half-edges live in a shared arena and refer to each other by
index, so splitting a polygon never leaves two meshes holding the same
mutable node. A mesh is just a root half-edge index plus the cycle reachable
from it.

Each polygon edge is stored twice: the inner half-edge walks the boundary in
input (counter-clockwise) order, its opposite walks it the other way. For
every half-edge ``e``::

    opposite(opposite(e)) == e
    start(opposite(e)) == start(next(e))
    prev(e) == opposite(next(opposite(e)))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import DegenerateInputError, InvalidDiagonalError
from .geometry import (
    Point,
    comes_before,
    in_cone,
    is_left_of,
    is_reflex,
    polygon_area,
    segments_cross,
)

logger = logging.getLogger(__name__)


@dataclass
class Vertex:
    id: int              # position in the caller's input sequence
    position: Point
    edge: int = -1       # outgoing inner half-edge

    def __repr__(self):
        return f"V{self.id}({self.position[0]:.2f},{self.position[1]:.2f})"


@dataclass
class HalfEdge:
    start: int           # arena vertex index
    next: int = -1
    opposite: int = -1


class HalfEdgeArena:
    """Owns every vertex and half-edge created for one pipeline run."""

    def __init__(self):
        self.vertices: List[Vertex] = []
        self.edges: List[HalfEdge] = []

    def add_vertex(self, vid: int, position: Point) -> int:
        self.vertices.append(Vertex(vid, position))
        return len(self.vertices) - 1

    def copy_vertex(self, v: int) -> int:
        """Fresh vertex with the same id and position as ``v``."""
        src = self.vertices[v]
        return self.add_vertex(src.id, src.position)

    def add_edge(self, start: int) -> int:
        self.edges.append(HalfEdge(start))
        return len(self.edges) - 1


class HalfEdgeMesh:
    """A simple polygon as a closed cycle of half-edges."""

    def __init__(self, arena: HalfEdgeArena, root: int):
        self.arena = arena
        self.root = root
        self.consumed = False   # set once partition() has split this mesh

    @classmethod
    def from_points(cls, points: Sequence[Point],
                    arena: Optional[HalfEdgeArena] = None,
                    area_epsilon: float = 1e-12) -> "HalfEdgeMesh":
        """Build a mesh whose forward traversal follows ``points`` in order.

        The last point connects back to the first.
        """
        n = len(points)
        if n < 3:
            raise DegenerateInputError(f"polygon needs at least 3 points, got {n}")
        pts = [(float(x), float(y)) for x, y in points]
        if abs(polygon_area(pts)) <= area_epsilon:
            raise DegenerateInputError(f"polygon of {n} points has no area (collinear input)")

        arena = arena if arena is not None else HalfEdgeArena()
        verts = [arena.add_vertex(i, p) for i, p in enumerate(pts)]
        inner = [arena.add_edge(v) for v in verts]
        outer = [arena.add_edge(verts[(i + 1) % n]) for i in range(n)]

        edges = arena.edges
        for i in range(n):
            e = edges[inner[i]]
            e.next = inner[(i + 1) % n]
            e.opposite = outer[i]
            o = edges[outer[i]]
            o.next = outer[i - 1]
            o.opposite = inner[i]
            arena.vertices[verts[i]].edge = inner[i]

        return cls(arena, inner[0])

    # -- navigation -------------------------------------------------------

    def start(self, e: int) -> int:
        return self.arena.edges[e].start

    def next(self, e: int) -> int:
        return self.arena.edges[e].next

    def opposite(self, e: int) -> int:
        return self.arena.edges[e].opposite

    def prev(self, e: int) -> int:
        return self.opposite(self.next(self.opposite(e)))

    def dest(self, e: int) -> int:
        return self.start(self.next(e))

    def edge_of(self, v: int) -> int:
        return self.arena.vertices[v].edge

    def position(self, v: int) -> Point:
        return self.arena.vertices[v].position

    def vertex_id(self, v: int) -> int:
        return self.arena.vertices[v].id

    def prev_vertex(self, v: int) -> int:
        return self.start(self.prev(self.edge_of(v)))

    def next_vertex(self, v: int) -> int:
        return self.dest(self.edge_of(v))

    # -- traversal --------------------------------------------------------

    def _walk(self, first: int) -> Iterator[int]:
        e = first
        while True:
            yield e
            e = self.next(e)
            if e == first:
                break

    def traverse(self) -> Iterator[int]:
        """Inner half-edges from the root, in boundary order."""
        return self._walk(self.root)

    def reverse(self) -> Iterator[int]:
        """Outer half-edges, starting from the root's opposite."""
        return self._walk(self.opposite(self.root))

    def __iter__(self) -> Iterator[int]:
        return self.traverse()

    def __len__(self) -> int:
        return sum(1 for _ in self.traverse())

    def vertices(self) -> List[int]:
        return [self.start(e) for e in self.traverse()]

    def vertex_ids(self) -> List[int]:
        return [self.vertex_id(v) for v in self.vertices()]

    def positions(self) -> List[Point]:
        return [self.position(v) for v in self.vertices()]

    def find_vertex(self, vid: int) -> Optional[int]:
        for v in self.vertices():
            if self.vertex_id(v) == vid:
                return v
        return None

    def contains_edge(self, e: int) -> bool:
        return any(x == e for x in self.traverse())

    def __repr__(self):
        return f"HalfEdgeMesh({self.vertex_ids()})"

    # -- predicates -------------------------------------------------------

    def segment_intersects(self, e: int, p1: Point, p2: Point) -> bool:
        """Edge ``e`` properly crosses the open segment p1p2."""
        return segments_cross(self.position(self.start(e)), self.position(self.dest(e)), p1, p2)

    def is_left_of_edge(self, v: int, e: int) -> bool:
        return is_left_of(self.position(v), self.position(self.start(e)), self.position(self.dest(e)))

    def is_reflex_vertex(self, v: int) -> bool:
        return is_reflex(self.position(self.prev_vertex(v)), self.position(v),
                         self.position(self.next_vertex(v)))

    def is_left_chain(self, v: int) -> bool:
        """v lies on the polygon's left boundary (interior to its right).

        Assumes counter-clockwise winding: the boundary runs downward
        through v, predecessor swept before v and successor after it.
        """
        p = self.position(v)
        return (comes_before(self.position(self.prev_vertex(v)), p)
                and comes_before(p, self.position(self.next_vertex(v))))

    def chord_inside(self, v: int, w: Point) -> bool:
        """The chord from v towards w starts out inside the polygon."""
        return in_cone(self.position(self.prev_vertex(v)), self.position(v),
                       self.position(self.next_vertex(v)), w)

    # -- mutation ---------------------------------------------------------

    def partition(self, a: int, b: int) -> Tuple["HalfEdgeMesh", "HalfEdgeMesh"]:
        """Split along the diagonal ab.

        Returns the piece walking a -> ... -> b along a's old successors,
        then the piece walking b -> ... -> a. Both endpoints are copied into
        each piece and each piece is closed by its own new pair of opposite
        half-edges. This mesh is consumed.
        """
        if self.consumed:
            raise InvalidDiagonalError("mesh was already partitioned")
        if a == b:
            raise InvalidDiagonalError(f"diagonal endpoints coincide: {self.arena.vertices[a]}")
        members = set(self.vertices())
        if a not in members or b not in members:
            raise InvalidDiagonalError(
                f"diagonal {self.arena.vertices[a]}-{self.arena.vertices[b]} is not on this mesh")

        ea, eb = self.edge_of(a), self.edge_of(b)
        if self.dest(ea) == b or self.dest(eb) == a:
            raise InvalidDiagonalError(
                f"diagonal {self.arena.vertices[a]}-{self.arena.vertices[b]} joins adjacent vertices")

        arena = self.arena
        edges = arena.edges
        pa, pb = self.prev(ea), self.prev(eb)
        opp_ea, opp_eb = self.opposite(ea), self.opposite(eb)
        opp_pa, opp_pb = self.opposite(pa), self.opposite(pb)

        # a-side: a -> ... -> b, closed by b -> a
        a1, b1 = arena.copy_vertex(a), arena.copy_vertex(b)
        d1, d1_opp = arena.add_edge(b1), arena.add_edge(a1)
        edges[ea].start = a1
        arena.vertices[a1].edge = ea
        edges[pb].next = d1
        edges[d1].next = ea
        arena.vertices[b1].edge = d1
        edges[opp_pb].start = b1
        edges[d1].opposite, edges[d1_opp].opposite = d1_opp, d1
        edges[opp_ea].next = d1_opp
        edges[d1_opp].next = opp_pb

        # b-side: b -> ... -> a, closed by a -> b
        a2, b2 = arena.copy_vertex(a), arena.copy_vertex(b)
        d2, d2_opp = arena.add_edge(a2), arena.add_edge(b2)
        edges[eb].start = b2
        arena.vertices[b2].edge = eb
        edges[pa].next = d2
        edges[d2].next = eb
        arena.vertices[a2].edge = d2
        edges[opp_pa].start = a2
        edges[d2].opposite, edges[d2_opp].opposite = d2_opp, d2
        edges[opp_eb].next = d2_opp
        edges[d2_opp].next = opp_pa

        self.consumed = True
        first, second = HalfEdgeMesh(arena, ea), HalfEdgeMesh(arena, eb)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("partition %d-%d: %d + %d vertices",
                         arena.vertices[a].id, arena.vertices[b].id, len(first), len(second))
        return first, second

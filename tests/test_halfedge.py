import pytest

from monotone_triang.errors import DegenerateInputError, InvalidDiagonalError
from monotone_triang.halfedge import HalfEdgeArena, HalfEdgeMesh
from monotone_triang.shapes import l_shape, unit_square


def check_links(mesh: HalfEdgeMesh):
    """Half-edge invariants on every edge of the mesh and its opposites."""
    for e in list(mesh.traverse()) + list(mesh.reverse()):
        assert mesh.opposite(mesh.opposite(e)) == e
        assert mesh.start(mesh.opposite(e)) == mesh.start(mesh.next(e))
    for e in mesh.traverse():
        assert mesh.next(mesh.prev(e)) == e


def test_from_points_square():
    mesh = HalfEdgeMesh.from_points(unit_square())
    assert len(mesh) == 4
    assert mesh.vertex_ids() == [0, 1, 2, 3]
    assert mesh.positions() == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    check_links(mesh)


def test_reverse_walks_the_other_way():
    mesh = HalfEdgeMesh.from_points(unit_square())
    starts = [mesh.vertex_id(mesh.start(e)) for e in mesh.reverse()]
    assert starts == [1, 0, 3, 2]


def test_neighbours():
    mesh = HalfEdgeMesh.from_points(l_shape())
    v0 = mesh.find_vertex(0)
    assert mesh.vertex_id(mesh.prev_vertex(v0)) == 5
    assert mesh.vertex_id(mesh.next_vertex(v0)) == 1
    assert mesh.vertex_id(mesh.dest(mesh.edge_of(v0))) == 1
    assert mesh.find_vertex(42) is None
    # (1, 1) is the reflex corner of the L
    assert [mesh.is_reflex_vertex(v) for v in mesh.vertices()] == [False, False, False, True, False, False]


def test_left_chain_of_square():
    mesh = HalfEdgeMesh.from_points(unit_square())
    assert [mesh.is_left_chain(v) for v in mesh.vertices()] == [True, False, False, False]


def test_side_and_crossing_queries():
    mesh = HalfEdgeMesh.from_points(unit_square())
    e3 = mesh.edge_of(mesh.find_vertex(3))    # left wall, walked downward
    v1 = mesh.find_vertex(1)
    assert not mesh.is_left_of_edge(v1, e3)
    assert mesh.segment_intersects(e3, (-1, 0.5), (1, 0.5))
    assert not mesh.segment_intersects(e3, (0.5, 0.5), (1, 0.5))


@pytest.mark.parametrize("points", [
    [(0, 0), (1, 1)],
    [(0, 0), (1, 1), (2, 2)],
])
def test_degenerate_input(points):
    with pytest.raises(DegenerateInputError):
        HalfEdgeMesh.from_points(points)


def test_degenerate_input_is_value_error():
    with pytest.raises(ValueError):
        HalfEdgeMesh.from_points([(0, 0), (1, 0)])


def test_partition_square():
    mesh = HalfEdgeMesh.from_points(unit_square())
    first, second = mesh.partition(mesh.find_vertex(0), mesh.find_vertex(2))

    assert mesh.consumed
    assert first.vertex_ids() == [0, 1, 2]
    assert second.vertex_ids() == [2, 3, 0]
    check_links(first)
    check_links(second)

    # endpoints are copies, never shared between the pieces
    assert not set(first.vertices()) & set(second.vertices())
    assert first.position(first.find_vertex(2)) == (1.0, 1.0)


def test_partition_rejects_bad_diagonals():
    mesh = HalfEdgeMesh.from_points(unit_square())
    v0, v1, v2 = (mesh.find_vertex(i) for i in range(3))

    with pytest.raises(InvalidDiagonalError):
        mesh.partition(v0, v0)
    with pytest.raises(InvalidDiagonalError):
        mesh.partition(v0, v1)
    with pytest.raises(InvalidDiagonalError):
        mesh.partition(v1, v0)

    first, _ = mesh.partition(v0, v2)
    with pytest.raises(InvalidDiagonalError):
        mesh.partition(v1, 3)
    # arena vertex 3 (input vertex 3) is not on the first piece
    with pytest.raises(InvalidDiagonalError):
        first.partition(first.find_vertex(1), 3)


def test_partition_twice():
    """Split a hexagon into three pieces; each piece stays a closed cycle."""
    pts = [(0, 0), (2, -1), (4, 0), (4, 2), (2, 3), (0, 2)]
    mesh = HalfEdgeMesh.from_points(pts)
    left, right = mesh.partition(mesh.find_vertex(0), mesh.find_vertex(3))
    assert left.vertex_ids() == [0, 1, 2, 3]
    assert right.vertex_ids() == [3, 4, 5, 0]

    a, b = right.partition(right.find_vertex(3), right.find_vertex(5))
    assert a.vertex_ids() == [3, 4, 5]
    assert b.vertex_ids() == [5, 0, 3]
    for piece in (left, a, b):
        check_links(piece)


def test_arena_is_shared():
    arena = HalfEdgeArena()
    m1 = HalfEdgeMesh.from_points(unit_square(), arena=arena)
    m2 = HalfEdgeMesh.from_points(l_shape(), arena=arena)
    assert m1.arena is m2.arena
    assert len(arena.vertices) == 10
    assert m2.vertex_ids() == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("a, b", [(0, 2), (0, 3), (1, 4), (5, 2)])
def test_partition_vertex_sets(a, b):
    """Children share only the diagonal endpoints and together cover the parent."""
    pts = [(0, 0), (2, -1), (4, 0), (4, 2), (2, 3), (0, 2)]
    mesh = HalfEdgeMesh.from_points(pts)
    first, second = mesh.partition(mesh.find_vertex(a), mesh.find_vertex(b))

    ids1, ids2 = set(first.vertex_ids()), set(second.vertex_ids())
    assert ids1 & ids2 == {a, b}
    assert ids1 | ids2 == set(range(len(pts)))
    assert len(first) == (b - a) % len(pts) + 1
    assert len(second) == (a - b) % len(pts) + 1

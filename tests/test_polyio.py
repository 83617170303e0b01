import pytest

from monotone_triang.errors import PolygonFormatError
from monotone_triang.polyio import read_polygon, read_triangulation, write_polygon, write_triangulation
from monotone_triang.shapes import make_shape


def test_polygon_round_trip(tmp_path):
    points = make_shape("random", 25)
    path = tmp_path / "sub" / "random.poly"
    write_polygon(points, path)
    assert read_polygon(path) == points


def test_read_polygon_skips_comments(tmp_path):
    path = tmp_path / "square.poly"
    path.write_text("# unit square\n4\n0 0\n1 0\n\n1 1\n0 1\n")
    assert read_polygon(path) == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.mark.parametrize("text", [
    "",
    "four\n0 0\n",
    "3\n0 0\n1 0\n",
    "3\n0 0\n1 0\n1\n",
    "3\n0 0\n1 x\n1 1\n",
])
def test_read_polygon_malformed(tmp_path, text):
    path = tmp_path / "bad.poly"
    path.write_text(text)
    with pytest.raises(PolygonFormatError):
        read_polygon(path)


def test_triangulation_round_trip(tmp_path):
    points = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    triangles = [(0, 1, 2), (0, 2, 3)]
    path = tmp_path / "square.tri"
    write_triangulation(points, triangles, path)

    text = path.read_text()
    assert text.startswith("# vertices\n4\n")
    assert "# triangles\n2\n0 1 2\n0 2 3\n" in text
    assert read_triangulation(path) == (points, triangles)


def test_read_triangulation_truncated(tmp_path):
    path = tmp_path / "bad.tri"
    path.write_text("3\n0 0\n1 0\n0 1\n2\n0 1 2\n")
    with pytest.raises(PolygonFormatError):
        read_triangulation(path)


def test_write_creates_parent_directories(tmp_path):
    path = tmp_path / "a" / "b" / "tri.tri"
    write_triangulation([(0.1, 0.2), (1.0, 0.0), (0.0, 1.0)], [(0, 1, 2)], path)
    assert read_triangulation(path) == ([(0.1, 0.2), (1.0, 0.0), (0.0, 1.0)], [(0, 1, 2)])

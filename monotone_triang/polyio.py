"""
Polygon and triangulation files.

.poly::

    N
    x0 y0
    x1 y1
    ...

.tri::

    # vertices
    N
    x0 y0
    ...
    # triangles
    M
    i j k
    ...

Lines starting with ``#`` are ignored when reading.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Sequence, TextIO, Tuple, Union

from .errors import PolygonFormatError
from .geometry import Point, Triangle

PathLike = Union[str, Path]


def _content_lines(path: PathLike) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [l.strip() for l in f if l.strip() and not l.lstrip().startswith("#")]


def _parse_points(lines: List[str], start: int, path: PathLike) -> Tuple[List[Point], int]:
    try:
        n = int(lines[start])
    except (IndexError, ValueError):
        raise PolygonFormatError(f"{path}: expected a vertex count on line {start + 1}") from None
    if len(lines) < start + 1 + n:
        raise PolygonFormatError(f"{path}: expected {n} vertices, file is truncated")
    pts = []
    for line in lines[start + 1:start + 1 + n]:
        parts = line.split()
        if len(parts) != 2:
            raise PolygonFormatError(f"{path}: bad vertex line {line!r}")
        try:
            pts.append((float(parts[0]), float(parts[1])))
        except ValueError:
            raise PolygonFormatError(f"{path}: bad vertex line {line!r}") from None
    return pts, start + 1 + n


def read_polygon(path: PathLike) -> List[Point]:
    pts, _ = _parse_points(_content_lines(path), 0, path)
    return pts


@contextmanager
def _open_for_write(path: PathLike) -> Iterator[TextIO]:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yield f


def _write_points(f: TextIO, points: Sequence[Point]) -> None:
    # 17 significant digits survive a float round trip, so no two y values collapse
    f.write(f"{len(points)}\n")
    f.writelines(f"{x:.17g} {y:.17g}\n" for x, y in points)


def write_polygon(points: Sequence[Point], path: PathLike) -> None:
    with _open_for_write(path) as f:
        _write_points(f, points)


def read_triangulation(path: PathLike) -> Tuple[List[Point], List[Triangle]]:
    lines = _content_lines(path)
    pts, i = _parse_points(lines, 0, path)

    tris: List[Triangle] = []
    if i < len(lines):
        try:
            m = int(lines[i])
            for line in lines[i + 1:i + 1 + m]:
                a, b, c = map(int, line.split())
                tris.append((a, b, c))
        except ValueError:
            raise PolygonFormatError(f"{path}: bad triangle section") from None
        if len(tris) != m:
            raise PolygonFormatError(f"{path}: expected {m} triangles, found {len(tris)}")
    return pts, tris


def write_triangulation(points: Sequence[Point], triangles: Sequence[Triangle], path: PathLike) -> None:
    with _open_for_write(path) as f:
        f.write("# vertices\n")
        _write_points(f, points)
        f.write(f"# triangles\n{len(triangles)}\n")
        f.writelines(f"{a} {b} {c}\n" for a, b, c in triangles)

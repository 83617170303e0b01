"""
Error taxonomy for the triangulation pipeline.

Every error here is a contract violation (bad input or a broken sweep
invariant), never a transient condition: nothing is retried and no partial
result is returned.
"""


class TriangulationError(Exception):
    """Base class for every error raised by the pipeline."""


class DegenerateInputError(TriangulationError, ValueError):
    """Fewer than 3 points, or all points collinear."""


class InvalidDiagonalError(TriangulationError):
    """A diagonal joins adjacent vertices, or vertices not on one mesh."""


class NoVisibleHelperError(TriangulationError):
    """No active edge lies to the left of a swept vertex.

    Usually the polygon is wound clockwise or is not simple.
    """


class DegenerateMonotonePieceError(TriangulationError):
    """A monotone piece handed to the triangulator has fewer than 3 vertices."""


class PolygonFormatError(TriangulationError, ValueError):
    """A .poly or .tri file could not be parsed."""

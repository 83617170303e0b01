"""
Simple-polygon triangulation by monotone decomposition.

    >>> from monotone_triang import triangulate
    >>> triangulate([(0, 0), (1, 0), (1, 1), (0, 1)])
    [(0, 1, 2), (0, 2, 3)]
"""

from .config import DEFAULT_CONFIG, TriangulationConfig
from .decompose import Diagonal, MonotoneDecomposer, VertexType
from .errors import (
    DegenerateInputError,
    DegenerateMonotonePieceError,
    InvalidDiagonalError,
    NoVisibleHelperError,
    PolygonFormatError,
    TriangulationError,
)
from .halfedge import HalfEdgeMesh
from .triangulate import MonotoneTriangulator, TriangulationResult, triangulate, triangulate_polygon

__version__ = "0.1.0"

"""
Matplotlib views of a triangulation and of its monotone pieces.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import PatchCollection
from matplotlib.patches import Polygon as MplPolygon

from .geometry import Point, Triangle
from .triangulate import TriangulationResult

PIECE_COLORS = ['#e41a1c', '#377eb8', '#4daf4a', '#984ea3', '#ff7f00', '#a65628', '#f781bf']


def _outline(ax, vertices: np.ndarray, label_vertices: bool):
    poly_closed = np.vstack([vertices, vertices[0]])
    ax.plot(poly_closed[:, 0], poly_closed[:, 1], 'k-', linewidth=1.5)
    ax.scatter(vertices[:, 0], vertices[:, 1], c='black', s=20, zorder=5)
    if label_vertices:
        for i, (x, y) in enumerate(vertices):
            ax.annotate(str(i), (x, y), textcoords='offset points', xytext=(3, 3), fontsize=8)


def plot_triangulation(points: Sequence[Point], triangles: Sequence[Triangle], ax,
                       title: str = '', color: str = '#377eb8', label_vertices: bool = False):
    """Draw triangles over the polygon outline."""
    vertices = np.asarray(points, dtype=float)
    patches = [MplPolygon(vertices[list(tri)], closed=True) for tri in triangles]

    p = PatchCollection(patches, alpha=0.4, facecolor=color, edgecolor='#333333', linewidth=0.5)
    ax.add_collection(p)
    _outline(ax, vertices, label_vertices)

    ax.set_aspect('equal')
    ax.set_title(title)
    return ax


def plot_pieces(points: Sequence[Point], pieces: Sequence[Sequence[int]], ax,
                title: str = '', label_vertices: bool = False):
    """Fill each monotone piece with its own colour."""
    vertices = np.asarray(points, dtype=float)
    for k, ids in enumerate(pieces):
        color = PIECE_COLORS[k % len(PIECE_COLORS)]
        ax.add_patch(MplPolygon(vertices[list(ids)], closed=True, alpha=0.35,
                                facecolor=color, edgecolor=color, linewidth=1.0))
    _outline(ax, vertices, label_vertices)

    ax.set_aspect('equal')
    ax.set_title(title)
    return ax


def save_figure(points: Sequence[Point], result: TriangulationResult, path: Union[str, Path],
                label_vertices: Optional[bool] = None, dpi: int = 150) -> Path:
    """Pieces on the left, triangles on the right, written to ``path``."""
    if label_vertices is None:
        label_vertices = len(points) <= 40
    fig, axes = plt.subplots(1, 2, figsize=(12, 6))
    plot_pieces(points, result.pieces, axes[0],
                title=f'{len(result.pieces)} monotone pieces, {len(result.diagonals)} diagonals',
                label_vertices=label_vertices)
    plot_triangulation(points, result.triangles, axes[1],
                       title=f'{len(result.triangles)} triangles', label_vertices=label_vertices)
    fig.tight_layout()

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi)
    plt.close(fig)
    return path


def use_headless_backend() -> None:
    """Switch to a non-interactive backend (CLI and tests)."""
    matplotlib.use('Agg')

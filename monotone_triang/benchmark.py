"""
Timing runs of the full pipeline over the generated shape families.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from .config import DEFAULT_CONFIG, TriangulationConfig
from .shapes import make_shape
from .triangulate import triangulate_polygon

logger = logging.getLogger(__name__)

COLUMNS = ['shape', 'n', 'run', 'diagonals', 'pieces', 'triangles', 'time_ms']


def run_benchmark(sizes: Iterable[int], shapes: Iterable[str] = ('convex', 'random', 'star', 'comb'),
                  runs: int = 3, config: TriangulationConfig = DEFAULT_CONFIG,
                  csv_path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """One row per (shape, size, run)."""
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")
    rows = []
    for shape in shapes:
        for n in sizes:
            pts = make_shape(shape, n)
            for run in range(runs):
                start = time.perf_counter()
                result = triangulate_polygon(pts, config)
                elapsed_ms = (time.perf_counter() - start) * 1000
                rows.append([shape, len(pts), run, len(result.diagonals), len(result.pieces),
                             len(result.triangles), elapsed_ms])
            logger.info("%s n=%d: %.3f ms (last of %d)", shape, len(pts), elapsed_ms, runs)

    df = pd.DataFrame(rows, columns=COLUMNS)
    if csv_path is not None:
        csv_path = Path(csv_path)
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(csv_path, index=False)
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and standard deviation of time per (shape, n)."""
    summary = df.groupby(['shape', 'n']).agg({
        'time_ms': ['mean', 'std'],
        'pieces': 'first',
        'triangles': 'first',
    }).reset_index()
    summary.columns = ['shape', 'n', 'time_mean', 'time_std', 'pieces', 'triangles']
    return summary

"""
Numeric tolerances and switches shared by the pipeline stages.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class TriangulationConfig:
    # Interpolated-x gap under which two active edges are coincident
    tie_epsilon: float = 1e-4
    # Departure-angle gap (radians) under which coincident edges compare equal
    angle_epsilon: float = 1e-3
    # Shoelace area under which the input counts as collinear
    area_epsilon: float = 1e-12
    # Reverse clockwise input instead of failing on it
    normalize_winding: bool = False
    # Scan piece edges before accepting a same-chain triangle
    check_visibility: bool = True

    def with_overrides(self, **changes) -> "TriangulationConfig":
        """Copy with some fields replaced; ``None`` values are ignored."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes)


DEFAULT_CONFIG = TriangulationConfig()

# File: src/score_cutter/layout/__init__.py
"""
Layout module: free placement of cell copies.

This module provides:
- PlacedTile, a decoupled copy of a cell with its own position
- Automatic placement of newly added tiles
- Edge snapping with alignment guide lines

Example:
    >>> from score_cutter.layout import calculate_snap
    >>> from score_cutter.geometry import Rect
    >>> result = calculate_snap(Rect(0, 0, 100, 100), [Rect(200, 0, 100, 100)], 205, 40)
    >>> print(result.x, result.snapped_x)  # 200 True
"""

from .placed_tile import (
    PlacedTile,
    create_placed_tile,
    next_placement_position,
)

from .snap import (
    SNAP_THRESHOLD,
    SnapConfig,
    GuideOrientation,
    GuideLine,
    SnapResult,
    calculate_snap,
)

__all__ = [
    # Placed tiles
    "PlacedTile",
    "create_placed_tile",
    "next_placement_position",
    # Snapping
    "SNAP_THRESHOLD",
    "SnapConfig",
    "GuideOrientation",
    "GuideLine",
    "SnapResult",
    "calculate_snap",
]

# File: src/score_cutter/strokes/__init__.py
"""
Freehand annotation strokes on placed tiles.

This module provides:
- Stroke / StrokeFragment data models (tile-local coordinates)
- Topmost-tile hit testing
- Liang-Barsky segment clipping
- Splitting of layout-space strokes into per-tile fragments
"""

from .stroke import Stroke, StrokeFragment, polyline_length

from .stroke_clipping import (
    StrokeConfig,
    find_tile_containing_point,
    clip_segment_to_rect,
    split_stroke_by_tiles,
)

__all__ = [
    "Stroke",
    "StrokeFragment",
    "polyline_length",
    "StrokeConfig",
    "find_tile_containing_point",
    "clip_segment_to_rect",
    "split_stroke_by_tiles",
]

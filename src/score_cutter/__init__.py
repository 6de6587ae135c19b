# File: src/score_cutter/__init__.py
"""
Score cutter: cut scanned sheet-music pages into labeled cells and lay the
cells out freely.

Subpackages:
    geometry: Point / Rect primitives.
    cell_decomposition: Cut lines, image-to-cell decomposition, stable labels.
    layout: Placed tiles, automatic placement, edge snapping.
    strokes: Annotation strokes split over placed tiles.
    workspace: Mutable session tying the above together.
    utils: Logging configuration.
"""

from .cell_decomposition import (
    decompose_image_to_cells,
    find_cell_bounds_at_point,
    assign_cell_labels,
)
from .layout import calculate_snap
from .strokes import split_stroke_by_tiles
from .workspace import Workspace

__version__ = "0.1.0"

__all__ = [
    "decompose_image_to_cells",
    "find_cell_bounds_at_point",
    "assign_cell_labels",
    "calculate_snap",
    "split_stroke_by_tiles",
    "Workspace",
]

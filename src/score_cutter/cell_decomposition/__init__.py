# File: src/score_cutter/cell_decomposition/__init__.py
"""
Cell decomposition module for image cutting.

This module provides:
- Cut line models (horizontal / vertical, with applicability bounds)
- Image-to-cell decomposition and point-to-cell lookup
- Stable label assignment across recomputations

Example:
    >>> from score_cutter.cell_decomposition import (
    ...     ScoreImage, HorizontalLine, decompose_image_to_cells,
    ... )
    >>> image = ScoreImage(id="img1", width=800, height=600)
    >>> cells = decompose_image_to_cells(image, [HorizontalLine(300, 0, 800)], [])
    >>> print([c.label for c in cells])  # ['1', '2']
"""

from .cut_lines import (
    CutDirection,
    CutLine,
    HorizontalLine,
    VerticalLine,
    cut_line_from_dict,
)

from .cell_types import (
    ScoreImage,
    Cell,
    CellBounds,
    make_cell_id,
    serialize_cells,
    deserialize_cells,
)

from .cell_segmentation import (
    decompose_image_to_cells,
    find_cell_bounds_at_point,
)

from .cell_labeling import (
    LabelConfig,
    LabelAssignment,
    assign_cell_labels,
)

__all__ = [
    # Cut lines
    "CutDirection",
    "CutLine",
    "HorizontalLine",
    "VerticalLine",
    "cut_line_from_dict",
    # Cell types
    "ScoreImage",
    "Cell",
    "CellBounds",
    "make_cell_id",
    "serialize_cells",
    "deserialize_cells",
    # Segmentation
    "decompose_image_to_cells",
    "find_cell_bounds_at_point",
    # Labeling
    "LabelConfig",
    "LabelAssignment",
    "assign_cell_labels",
]

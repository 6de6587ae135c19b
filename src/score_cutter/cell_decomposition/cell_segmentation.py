# File: src/score_cutter/cell_decomposition/cell_segmentation.py
"""
Cell segmentation for cut images.

Derives the rectangle partition of an image from its cut lines, and finds
the partition region under a point without building the whole partition.

Algorithm (decomposition):
    Starting from the full image region (0, 0, width, height):
    1. Collect horizontal lines whose x-bounds cover the region and whose y
       lies strictly inside it; collect vertical lines symmetrically
    2. Build sorted, de-duplicated edge positions per axis:
       region edges + applicable line positions
    3. If neither axis has an interior position -> emit the region as a cell
    4. Otherwise recurse into every grid sub-region, rows top-to-bottom,
       columns left-to-right within a row

    Step 4's visiting order is the canonical cell order; provisional labels
    are assigned 1, 2, 3, ... in that order.

    Recursing (instead of cutting once with every line) is what gives bounded
    lines their meaning: a line bounded to a sub-region only applies once the
    recursion has narrowed down to that sub-region.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .cell_types import Cell, CellBounds, ScoreImage, make_cell_id
from .cut_lines import HorizontalLine, VerticalLine
from ..utils.logging_config import TRACE_LEVEL

logger = logging.getLogger(__name__)


def _grid_positions(
    left_x: float,
    top_y: float,
    right_x: float,
    bottom_y: float,
    h_lines: Sequence[HorizontalLine],
    v_lines: Sequence[VerticalLine],
) -> Tuple[List[float], List[float]]:
    """Sorted, de-duplicated x and y grid positions for a region.

    Returns:
        Tuple of (x_positions, y_positions), each starting and ending with
        the region's own edges.
    """
    region = (left_x, top_y, right_x, bottom_y)

    inner_y = {hl.y for hl in h_lines if hl.applies_to(*region)}
    inner_x = {vl.x for vl in v_lines if vl.applies_to(*region)}

    y_positions = [top_y] + sorted(inner_y) + [bottom_y]
    x_positions = [left_x] + sorted(inner_x) + [right_x]
    return x_positions, y_positions


def decompose_image_to_cells(
    image: ScoreImage,
    h_lines: Sequence[HorizontalLine],
    v_lines: Sequence[VerticalLine],
) -> List[Cell]:
    """Partition an image into leaf cells using its cut lines.

    Args:
        image: Source image (only id and size are used).
        h_lines: Horizontal cut lines for this image.
        v_lines: Vertical cut lines for this image.

    Returns:
        Cells in canonical traversal order with provisional labels "1", "2", ...
        Their rects exactly tile (0, 0, image.width, image.height).
    """
    cells: List[Cell] = []

    def subdivide(left_x: float, top_y: float, right_x: float, bottom_y: float) -> None:
        # Degenerate regions can't hold a cell and would recurse forever
        if right_x <= left_x or bottom_y <= top_y:
            logger.log(
                TRACE_LEVEL,
                "Dropping degenerate region (%s, %s, %s, %s)",
                left_x, top_y, right_x, bottom_y,
            )
            return

        x_positions, y_positions = _grid_positions(
            left_x, top_y, right_x, bottom_y, h_lines, v_lines
        )

        if len(x_positions) == 2 and len(y_positions) == 2:
            label = str(len(cells) + 1)
            cells.append(
                Cell(
                    id=make_cell_id(image.id, label),
                    image_id=image.id,
                    label=label,
                    rect=CellBounds(left_x, top_y, right_x, bottom_y).to_rect(),
                )
            )
            return

        logger.log(
            TRACE_LEVEL,
            "Region (%s, %s, %s, %s) splits into %d x %d",
            left_x, top_y, right_x, bottom_y,
            len(x_positions) - 1, len(y_positions) - 1,
        )

        for row in range(len(y_positions) - 1):
            for col in range(len(x_positions) - 1):
                subdivide(
                    x_positions[col],
                    y_positions[row],
                    x_positions[col + 1],
                    y_positions[row + 1],
                )

    subdivide(0, 0, image.width, image.height)

    logger.debug(
        "Image %s: %d horizontal + %d vertical lines -> %d cells",
        image.id, len(h_lines), len(v_lines), len(cells),
    )
    return cells


def _band_index(value: float, positions: List[float]) -> int:
    """Index of the half-open band [positions[i], positions[i + 1]) holding value.

    Falls back to the last band when no band holds the value, which covers
    points on or beyond the final boundary.
    """
    last = len(positions) - 2
    for i in range(last + 1):
        if positions[i] <= value < positions[i + 1]:
            return i
    return last


def find_cell_bounds_at_point(
    x: float,
    y: float,
    h_lines: Sequence[HorizontalLine],
    v_lines: Sequence[VerticalLine],
    image_width: float,
    image_height: float,
) -> CellBounds:
    """Find the bounds of the partition region containing a point.

    Follows the same recursion as decompose_image_to_cells but only descends
    into the single sub-region holding the point, so the result always
    matches one of the decomposed cells. Used for live preview while
    drawing and to bound newly drawn lines.

    Args:
        x: Point x in image pixels.
        y: Point y in image pixels.
        h_lines: Horizontal cut lines for the image.
        v_lines: Vertical cut lines for the image.
        image_width: Image width in pixels.
        image_height: Image height in pixels.

    Returns:
        CellBounds of the leaf region under the point.
    """
    left_x, top_y, right_x, bottom_y = 0, 0, image_width, image_height

    while True:
        x_positions, y_positions = _grid_positions(
            left_x, top_y, right_x, bottom_y, h_lines, v_lines
        )
        if len(x_positions) == 2 and len(y_positions) == 2:
            return CellBounds(left_x, top_y, right_x, bottom_y)

        row = _band_index(y, y_positions)
        col = _band_index(x, x_positions)
        left_x, right_x = x_positions[col], x_positions[col + 1]
        top_y, bottom_y = y_positions[row], y_positions[row + 1]

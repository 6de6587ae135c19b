# File: src/score_cutter/workspace/workspace.py
"""
In-memory cutting and layout session.

A Workspace holds everything a user works on at once: source images, their
cut lines and cells, the placed tiles on the layout, and the strokes drawn
on those tiles. It wires the pure algorithms together the way the editing
workflow needs them:

    line added/moved/removed -> decompose every image -> relabel against the
    previous cells with that image's counter

    tile dragged -> snap against the other tiles

    stroke finished -> split over the tiles -> store one Stroke per fragment

Rendering, pointer handling, image decoding and persistence stay with the
caller. Lookups of unknown ids log a warning and return None.

Example:
    >>> ws = Workspace()
    >>> ws.add_image(ScoreImage(id="img1", width=800, height=600))
    >>> ws.add_vertical_line("img1", 400, 100)
    >>> print([c.label for c in ws.cells_for_image("img1")])  # ['1', '2']
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..cell_decomposition.cell_labeling import assign_cell_labels
from ..cell_decomposition.cell_segmentation import (
    decompose_image_to_cells,
    find_cell_bounds_at_point,
)
from ..cell_decomposition.cell_types import Cell, CellBounds, ScoreImage
from ..cell_decomposition.cut_lines import (
    CutDirection,
    CutLine,
    HorizontalLine,
    VerticalLine,
)
from ..geometry.rect import Point, Rect, bounding_box
from ..layout.placed_tile import PlacedTile, create_placed_tile, next_placement_position
from ..layout.snap import SnapResult, calculate_snap
from ..strokes.stroke import Stroke
from ..strokes.stroke_clipping import split_stroke_by_tiles
from .workspace_config import LABEL_POSITION_CYCLE, LabelPosition, WorkspaceConfig

logger = logging.getLogger(__name__)


class Workspace:
    """Mutable cutting/layout session. Not thread-safe."""

    def __init__(self, config: Optional[WorkspaceConfig] = None) -> None:
        self.config = config or WorkspaceConfig()
        self.config.validate()

        self.images: List[ScoreImage] = []
        self.horizontal_lines: List[HorizontalLine] = []
        self.vertical_lines: List[VerticalLine] = []
        self.cells: List[Cell] = []
        self.next_number_by_image: Dict[str, int] = {}

        self.placed_tiles: List[PlacedTile] = []
        self.selected_tile_id: Optional[str] = None
        self.strokes: List[Stroke] = []

        self.label_position = LabelPosition.TOP_LEFT

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def add_image(self, image: ScoreImage) -> ScoreImage:
        """Add a source image and compute its initial single cell."""
        self.images.append(image)
        logger.info("Added image %s (%s x %s)", image.id, image.width, image.height)
        self.recalculate_cells()
        return image

    def get_image(self, image_id: str) -> Optional[ScoreImage]:
        for image in self.images:
            if image.id == image_id:
                return image
        return None

    def remove_image(self, image_id: str) -> Optional[ScoreImage]:
        """Remove an image with its lines and cells.

        Tiles already placed from its cells stay on the layout.
        """
        image = self.get_image(image_id)
        if image is None:
            logger.warning("remove_image: unknown image %s", image_id)
            return None

        self.images.remove(image)
        self.next_number_by_image.pop(image_id, None)
        self.horizontal_lines = [l for l in self.horizontal_lines if l.image_id != image_id]
        self.vertical_lines = [l for l in self.vertical_lines if l.image_id != image_id]
        self.recalculate_cells()
        return image

    # ------------------------------------------------------------------
    # Cut lines
    # ------------------------------------------------------------------

    def lines_for_image(
        self, image_id: str
    ) -> Tuple[List[HorizontalLine], List[VerticalLine]]:
        """Return (horizontal_lines, vertical_lines) belonging to an image."""
        return (
            [l for l in self.horizontal_lines if l.image_id == image_id],
            [l for l in self.vertical_lines if l.image_id == image_id],
        )

    def add_line(self, line: CutLine) -> Optional[CutLine]:
        """Add a cut line with explicit bounds and recompute cells."""
        if self.get_image(line.image_id) is None:
            logger.warning("add_line: unknown image %s", line.image_id)
            return None

        if line.direction is CutDirection.HORIZONTAL:
            self.horizontal_lines.append(line)
        else:
            self.vertical_lines.append(line)
        self.recalculate_cells()
        return line

    def _cell_bounds_at(self, image: ScoreImage, x: float, y: float) -> CellBounds:
        h_lines, v_lines = self.lines_for_image(image.id)
        return find_cell_bounds_at_point(
            x, y, h_lines, v_lines, image.width, image.height
        )

    def add_horizontal_line(
        self,
        image_id: str,
        x: float,
        y: float,
        left_bound_x: Optional[float] = None,
        right_bound_x: Optional[float] = None,
    ) -> Optional[HorizontalLine]:
        """Draw a horizontal cut at y through the point (x, y).

        Args:
            image_id: Image to cut.
            x: Click x in image pixels, selects the cell to split.
            y: Line position in image pixels.
            left_bound_x: Explicit left bound (cell under the point if not provided).
            right_bound_x: Explicit right bound (cell under the point if not provided).

        Returns:
            The new line, or None if the image is unknown.
        """
        image = self.get_image(image_id)
        if image is None:
            logger.warning("add_horizontal_line: unknown image %s", image_id)
            return None

        if left_bound_x is None or right_bound_x is None:
            bounds = self._cell_bounds_at(image, x, y)
            left_bound_x = bounds.left_x if left_bound_x is None else left_bound_x
            right_bound_x = bounds.right_x if right_bound_x is None else right_bound_x

        line = HorizontalLine(
            y=y,
            left_bound_x=left_bound_x,
            right_bound_x=right_bound_x,
            image_id=image_id,
        )
        return self.add_line(line)

    def add_vertical_line(
        self,
        image_id: str,
        x: float,
        y: float,
        top_bound_y: Optional[float] = None,
        bottom_bound_y: Optional[float] = None,
    ) -> Optional[VerticalLine]:
        """Draw a vertical cut at x through the point (x, y)."""
        image = self.get_image(image_id)
        if image is None:
            logger.warning("add_vertical_line: unknown image %s", image_id)
            return None

        if top_bound_y is None or bottom_bound_y is None:
            bounds = self._cell_bounds_at(image, x, y)
            top_bound_y = bounds.top_y if top_bound_y is None else top_bound_y
            bottom_bound_y = bounds.bottom_y if bottom_bound_y is None else bottom_bound_y

        line = VerticalLine(
            x=x,
            top_bound_y=top_bound_y,
            bottom_bound_y=bottom_bound_y,
            image_id=image_id,
        )
        return self.add_line(line)

    def _find_line(self, line_id: str) -> Optional[CutLine]:
        for line in self.horizontal_lines + self.vertical_lines:
            if line.id == line_id:
                return line
        return None

    def move_line(self, line_id: str, position: float) -> Optional[CutLine]:
        """Move a line along its normal axis (y for horizontal, x for vertical)."""
        line = self._find_line(line_id)
        if line is None:
            logger.warning("move_line: unknown line %s", line_id)
            return None

        if isinstance(line, HorizontalLine):
            line.y = position
        else:
            line.x = position
        self.recalculate_cells()
        return line

    def remove_line(self, line_id: str) -> Optional[CutLine]:
        line = self._find_line(line_id)
        if line is None:
            logger.warning("remove_line: unknown line %s", line_id)
            return None

        if isinstance(line, HorizontalLine):
            self.horizontal_lines.remove(line)
        else:
            self.vertical_lines.remove(line)
        self.recalculate_cells()
        return line

    def clear_lines(self, image_id: str) -> None:
        """Remove all lines of an image and restart its label numbering."""
        if self.get_image(image_id) is None:
            logger.warning("clear_lines: unknown image %s", image_id)
            return

        self.horizontal_lines = [l for l in self.horizontal_lines if l.image_id != image_id]
        self.vertical_lines = [l for l in self.vertical_lines if l.image_id != image_id]
        self.cells = [c for c in self.cells if c.image_id != image_id]
        self.next_number_by_image.pop(image_id, None)
        self.recalculate_cells()

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------

    def cells_for_image(self, image_id: str) -> List[Cell]:
        return [c for c in self.cells if c.image_id == image_id]

    def get_cell(self, cell_id: str) -> Optional[Cell]:
        for cell in self.cells:
            if cell.id == cell_id:
                return cell
        return None

    def recalculate_cells(self) -> List[Cell]:
        """Recompute and relabel the cells of every image."""
        new_cells: List[Cell] = []
        for image in self.images:
            h_lines, v_lines = self.lines_for_image(image.id)
            raw_cells = decompose_image_to_cells(image, h_lines, v_lines)
            assignment = assign_cell_labels(
                raw_cells,
                self.cells_for_image(image.id),
                self.next_number_by_image.get(image.id, self.config.labels.first_number),
            )
            new_cells.extend(assignment.cells)
            self.next_number_by_image[image.id] = assignment.next_number

        self.cells = new_cells
        return self.cells

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def get_tile(self, tile_id: str) -> Optional[PlacedTile]:
        for tile in self.placed_tiles:
            if tile.id == tile_id:
                return tile
        return None

    def place_cell(self, cell_id: str) -> Optional[PlacedTile]:
        """Put a copy of a cell on the layout next to the existing tiles."""
        cell = self.get_cell(cell_id)
        if cell is None:
            logger.warning("place_cell: unknown cell %s", cell_id)
            return None

        x, y = next_placement_position(self.placed_tiles)
        tile = create_placed_tile(cell, x, y)
        self.placed_tiles.append(tile)
        logger.debug("Placed cell %s as tile %s at (%s, %s)", cell_id, tile.id, x, y)
        return tile

    def move_tile(self, tile_id: str, x: float, y: float) -> Optional[PlacedTile]:
        tile = self.get_tile(tile_id)
        if tile is None:
            logger.warning("move_tile: unknown tile %s", tile_id)
            return None

        tile.x = x
        tile.y = y
        return tile

    def drag_tile(self, tile_id: str, x: float, y: float) -> Optional[SnapResult]:
        """Move a tile to a dragged position, snapped to the other tiles.

        Returns:
            The SnapResult (its guide lines are for display only), or None if
            the tile is unknown.
        """
        tile = self.get_tile(tile_id)
        if tile is None:
            logger.warning("drag_tile: unknown tile %s", tile_id)
            return None

        others = [t.placement_rect for t in self.placed_tiles if t.id != tile_id]
        result = calculate_snap(tile.placement_rect, others, x, y, self.config.snap)
        tile.x = result.x
        tile.y = result.y
        return result

    def nudge_tile(
        self, tile_id: str, dx: int, dy: int, large: bool = False
    ) -> Optional[PlacedTile]:
        """Move a tile by whole steps, e.g. dx=-1 for one step left."""
        tile = self.get_tile(tile_id)
        if tile is None:
            logger.warning("nudge_tile: unknown tile %s", tile_id)
            return None

        step = self.config.large_nudge_step if large else self.config.nudge_step
        return self.move_tile(tile_id, tile.x + dx * step, tile.y + dy * step)

    def select_tile(self, tile_id: Optional[str]) -> None:
        self.selected_tile_id = tile_id

    def remove_tile(self, tile_id: str) -> Optional[PlacedTile]:
        """Remove a tile together with the strokes drawn on it."""
        tile = self.get_tile(tile_id)
        if tile is None:
            logger.warning("remove_tile: unknown tile %s", tile_id)
            return None

        self.placed_tiles.remove(tile)
        self.remove_strokes_for_tile(tile_id)
        if self.selected_tile_id == tile_id:
            self.selected_tile_id = None
        return tile

    def clear_layout(self) -> None:
        self.placed_tiles = []
        self.strokes = []
        self.selected_tile_id = None

    def layout_bounds(self) -> Optional[Rect]:
        """Bounding box of all placed tiles, e.g. the export canvas size."""
        return bounding_box(t.placement_rect for t in self.placed_tiles)

    def cycle_label_position(self) -> LabelPosition:
        index = LABEL_POSITION_CYCLE.index(self.label_position)
        self.label_position = LABEL_POSITION_CYCLE[(index + 1) % len(LABEL_POSITION_CYCLE)]
        return self.label_position

    # ------------------------------------------------------------------
    # Strokes
    # ------------------------------------------------------------------

    def add_stroke(
        self,
        points: Sequence[Point],
        color: Optional[str] = None,
        width: Optional[float] = None,
    ) -> List[Stroke]:
        """Split a layout-space stroke over the tiles and store the pieces.

        Args:
            points: Stroke polyline in layout coordinates.
            color: Stroke color (config default if not provided).
            width: Stroke width (config default if not provided).

        Returns:
            The stored strokes, one per tile per contiguous run.
        """
        fragments = split_stroke_by_tiles(
            points,
            self.placed_tiles,
            color if color is not None else self.config.default_stroke_color,
            width if width is not None else self.config.default_stroke_width,
            self.config.strokes,
        )
        stored = [Stroke.from_fragment(f) for f in fragments]
        self.strokes.extend(stored)
        return stored

    def strokes_for_tile(self, tile_id: str) -> List[Stroke]:
        return [s for s in self.strokes if s.placed_tile_id == tile_id]

    def remove_stroke(self, stroke_id: str) -> Optional[Stroke]:
        for stroke in self.strokes:
            if stroke.id == stroke_id:
                self.strokes.remove(stroke)
                return stroke
        logger.warning("remove_stroke: unknown stroke %s", stroke_id)
        return None

    def remove_strokes_for_tile(self, tile_id: str) -> None:
        self.strokes = [s for s in self.strokes if s.placed_tile_id != tile_id]

    def undo_last_stroke(self) -> Optional[Stroke]:
        """Remove the most recently stored stroke piece."""
        if not self.strokes:
            return None
        return self.strokes.pop()

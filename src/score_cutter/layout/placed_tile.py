# File: src/score_cutter/layout/placed_tile.py
"""
Placed tile data model.

A PlacedTile is an independent copy of a cell positioned on the layout
canvas. It copies the cell's rect and label at placement time, so later
re-cutting of the source image, or moving other copies of the same cell,
never changes it.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from ..cell_decomposition.cell_types import Cell
from ..geometry.rect import Rect, bounding_box


@dataclass
class PlacedTile:
    """A cell copy placed on the layout.

    Attributes:
        cell_id: Source cell identifier (for duplicate checks and pixel lookup).
        x: Layout x of the tile's top-left corner.
        y: Layout y of the tile's top-left corner.
        label: Label copied from the source cell.
        rect: Source rect copied from the cell, in image pixels.
        id: Unique identifier of this placement.
    """
    cell_id: str
    x: float
    y: float
    label: str
    rect: Rect
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def width(self) -> float:
        return self.rect.width

    @property
    def height(self) -> float:
        return self.rect.height

    @property
    def placement_rect(self) -> Rect:
        """The tile's footprint in layout coordinates."""
        return self.rect.moved_to(self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "cell_id": self.cell_id,
            "x": self.x,
            "y": self.y,
            "label": self.label,
            "rect": self.rect.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlacedTile":
        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            cell_id=data.get("cell_id", ""),
            x=float(data["x"]),
            y=float(data["y"]),
            label=str(data.get("label", "")),
            rect=Rect.from_dict(data["rect"]),
        )


def create_placed_tile(
    cell: Cell,
    x: float,
    y: float,
    tile_id: Optional[str] = None,
) -> PlacedTile:
    """Copy a cell onto the layout at (x, y)."""
    tile = PlacedTile(
        cell_id=cell.id,
        x=x,
        y=y,
        label=cell.label,
        rect=Rect(cell.rect.x, cell.rect.y, cell.rect.width, cell.rect.height),
    )
    if tile_id is not None:
        tile.id = tile_id
    return tile


def next_placement_position(placed_tiles: Sequence[PlacedTile]) -> Tuple[float, float]:
    """Where to put the next tile added to the layout.

    The first tile goes at the origin. After that the new tile is appended
    beside the bounding box of the current layout: to its right when the
    layout is taller than it is wide, below it otherwise. This keeps the
    layout growing toward a square.

    Args:
        placed_tiles: Tiles currently on the layout.

    Returns:
        Tuple of (x, y) for the new tile's top-left corner.
    """
    box = bounding_box(t.placement_rect for t in placed_tiles)
    if box is None:
        return 0.0, 0.0

    if box.height > box.width:
        return box.right, box.top
    return box.left, box.bottom

# File: src/score_cutter/cell_decomposition/cell_types.py
"""
Cell data model for image cutting.

A Cell is a leaf rectangle of the current partition of one source image.
For a fixed image and line set the cells tile the image exactly: no gaps,
no overlaps. Cells are recomputed in full on every line change and are
never edited in place.

Hierarchy: ScoreImage -> (cut lines) -> Cell -> PlacedTile
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List

from ..geometry.rect import Rect


@dataclass
class ScoreImage:
    """A source image to be cut. Pixel data is held by the caller.

    Attributes:
        id: Unique identifier.
        width: Image width in pixels.
        height: Image height in pixels.
        name: Display name, typically the file name.
    """
    id: str
    width: float
    height: float
    name: str = ""

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"ScoreImage {self.id!r} must have a positive size, "
                f"got {self.width} x {self.height}"
            )

    @property
    def rect(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreImage":
        return cls(
            id=data["id"],
            width=float(data["width"]),
            height=float(data["height"]),
            name=data.get("name", ""),
        )


@dataclass(frozen=True)
class CellBounds:
    """Edge positions of a region of the partition.

    Returned by the point locator; also the shape of every region visited
    during decomposition.
    """
    left_x: float
    top_y: float
    right_x: float
    bottom_y: float

    @property
    def width(self) -> float:
        return self.right_x - self.left_x

    @property
    def height(self) -> float:
        return self.bottom_y - self.top_y

    def to_rect(self) -> Rect:
        return Rect.from_edges(self.left_x, self.top_y, self.right_x, self.bottom_y)

    def to_dict(self) -> Dict[str, float]:
        return {
            "left_x": self.left_x,
            "top_y": self.top_y,
            "right_x": self.right_x,
            "bottom_y": self.bottom_y,
        }


def make_cell_id(image_id: str, label: str) -> str:
    """Build the cell identifier for an image and label, e.g. "img1-3"."""
    return f"{image_id}-{label}"


@dataclass
class Cell:
    """A leaf rectangle of an image partition.

    Attributes:
        id: Unique identifier, "<image_id>-<label>".
        image_id: Owning image identifier.
        label: Short identity label, numeric string by default.
        rect: Cell rectangle in source-image pixels.
    """
    id: str
    image_id: str
    label: str
    rect: Rect

    def with_label(self, label: str) -> "Cell":
        """Return a copy of this cell carrying a different label (and id)."""
        return Cell(
            id=make_cell_id(self.image_id, label),
            image_id=self.image_id,
            label=label,
            rect=self.rect,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize cell to dictionary."""
        return {
            "id": self.id,
            "image_id": self.image_id,
            "label": self.label,
            "rect": self.rect.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cell":
        """Deserialize cell from dictionary.

        Args:
            data: Dictionary with cell fields.

        Returns:
            Cell instance.
        """
        image_id = data.get("image_id", "")
        label = str(data.get("label", ""))
        return cls(
            id=data.get("id") or make_cell_id(image_id, label),
            image_id=image_id,
            label=label,
            rect=Rect.from_dict(data["rect"]),
        )


def serialize_cells(cells: List[Cell]) -> str:
    """Serialize a list of cells to JSON string.

    Args:
        cells: List of Cell objects.

    Returns:
        JSON string representation.
    """
    return json.dumps([c.to_dict() for c in cells], indent=2)


def deserialize_cells(json_str: str) -> List[Cell]:
    """Deserialize a JSON string to a list of cells.

    Args:
        json_str: JSON string (array of cell dicts).

    Returns:
        List of Cell objects.
    """
    data = json.loads(json_str)
    return [Cell.from_dict(d) for d in data]

# File: src/score_cutter/strokes/stroke.py
"""
Freehand stroke data model.

Strokes are stored against a single placed tile, with points in that tile's
local coordinates (origin at the tile's top-left corner). A gesture drawn
across several tiles is split into one stroke per tile per contiguous run
before storage, so each piece redraws correctly wherever its tile is moved.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..geometry.rect import Point


def polyline_length(points: List[Point]) -> float:
    """Total length of a polyline."""
    return sum(
        math.hypot(b.x - a.x, b.y - a.y) for a, b in zip(points, points[1:])
    )


@dataclass
class StrokeFragment:
    """A tile-scoped piece of a stroke, not yet stored.

    Attributes:
        placed_tile_id: Tile the fragment belongs to.
        points: Points in the tile's local coordinates.
        color: Stroke color, e.g. "#ffffff".
        width: Stroke width in layout pixels.
    """
    placed_tile_id: str
    points: List[Point]
    color: str
    width: float

    def __post_init__(self):
        if self.width < 0:
            raise ValueError(f"Stroke width must be >= 0, got {self.width}")

    @property
    def length(self) -> float:
        return polyline_length(self.points)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "placed_tile_id": self.placed_tile_id,
            "points": [p.to_dict() for p in self.points],
            "color": self.color,
            "width": self.width,
        }


@dataclass
class Stroke(StrokeFragment):
    """A stored stroke.

    Attributes:
        id: Unique identifier.
    """
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_fragment(cls, fragment: StrokeFragment) -> "Stroke":
        return cls(
            placed_tile_id=fragment.placed_tile_id,
            points=list(fragment.points),
            color=fragment.color,
            width=fragment.width,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["id"] = self.id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Stroke":
        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            placed_tile_id=data["placed_tile_id"],
            points=[Point.from_dict(p) for p in data.get("points", [])],
            color=data.get("color", "#ffffff"),
            width=float(data.get("width", 0)),
        )

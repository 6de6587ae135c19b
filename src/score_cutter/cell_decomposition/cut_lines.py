# File: src/score_cutter/cell_decomposition/cut_lines.py
"""Cut line models.

A cut line divides an image along one axis, but only inside the span given
by its applicability bounds. A line drawn inside a region that is already
cut gets the bounds of that region, so it splits the region alone instead
of running across the whole image.

Key Types:
    CutDirection: Which axis a line divides.
    HorizontalLine: Divider at a fixed y, bounded in x.
    VerticalLine: Divider at a fixed x, bounded in y.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Union


class CutDirection(Enum):
    """Axis along which a cut line runs."""

    HORIZONTAL = "horizontal"
    """Line of constant y, splits a region into rows."""

    VERTICAL = "vertical"
    """Line of constant x, splits a region into columns."""


def _new_line_id() -> str:
    return str(uuid.uuid4())


@dataclass
class HorizontalLine:
    """Horizontal cut line.

    Attributes:
        y: Vertical position of the line in image pixels.
        left_bound_x: Leftmost x where the line takes effect.
        right_bound_x: Rightmost x where the line takes effect.
        image_id: Image the line belongs to.
        id: Unique identifier.
    """
    y: float
    left_bound_x: float
    right_bound_x: float
    image_id: str = ""
    id: str = field(default_factory=_new_line_id)

    @property
    def direction(self) -> CutDirection:
        return CutDirection.HORIZONTAL

    @property
    def position(self) -> float:
        return self.y

    def applies_to(
        self, left_x: float, top_y: float, right_x: float, bottom_y: float
    ) -> bool:
        """Check if this line divides the given region.

        The bounds must cover the region's full width and the line must sit
        strictly inside its height. A line on the region's edge has already
        produced that edge and does nothing further.
        """
        return (
            self.left_bound_x <= left_x
            and self.right_bound_x >= right_x
            and top_y < self.y < bottom_y
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["direction"] = self.direction.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HorizontalLine":
        return cls(
            y=float(data["y"]),
            left_bound_x=float(data["left_bound_x"]),
            right_bound_x=float(data["right_bound_x"]),
            image_id=data.get("image_id", ""),
            id=data.get("id") or _new_line_id(),
        )


@dataclass
class VerticalLine:
    """Vertical cut line.

    Attributes:
        x: Horizontal position of the line in image pixels.
        top_bound_y: Topmost y where the line takes effect.
        bottom_bound_y: Bottommost y where the line takes effect.
        image_id: Image the line belongs to.
        id: Unique identifier.
    """
    x: float
    top_bound_y: float
    bottom_bound_y: float
    image_id: str = ""
    id: str = field(default_factory=_new_line_id)

    @property
    def direction(self) -> CutDirection:
        return CutDirection.VERTICAL

    @property
    def position(self) -> float:
        return self.x

    def applies_to(
        self, left_x: float, top_y: float, right_x: float, bottom_y: float
    ) -> bool:
        """Check if this line divides the given region.

        Mirror of HorizontalLine.applies_to with the axes swapped.
        """
        return (
            self.top_bound_y <= top_y
            and self.bottom_bound_y >= bottom_y
            and left_x < self.x < right_x
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["direction"] = self.direction.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VerticalLine":
        return cls(
            x=float(data["x"]),
            top_bound_y=float(data["top_bound_y"]),
            bottom_bound_y=float(data["bottom_bound_y"]),
            image_id=data.get("image_id", ""),
            id=data.get("id") or _new_line_id(),
        )


CutLine = Union[HorizontalLine, VerticalLine]


def cut_line_from_dict(data: Dict[str, Any]) -> CutLine:
    """Deserialize either kind of cut line using its ``direction`` tag.

    Args:
        data: Dictionary produced by ``to_dict`` of either line type.

    Returns:
        HorizontalLine or VerticalLine.

    Raises:
        ValueError: If the direction tag is missing or unknown.
    """
    direction = CutDirection(data.get("direction"))
    if direction is CutDirection.HORIZONTAL:
        return HorizontalLine.from_dict(data)
    return VerticalLine.from_dict(data)

# File: src/score_cutter/geometry/rect.py
"""
Axis-aligned rectangle and point primitives.

Rectangles are expressed as (x, y, width, height) in whichever coordinate
space the caller is working in: source-image pixels for cells, layout
pixels for placed tiles. The y axis grows downward, so ``top`` is the
smaller y value.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, Optional


@dataclass(frozen=True)
class Point:
    """A 2D point."""
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Point":
        """Return this point translated by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent, never negative.
        height: Vertical extent, never negative.
    """
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        """Validate rectangle size."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size must be non-negative, got {self.width} x {self.height}"
            )

    @classmethod
    def from_edges(
        cls, left: float, top: float, right: float, bottom: float
    ) -> "Rect":
        """Build a rectangle from its four edge positions."""
        return cls(x=left, y=top, width=right - left, height=bottom - top)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def moved_to(self, x: float, y: float) -> "Rect":
        """Return a rectangle of the same size with its top-left at (x, y)."""
        return Rect(x=x, y=y, width=self.width, height=self.height)

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point lies inside the rectangle, edges included."""
        return point_in_rect(x, y, self)

    def contains_rect(self, other: "Rect") -> bool:
        """Check if ``other`` lies entirely inside this rectangle."""
        return (
            other.left >= self.left
            and other.top >= self.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other: "Rect") -> bool:
        """Check if two rectangles overlap or touch."""
        return rects_intersect(self, other)

    def to_dict(self) -> Dict[str, float]:
        """Serialize rectangle to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rect":
        """Deserialize rectangle from dictionary.

        Args:
            data: Dictionary with x, y, width and height.

        Returns:
            Rect instance.
        """
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )


def point_in_rect(x: float, y: float, rect: Rect) -> bool:
    """Check if a point lies inside a rectangle (inclusive on all edges).

    Args:
        x: X-coordinate to test.
        y: Y-coordinate to test.
        rect: Rectangle to test against.

    Returns:
        True if the point is within or on the rectangle bounds.
    """
    return rect.left <= x <= rect.right and rect.top <= y <= rect.bottom


def rects_intersect(rect1: Rect, rect2: Rect) -> bool:
    """Check if two rectangles overlap. Shared edges count as overlap."""
    return not (
        rect1.right < rect2.left
        or rect2.right < rect1.left
        or rect1.bottom < rect2.top
        or rect2.bottom < rect1.top
    )


def bounding_box(rects: Iterable[Rect]) -> Optional[Rect]:
    """Compute the smallest rectangle enclosing all given rectangles.

    Args:
        rects: Rectangles to enclose.

    Returns:
        The enclosing Rect, or None if no rectangles were given.
    """
    rects = list(rects)
    if not rects:
        return None

    min_x = min(r.left for r in rects)
    min_y = min(r.top for r in rects)
    max_x = max(r.right for r in rects)
    max_y = max(r.bottom for r in rects)

    return Rect.from_edges(min_x, min_y, max_x, max_y)

# File: src/score_cutter/geometry/__init__.py
"""
Geometry primitives shared by the cutting and layout stages.

Example:
    >>> from score_cutter.geometry import Rect, bounding_box
    >>> box = bounding_box([Rect(0, 0, 10, 10), Rect(20, 5, 10, 10)])
    >>> print(box.width, box.height)  # 30 15
"""

from .rect import (
    Point,
    Rect,
    point_in_rect,
    rects_intersect,
    bounding_box,
)

__all__ = [
    "Point",
    "Rect",
    "point_in_rect",
    "rects_intersect",
    "bounding_box",
]

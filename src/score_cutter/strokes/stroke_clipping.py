# File: src/score_cutter/strokes/stroke_clipping.py
"""
Stroke clipping against placed tiles.

Splits a freehand polyline drawn in layout coordinates into per-tile
fragments in each tile's local coordinates.

Algorithm (split_stroke_by_tiles):
    For each tile, in layout order:
    1. Clip every consecutive segment of the polyline against the tile's
       footprint (Liang-Barsky)
    2. Shift surviving endpoints into the tile's local frame
    3. Extend the current fragment while each clipped segment starts where
       the previous one ended (within join_epsilon); otherwise start a new
       fragment
    4. A segment entirely outside the tile, or only touching its edge,
       closes the current fragment
    5. Drop fragments with fewer than two points

Overlapping tiles each receive their own copy of the overlapping part.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..geometry.rect import Point, Rect
from ..layout.placed_tile import PlacedTile
from .stroke import StrokeFragment

logger = logging.getLogger(__name__)


@dataclass
class StrokeConfig:
    """Configuration for stroke splitting.

    Attributes:
        join_epsilon: Max per-axis gap between the end of one clipped segment
            and the start of the next for them to join into one fragment.
    """
    join_epsilon: float = 0.001

    def validate(self) -> None:
        """Raise ValueError if the configuration is invalid."""
        if self.join_epsilon < 0:
            raise ValueError(f"join_epsilon must be >= 0, got {self.join_epsilon}")


def find_tile_containing_point(
    x: float,
    y: float,
    placed_tiles: Sequence[PlacedTile],
) -> Optional[PlacedTile]:
    """Find the topmost tile under a layout point.

    Tiles later in the list are drawn on top, so the search runs backwards.
    Containment is half-open: [x, x + width) x [y, y + height).

    Args:
        x: Layout x-coordinate.
        y: Layout y-coordinate.
        placed_tiles: Tiles in drawing order.

    Returns:
        The topmost containing tile, or None.
    """
    for tile in reversed(placed_tiles):
        footprint = tile.placement_rect
        if footprint.left <= x < footprint.right and footprint.top <= y < footprint.bottom:
            return tile
    return None


def clip_segment_to_rect(
    p1: Point,
    p2: Point,
    rect: Rect,
) -> Optional[Tuple[Point, Point]]:
    """Clip a line segment to an axis-aligned rectangle (Liang-Barsky).

    The segment is parametrized as p1 + t * (p2 - p1) for t in [0, 1]. Each
    rectangle edge either narrows [t0, t1] or, for a segment parallel to
    the edge and outside it, rejects the segment outright.

    Args:
        p1: Segment start.
        p2: Segment end.
        rect: Clipping rectangle.

    Returns:
        Tuple of clipped (start, end) points, or None if the segment lies
        entirely outside the rectangle.
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y

    t0 = 0.0
    t1 = 1.0

    # (p, q) per edge: left, right, top, bottom
    constraints = (
        (-dx, p1.x - rect.left),
        (dx, rect.right - p1.x),
        (-dy, p1.y - rect.top),
        (dy, rect.bottom - p1.y),
    )

    for p, q in constraints:
        if p == 0:
            # Parallel to this edge
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            t0 = max(t0, t)
        else:
            t1 = min(t1, t)

    if t0 > t1:
        return None

    return (
        Point(p1.x + t0 * dx, p1.y + t0 * dy),
        Point(p1.x + t1 * dx, p1.y + t1 * dy),
    )


def _points_coincide(a: Point, b: Point, epsilon: float) -> bool:
    return abs(a.x - b.x) < epsilon and abs(a.y - b.y) < epsilon


def _fragments_for_tile(
    points: Sequence[Point],
    tile: PlacedTile,
    epsilon: float,
) -> List[List[Point]]:
    """Contiguous runs of the polyline inside one tile, in local coordinates."""
    footprint = tile.placement_rect
    fragments: List[List[Point]] = []
    current: List[Point] = []

    for start, end in zip(points, points[1:]):
        clipped = clip_segment_to_rect(start, end, footprint)
        if clipped is not None and clipped[0] == clipped[1] and start != end:
            # Segment only touches the tile edge
            clipped = None

        if clipped is None:
            # Segment misses the tile; close the open fragment
            if len(current) >= 2:
                fragments.append(current)
            current = []
            continue

        local_start = clipped[0].offset(-tile.x, -tile.y)
        local_end = clipped[1].offset(-tile.x, -tile.y)

        if current and _points_coincide(current[-1], local_start, epsilon):
            current.append(local_end)
        else:
            if len(current) >= 2:
                fragments.append(current)
            current = [local_start, local_end]

    if len(current) >= 2:
        fragments.append(current)

    return fragments


def split_stroke_by_tiles(
    points: Sequence[Point],
    placed_tiles: Sequence[PlacedTile],
    color: str,
    width: float,
    config: Optional[StrokeConfig] = None,
) -> List[StrokeFragment]:
    """Split a layout-space stroke into per-tile fragments.

    Args:
        points: Stroke polyline in layout coordinates.
        placed_tiles: Tiles currently on the layout.
        color: Stroke color.
        width: Stroke width.
        config: Stroke configuration (uses defaults if not provided).

    Returns:
        Fragments grouped by tile (in tile order), each with at least two
        points in its tile's local coordinates. Empty for strokes with fewer
        than two points or an empty layout.
    """
    config = config or StrokeConfig()

    if len(points) < 2 or not placed_tiles:
        return []

    result: List[StrokeFragment] = []
    for tile in placed_tiles:
        for fragment_points in _fragments_for_tile(points, tile, config.join_epsilon):
            result.append(
                StrokeFragment(
                    placed_tile_id=tile.id,
                    points=fragment_points,
                    color=color,
                    width=width,
                )
            )

    logger.debug(
        "Stroke of %d points split into %d fragments over %d tiles",
        len(points), len(result), len(placed_tiles),
    )
    return result

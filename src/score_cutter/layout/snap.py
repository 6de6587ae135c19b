# File: src/score_cutter/layout/snap.py
"""
Edge snapping for tiles dragged on the layout.

Algorithm:
    1. Compute the moving rectangle's edges at the proposed position
    2. For the canvas origin (a zero-size rectangle at 0, 0) and then every
       candidate rectangle, and separately for each axis, measure four edge
       pairings in this order:
         near-near (left-left / top-top)
         far-far   (right-right / bottom-bottom)
         near-far  (left-right / top-bottom)
         far-near  (right-left / bottom-top)
    3. Keep, per axis, the closest pairing over all candidates whose
       distance is within the threshold. A later pairing replaces the
       current best only when strictly closer, so ties go to whichever was
       measured first.
    4. For each snapped axis, emit two guide lines at the moving
       rectangle's resulting near and far edges.

The X and Y snaps are independent and may come from different candidates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..geometry.rect import Rect

logger = logging.getLogger(__name__)

# Maximum edge distance in layout pixels that still snaps (inclusive)
SNAP_THRESHOLD = 8.0

ORIGIN = Rect(0, 0, 0, 0)


@dataclass
class SnapConfig:
    """Configuration for edge snapping.

    Attributes:
        threshold: Maximum edge distance that snaps, inclusive.
        snap_to_origin: Whether the canvas origin acts as a snap candidate.
    """
    threshold: float = SNAP_THRESHOLD
    snap_to_origin: bool = True

    def validate(self) -> None:
        """Raise ValueError if the configuration is invalid."""
        if self.threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {self.threshold}")


class GuideOrientation(Enum):
    """Orientation of an alignment guide line."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class GuideLine:
    """A transient line marking an achieved alignment.

    Attributes:
        orientation: VERTICAL guides sit at an x position, HORIZONTAL at a y.
        position: Coordinate of the guide in layout pixels.
    """
    orientation: GuideOrientation
    position: float

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.orientation.value, "position": self.position}


@dataclass
class SnapResult:
    """Outcome of a snap calculation.

    Attributes:
        x: Corrected x (the proposed x when not snapped).
        y: Corrected y (the proposed y when not snapped).
        snapped_x: Whether the x axis snapped.
        snapped_y: Whether the y axis snapped.
        guide_lines: 0, 2 or 4 guide lines; vertical ones first.
    """
    x: float
    y: float
    snapped_x: bool = False
    snapped_y: bool = False
    guide_lines: List[GuideLine] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "snapped_x": self.snapped_x,
            "snapped_y": self.snapped_y,
            "guide_lines": [g.to_dict() for g in self.guide_lines],
        }


def _axis_pairings(
    near: float, size: float, target_near: float, target_far: float
) -> List[Tuple[float, float]]:
    """(distance, snapped near-edge position) for the four edge pairings."""
    far = near + size
    return [
        (abs(near - target_near), target_near),
        (abs(far - target_far), target_far - size),
        (abs(near - target_far), target_far),
        (abs(far - target_near), target_near - size),
    ]


def _snap_axis(
    proposed: float,
    size: float,
    targets: Sequence[Tuple[float, float]],
    threshold: float,
) -> Optional[float]:
    """Best snapped near-edge position along one axis, or None."""
    best_position: Optional[float] = None
    best_distance = threshold

    for target_near, target_far in targets:
        for distance, position in _axis_pairings(proposed, size, target_near, target_far):
            if distance > threshold:
                continue
            if best_position is None or distance < best_distance:
                best_distance = distance
                best_position = position

    return best_position


def calculate_snap(
    moving_rect: Rect,
    candidate_rects: Sequence[Rect],
    proposed_x: float,
    proposed_y: float,
    config: Optional[SnapConfig] = None,
) -> SnapResult:
    """Snap a dragged rectangle's edges to nearby rectangle edges.

    Args:
        moving_rect: The dragged rectangle; only its size is used.
        candidate_rects: Static rectangles to align with, in layout space.
        proposed_x: Unsnapped x of the moving rectangle.
        proposed_y: Unsnapped y of the moving rectangle.
        config: Snap configuration (uses defaults if not provided).

    Returns:
        SnapResult with the corrected position and guide lines.
    """
    config = config or SnapConfig()

    targets = list(candidate_rects)
    if config.snap_to_origin:
        targets.insert(0, ORIGIN)

    snapped_x = _snap_axis(
        proposed_x, moving_rect.width,
        [(t.left, t.right) for t in targets], config.threshold,
    )
    snapped_y = _snap_axis(
        proposed_y, moving_rect.height,
        [(t.top, t.bottom) for t in targets], config.threshold,
    )

    result = SnapResult(x=proposed_x, y=proposed_y)

    if snapped_x is not None:
        result.x = snapped_x
        result.snapped_x = True
        result.guide_lines.append(GuideLine(GuideOrientation.VERTICAL, snapped_x))
        result.guide_lines.append(
            GuideLine(GuideOrientation.VERTICAL, snapped_x + moving_rect.width)
        )

    if snapped_y is not None:
        result.y = snapped_y
        result.snapped_y = True
        result.guide_lines.append(GuideLine(GuideOrientation.HORIZONTAL, snapped_y))
        result.guide_lines.append(
            GuideLine(GuideOrientation.HORIZONTAL, snapped_y + moving_rect.height)
        )

    logger.debug(
        "Snap (%s, %s) -> (%s, %s) against %d candidates",
        proposed_x, proposed_y, result.x, result.y, len(candidate_rects),
    )
    return result
